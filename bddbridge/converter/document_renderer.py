"""Serialise a GherkinDocument to canonical Gherkin text"""

from typing import Iterable, List

from bddbridge.models.gherkin_model import GherkinDocument, GherkinStep

SECTION_INDENT = '  '
STEP_INDENT = '    '


def render_step(step: GherkinStep) -> str:
    return f"{STEP_INDENT}{step.keyword.value} {step.text}"


def _render_steps(lines: List[str], steps: Iterable[GherkinStep]) -> None:
    for step in steps:
        lines.append(render_step(step))


def render(document: GherkinDocument) -> str:
    """Render the document; an empty document gives an empty string"""
    lines: List[str] = []

    for feature in document.features:
        lines.append(f"Feature: {feature.name}")
        lines.append("")

        if feature.background is not None:
            lines.append(f"{SECTION_INDENT}Background:")
            _render_steps(lines, feature.background)
            lines.append("")

        for scenario in feature.scenarios:
            lines.append(f"{SECTION_INDENT}Scenario: {scenario.name}")
            _render_steps(lines, scenario.steps)
            lines.append("")

    return "\n".join(lines).strip()
