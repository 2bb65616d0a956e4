"""
Gherkin converter
Classifies parsed test steps as Given/When/Then/And and rewrites their
labels into narrative text
"""

import logging
from typing import Sequence, Tuple

from bddbridge.converter.text_rewriter import rewrite_step_text
from bddbridge.models.gherkin_model import (
    GherkinDocument, GherkinFeature, GherkinScenario, GherkinStep, StepType
)
from bddbridge.models.test_model import ParsedTest, TestCase, TestStep, TestSuite

logger = logging.getLogger(__name__)

# Checked in this order: a label matching both lists counts as an action
ACTION_KEYWORDS = ['click', 'enter', 'fill', 'type', 'submit', 'navigate', 'go to']
ASSERTION_KEYWORDS = ['verify', 'check', 'should', 'expect', 'assert']


def determine_keyword(step: TestStep, index: int, is_background: bool) -> StepType:
    """Pick the Gherkin keyword from the step label and its position"""
    if is_background:
        return StepType.GIVEN if index == 0 else StepType.AND

    # The first scenario step is always the precondition
    if index == 0:
        return StepType.GIVEN

    description = step.description.lower()

    if any(word in description for word in ACTION_KEYWORDS):
        return StepType.WHEN if index == 1 else StepType.AND

    if any(word in description for word in ASSERTION_KEYWORDS):
        return StepType.THEN

    return StepType.WHEN if index == 1 else StepType.AND


class GherkinConverter:
    """Convert a ParsedTest into a GherkinDocument"""

    def convert(self, parsed_test: ParsedTest) -> GherkinDocument:
        features = tuple(self._convert_suite(suite) for suite in parsed_test.suites)
        logger.debug(f"Converted {len(features)} feature(s)")
        return GherkinDocument(features=features)

    def _convert_suite(self, suite: TestSuite) -> GherkinFeature:
        background = None
        if suite.background is not None:
            background = self.convert_steps(suite.background, is_background=True)

        scenarios = tuple(self._convert_test_case(test_case) for test_case in suite.test_cases)

        return GherkinFeature(
            name=suite.name,
            scenarios=scenarios,
            original_suite=suite,
            background=background
        )

    def _convert_test_case(self, test_case: TestCase) -> GherkinScenario:
        return GherkinScenario(
            name=test_case.name,
            steps=self.convert_steps(test_case.steps, is_background=False),
            original_test_case=test_case
        )

    def convert_steps(self, steps: Sequence[TestStep], is_background: bool) -> Tuple[GherkinStep, ...]:
        return tuple(
            GherkinStep(
                keyword=determine_keyword(step, index, is_background),
                text=rewrite_step_text(step.description, step.code),
                original_step=step
            )
            for index, step in enumerate(steps)
        )


def convert(parsed_test: ParsedTest) -> GherkinDocument:
    return GherkinConverter().convert(parsed_test)
