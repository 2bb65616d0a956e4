"""Gherkin document model derived from a ParsedTest"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from bddbridge.models.test_model import TestCase, TestStep, TestSuite


class StepType(Enum):
    GIVEN = "Given"
    WHEN = "When"
    THEN = "Then"
    AND = "And"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class GherkinStep:
    keyword: StepType
    text: str
    original_step: TestStep = field(compare=False, repr=False)

    def to_dict(self) -> Dict:
        return {
            'keyword': self.keyword.value,
            'text': self.text,
            'line': self.original_step.line,
        }


@dataclass(frozen=True)
class GherkinScenario:
    name: str
    steps: Tuple[GherkinStep, ...]
    original_test_case: TestCase = field(compare=False, repr=False)

    def to_dict(self) -> Dict:
        return {
            'name': self.name,
            'line': self.original_test_case.line,
            'steps': [step.to_dict() for step in self.steps],
        }


@dataclass(frozen=True)
class GherkinFeature:
    name: str
    scenarios: Tuple[GherkinScenario, ...]
    original_suite: TestSuite = field(compare=False, repr=False)
    background: Optional[Tuple[GherkinStep, ...]] = None

    def to_dict(self) -> Dict:
        result = {
            'name': self.name,
            'line': self.original_suite.line,
            'scenarios': [scenario.to_dict() for scenario in self.scenarios],
        }
        if self.background is not None:
            result['background'] = [step.to_dict() for step in self.background]
        return result


@dataclass(frozen=True)
class GherkinDocument:
    features: Tuple[GherkinFeature, ...] = ()

    def to_dict(self) -> Dict[str, List[Dict]]:
        return {'features': [feature.to_dict() for feature in self.features]}
