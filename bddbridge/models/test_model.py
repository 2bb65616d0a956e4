"""
Structured model of a Playwright test script
Produced by the source parser, consumed by the Gherkin converter
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class TestStep:
    """One narrated test.step() block"""
    description: str
    code: str
    line: int

@dataclass(frozen=True)
class TestCase:
    """One test() block with its steps in source order"""
    name: str
    steps: Tuple[TestStep, ...] = ()
    line: int = 0

@dataclass(frozen=True)
class TestSuite:
    """One test.describe() block"""
    name: str
    test_cases: Tuple[TestCase, ...] = ()
    line: int = 0
    background: Optional[Tuple[TestStep, ...]] = None

@dataclass(frozen=True)
class ParsedTest:
    """All suites found in a script, in source order"""
    suites: Tuple[TestSuite, ...] = field(default_factory=tuple)
