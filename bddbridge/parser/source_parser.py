"""
Source parser for Playwright test scripts
Recovers suites, cases and narrated steps from raw source text using
brace counting and line patterns instead of a full grammar
"""

import logging
import re
from pathlib import Path
from typing import List, Optional, Sequence

from bddbridge.models.test_model import ParsedTest, TestCase, TestStep, TestSuite
from bddbridge.utils.helpers import extract_string_literal

logger = logging.getLogger(__name__)

UNNAMED_SUITE = 'Unnamed Test Suite'
UNNAMED_TEST = 'Unnamed Test'

# Optional module prefix left behind by the TypeScript compiler, e.g. test_1.test
_TEST_OBJECT = r'(?:\w+\.)?test'
_SUITE_MODIFIER = r'(?:\.(?:only|skip|fixme|serial|parallel))?'
# test.skip()/test.fixme() are also called as conditions inside a test body
_CASE_MODIFIER = r'(?:\.only)?'

SUITE_MARKER = re.compile(rf'^{_TEST_OBJECT}\.describe{_SUITE_MODIFIER}\(')
SETUP_MARKER = re.compile(rf'^{_TEST_OBJECT}\.beforeEach\(')
CASE_MARKER = re.compile(rf'^(?:\(0,\s*{_TEST_OBJECT}\)|{_TEST_OBJECT}{_CASE_MODIFIER})\(')
STEP_MARKER = re.compile(rf'\b{_TEST_OBJECT}\.step\(')
BLOCK_CLOSE = ('});', '})')

DEFAULT_PATTERNS = ('**/*.spec.ts', '**/*.spec.js', '**/*.test.ts', '**/*.test.js')


class SourceParser:
    """Parse a Playwright test script into a ParsedTest"""

    def __init__(self, source_code: str):
        self.source_code = source_code
        self.lines = source_code.split('\n')

    def parse(self) -> ParsedTest:
        suites: List[TestSuite] = []
        current_suite: Optional[_SuiteBuilder] = None
        current_case: Optional[_CaseBuilder] = None
        current_steps: List[TestStep] = []
        in_background = False
        in_test_function = False
        brace_count = 0

        for line_num, line in enumerate(self.lines, 1):
            trimmed = line.strip()

            # Running depth, used to spot the end of a test or beforeEach block
            brace_count += line.count('{') - line.count('}')

            if SUITE_MARKER.match(trimmed):
                if current_suite:
                    suites.append(current_suite.build())
                name = extract_string_literal(trimmed)
                current_suite = _SuiteBuilder(name or UNNAMED_SUITE, line_num)
                current_case = None
                current_steps = []
                in_background = False
                in_test_function = False

            elif SETUP_MARKER.match(trimmed):
                if current_case and current_suite:
                    current_case.steps = list(current_steps)
                    current_suite.test_cases.append(current_case.build())
                current_case = None
                in_background = True
                in_test_function = False
                current_steps = []

            elif CASE_MARKER.match(trimmed):
                if current_case and current_suite:
                    current_case.steps = list(current_steps)
                    current_suite.test_cases.append(current_case.build())

                if current_suite and in_background and current_steps:
                    current_suite.background = list(current_steps)

                name = extract_string_literal(trimmed)
                current_case = _CaseBuilder(name or UNNAMED_TEST, line_num)
                current_steps = []
                in_background = False
                in_test_function = True

            elif STEP_MARKER.search(trimmed):
                description = extract_string_literal(trimmed)
                if description:
                    current_steps.append(TestStep(
                        description=description,
                        code=self._extract_step_code(line_num - 1),
                        line=line_num
                    ))
                else:
                    logger.debug(f"Skipping unlabelled step on line {line_num}")

            elif trimmed in BLOCK_CLOSE and brace_count == 0:
                if in_test_function:
                    if current_case:
                        current_case.steps = list(current_steps)
                        if current_suite:
                            current_suite.test_cases.append(current_case.build())
                    current_case = None
                    current_steps = []
                    in_test_function = False

                elif in_background:
                    if current_suite and current_steps:
                        current_suite.background = list(current_steps)
                    in_background = False
                    current_steps = []

        if current_suite:
            suites.append(current_suite.build())

        logger.debug(f"Parsed {len(suites)} suite(s) from {len(self.lines)} line(s)")
        return ParsedTest(suites=tuple(suites))

    def _extract_step_code(self, start_index: int) -> str:
        """Collect lines from the first opening brace until braces balance"""
        collected = []
        depth = 0
        started = False

        for line in self.lines[start_index:]:
            for char in line:
                if char == '{':
                    depth += 1
                    started = True
                elif char == '}' and started:
                    depth -= 1

            if started:
                collected.append(line)
                if depth <= 0:
                    break

        return '\n'.join(collected).strip()


class _SuiteBuilder:
    """Mutable accumulator for a suite while its block is being scanned"""

    def __init__(self, name: str, line: int):
        self.name = name
        self.line = line
        self.test_cases: List[TestCase] = []
        self.background: Optional[List[TestStep]] = None

    def build(self) -> TestSuite:
        background = tuple(self.background) if self.background is not None else None
        return TestSuite(
            name=self.name,
            test_cases=tuple(self.test_cases),
            line=self.line,
            background=background
        )


class _CaseBuilder:
    def __init__(self, name: str, line: int):
        self.name = name
        self.line = line
        self.steps: List[TestStep] = []

    def build(self) -> TestCase:
        return TestCase(name=self.name, steps=tuple(self.steps), line=self.line)


def parse(source_text: str) -> ParsedTest:
    """Parse source text; never raises on malformed input"""
    return SourceParser(source_text).parse()


def parse_file(file_path) -> ParsedTest:
    """Read a test script as UTF-8 and parse it"""
    with open(file_path, 'r', encoding='utf-8') as f:
        return parse(f.read())


def find_test_files(root, patterns: Sequence[str] = DEFAULT_PATTERNS) -> List[Path]:
    """Find test scripts under root, sorted and de-duplicated"""
    root_path = Path(root)
    if root_path.is_file():
        return [root_path]

    files = set()
    for pattern in patterns:
        files.update(path for path in root_path.glob(pattern) if path.is_file())

    return sorted(files)
