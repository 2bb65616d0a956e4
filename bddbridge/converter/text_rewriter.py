"""
Rewrites a step's author label into narrative Gherkin prose
Rules are applied in order: quote cleanup, literal splice, selector
wording, then fixed prefix rewrites
"""

import re
from typing import List, Tuple

from bddbridge.utils.helpers import extract_string_literals, strip_quotes

# Insertion point for a spliced literal
FIRST_WORD = re.compile(r'^(\w+)\b')

SELECTOR_RULES: List[Tuple[re.Pattern, str]] = [
    (re.compile(r'(^|[\s"])#([\w-]+)'), r'\1the \2 field'),
    (re.compile(r'(^|[\s"])\.([A-Za-z_][\w-]*)'), r'\1the \2 element'),
]

PREFIX_RULES: List[Tuple[re.Pattern, str]] = [
    (re.compile(r'^enter (\w+)', re.IGNORECASE), r'the user enters \1'),
    (re.compile(r'^click (\w+)', re.IGNORECASE), r'the user clicks the \1'),
    (re.compile(r'^verify (\w+)', re.IGNORECASE), r'the \1 should be visible'),
]


def splice_literals(text: str, code: str) -> str:
    """Insert the first non-empty quoted literal of the step code after the first word"""
    # The step's own label sits before the first brace of its code block
    brace = code.find('{')
    body = code[brace + 1:] if brace >= 0 else code

    for literal in extract_string_literals(body):
        value = strip_quotes(literal)
        if value:
            return FIRST_WORD.sub(lambda m: f'{m.group(1)} "{value}"', text, count=1)
    return text


def describe_selectors(text: str) -> str:
    for pattern, replacement in SELECTOR_RULES:
        text = pattern.sub(replacement, text, count=1)
    return text


def apply_prefix_rules(text: str) -> str:
    for pattern, replacement in PREFIX_RULES:
        text = pattern.sub(replacement, text, count=1)
    return text


def rewrite_step_text(description: str, code: str = '') -> str:
    """Turn a test.step() label and its code into a Gherkin step sentence"""
    text = strip_quotes(description)
    text = splice_literals(text, code)
    text = describe_selectors(text)
    return apply_prefix_rules(text)
