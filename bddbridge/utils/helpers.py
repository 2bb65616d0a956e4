"""Helper utilities"""
import re
from typing import Dict, Any, List, Optional

# First quoted literal in any of the three JS quote styles
STRING_LITERAL = re.compile(r'[\'"`]([^\'"`]*)[\'"`]')


def sanitize_filename(name: str) -> str:
    """Sanitize string for use as filename"""
    return re.sub(r'[<>:"/\\|?*]', '_', name)


def deep_get(dictionary: Dict, keys: str, default: Any = None) -> Any:
    """Get nested dictionary value using dot notation"""
    keys_list = keys.split('.')
    value = dictionary

    for key in keys_list:
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default

    return value


def extract_string_literal(line: str) -> Optional[str]:
    """Return the first quoted literal on a line, or None"""
    match = STRING_LITERAL.search(line)
    return match.group(1) if match else None


def extract_string_literals(text: str) -> List[str]:
    """Return every quoted literal in text, in order of appearance"""
    return STRING_LITERAL.findall(text)


def strip_quotes(text: str) -> str:
    """Remove single, double and back quotes"""
    return re.sub(r'[\'"`]', '', text)
