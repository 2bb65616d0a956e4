"""Gherkin views of Playwright test scripts"""

from bddbridge.parser.source_parser import parse, parse_file
from bddbridge.converter.gherkin_converter import convert
from bddbridge.converter.document_renderer import render
from bddbridge.core.pipeline import generate_gherkin

__version__ = "1.0.0"

__all__ = [
    "parse",
    "parse_file",
    "convert",
    "render",
    "generate_gherkin",
]
