"""
HTML view of a generated Gherkin document
Highlights section headers and step keywords, like the editor preview
"""

import re
from pathlib import Path
from typing import Dict, List, Optional

from jinja2 import Environment, select_autoescape

from bddbridge.converter.document_renderer import render
from bddbridge.models.gherkin_model import GherkinDocument

STEP_LINE = re.compile(r'^(\s*)(Given|When|Then|And)\b(.*)$')
HEADER_LINE = re.compile(r'^(\s*)(Feature:|Background:|Scenario:)(.*)$')

HEADER_CLASSES = {
    'Feature:': 'gherkin-feature',
    'Background:': 'gherkin-background',
    'Scenario:': 'gherkin-scenario',
}

REPORT_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>{{ title }}</title>
    <style>
        body { font-family: monospace; padding: 1em; }
        div { white-space: pre; min-height: 1em; }
        .gherkin-feature { font-weight: bold; color: #0b5394; }
        .gherkin-background { font-weight: bold; color: #6a329f; }
        .gherkin-scenario { font-weight: bold; color: #38761d; }
        .gherkin-keyword { font-weight: bold; color: #b45f06; }
    </style>
</head>
<body>
{%- if not lines %}
<p class="empty">No test suites found</p>
{%- endif %}
{%- for line in lines %}
{%- if line.kind == 'header' %}
<div class="{{ line.css }}">{{ line.indent }}{{ line.keyword }}{{ line.text }}</div>
{%- elif line.kind == 'step' %}
<div>{{ line.indent }}<span class="gherkin-keyword">{{ line.keyword }}</span>{{ line.text }}</div>
{%- else %}
<div>{{ line.text }}</div>
{%- endif %}
{%- endfor %}
</body>
</html>
"""


class HTMLReporter:
    """Renders Gherkin documents as standalone HTML pages"""

    def __init__(self):
        self.env = Environment(autoescape=select_autoescape(default=True, default_for_string=True))
        self.template = self.env.from_string(REPORT_TEMPLATE)

    def _classify_lines(self, gherkin_text: str) -> List[Dict]:
        lines = []
        if not gherkin_text:
            return lines

        for raw in gherkin_text.split('\n'):
            header = HEADER_LINE.match(raw)
            step = STEP_LINE.match(raw)
            if header:
                indent, keyword, text = header.groups()
                lines.append({'kind': 'header', 'css': HEADER_CLASSES[keyword],
                              'indent': indent, 'keyword': keyword, 'text': text})
            elif step:
                indent, keyword, text = step.groups()
                lines.append({'kind': 'step', 'indent': indent, 'keyword': keyword, 'text': text})
            else:
                lines.append({'kind': 'text', 'text': raw})

        return lines

    def render(self, document: GherkinDocument, title: Optional[str] = None) -> str:
        """Render the document to an HTML string"""
        if title is None:
            title = document.features[0].name if document.features else 'Gherkin Preview'
        return self.template.render(title=title, lines=self._classify_lines(render(document)))

    def generate_report(self, document: GherkinDocument, output_path: str, title: Optional[str] = None) -> str:
        """Write the HTML page and return its path"""
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.render(document, title), encoding='utf-8')
        return str(path)


def render_html(document: GherkinDocument, title: Optional[str] = None) -> str:
    return HTMLReporter().render(document, title)
