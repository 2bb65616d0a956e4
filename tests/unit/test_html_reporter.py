"""Unit tests for the HTML view"""
from bddbridge.models.gherkin_model import GherkinDocument, GherkinFeature
from bddbridge.models.test_model import TestSuite as SourceSuite
from bddbridge.converter.gherkin_converter import convert
from bddbridge.parser.source_parser import parse
from bddbridge.reports.html_reporter import HTMLReporter, render_html
from tests.helpers import LOGIN_SPEC, read


def test_keywords_and_headers_are_highlighted():
    html = render_html(convert(parse(read(LOGIN_SPEC))))

    assert '<title>Login</title>' in html
    assert '<div class="gherkin-feature">Feature: Login</div>' in html
    assert '<div class="gherkin-background">  Background:</div>' in html
    assert '<div class="gherkin-scenario">  Scenario: valid login</div>' in html
    assert '<span class="gherkin-keyword">Given</span>' in html
    assert '<span class="gherkin-keyword">Then</span>' in html


def test_text_is_escaped():
    suite = SourceSuite(name='<script>alert(1)</script>')
    document = GherkinDocument(features=(
        GherkinFeature(name=suite.name, scenarios=(), original_suite=suite),
    ))

    html = render_html(document, title='a & b')

    assert '<script>' not in html
    assert '&lt;script&gt;alert(1)&lt;/script&gt;' in html
    assert '<title>a &amp; b</title>' in html


def test_empty_document():
    html = render_html(GherkinDocument())

    assert 'No test suites found' in html
    assert '<title>Gherkin Preview</title>' in html


def test_generate_report_writes_file(tmp_path):
    target = tmp_path / 'reports' / 'login.html'

    path = HTMLReporter().generate_report(convert(parse(read(LOGIN_SPEC))), str(target))

    assert path == str(target)
    assert 'Feature: Login' in target.read_text(encoding='utf-8')
