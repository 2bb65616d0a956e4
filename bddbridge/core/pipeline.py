"""
Host-side glue around the conversion pipeline
parse -> convert -> render, plus a preview session that keeps the last
good output when a refresh fails
"""

import json
import logging
from pathlib import Path
from typing import Optional

from bddbridge.converter.document_renderer import render
from bddbridge.converter.gherkin_converter import convert
from bddbridge.core.exceptions import UnsupportedSourceError
from bddbridge.models.gherkin_model import GherkinDocument
from bddbridge.parser.source_parser import parse
from bddbridge.reports.html_reporter import render_html

SUPPORTED_EXTENSIONS = ('.ts', '.js', '.mts', '.cts', '.mjs', '.cjs')

OUTPUT_FORMATS = {
    'gherkin': '.feature',
    'html': '.html',
    'json': '.json',
}


def build_document(source_text: str) -> GherkinDocument:
    return convert(parse(source_text))


def generate_gherkin(source_text: str) -> str:
    """Full pipeline from test script text to Gherkin text"""
    return render(build_document(source_text))


def format_document(document: GherkinDocument, output_format: str = 'gherkin',
                    title: Optional[str] = None) -> str:
    """Serialise a document in one of OUTPUT_FORMATS"""
    if output_format == 'gherkin':
        return render(document)
    if output_format == 'html':
        return render_html(document, title)
    if output_format == 'json':
        return json.dumps(document.to_dict(), indent=2, ensure_ascii=False)
    raise ValueError(f"Unknown output format: {output_format}")


def check_source_path(path: Path) -> None:
    if path.suffix.lower() not in SUPPORTED_EXTENSIONS:
        raise UnsupportedSourceError(
            f"Please open a JavaScript or TypeScript test file (got '{path.name}')"
        )


class PreviewSession:
    """Keeps a rendered view of one test script up to date"""

    def __init__(self, source_path, logger: logging.Logger, output_format: str = 'gherkin'):
        self.source_path = Path(source_path)
        self.logger = logger
        self.output_format = output_format
        self.content = ''
        self.last_error: Optional[str] = None
        self._last_mtime: Optional[float] = None

    def refresh(self) -> bool:
        """
        Re-read the source and rebuild the view from scratch.

        Returns True when the content was updated. On failure the error is
        logged, kept in last_error, and the previous content is left as is.
        """
        try:
            check_source_path(self.source_path)
            source_text = self.source_path.read_text(encoding='utf-8')
            self.logger.debug(f"Source code length: {len(source_text)}")

            document = build_document(source_text)
            content = format_document(document, self.output_format, self.source_path.name)
        except Exception as e:
            self.last_error = str(e)
            self.logger.error(f"Error refreshing preview of {self.source_path}: {e}")
            return False

        self.content = content
        self.last_error = None
        self.logger.info(f"Preview updated: {len(document.features)} feature(s)")
        return True

    def has_changed(self) -> bool:
        """True when the file's modification time differs from the last check"""
        try:
            mtime = self.source_path.stat().st_mtime
        except OSError:
            return False

        changed = mtime != self._last_mtime
        self._last_mtime = mtime
        return changed

    def refresh_if_changed(self) -> bool:
        if self.has_changed():
            return self.refresh()
        return False
