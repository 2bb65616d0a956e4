#!/usr/bin/env python3
"""
BDD Bridge - Gherkin views of Playwright test scripts
Main entry point for converting test.describe/test/test.step scripts into
Feature/Scenario documents
"""

import sys
import time
from pathlib import Path

import click

from bddbridge.core.config_manager import ConfigManager
from bddbridge.core.exceptions import BddBridgeError
from bddbridge.core.pipeline import (
    OUTPUT_FORMATS, PreviewSession, build_document, check_source_path, format_document
)
from bddbridge.parser.source_parser import DEFAULT_PATTERNS, find_test_files
from bddbridge.utils.helpers import sanitize_filename
from bddbridge.utils.logger import setup_logger

__version__ = '1.0.0'


def _load_config(config, env):
    config_manager = ConfigManager(config, env)
    config_manager.load_config()
    logger = setup_logger('bddbridge', config_manager.get('logging.level', 'INFO'),
                          config_manager.get('logging.file'))
    return config_manager, logger


def _output_path(source: Path, root: Path, out_dir: Path, output_format: str,
                 keep_extension: bool = False) -> Path:
    """login.spec.ts -> <out>/login.feature, keeping sub-directories of root"""
    stem = source.stem
    for suffix in ('.spec', '.test'):
        if stem.endswith(suffix):
            stem = stem[:-len(suffix)]
            break
    if keep_extension:
        stem += source.suffix

    relative = source.parent.relative_to(root) if root.is_dir() else Path()
    return out_dir / relative / f"{sanitize_filename(stem)}{OUTPUT_FORMATS[output_format]}"


@click.group()
@click.version_option(__version__, prog_name='bddbridge')
def main():
    """
    BDD Bridge - turn Playwright test scripts into Gherkin features

    Examples:
        # Convert every spec under tests/ into features/
        bddbridge convert tests --out features

        # Print one script as Gherkin
        bddbridge convert tests/login.spec.ts --stdout

        # Keep a preview up to date while editing
        bddbridge preview tests/login.spec.ts --watch
    """


@main.command()
@click.argument('path', type=click.Path(exists=True))
@click.option('--out', '-o', default=None, help='Output directory (default from config)')
@click.option('--format', '-f', 'output_format', type=click.Choice(sorted(OUTPUT_FORMATS)),
              default=None, help='Output format (gherkin/html/json)')
@click.option('--stdout', is_flag=True, help='Print results instead of writing files')
@click.option('--env', '-e', default=None, help='Environment config to merge (e.g. dev)')
@click.option('--config', '-c', default='config/config.yaml', help='Path to config file')
def convert(path, out, output_format, stdout, env, config):
    """Convert a test script, or every script under a directory"""
    try:
        config_manager, logger = _load_config(config, env)
    except BddBridgeError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    output_format = output_format or config_manager.get('output.format', 'gherkin')
    if output_format not in OUTPUT_FORMATS:
        click.echo(f"Error: unknown output format '{output_format}'", err=True)
        sys.exit(1)
    out_dir = Path(out or config_manager.get('output.directory', 'features'))

    files = find_test_files(path, config_manager.get('parser.patterns') or DEFAULT_PATTERNS)
    if not files:
        logger.warning(f"No test scripts found under {path}")
        return

    logger.info(f"Found {len(files)} test script(s) to convert")

    failed = 0
    written = set()
    for source in files:
        try:
            check_source_path(source)
            document = build_document(source.read_text(encoding='utf-8'))
            content = format_document(document, output_format, source.name)

            if stdout:
                click.echo(content)
                continue

            target = _output_path(source, Path(path), out_dir, output_format)
            if target in written:
                renamed = _output_path(source, Path(path), out_dir, output_format, keep_extension=True)
                logger.warning(f"{source} would overwrite {target}, writing {renamed.name} instead")
                target = renamed
            written.add(target)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content + '\n', encoding='utf-8')
            logger.info(f"{source} -> {target} ({len(document.features)} feature(s))")

        except Exception as e:
            logger.error(f"Conversion failed for {source}: {e}")
            failed += 1

    if failed:
        logger.error(f"Completed with {failed} failure(s)")
        sys.exit(1)


@main.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
@click.option('--watch', '-w', is_flag=True, help='Re-render whenever the file changes')
@click.option('--interval', '-i', default=None, type=float, help='Polling interval in seconds')
@click.option('--format', '-f', 'output_format', type=click.Choice(sorted(OUTPUT_FORMATS)),
              default='gherkin', help='Output format (gherkin/html/json)')
@click.option('--env', '-e', default=None, help='Environment config to merge (e.g. dev)')
@click.option('--config', '-c', default='config/config.yaml', help='Path to config file')
def preview(file, watch, interval, output_format, env, config):
    """Print the Gherkin view of a test script"""
    try:
        config_manager, logger = _load_config(config, env)
    except BddBridgeError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    session = PreviewSession(file, logger, output_format)

    session.has_changed()
    if session.refresh():
        click.echo(session.content)
    else:
        click.echo(f"Error: {session.last_error}", err=True)
        if not watch:
            sys.exit(1)

    if not watch:
        return

    interval = interval or float(config_manager.get('watch.interval', 1.0))
    logger.info(f"Watching {file} (every {interval}s, Ctrl+C to stop)")
    try:
        while True:
            time.sleep(interval)
            if not session.has_changed():
                continue
            if session.refresh():
                click.echo(click.style('-' * 40, dim=True))
                click.echo(session.content)
            else:
                # Previous output stays on screen
                click.echo(f"Error: {session.last_error}", err=True)
    except KeyboardInterrupt:
        logger.info("Preview stopped")


if __name__ == '__main__':
    main()
