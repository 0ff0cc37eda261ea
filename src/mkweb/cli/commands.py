"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from mkweb.config import Settings, load_config
from mkweb.core.models import BuildReport
from mkweb.core.pipeline import build_site
from mkweb.errors import BuildError


USAGE = "syntax: mkweb <root_directory>"


class _EchoHandler(logging.Handler):
    """Route library log records through typer.echo; warnings go to stderr."""

    def emit(self, record: logging.LogRecord) -> None:
        typer.echo(self.format(record), err=record.levelno >= logging.WARNING)


def _configure_logging(quiet: bool) -> None:
    logger = logging.getLogger("mkweb")
    for h in [h for h in logger.handlers if isinstance(h, _EchoHandler)]:
        logger.removeHandler(h)
    handler = _EchoHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.WARNING if quiet else logging.INFO)


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(root: Path, overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(root, overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _echo_report(report: BuildReport) -> None:
    """Print one line per rendered document and a summary line."""
    for src, out in report.rendered:
        typer.echo(f"  {src} -> {out}")
    typer.echo(
        f"Build complete - "
        f"{len(report.rendered)} rendered, "
        f"{len(report.copied)} copied, "
        f"{len(report.skipped)} skipped"
    )


def build_cmd(
    roots: Annotated[Optional[list[str]], typer.Argument(help="Site root directory", show_default=False)] = None,
    converter: Annotated[Optional[str], typer.Option("--converter", help="markdown-it or pandoc")] = None,
    template: Annotated[Optional[str], typer.Option("--template-file", help="Template path relative to the root")] = None,
    html_suffix: Annotated[Optional[bool], typer.Option("--html-suffix/--keep-suffix", help="Write markdown output as .html")] = None,
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Hide skip notices")] = False,
    ):
    """Render changed .md/.html documents under ROOT into ROOT/public."""
    if not roots or len(roots) != 1:
        typer.echo(USAGE, err=True)
        return
    root = Path(roots[0])
    _configure_logging(quiet)
    settings = _settings(root, overrides={
        "converter": converter, "template_file": template, "html_suffix": html_suffix,
    })

    try:
        report = build_site(root, settings)
    except BuildError as e:
        _fail(str(e))
    _echo_report(report)
