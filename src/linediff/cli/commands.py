"""CLI command implementations"""

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from linediff.config import Settings, load_config
from linediff.core.export import build_report_json, format_split_as_text
from linediff.core.models import DiffReport
from linediff.core.pipeline import build_report, run_compare
from linediff.core.samples import SAMPLE_MODIFIED, SAMPLE_ORIGINAL


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def _echo_report(report: DiffReport, settings: Settings, as_json: bool) -> None:
    if as_json:
        typer.echo(json.dumps(build_report_json(report), indent=2, ensure_ascii=False))
    elif settings.view_mode == "split":
        typer.echo(format_split_as_text(report.split, settings.split_width))
    else:
        typer.echo(report.text)


def _compare(original: Path, modified: Path, settings: Settings, swap: bool) -> DiffReport:
    if swap:
        original, modified = modified, original
    try:
        return run_compare(original, modified, settings.options(), settings.max_lines)
    except (RuntimeError, ValueError) as e:
        _fail(str(e))


def compare_cmd(
    original: Annotated[Path, typer.Argument(help="Original text file")],
    modified: Annotated[Path, typer.Argument(help="Modified text file")],
    view: Annotated[Optional[str], typer.Option("--view", help="unified or split")] = None,
    ignore_whitespace: Annotated[Optional[bool], typer.Option("--ignore-whitespace/--no-ignore-whitespace", "-w/-W", help="Ignore whitespace differences")] = None,
    ignore_case: Annotated[Optional[bool], typer.Option("--ignore-case/--no-ignore-case", "-i/-I", help="Ignore case differences")] = None,
    swap: Annotated[bool, typer.Option("--swap", help="Swap original and modified")] = False,
    as_json: Annotated[bool, typer.Option("--json", help="Print the full report as JSON")] = False,
    max_lines: Annotated[Optional[int], typer.Option("--max-lines", help="Max lines per file; 0 = unlimited")] = None,
    width: Annotated[Optional[int], typer.Option("--width", help="Column width of the split view")] = None,
    ):
    """Show the line diff between two files."""
    settings = _settings(overrides={
        "view_mode": view, "max_lines": max_lines, "split_width": width,
        "ignore_whitespace": ignore_whitespace, "ignore_case": ignore_case,
    })
    report = _compare(original, modified, settings, swap)
    _echo_report(report, settings, as_json)


def stats_cmd(
    original: Annotated[Path, typer.Argument(help="Original text file")],
    modified: Annotated[Path, typer.Argument(help="Modified text file")],
    ignore_whitespace: Annotated[Optional[bool], typer.Option("--ignore-whitespace/--no-ignore-whitespace", "-w/-W", help="Ignore whitespace differences")] = None,
    ignore_case: Annotated[Optional[bool], typer.Option("--ignore-case/--no-ignore-case", "-i/-I", help="Ignore case differences")] = None,
    max_lines: Annotated[Optional[int], typer.Option("--max-lines", help="Max lines per file; 0 = unlimited")] = None,
    ):
    """Print added/removed/unchanged line counts."""
    settings = _settings(overrides={
        "max_lines": max_lines,
        "ignore_whitespace": ignore_whitespace, "ignore_case": ignore_case,
    })
    stats = _compare(original, modified, settings, swap=False).stats
    typer.echo(f"+{stats.added} -{stats.removed} ={stats.unchanged} (total {stats.total})")


def sample_cmd(
    view: Annotated[Optional[str], typer.Option("--view", help="unified or split")] = None,
    ):
    """Render the bundled sample pair."""
    settings = _settings(overrides={"view_mode": view})
    report = build_report(SAMPLE_ORIGINAL, SAMPLE_MODIFIED, settings.options())
    _echo_report(report, settings, as_json=False)
