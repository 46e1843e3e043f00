"""Renderers: prefixed text listing, fixed-width split table, and JSON-ready report"""

import re
from typing import Optional

from linediff.core.models import DiffEntry, DiffReport, DiffType, SplitCell, SplitView


_CONTROL = re.compile(r"[\x00-\x1f\x7f]")

PREFIXES = {
    DiffType.unchanged: "  ",
    DiffType.added: "+ ",
    DiffType.removed: "- ",
}


def format_diff_as_text(entries: list[DiffEntry]) -> str:
    """Join entries as '  '/'+ '/'- ' prefixed lines. Not a parseable patch."""
    return "\n".join(f"{PREFIXES[e.type]}{e.content}" for e in entries)


def _format_cell(cell: Optional[SplitCell], num_width: int, width: int) -> str:
    if cell is None:
        return " " * (num_width + 3 + width)
    num = str(cell.line_number) if cell.line_number is not None else ""
    marker = PREFIXES[cell.type][0]
    content = _CONTROL.sub(lambda m: repr(m.group())[1:-1], cell.content.expandtabs(4))[:width]
    return f"{num:>{num_width}} {marker} {content:<{width}}"


def format_split_as_text(view: SplitView, width: int = 60) -> str:
    """Render the split view as a two-column text table, one line per row.

    Each side is '<line number> <marker> <content>' with content truncated to
    width. Control characters are shown escaped (a carriage return as \\r),
    padded cells are blank, and trailing whitespace is stripped per line.
    """
    numbers = [c.line_number for c in view.left + view.right if c and c.line_number]
    num_width = len(str(max(numbers))) if numbers else 1
    return "\n".join(
        f"{_format_cell(l, num_width, width)} | {_format_cell(r, num_width, width)}".rstrip()
        for l, r in view.rows
    )


def build_report_json(report: DiffReport) -> dict:
    """Build a JSON-serializable dict: options, stats, flags, line counts, and entries."""
    return {
        "options": report.options.model_dump(),
        "stats": report.stats.model_dump(),
        "has_changes": report.has_changes,
        "original_line_count": report.original_line_count,
        "modified_line_count": report.modified_line_count,
        "entries": [e.model_dump(mode="json") for e in report.entries],
    }
