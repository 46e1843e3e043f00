"""Report pipeline: read inputs, run the diff engine, and bundle every derived view"""

import logging
from pathlib import Path
from typing import Optional

from linediff.core.diff import calculate_diff_stats, compute_diff
from linediff.core.export import format_diff_as_text
from linediff.core.models import DiffOptions, DiffReport
from linediff.core.split import build_split_view
from linediff.core.utils.tokens import tokenize


logger = logging.getLogger(__name__)


def _line_count(text: str) -> int:
    """Number of lines in text; 0 when nothing was entered."""
    return len(tokenize(text)) if text else 0


def build_report(
    original: str,
    modified: str,
    options: Optional[DiffOptions] = None,
    ) -> DiffReport:
    """Diff two texts and derive stats, split view, and text rendering.

    Two empty inputs give an empty report (no entries) rather than the
    engine's single unchanged empty line.
    """
    options = options or DiffOptions()
    entries = [] if not original and not modified else compute_diff(original, modified, options)
    stats = calculate_diff_stats(entries)
    logger.debug(
        "Diffed %d entries: +%d -%d =%d", stats.total, stats.added, stats.removed, stats.unchanged,
    )
    return DiffReport(
        options=options,
        entries=entries,
        stats=stats,
        split=build_split_view(entries),
        text=format_diff_as_text(entries),
        has_changes=stats.added > 0 or stats.removed > 0,
        has_diff=bool(entries),
        original_line_count=_line_count(original),
        modified_line_count=_line_count(modified),
    )


def read_text_file(path: Path) -> str:
    """Read a UTF-8 text file byte-for-byte (no newline translation), wrapping failures with the path."""
    try:
        return Path(path).read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise RuntimeError(f"Failed to read {path}: {e}") from e


def run_compare(
    original_path: Path,
    modified_path: Path,
    options: Optional[DiffOptions] = None,
    max_lines: int = 0,
    ) -> DiffReport:
    """Read both files and build their report. max_lines caps each input (0 = unlimited)."""
    texts = []
    for path in (original_path, modified_path):
        text = read_text_file(path)
        if max_lines and _line_count(text) > max_lines:
            raise ValueError(f"{path} has {_line_count(text)} lines; max_lines is {max_lines}")
        texts.append(text)
    logger.debug("Comparing %s -> %s", original_path, modified_path)
    return build_report(texts[0], texts[1], options)
