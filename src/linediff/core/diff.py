"""Edit script assembly and statistics"""

from typing import Optional

from linediff.core.lcs import compute_lcs
from linediff.core.models import DiffEntry, DiffOptions, DiffStats, DiffType
from linediff.core.utils.tokens import comparison_keys, tokenize


def removed_lines(lines: list[str], start: int, end: int) -> list[DiffEntry]:
    """Removed entries for lines[start:end], numbered 1-based in the original."""
    return [
        DiffEntry(type=DiffType.removed, content=lines[i], old_line_number=i + 1)
        for i in range(start, end)
    ]


def added_lines(lines: list[str], start: int, end: int) -> list[DiffEntry]:
    """Added entries for lines[start:end], numbered 1-based in the modified text."""
    return [
        DiffEntry(type=DiffType.added, content=lines[i], new_line_number=i + 1)
        for i in range(start, end)
    ]


def compute_diff(
    original: str,
    modified: str,
    options: Optional[DiffOptions] = None,
    ) -> list[DiffEntry]:
    """Return the line edit script turning original into modified.

    Each gap between matched lines is emitted as all removed lines, then all
    added lines, then the matched line as unchanged. Unchanged entries always
    show the original line, even when options made two different lines compare
    equal.
    """
    options = options or DiffOptions()
    orig_lines, mod_lines = tokenize(original), tokenize(modified)
    pairs = compute_lcs(comparison_keys(orig_lines, options), comparison_keys(mod_lines, options))

    entries: list[DiffEntry] = []
    oi = mi = 0
    for pair in pairs:
        entries += removed_lines(orig_lines, oi, pair.orig_index)
        entries += added_lines(mod_lines, mi, pair.mod_index)
        entries.append(DiffEntry(
            type=DiffType.unchanged,
            content=orig_lines[pair.orig_index],
            old_line_number=pair.orig_index + 1,
            new_line_number=pair.mod_index + 1,
        ))
        oi, mi = pair.orig_index + 1, pair.mod_index + 1

    entries += removed_lines(orig_lines, oi, len(orig_lines))
    entries += added_lines(mod_lines, mi, len(mod_lines))
    return entries


def calculate_diff_stats(entries: list[DiffEntry]) -> DiffStats:
    """Count entries per type in a single pass."""
    counts = {t: 0 for t in DiffType}
    for entry in entries:
        counts[entry.type] += 1
    return DiffStats(
        unchanged=counts[DiffType.unchanged],
        added=counts[DiffType.added],
        removed=counts[DiffType.removed],
        total=sum(counts.values()),
    )
