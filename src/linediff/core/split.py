"""Two-column split view construction"""

from typing import Optional

from linediff.core.models import DiffEntry, DiffType, SplitCell, SplitView


def _cell(entry: DiffEntry, line_number: Optional[int]) -> SplitCell:
    return SplitCell(type=entry.type, content=entry.content, line_number=line_number)


def build_split_view(entries: list[DiffEntry]) -> SplitView:
    """Align the edit script into left (original) and right (modified) columns.

    A run of r removed and a added lines between unchanged anchors becomes
    max(r, a) rows; the shorter side is padded with None so both columns
    always have the same length.
    """
    left: list[Optional[SplitCell]] = []
    right: list[Optional[SplitCell]] = []

    def _pad() -> None:
        gap = len(left) - len(right)
        if gap > 0:
            right.extend([None] * gap)
        elif gap < 0:
            left.extend([None] * -gap)

    for entry in entries:
        if entry.type == DiffType.unchanged:
            _pad()
            left.append(_cell(entry, entry.old_line_number))
            right.append(_cell(entry, entry.new_line_number))
        elif entry.type == DiffType.removed:
            left.append(_cell(entry, entry.old_line_number))
        elif entry.type == DiffType.added:
            right.append(_cell(entry, entry.new_line_number))
    _pad()

    return SplitView(left=left, right=right)
