"""Data models for the diff engine: options, edit script entries, stats, split view, report"""

from enum import Enum
from typing import NamedTuple, Optional

from pydantic import BaseModel, ConfigDict


class DiffType(str, Enum):
    """Kind of a single edit script entry"""
    unchanged = "unchanged"
    added = "added"
    removed = "removed"


class DiffOptions(BaseModel):
    """Normalization applied to comparison keys only; displayed content is never altered."""
    model_config = ConfigDict(frozen=True)
    ignore_whitespace: bool = False
    ignore_case: bool = False


class MatchedPair(NamedTuple):
    """0-based indices of one LCS match in the original and modified line lists."""
    orig_index: int
    mod_index: int


class DiffEntry(BaseModel):
    """One typed line of the edit script."""
    model_config = ConfigDict(frozen=True)
    type: DiffType
    content: str
    old_line_number: Optional[int] = None     # 1-based; None for added lines
    new_line_number: Optional[int] = None     # 1-based; None for removed lines


class DiffStats(BaseModel):
    model_config = ConfigDict(frozen=True)
    unchanged: int = 0
    added: int = 0
    removed: int = 0
    total: int = 0


class SplitCell(BaseModel):
    """A rendered cell on one side of the split view."""
    model_config = ConfigDict(frozen=True)
    type: DiffType
    content: str
    line_number: Optional[int] = None


class SplitRow(NamedTuple):
    left: Optional[SplitCell]
    right: Optional[SplitCell]


class SplitView(BaseModel):
    """Two row-aligned columns; a None cell is padding."""
    model_config = ConfigDict(frozen=True)
    left: list[Optional[SplitCell]] = []
    right: list[Optional[SplitCell]] = []

    @property
    def rows(self) -> list[SplitRow]:
        return [SplitRow(l, r) for l, r in zip(self.left, self.right)]


class DiffReport(BaseModel):
    """Everything a caller renders for one (original, modified, options) triple."""
    model_config = ConfigDict(frozen=True)
    options: DiffOptions
    entries: list[DiffEntry]
    stats: DiffStats
    split: SplitView
    text: str
    has_changes: bool
    has_diff: bool
    original_line_count: int
    modified_line_count: int
