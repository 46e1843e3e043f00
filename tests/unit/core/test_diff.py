"""Unit tests for core/diff.py"""

import pytest

from linediff.core.diff import added_lines, calculate_diff_stats, compute_diff, removed_lines
from linediff.core.models import DiffEntry, DiffOptions, DiffStats, DiffType
from linediff.core.utils.tokens import tokenize


PAIRS = [
    ("", ""),
    ("a", ""),
    ("", "a"),
    ("line1\nline2\nline3", "line1\nline2\nline3"),
    ("a\nb\nc\nd", "a\nc\nd\ne"),
    ("x\ny\nz", "1\n2"),
    ("p\nq", "q\np"),
    ("dup\ndup\ndup", "dup\nother\ndup"),
    ("trailing\n", "trailing"),
]


def _types(entries: list[DiffEntry]) -> list[DiffType]:
    return [e.type for e in entries]


# --- removed_lines / added_lines ---

def test_removed_lines_numbering():
    """removed_lines numbers entries by their 1-based original position."""
    result = removed_lines(["line1", "line2", "line3"], 1, 3)
    assert [(e.content, e.old_line_number) for e in result] == [("line2", 2), ("line3", 3)]
    assert all(e.type == DiffType.removed and e.new_line_number is None for e in result)


def test_added_lines_numbering():
    """added_lines numbers entries by their 1-based modified position."""
    result = added_lines(["line1", "line2", "line3"], 0, 2)
    assert [(e.content, e.new_line_number) for e in result] == [("line1", 1), ("line2", 2)]
    assert all(e.type == DiffType.added and e.old_line_number is None for e in result)


def test_empty_ranges():
    assert removed_lines(["a", "b"], 0, 0) == []
    assert added_lines(["a", "b"], 2, 2) == []


# --- compute_diff scenarios ---

def test_compute_diff_identical_is_all_unchanged():
    text = "line1\nline2\nline3"
    entries = compute_diff(text, text)
    assert _types(entries) == [DiffType.unchanged] * 3
    assert [(e.old_line_number, e.new_line_number) for e in entries] == [(1, 1), (2, 2), (3, 3)]


def test_compute_diff_added_line():
    """A line appended to the end is one added entry numbered in the modified text."""
    entries = compute_diff("line1\nline2", "line1\nline2\nline3")
    added = [e for e in entries if e.type == DiffType.added]
    assert len(added) == 1
    assert added[0].content == "line3"
    assert added[0].new_line_number == 3
    assert added[0].old_line_number is None
    assert sum(e.type == DiffType.unchanged for e in entries) == 2


def test_compute_diff_removed_line():
    entries = compute_diff("line1\nline2\nline3", "line1\nline3")
    removed = [e for e in entries if e.type == DiffType.removed]
    assert [(e.content, e.old_line_number) for e in removed] == [("line2", 2)]


def test_compute_diff_modified_line_is_removed_then_added():
    """A changed line becomes a removed entry immediately followed by an added one."""
    entries = compute_diff("line1\noriginal", "line1\nmodified")
    assert entries == [
        DiffEntry(type=DiffType.unchanged, content="line1", old_line_number=1, new_line_number=1),
        DiffEntry(type=DiffType.removed, content="original", old_line_number=2),
        DiffEntry(type=DiffType.added, content="modified", new_line_number=2),
    ]


def test_compute_diff_empty_strings():
    """Two empty texts give one unchanged empty line."""
    entries = compute_diff("", "")
    assert entries == [
        DiffEntry(type=DiffType.unchanged, content="", old_line_number=1, new_line_number=1),
    ]
    assert calculate_diff_stats(entries) == DiffStats(unchanged=1, added=0, removed=0, total=1)


def test_compute_diff_one_side_empty():
    assert _types(compute_diff("text", "")) == [DiffType.removed, DiffType.added]
    assert _types(compute_diff("", "text")) == [DiffType.removed, DiffType.added]


def test_compute_diff_disjoint_is_all_removed_then_all_added():
    entries = compute_diff("x\ny\nz", "1\n2")
    assert _types(entries) == [DiffType.removed] * 3 + [DiffType.added] * 2


def test_compute_diff_gap_order_within_each_gap():
    """Every gap lists its removed lines before its added lines."""
    entries = compute_diff("a\nold1\nold2\nb\nold3", "a\nnew1\nb\nnew2\nnew3")
    assert [(e.type.value, e.content) for e in entries] == [
        ("unchanged", "a"),
        ("removed", "old1"),
        ("removed", "old2"),
        ("added", "new1"),
        ("unchanged", "b"),
        ("removed", "old3"),
        ("added", "new2"),
        ("added", "new3"),
    ]


def test_compute_diff_ignore_whitespace():
    """ignore_whitespace matches lines that differ only in surrounding/internal spaces."""
    original, modified = "line1\n  line2  ", "line1\nline2"
    plain = compute_diff(original, modified)
    relaxed = compute_diff(original, modified, DiffOptions(ignore_whitespace=True))
    unchanged = lambda entries: sum(e.type == DiffType.unchanged for e in entries)
    assert unchanged(relaxed) >= unchanged(plain)
    assert _types(relaxed) == [DiffType.unchanged, DiffType.unchanged]


def test_compute_diff_ignore_whitespace_collapses_internal_runs():
    entries = compute_diff("a    b", "a b", DiffOptions(ignore_whitespace=True))
    assert _types(entries) == [DiffType.unchanged]


def test_compute_diff_ignore_case():
    entries = compute_diff("Line1\nLINE2", "line1\nline2", DiffOptions(ignore_case=True))
    assert _types(entries) == [DiffType.unchanged, DiffType.unchanged]


def test_compute_diff_normalization_does_not_leak_into_content():
    """Unchanged entries show the original line, not the normalized or modified one."""
    entries = compute_diff(
        "  Hello   World ", "hello world",
        DiffOptions(ignore_whitespace=True, ignore_case=True),
    )
    assert len(entries) == 1
    assert entries[0].type == DiffType.unchanged
    assert entries[0].content == "  Hello   World "


# --- properties over a fixed corpus ---

@pytest.mark.parametrize("text", [a for a, _ in PAIRS])
def test_compute_diff_idempotent_on_identical_input(text):
    entries = compute_diff(text, text)
    stats = calculate_diff_stats(entries)
    assert all(e.type == DiffType.unchanged for e in entries)
    assert stats.added == stats.removed == 0


@pytest.mark.parametrize("original,modified", PAIRS)
def test_compute_diff_count_invariant(original, modified):
    """unchanged + removed covers the original; unchanged + added covers the modified."""
    stats = calculate_diff_stats(compute_diff(original, modified))
    assert stats.unchanged + stats.removed == len(tokenize(original))
    assert stats.unchanged + stats.added == len(tokenize(modified))


@pytest.mark.parametrize("original,modified", PAIRS)
def test_compute_diff_line_numbers_contiguous(original, modified):
    """Old numbers walk 1..n and new numbers walk 1..m in order."""
    entries = compute_diff(original, modified)
    old = [e.old_line_number for e in entries if e.old_line_number is not None]
    new = [e.new_line_number for e in entries if e.new_line_number is not None]
    assert old == list(range(1, len(tokenize(original)) + 1))
    assert new == list(range(1, len(tokenize(modified)) + 1))


# --- calculate_diff_stats ---

def test_calculate_diff_stats():
    entries = [
        DiffEntry(type=DiffType.unchanged, content="a"),
        DiffEntry(type=DiffType.unchanged, content="b"),
        DiffEntry(type=DiffType.added, content="c"),
        DiffEntry(type=DiffType.removed, content="d"),
    ]
    assert calculate_diff_stats(entries) == DiffStats(unchanged=2, added=1, removed=1, total=4)


def test_calculate_diff_stats_empty():
    assert calculate_diff_stats([]) == DiffStats(unchanged=0, added=0, removed=0, total=0)
