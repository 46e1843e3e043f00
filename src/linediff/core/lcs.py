"""Longest common subsequence over comparison keys"""

from typing import Sequence

from linediff.core.models import MatchedPair


def _lcs_table(a: Sequence[str], b: Sequence[str]) -> list[list[int]]:
    """dp[i][j] = LCS length of a[:i] and b[:j]."""
    n, m = len(a), len(b)
    dp = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        prev, row, ai = dp[i - 1], dp[i], a[i - 1]
        for j in range(1, m + 1):
            if ai == b[j - 1]:
                row[j] = prev[j - 1] + 1
            else:
                row[j] = max(prev[j], row[j - 1])
    return dp


def compute_lcs(a: Sequence[str], b: Sequence[str]) -> list[MatchedPair]:
    """Return matched (orig_index, mod_index) pairs of a longest common subsequence.

    Pairs are strictly increasing in both indices. When both neighbours of a
    cell have the same LCS length the backtrack moves up (skips a[i-1]), so
    original lines pair with the latest matching modified line.
    O(len(a) * len(b)) time and memory; empty input gives [].
    """
    if not a or not b:
        return []

    dp = _lcs_table(a, b)
    pairs: list[MatchedPair] = []
    i, j = len(a), len(b)
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            pairs.append(MatchedPair(i - 1, j - 1))
            i -= 1
            j -= 1
        elif dp[i - 1][j] >= dp[i][j - 1]:
            i -= 1
        else:
            j -= 1

    pairs.reverse()
    return pairs
