"""
Sequence Aligner - Longest common subsequence over lines
"""

from __future__ import annotations

from collections.abc import Sequence


def align(candidate: Sequence[str], reference: Sequence[str]) -> list[tuple[int, int]]:
    """Compute matched ``(candidate_idx, reference_idx)`` pairs, in order.

    Lines match on exact string equality. ``lengths[i][j]`` holds the LCS
    length of ``candidate[:i]`` and ``reference[:j]``; the back-trace starts
    at ``(n, m)``, takes the diagonal whenever the two lines are equal and
    otherwise steps towards the larger neighbour. On a tie it steps back in
    the candidate, which fixes one alignment among equally long ones.
    """
    n = len(candidate)
    m = len(reference)

    if n == 0 or m == 0:
        return []

    lengths: list[list[int]] = [[0] * (m + 1) for _ in range(n + 1)]

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            if candidate[i - 1] == reference[j - 1]:
                lengths[i][j] = lengths[i - 1][j - 1] + 1
            else:
                lengths[i][j] = max(lengths[i - 1][j], lengths[i][j - 1])

    pairs: list[tuple[int, int]] = []
    i, j = n, m
    while i > 0 and j > 0:
        if candidate[i - 1] == reference[j - 1]:
            pairs.append((i - 1, j - 1))
            i -= 1
            j -= 1
        elif lengths[i - 1][j] >= lengths[i][j - 1]:
            i -= 1
        else:
            j -= 1

    pairs.reverse()
    return pairs
