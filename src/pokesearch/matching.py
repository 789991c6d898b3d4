"""Approximate name matching."""

from __future__ import annotations

from typing import Iterable, List


class EmptyCandidateSet(ValueError):
    """Raised when there is nothing to match a query against."""


def distance(a: str, b: str) -> int:
    """Return the Levenshtein edit distance between `a` and `b`."""

    if not a:
        return len(b)
    if not b:
        return len(a)

    # rows follow b, columns follow a
    matrix: List[List[int]] = [[i] + [0] * len(a) for i in range(len(b) + 1)]
    matrix[0] = list(range(len(a) + 1))

    for i in range(1, len(b) + 1):
        for j in range(1, len(a) + 1):
            if b[i - 1] == a[j - 1]:
                matrix[i][j] = matrix[i - 1][j - 1]
            else:
                matrix[i][j] = 1 + min(
                    matrix[i - 1][j - 1],
                    matrix[i][j - 1],
                    matrix[i - 1][j],
                )

    return matrix[len(b)][len(a)]


def closest_match(query: str, candidates: Iterable[str]) -> str:
    """Return the candidate closest to `query`; ties go to the earliest one."""

    pool = list(candidates)
    if not pool:
        raise EmptyCandidateSet(f"No candidates to match '{query}' against")

    best = pool[0]
    best_distance = distance(query, best)
    for candidate in pool[1:]:
        score = distance(query, candidate)
        if score < best_distance:
            best, best_distance = candidate, score
    return best


__all__ = ["EmptyCandidateSet", "closest_match", "distance"]
