"""Levenshtein edit distance.

The distance is the minimum number of single-character insertions,
deletions, or substitutions turning one string into the other. Callers
pass normalized strings; this module does no normalization of its own.
"""

from typing import List

DEFAULT_MAX_DISTANCE = 2


def levenshtein_distance(a: str, b: str) -> int:
    """Compute the edit distance between two strings.

    Classic dynamic-programming table of (len(b) + 1) rows by
    (len(a) + 1) columns. Row 0 and column 0 hold the cost of building a
    prefix from nothing; each inner cell takes the cheapest of a deletion,
    an insertion, or a substitution (free when the characters match).

    Args:
        a: First string
        b: Second string

    Returns:
        Non-negative edit distance; 0 only when a == b

    Example:
        >>> levenshtein_distance("jaun perez", "juan perez")
        2
        >>> levenshtein_distance("", "ucv")
        3
    """
    matrix: List[List[int]] = [[0] * (len(a) + 1) for _ in range(len(b) + 1)]

    for i in range(len(a) + 1):
        matrix[0][i] = i
    for j in range(len(b) + 1):
        matrix[j][0] = j

    for j in range(1, len(b) + 1):
        for i in range(1, len(a) + 1):
            substitution_cost = 0 if a[i - 1] == b[j - 1] else 1
            matrix[j][i] = min(
                matrix[j][i - 1] + 1,  # deletion
                matrix[j - 1][i] + 1,  # insertion
                matrix[j - 1][i - 1] + substitution_cost,  # substitution
            )

    return matrix[len(b)][len(a)]


def within_distance(a: str, b: str, max_distance: int = DEFAULT_MAX_DISTANCE) -> bool:
    """Check whether two strings are at most max_distance edits apart.

    Strings whose lengths differ by more than max_distance can never be
    close enough, so the table is skipped for them.

    Args:
        a: First string
        b: Second string
        max_distance: Inclusive threshold

    Returns:
        True if levenshtein_distance(a, b) <= max_distance
    """
    if abs(len(a) - len(b)) > max_distance:
        return False
    return levenshtein_distance(a, b) <= max_distance
