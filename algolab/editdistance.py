"""Edit distance allowing only insertions and deletions."""

from __future__ import annotations


def _check(s1: object, s2: object) -> None:
    if s1 is None or s2 is None:
        raise TypeError("edit distance needs two strings")


def edit_distance(s1: str, s2: str) -> int:
    """Count the insertions and deletions needed to turn ``s2`` into ``s1``.

    Plain recursion with no memoisation; exponential in the worst case.
    """
    _check(s1, s2)

    def distance(i: int, j: int) -> int:
        if i == len(s1):
            return len(s2) - j
        if j == len(s2):
            return len(s1) - i
        if s1[i] == s2[j]:
            return distance(i + 1, j + 1)
        return 1 + min(distance(i, j + 1), distance(i + 1, j))

    return distance(0, 0)


def edit_distance_dyn(s1: str, s2: str) -> int:
    """Same distance as :func:`edit_distance`, computed with a table."""
    _check(s1, s2)
    previous = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1, start=1):
        current = [i]
        for j, c2 in enumerate(s2, start=1):
            if c1 == c2:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(current[j - 1], previous[j]))
        previous = current
    return previous[-1]