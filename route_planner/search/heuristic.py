"""Distance estimate used to order the frontier."""

from __future__ import annotations


def heuristic(x1: int, y1: int, x2: int, y2: int) -> int:
    """Return the Manhattan distance between ``(x1, y1)`` and ``(x2, y2)``.

    Never overestimates on a 4-neighbour unit-cost grid.
    """

    return abs(x2 - x1) + abs(y2 - y1)


__all__ = ["heuristic"]
