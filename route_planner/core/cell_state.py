"""Per-cell state of an occupancy grid."""

from __future__ import annotations

from enum import Enum


class CellState(Enum):
    """State a single grid cell can be in during a search."""

    EMPTY = "empty"
    OBSTACLE = "obstacle"
    CLOSED = "closed"
    PATH = "path"
    START = "start"
    FINISH = "finish"

    @classmethod
    def from_flag(cls, flag: int) -> "CellState":
        """Return ``EMPTY`` for ``0`` and ``OBSTACLE`` for anything else."""

        return cls.EMPTY if flag == 0 else cls.OBSTACLE


__all__ = ["CellState"]
