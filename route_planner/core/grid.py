"""Rectangular occupancy grid with bounds-checked access."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence, Tuple

from .cell_state import CellState


Coord = Tuple[int, int]


class Grid:
    """Row-major 2D array of :class:`CellState`.

    Coordinates are ``(x, y)`` where ``x`` is the row index and ``y`` the
    column index. Every read and write goes through :meth:`in_bounds` so a
    negative index never wraps around to the other side of the board.
    """

    def __init__(self, cells: Iterable[Iterable[CellState]] = ()) -> None:
        self._cells: List[List[CellState]] = [list(row) for row in cells]
        widths = {len(row) for row in self._cells}
        if len(widths) > 1:
            raise ValueError(f"grid rows must have equal length, got widths {sorted(widths)}")

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------
    @classmethod
    def from_occupancy(cls, rows: Iterable[Iterable[int]]) -> "Grid":
        """Build a grid from integer flags (``0`` free, nonzero obstacle)."""

        return cls([CellState.from_flag(int(v)) for v in row] for row in rows)

    @classmethod
    def empty(cls) -> "Grid":
        """Return a zero-row grid."""

        return cls()

    def copy(self) -> "Grid":
        return Grid(self._cells)

    # ------------------------------------------------------------------
    # Dimensions
    # ------------------------------------------------------------------
    @property
    def rows(self) -> int:
        return len(self._cells)

    @property
    def cols(self) -> int:
        return len(self._cells[0]) if self._cells else 0

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.rows and 0 <= y < self.cols

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) outside grid of shape {self.shape}")

    def state_at(self, x: int, y: int) -> CellState:
        self._check(x, y)
        return self._cells[x][y]

    def set_state(self, x: int, y: int, state: CellState) -> None:
        self._check(x, y)
        self._cells[x][y] = state

    def is_valid_expansion_target(self, x: int, y: int) -> bool:
        """Return ``True`` if ``(x, y)`` is on the grid and still ``EMPTY``."""

        return self.in_bounds(x, y) and self._cells[x][y] is CellState.EMPTY

    def cells_in(self, state: CellState) -> List[Coord]:
        """Return coordinates of every cell currently in ``state``."""

        return [
            (x, y)
            for x, row in enumerate(self._cells)
            for y, cell in enumerate(row)
            if cell is state
        ]

    def to_rows(self) -> List[List[CellState]]:
        return [list(row) for row in self._cells]

    # ------------------------------------------------------------------
    # Dunder helpers
    # ------------------------------------------------------------------
    def __iter__(self) -> Iterator[Sequence[CellState]]:
        return (tuple(row) for row in self._cells)

    def __len__(self) -> int:
        return self.rows

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols})"


__all__ = ["Coord", "Grid"]
