"""core package."""

from .cell_state import CellState
from .grid import Grid

__all__ = ["CellState", "Grid"]
