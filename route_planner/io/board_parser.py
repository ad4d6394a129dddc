"""Reader for comma separated ``.board`` files.

Each non-blank line is one row of integers, ``0`` for a free cell and
anything else for an obstacle::

    0,1,0,0,0,0,
    0,1,0,0,0,0,
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from ..core.cell_state import CellState
from ..core.grid import Grid


logger = logging.getLogger(__name__)


class BoardParseError(ValueError):
    """Raised when board text cannot be turned into a rectangular grid."""

    def __init__(self, message: str, line_no: Optional[int] = None) -> None:
        self.line_no = line_no
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)


def parse_line(line: str, line_no: Optional[int] = None) -> List[CellState]:
    """Return the cell states for one board row. A trailing comma is optional."""

    row: List[CellState] = []
    for token in line.strip().split(","):
        token = token.strip()
        if not token:
            continue
        try:
            flag = int(token)
        except ValueError:
            raise BoardParseError(f"expected an integer, got {token!r}", line_no) from None
        row.append(CellState.from_flag(flag))
    return row


def parse_board(text: str) -> Grid:
    """Parse the full contents of a board file into a :class:`Grid`."""

    rows: List[List[CellState]] = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        row = parse_line(line, line_no)
        if rows and len(row) != len(rows[0]):
            raise BoardParseError(
                f"row has {len(row)} cells, expected {len(rows[0])}", line_no
            )
        rows.append(row)
    return Grid(rows)


def read_board_file(path: str | Path) -> Grid:
    """Read and parse the board stored at ``path``."""

    path = Path(path)
    grid = parse_board(path.read_text(encoding="utf-8"))
    logger.info("Loaded %dx%d board from %s", grid.rows, grid.cols, path)
    return grid


__all__ = ["BoardParseError", "parse_board", "parse_line", "read_board_file"]
