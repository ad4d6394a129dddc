"""Text renderer for searched boards."""

from __future__ import annotations

import sys
from typing import Any, Dict, TextIO, Tuple

from ...core.cell_state import CellState
from ...core.grid import Grid
from ...search.astar import SearchResult


# Basic ANSI colour codes used by :class:`TerminalView`
_COLOURS = {
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "white": "\x1b[37m",
    "reset": "\x1b[0m",
}

_GLYPHS: Dict[CellState, Tuple[str, str]] = {
    CellState.OBSTACLE: ("⛰️   ", "white"),
    CellState.PATH: ("🚗   ", "blue"),
    CellState.START: ("🚦   ", "yellow"),
    CellState.FINISH: ("🏁   ", "green"),
}
_DEFAULT_GLYPH = ("0   ", "reset")

NO_PATH_MESSAGE = "No path found!"


def cell_string(state: CellState) -> str:
    """Return the display glyph for ``state``."""

    return _GLYPHS.get(state, _DEFAULT_GLYPH)[0]


def render_board(grid: Grid, colour: bool = False) -> str:
    """Return ``grid`` as text, one line per row."""

    lines: list[str] = []
    for row in grid:
        parts: list[str] = []
        for state in row:
            glyph, name = _GLYPHS.get(state, _DEFAULT_GLYPH)
            parts.append(f"{_COLOURS[name]}{glyph}" if colour else glyph)
        if colour:
            parts.append(_COLOURS["reset"])
        lines.append("".join(parts))
    return "\n".join(lines)


class TerminalView:
    """Prints a :class:`SearchResult` to a text stream."""

    def __init__(self, colour: bool = False) -> None:
        self.colour = colour

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def render(self, result: SearchResult) -> str:
        if not result.found:
            return NO_PATH_MESSAGE
        return render_board(result.grid, colour=self.colour)

    def print_result(self, result: SearchResult, stream: TextIO | None = None) -> None:
        out: Any = stream if stream is not None else sys.stdout
        out.write(self.render(result) + "\n")
        out.flush()


__all__ = ["NO_PATH_MESSAGE", "TerminalView", "cell_string", "render_board"]
