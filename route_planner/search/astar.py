"""A* search over an occupancy :class:`~route_planner.core.grid.Grid`.

Cells are closed as soon as they are discovered, so every cell enters the
open set at most once. The cell of each extracted node is marked ``PATH``;
once the goal comes out of the open set the start and goal cells are
overwritten with ``START`` and ``FINISH`` and the annotated grid is returned.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from ..core.cell_state import CellState
from ..core.grid import Coord, Grid
from .heuristic import heuristic
from .open_set import FrontierNode, OpenSet, make_open_set


logger = logging.getLogger(__name__)

# up, left, down, right
DELTAS: Tuple[Coord, ...] = ((-1, 0), (0, -1), (1, 0), (0, 1))


class SearchStatus(Enum):
    INITIALIZED = "initialized"
    EXPANDING = "expanding"
    FOUND = "found"
    EXHAUSTED = "exhausted"


@dataclass
class SearchResult:
    """Outcome of one search call.

    ``grid`` is the annotated board when a path was found and an empty
    zero-row grid otherwise. ``cost`` is the accumulated ``g`` at the goal.
    """

    status: SearchStatus
    grid: Grid
    cost: Optional[int] = None
    expanded: int = 0

    @property
    def found(self) -> bool:
        return self.status is SearchStatus.FOUND


class GridSearch:
    """Single-use A* driver that owns a private copy of the input grid."""

    def __init__(
        self,
        grid: Grid,
        start: Coord,
        goal: Coord,
        open_set: OpenSet | None = None,
    ) -> None:
        _check_endpoint(grid, start, "start")
        _check_endpoint(grid, goal, "goal")

        self.grid = grid.copy()
        self.start = (int(start[0]), int(start[1]))
        self.goal = (int(goal[0]), int(goal[1]))
        self.open_set = open_set if open_set is not None else make_open_set()
        self.expanded = 0
        self.cost: Optional[int] = None

        sx, sy = self.start
        self._add_to_open(FrontierNode(sx, sy, 0, heuristic(sx, sy, *self.goal)))
        self.status = SearchStatus.INITIALIZED

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _add_to_open(self, node: FrontierNode) -> None:
        self.open_set.insert(node)
        self.grid.set_state(node.x, node.y, CellState.CLOSED)

    def _expand_neighbors(self, node: FrontierNode) -> None:
        gx, gy = self.goal
        for dx, dy in DELTAS:
            nx, ny = node.x + dx, node.y + dy
            if self.grid.is_valid_expansion_target(nx, ny):
                self._add_to_open(FrontierNode(nx, ny, node.g + 1, heuristic(nx, ny, gx, gy)))

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def done(self) -> bool:
        return self.status in (SearchStatus.FOUND, SearchStatus.EXHAUSTED)

    def step(self) -> SearchStatus:
        """Extract and process one node. No-op once the search has finished."""

        if self.done:
            return self.status

        if not self.open_set:
            self.status = SearchStatus.EXHAUSTED
            logger.warning(
                "No path found from %s to %s after %d expansions",
                self.start, self.goal, self.expanded,
            )
            return self.status

        self.status = SearchStatus.EXPANDING
        current = self.open_set.extract_best()
        self.expanded += 1
        self.grid.set_state(current.x, current.y, CellState.PATH)
        logger.debug("Expanding %s g=%d h=%d", current.position, current.g, current.h)

        if current.position == self.goal:
            self.grid.set_state(*self.start, CellState.START)
            self.grid.set_state(*self.goal, CellState.FINISH)
            self.open_set.clear()
            self.cost = current.g
            self.status = SearchStatus.FOUND
            logger.info(
                "Path found from %s to %s with cost %d (%d expansions)",
                self.start, self.goal, current.g, self.expanded,
            )
            return self.status

        self._expand_neighbors(current)
        return self.status

    def run(self) -> SearchResult:
        """Step until the goal is found or the open set runs dry."""

        while not self.done:
            self.step()
        return self.result()

    def result(self) -> SearchResult:
        if self.status is SearchStatus.FOUND:
            return SearchResult(self.status, self.grid, self.cost, self.expanded)
        return SearchResult(self.status, Grid.empty(), None, self.expanded)


def _check_endpoint(grid: Grid, coord: Coord, label: str) -> None:
    x, y = coord
    if not grid.in_bounds(x, y):
        raise ValueError(f"{label} {tuple(coord)} is outside grid of shape {grid.shape}")
    if grid.state_at(x, y) is CellState.OBSTACLE:
        raise ValueError(f"{label} {tuple(coord)} is on an obstacle")


def search(
    grid: Grid,
    start: Coord,
    goal: Coord,
    open_set_kind: str = "heap",
) -> SearchResult:
    """Run A* from ``start`` to ``goal`` on a copy of ``grid``."""

    return GridSearch(grid, start, goal, make_open_set(open_set_kind)).run()


__all__ = ["DELTAS", "GridSearch", "SearchResult", "SearchStatus", "search"]
