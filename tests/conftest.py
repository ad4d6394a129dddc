import pytest

from route_planner.core.grid import Grid
from route_planner.io.board_parser import parse_board


WALL_ROWS = [
    [0, 1, 0, 0, 0, 0],
    [0, 1, 0, 0, 0, 0],
    [0, 1, 0, 0, 0, 0],
    [0, 1, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0],
]

# Shipped sample board: same wall plus a rock next to the goal.
SAMPLE_BOARD = """\
0,1,0,0,0,0,
0,1,0,0,0,0,
0,1,0,0,0,0,
0,1,0,0,0,0,
0,0,0,0,1,0,
"""


@pytest.fixture
def wall_grid() -> Grid:
    """5x6 board with a wall in column 1 that is open only on the last row."""
    return Grid.from_occupancy(WALL_ROWS)


@pytest.fixture
def open_grid() -> Grid:
    return Grid.from_occupancy([[0] * 7 for _ in range(5)])


@pytest.fixture
def enclosed_goal_grid() -> Grid:
    """Goal at (2, 2) is walled in on all four sides."""
    return Grid.from_occupancy(
        [
            [0, 0, 0, 0, 0],
            [0, 0, 1, 0, 0],
            [0, 1, 0, 1, 0],
            [0, 0, 1, 0, 0],
            [0, 0, 0, 0, 0],
        ]
    )


@pytest.fixture
def sample_board_file(tmp_path):
    path = tmp_path / "1.board"
    path.write_text(SAMPLE_BOARD, encoding="utf-8")
    return path


@pytest.fixture
def sample_grid() -> Grid:
    return parse_board(SAMPLE_BOARD)
