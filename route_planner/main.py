"""Command line entry point: read a board, search it and print the result."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import CONFIG_PATH, Config, load_config
from .core.grid import Coord
from .io.board_parser import BoardParseError, read_board_file
from .search.astar import search
from .search.open_set import OPEN_SET_KINDS
from .utils.cli.terminal_view import TerminalView


logger = logging.getLogger(__name__)

EXIT_FOUND = 0
EXIT_NO_PATH = 1
EXIT_BAD_INPUT = 2


def configure_logging(cfg: Config) -> None:
    """Apply the global and per-module log levels from ``cfg``."""

    numeric_level = getattr(logging, cfg.logging.global_level, logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )
    for module_name, level_str in cfg.logging.module_levels.items():
        module_level = getattr(logging, level_str.upper(), None)
        if isinstance(module_level, int):
            logging.getLogger(module_name).setLevel(module_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def parse_coord(text: str) -> Coord:
    """Parse ``"r,c"`` into a coordinate pair."""

    parts = text.split(",")
    try:
        if len(parts) != 2:
            raise ValueError
        return (int(parts[0]), int(parts[1]))
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid coordinate {text!r}, expected r,c") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="route-planner", description="A* route planner on a text occupancy board"
    )
    parser.add_argument("--config", type=Path, default=CONFIG_PATH, help="YAML config file")
    parser.add_argument("--board", type=Path, default=None, help="board file (overrides config)")
    parser.add_argument("--start", type=parse_coord, default=None, help="start as r,c")
    parser.add_argument("--goal", type=parse_coord, default=None, help="goal as r,c")
    parser.add_argument("--open-set", choices=sorted(OPEN_SET_KINDS), default=None)
    parser.add_argument("--colour", action="store_true", default=None, help="ANSI colour output")
    return parser


def _board_path(args: argparse.Namespace, cfg: Config) -> Path:
    if args.board is not None:
        return args.board
    path = Path(cfg.board.path)
    if not path.is_absolute() and cfg.source is not None:
        path = cfg.source.parent / path
    return path


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = load_config(args.config)
    configure_logging(cfg)

    start = args.start if args.start is not None else cfg.search.start
    goal = args.goal if args.goal is not None else cfg.search.goal
    kind = args.open_set or cfg.search.open_set
    colour = cfg.render.colour if args.colour is None else args.colour

    board_path = _board_path(args, cfg)
    try:
        grid = read_board_file(board_path)
    except FileNotFoundError:
        logger.error("Board file not found: %s", board_path)
        return EXIT_BAD_INPUT
    except BoardParseError as exc:
        logger.error("Could not parse board %s: %s", board_path, exc)
        return EXIT_BAD_INPUT

    try:
        result = search(grid, start, goal, kind)
    except ValueError as exc:
        logger.error("Invalid search request: %s", exc)
        return EXIT_BAD_INPUT

    TerminalView(colour=colour).print_result(result)
    return EXIT_FOUND if result.found else EXIT_NO_PATH


if __name__ == "__main__":
    sys.exit(main())
