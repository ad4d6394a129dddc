"""Simple configuration loader for route_planner."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class BoardConfig:
    """Where the occupancy board is read from."""

    path: str = "data/1.board"


@dataclass
class SearchConfig:
    """Default endpoints and frontier implementation."""

    start: tuple[int, int] = (0, 0)
    goal: tuple[int, int] = (4, 5)
    open_set: str = "heap"


@dataclass
class RenderConfig:
    colour: bool = False


@dataclass
class LoggingConfig:
    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    board: BoardConfig
    search: SearchConfig
    render: RenderConfig
    logging: LoggingConfig
    source: Optional[Path] = None


def _coord(value: Any, default: tuple[int, int]) -> tuple[int, int]:
    if value is None:
        return default
    x, y = value
    return (int(x), int(y))


def _parse_config(data: dict[str, Any], source: Optional[Path] = None) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    board_data = data.get("board", {}) or {}
    board = BoardConfig(path=str(board_data.get("path", "data/1.board")))

    search_data = data.get("search", {}) or {}
    search = SearchConfig(
        start=_coord(search_data.get("start"), (0, 0)),
        goal=_coord(search_data.get("goal"), (4, 5)),
        open_set=str(search_data.get("open_set", "heap")),
    )

    render_data = data.get("render", {}) or {}
    render = RenderConfig(colour=bool(render_data.get("colour", False)))

    logging_data = data.get("logging", {}) or {}
    logging_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels={
            str(k): str(v) for k, v in (logging_data.get("module_levels") or {}).items()
        },
    )

    return Config(
        board=board, search=search, render=render, logging=logging_cfg, source=source
    )


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if path.is_file():
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        source: Optional[Path] = path
    else:
        raw = {}
        source = None
    return _parse_config(raw, source)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "BoardConfig",
    "CONFIG",
    "Config",
    "LoggingConfig",
    "RenderConfig",
    "SearchConfig",
    "load_config",
]
