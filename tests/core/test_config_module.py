from pathlib import Path

from route_planner.config import CONFIG, SearchConfig, load_config


def test_config_module_loads_project_config():
    assert isinstance(CONFIG.search, SearchConfig)
    assert CONFIG.search.start == (0, 0)
    assert CONFIG.search.goal == (4, 5)
    assert CONFIG.search.open_set == "heap"
    assert CONFIG.board.path == "data/1.board"


def test_missing_file_gives_defaults(tmp_path: Path):
    cfg = load_config(tmp_path / "nope.yaml")
    assert cfg.source is None
    assert cfg.search.goal == (4, 5)
    assert cfg.logging.global_level == "INFO"
    assert cfg.render.colour is False


def test_load_config_reads_values(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "search:\n"
        "  start: [1, 2]\n"
        "  goal: [3, 4]\n"
        "  open_set: sorted\n"
        "render:\n"
        "  colour: true\n"
        "logging:\n"
        "  global_level: debug\n"
        "  module_levels:\n"
        "    route_planner.io: WARNING\n"
    )
    cfg = load_config(path)
    assert cfg.source == path
    assert cfg.search.start == (1, 2)
    assert cfg.search.goal == (3, 4)
    assert cfg.search.open_set == "sorted"
    assert cfg.render.colour is True
    assert cfg.logging.global_level == "DEBUG"
    assert cfg.logging.module_levels == {"route_planner.io": "WARNING"}


def test_empty_yaml_gives_defaults(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    cfg = load_config(path)
    assert cfg.board.path == "data/1.board"
