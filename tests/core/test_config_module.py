from pathlib import Path

import pytest
import yaml

from path_finder.config import (
    CONFIG,
    CONFIG_PATH,
    LoggingConfig,
    MarkerConfig,
    RenderConfig,
    SearchConfig,
    load_config,
)


def test_config_module_loads_config():
    assert isinstance(CONFIG.search, SearchConfig)
    assert isinstance(CONFIG.markers, MarkerConfig)
    assert isinstance(CONFIG.render, RenderConfig)
    assert isinstance(CONFIG.logging, LoggingConfig)
    assert CONFIG.search.step_cost == 10


def test_config_file_keys():
    data = yaml.safe_load(CONFIG_PATH.read_text())
    assert data["search"]["step_cost"] == 10
    assert data["markers"]["target"] == "X"
    assert data["markers"]["obstacle"] == 0
    assert data["logging"]["global_level"] == "INFO"


def test_missing_file_uses_defaults(tmp_path: Path):
    cfg = load_config(tmp_path / "missing.yaml")
    assert cfg.search.step_cost == 10
    assert cfg.markers.target == "X"
    assert cfg.markers.obstacle == 0
    assert cfg.render.colour is True
    assert cfg.render.path_glyph == "*"
    assert cfg.logging.global_level == "INFO"
    assert cfg.logging.module_levels == {}


def test_partial_file_overrides(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "search:\n  step_cost: 1\n"
        "markers:\n  target: T\n  obstacle: '#'\n"
        "logging:\n  global_level: debug\n  module_levels:\n    path_finder: WARNING\n"
    )
    cfg = load_config(path)
    assert cfg.search.step_cost == 1
    assert (cfg.markers.target, cfg.markers.obstacle) == ("T", "#")
    assert cfg.logging.global_level == "DEBUG"
    assert cfg.logging.module_levels == {"path_finder": "WARNING"}
    assert cfg.render.colour is True


def test_non_positive_step_cost_rejected(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("search:\n  step_cost: 0\n")
    with pytest.raises(ValueError):
        load_config(path)
