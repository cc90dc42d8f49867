"""Simple configuration loader for path_finder."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class SearchConfig:
    """Configuration values for the search engine."""

    step_cost: int = 10


@dataclass
class MarkerConfig:
    """Default cell markers used by the command line."""

    target: Any = "X"
    obstacle: Any = 0


@dataclass
class RenderConfig:
    """Terminal rendering options."""

    colour: bool = True
    path_glyph: str = "*"


@dataclass
class LoggingConfig:
    """Root and per-module log levels."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    search: SearchConfig = field(default_factory=SearchConfig)
    markers: MarkerConfig = field(default_factory=MarkerConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    search_data = data.get("search") or {}
    step_cost = int(search_data.get("step_cost", 10))
    if step_cost <= 0:
        raise ValueError(f"search.step_cost must be positive, got {step_cost}")
    search = SearchConfig(step_cost=step_cost)

    marker_data = data.get("markers") or {}
    markers = MarkerConfig(
        target=marker_data.get("target", "X"),
        obstacle=marker_data.get("obstacle", 0),
    )

    render_data = data.get("render") or {}
    render = RenderConfig(
        colour=bool(render_data.get("colour", True)),
        path_glyph=str(render_data.get("path_glyph", "*"))[:1] or "*",
    )

    logging_data = data.get("logging") or {}
    log_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    return Config(search=search, markers=markers, render=render, logging=log_cfg)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "CONFIG_PATH",
    "Config",
    "LoggingConfig",
    "MarkerConfig",
    "RenderConfig",
    "SearchConfig",
    "load_config",
]
