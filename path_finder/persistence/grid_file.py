"""Load grid maps from disk and save search results."""

from __future__ import annotations

import gzip
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, Sequence

import yaml

from ..core.grid import grid_shape
from ..core.position import Position
from ..systems.search.astar import PathResult


logger = logging.getLogger(__name__)


class GridFormatError(ValueError):
    """Raised when a grid map document or start position is malformed."""


@dataclass
class GridMap:
    """A grid together with the markers and start stored alongside it."""

    grid: List[List[Any]]
    target: Any = None
    obstacle: Any = None
    start: Optional[Position] = None


def validate_grid(grid: Any) -> List[List[Any]]:
    """Return ``grid`` as a list of lists, checking it is non-empty and rectangular."""

    if not isinstance(grid, (list, tuple)) or not grid:
        raise GridFormatError("grid must be a non-empty list of rows")
    rows: List[List[Any]] = []
    for index, row in enumerate(grid):
        if not isinstance(row, (list, tuple)):
            raise GridFormatError(f"grid row {index} is not a list")
        rows.append(list(row))
    width = len(rows[0])
    if width == 0:
        raise GridFormatError("grid rows must not be empty")
    for index, row in enumerate(rows):
        if len(row) != width:
            raise GridFormatError(
                f"grid is not rectangular: row {index} has {len(row)} cells, expected {width}"
            )
    return rows


def validate_start(start: Any, grid: Sequence[Sequence[Any]]) -> Position:
    """Return ``start`` as a :class:`Position` lying inside ``grid``."""

    if isinstance(start, (str, bytes)) or not isinstance(start, Sequence) or len(start) != 2:
        raise GridFormatError(f"start must be a (row, column) pair, got {start!r}")
    if not all(isinstance(v, int) and not isinstance(v, bool) for v in start):
        raise GridFormatError(f"start coordinates must be integers, got {start!r}")
    position = Position.coerce(start)
    row, column = position
    if not (0 <= row < len(grid) and 0 <= column < len(grid[row])):
        raise GridFormatError(f"start {tuple(position)} is outside the grid")
    return position


def _read_text(path: Path) -> str:
    if path.suffix == ".gz":
        with gzip.open(path, "rt", encoding="utf-8") as fh:
            return fh.read()
    with open(path, "r", encoding="utf-8") as fh:
        return fh.read()


def load_grid_map(path: str | Path) -> GridMap:
    """Read a YAML or JSON grid map from ``path``.

    The document is either a bare list of rows or a mapping with a ``grid`` key
    and optional ``target``, ``obstacle`` and ``start`` keys. Files ending in
    ``.gz`` are decompressed first.
    """

    path = Path(path)
    try:
        data = yaml.safe_load(_read_text(path))
    except UnicodeDecodeError as exc:
        raise GridFormatError(f"{path}: grid map is not valid UTF-8: {exc}") from exc
    except yaml.YAMLError as exc:
        raise GridFormatError(f"{path}: unable to parse grid map: {exc}") from exc

    if isinstance(data, list):
        data = {"grid": data}
    if not isinstance(data, dict) or "grid" not in data:
        raise GridFormatError(f"{path}: expected a 'grid' entry")

    grid = validate_grid(data["grid"])
    start = data.get("start")
    grid_map = GridMap(
        grid=grid,
        target=data.get("target"),
        obstacle=data.get("obstacle"),
        start=validate_start(start, grid) if start is not None else None,
    )
    rows, columns = grid_shape(grid)
    logger.debug("Loaded %dx%d grid from %s", rows, columns, path)
    return grid_map


def save_result(result: PathResult, path: str | Path, *, gzip_compress: bool = False) -> None:
    """Write ``result`` to ``path`` as JSON.

    Parameters
    ----------
    result:
        The :class:`PathResult` to serialize.
    path:
        Destination file path.
    gzip_compress:
        If ``True``, compress the JSON using gzip.
    """

    text = json.dumps(result.to_dict(), indent=2)
    path = Path(path)
    if gzip_compress:
        with gzip.open(path, "wt", encoding="utf-8") as fh:
            fh.write(text)
    else:
        with open(path, "w", encoding="utf-8") as fh:
            fh.write(text)


__all__ = [
    "GridFormatError",
    "GridMap",
    "load_grid_map",
    "save_result",
    "validate_grid",
    "validate_start",
]
