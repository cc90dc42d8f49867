"""ASCII terminal renderer for grids and search results."""

from __future__ import annotations

import sys
from typing import Any, Iterable, Optional, Sequence, TextIO

from ...core.position import Position


# Basic ANSI colour codes used by :func:`render_grid`
_COLOURS = {
    "black": "\x1b[30m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "magenta": "\x1b[35m",
    "cyan": "\x1b[36m",
    "white": "\x1b[37m",
    "reset": "\x1b[0m",
}

OBSTACLE_GLYPH = "#"
TARGET_GLYPH = "X"
START_GLYPH = "S"
OPEN_GLYPH = "."


def _cell_glyph_colour(
    position: Position,
    cell: Any,
    *,
    obstacle_marker: Any,
    target: Optional[Position],
    start: Optional[Position],
    on_path: bool,
    path_glyph: str,
) -> tuple[str, str]:
    if start is not None and position == start:
        return START_GLYPH, "green"
    if target is not None and position == target:
        return TARGET_GLYPH, "red"
    if on_path:
        return path_glyph, "yellow"
    if cell == obstacle_marker:
        return OBSTACLE_GLYPH, "blue"
    return OPEN_GLYPH, "reset"


def render_grid(
    grid: Sequence[Sequence[Any]],
    path: Iterable[Sequence[int]] = (),
    *,
    obstacle_marker: Any,
    target: Optional[Sequence[int]] = None,
    start: Optional[Sequence[int]] = None,
    colour: bool = False,
    path_glyph: str = "*",
) -> str:
    """Return ``grid`` drawn as text with ``path`` overlaid.

    Obstacles are ``#``, the ``target`` cell ``X``, the start ``S`` and every
    other cell on ``path`` is ``path_glyph``.
    """

    on_path = {Position.coerce(p) for p in path}
    origin = Position.coerce(start) if start is not None else None
    goal = Position.coerce(target) if target is not None else None

    lines: list[str] = []
    for row, cells in enumerate(grid):
        line: list[str] = []
        for column, cell in enumerate(cells):
            position = Position(row, column)
            glyph, tint = _cell_glyph_colour(
                position,
                cell,
                obstacle_marker=obstacle_marker,
                target=goal,
                start=origin,
                on_path=position in on_path,
                path_glyph=path_glyph,
            )
            line.append(f"{_COLOURS[tint]}{glyph}" if colour else glyph)
        if colour:
            line.append(_COLOURS["reset"])
        lines.append("".join(line))
    return "\n".join(lines)


def print_grid(text: str, stream: TextIO | None = None) -> None:
    """Write rendered ``text`` to ``stream`` (``stdout`` by default)."""

    out = stream if stream is not None else sys.stdout
    out.write(text + "\n")
    out.flush()


__all__ = ["print_grid", "render_grid"]
