"""Grid helpers: target lookup and traversability checks."""

from __future__ import annotations

from typing import Any, Hashable, Optional, Sequence

from .position import Position


Grid = Sequence[Sequence[Any]]
Marker = Hashable


def find_target(grid: Grid, target_marker: Marker) -> Optional[Position]:
    """Return the first cell equal to ``target_marker`` in row-major order.

    ``None`` is returned when the marker does not occur anywhere in ``grid``.
    """

    for row, cells in enumerate(grid):
        for column, cell in enumerate(cells):
            if cell == target_marker:
                return Position(row, column)
    return None


def is_traversable(position: Position, grid: Grid, obstacle_marker: Marker) -> bool:
    """Return ``True`` if ``position`` is inside ``grid`` and not an obstacle."""

    row, column = position
    if not 0 <= row < len(grid):
        return False
    cells = grid[row]
    if not 0 <= column < len(cells):
        return False
    return cells[column] != obstacle_marker


def grid_shape(grid: Grid) -> tuple[int, int]:
    """Return ``(rows, columns)`` using the width of the first row."""

    rows = len(grid)
    columns = len(grid[0]) if rows else 0
    return rows, columns


__all__ = ["Grid", "Marker", "find_target", "grid_shape", "is_traversable"]
