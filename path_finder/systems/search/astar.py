"""A* search over a four-connected grid with uniform step cost."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

from ...config import CONFIG
from ...core.grid import Grid, Marker, find_target, is_traversable
from ...core.position import Position
from .heuristic import manhattan
from .node import NodeArena, SearchNode


logger = logging.getLogger(__name__)

# Successors are generated in this order: top, right, bottom, left.
SEARCH_DIRECTIONS: tuple[str, ...] = ("N", "E", "S", "W")


@dataclass(frozen=True)
class PathResult:
    """Outcome of :func:`find_path`.

    ``path`` runs from the start to the target inclusive and ``length`` is the
    number of steps taken. Both are empty/zero when no path was found, whether
    because the target is missing or because it cannot be reached.
    """

    path: tuple[Position, ...] = field(default_factory=tuple)
    length: int = 0

    @property
    def found(self) -> bool:
        return bool(self.path)

    def to_dict(self) -> dict[str, Any]:
        return {"path": [list(pos) for pos in self.path], "length": self.length}


NO_PATH = PathResult()


def _select_lowest_f(open_set: Dict[Position, int], arena: NodeArena) -> Position:
    """Return the open position with the smallest ``f``.

    Ties resolve to the entry inserted first; replacing an entry keeps its slot.
    """

    best = next(iter(open_set))
    best_f = arena[open_set[best]].f
    for position, index in open_set.items():
        f = arena[index].f
        if f < best_f:
            best, best_f = position, f
    return best


def find_path(
    target_marker: Marker,
    obstacle_marker: Marker,
    start: Position | Sequence[int],
    grid: Grid,
    *,
    step_cost: int | None = None,
) -> PathResult:
    """Return the shortest four-directional path from ``start`` to the target.

    The target is the first cell equal to ``target_marker`` in row-major order.
    Cells equal to ``obstacle_marker`` and cells outside ``grid`` cannot be
    entered. The start cell itself is not checked against ``obstacle_marker``.

    Parameters
    ----------
    target_marker:
        Value identifying the destination cell.
    obstacle_marker:
        Value identifying impassable cells.
    start:
        Starting ``(row, column)``.
    grid:
        Rectangular sequence of rows of cell markers.
    step_cost:
        Cost of a single move. Defaults to ``CONFIG.search.step_cost``.

    Returns
    -------
    PathResult
        The path and its length, or an empty result if there is no path.
    """

    cost = CONFIG.search.step_cost if step_cost is None else step_cost
    if cost <= 0:
        raise ValueError(f"step_cost must be positive, got {cost!r}")

    target = find_target(grid, target_marker)
    if target is None:
        logger.debug("Target marker %r not present in grid", target_marker)
        return NO_PATH

    origin = Position.coerce(start)
    arena = NodeArena()
    open_set: Dict[Position, int] = {}
    closed_set: Dict[Position, int] = {}

    open_set[origin] = arena.add(SearchNode(origin, 0, manhattan(origin, target)))

    while open_set:
        position = _select_lowest_f(open_set, arena)
        current_index = open_set.pop(position)
        closed_set[position] = current_index
        current = arena[current_index]

        if position == target:
            path: List[Position] = arena.backtrace(current_index)
            logger.debug(
                "Reached %s from %s in %d steps (%d expanded, %d created)",
                target,
                origin,
                len(path) - 1,
                len(closed_set),
                len(arena),
            )
            return PathResult(path=tuple(path), length=len(path) - 1)

        for direction in SEARCH_DIRECTIONS:
            candidate = position.step(direction)
            if not is_traversable(candidate, grid, obstacle_marker):
                continue
            if candidate in closed_set:
                continue

            node = SearchNode(
                candidate,
                current.g + cost,
                manhattan(candidate, target),
                current_index,
            )
            existing = open_set.get(candidate)
            if existing is not None and node.f >= arena[existing].f:
                continue

            open_set[candidate] = arena.add(node)
            if candidate == target:
                # no more successors once the target is open
                break

    logger.debug(
        "No path from %s to %s (%d cells expanded)", origin, target, len(closed_set)
    )
    return NO_PATH


__all__ = ["NO_PATH", "PathResult", "SEARCH_DIRECTIONS", "find_path"]
