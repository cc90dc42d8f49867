"""Distance estimates used to rank open nodes."""

from __future__ import annotations

from ...core.position import Position


def manhattan(position: Position, target: Position) -> int:
    """Return the Manhattan distance between ``position`` and ``target``.

    Admissible and consistent for four-directional movement with a uniform,
    positive step cost of at least one.
    """

    return abs(position[0] - target[0]) + abs(position[1] - target[1])


__all__ = ["manhattan"]
