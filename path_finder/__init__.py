"""Shortest paths on obstacle grids using A* search."""

from .core.grid import find_target, is_traversable
from .core.position import Position, UnhandledDirectionError
from .systems.search.astar import PathResult, find_path

__all__ = [
    "PathResult",
    "Position",
    "UnhandledDirectionError",
    "find_path",
    "find_target",
    "is_traversable",
]
