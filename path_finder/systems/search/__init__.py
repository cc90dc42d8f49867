"""search package."""

from .astar import NO_PATH, PathResult, SEARCH_DIRECTIONS, find_path
from .heuristic import manhattan
from .node import NodeArena, SearchNode

__all__ = [
    "NO_PATH",
    "NodeArena",
    "PathResult",
    "SEARCH_DIRECTIONS",
    "SearchNode",
    "find_path",
    "manhattan",
]
