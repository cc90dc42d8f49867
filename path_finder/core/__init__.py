"""core package."""

from .grid import Grid, Marker, find_target, grid_shape, is_traversable
from .position import DIRECTION_OFFSETS, Position, UnhandledDirectionError

__all__ = [
    "DIRECTION_OFFSETS",
    "Grid",
    "Marker",
    "Position",
    "UnhandledDirectionError",
    "find_target",
    "grid_shape",
    "is_traversable",
]
