"""Search nodes and the per-search arena that owns them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ...core.position import Position


@dataclass(frozen=True)
class SearchNode:
    """One visited or frontier cell.

    ``parent`` is the arena index of the predecessor on the best known path,
    ``None`` for the start node.
    """

    position: Position
    g: int
    h: int
    parent: Optional[int] = None

    @property
    def f(self) -> int:
        return self.g + self.h


@dataclass
class NodeArena:
    """Append-only store of :class:`SearchNode` objects for a single search."""

    nodes: List[SearchNode] = field(default_factory=list)

    def add(self, node: SearchNode) -> int:
        """Store ``node`` and return its index."""

        self.nodes.append(node)
        return len(self.nodes) - 1

    def __getitem__(self, index: int) -> SearchNode:
        return self.nodes[index]

    def __len__(self) -> int:
        return len(self.nodes)

    def backtrace(self, index: int) -> List[Position]:
        """Return positions from the root of ``index``'s chain to ``index``."""

        path: List[Position] = []
        current: Optional[int] = index
        while current is not None:
            node = self.nodes[current]
            path.append(node.position)
            current = node.parent
        path.reverse()
        return path


__all__ = ["NodeArena", "SearchNode"]
