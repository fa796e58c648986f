"""Index-based storage for search nodes."""

from typing import List

from .types import SearchNode


class NodeArena:
    """
    Owns every SearchNode created by one search run.

    Nodes refer to their predecessor by arena index, so the parent links form
    a tree rooted at the start node that can be walked backwards in O(1) per
    step without holding object references between nodes.
    """

    def __init__(self):
        self._nodes: List[SearchNode] = []

    def add(self, node: SearchNode) -> int:
        """Store a node and return its index."""
        self._nodes.append(node)
        return len(self._nodes) - 1

    def get(self, index: int) -> SearchNode:
        return self._nodes[index]

    def __len__(self) -> int:
        return len(self._nodes)
