"""Open set for the A* search with FIFO tie-breaking."""

import heapq
import itertools
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .types import Coord


@dataclass
class OpenEntry:
    """
    Heap entry for the open set.

    Comparison order:
    1. f_cost (lower is better)
    2. sequence (lower is better - earliest inserted wins a tie)
    """
    f_cost: float
    sequence: int
    coord: Coord
    g_cost: float
    node_index: int

    def __lt__(self, other: 'OpenEntry') -> bool:
        """Define comparison for heap ordering."""
        if self.f_cost != other.f_cost:
            return self.f_cost < other.f_cost
        return self.sequence < other.sequence


class OpenSet:
    """
    Frontier of discovered but not yet expanded coordinates.

    A binary heap ordered by (f, insertion order) paired with a map from
    coordinate to its single live entry. A push only replaces the live entry
    when it improves on its g_cost; the superseded heap entry stays in the
    heap and is discarded when it surfaces.
    """

    def __init__(self):
        self._heap: List[OpenEntry] = []
        self._live: Dict[Coord, OpenEntry] = {}
        self._counter = itertools.count()

    def is_empty(self) -> bool:
        """Check if no live entries remain."""
        return len(self._live) == 0

    def size(self) -> int:
        """Get the number of live entries."""
        return len(self._live)

    def push(self, coord: Coord, f_cost: float, g_cost: float, node_index: int) -> bool:
        """
        Insert an entry for coord.
        Returns False, leaving the open set unchanged, if coord already has a
        live entry with an equal or lower g_cost.
        """
        current = self._live.get(coord)
        if current is not None and g_cost >= current.g_cost:
            return False

        entry = OpenEntry(f_cost, next(self._counter), coord, g_cost, node_index)
        self._live[coord] = entry
        heapq.heappush(self._heap, entry)
        return True

    def pop(self) -> Optional[Tuple[Coord, int]]:
        """
        Remove and return (coord, node_index) with the lowest f_cost.
        Returns None if no live entries remain.
        """
        while self._heap:
            entry = heapq.heappop(self._heap)
            if self._live.get(entry.coord) is entry:
                del self._live[entry.coord]
                return (entry.coord, entry.node_index)
        return None

    def contains(self, coord: Coord) -> bool:
        """Check if coord has a live entry."""
        return coord in self._live

    def best_g(self, coord: Coord) -> Optional[float]:
        """Get the g_cost of the live entry for coord, or None if absent."""
        entry = self._live.get(coord)
        return entry.g_cost if entry else None

    def coords(self) -> List[Coord]:
        """Coordinates with a live entry, useful for visualization."""
        return list(self._live)

