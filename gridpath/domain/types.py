"""Core type definitions for the A* pathfinding search."""

from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Tuple

# Coordinate type for grid positions
Coord = Tuple[int, int]


class GridQuery(Protocol):
    """Read-only view of a grid that the search needs."""
    width: int
    height: int

    def is_obstacle(self, x: int, y: int) -> bool:
        ...


@dataclass
class SearchNode:
    """A coordinate reached during a search, with its costs."""
    coord: Coord
    g: float = 0.0  # Cost from start
    h: float = 0.0  # Heuristic estimate to goal
    parent: Optional[int] = None  # Arena index of the predecessor

    @property
    def f(self) -> float:
        """Total estimated cost (g + h)."""
        return self.g + self.h


@dataclass
class PathfindingResult:
    """Result of a pathfinding operation."""
    path: List[Coord] = field(default_factory=list)
    path_cost: float = 0.0
    nodes_explored: int = 0
    found: bool = False

    @property
    def success(self) -> bool:
        """Whether pathfinding was successful."""
        return self.found and len(self.path) > 0

    @property
    def steps(self) -> int:
        """Number of moves along the path."""
        return max(len(self.path) - 1, 0)
