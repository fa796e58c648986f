"""Obstacle storage for the pathfinding grid."""

from typing import Iterator, Sequence

import numpy as np

from .types import Coord


class GridStore:
    """
    Fixed-size grid of obstacle flags backed by a boolean array.

    Cells are addressed as (x, y); the array is indexed [y, x]. Queries and
    edits outside the grid are ignored rather than raising.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._cells = np.zeros((height, width), dtype=bool)

    @classmethod
    def from_strings(cls, rows: Sequence[str]) -> 'GridStore':
        """Build a grid from text rows where '#' marks an obstacle."""
        if not rows:
            raise ValueError("At least one row is required")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("All rows must have the same length")

        grid = cls(width, len(rows))
        for y, row in enumerate(rows):
            for x, char in enumerate(row):
                if char == "#":
                    grid._cells[y, x] = True
        return grid

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if coordinate is within grid bounds."""
        return 0 <= x < self.width and 0 <= y < self.height

    def is_obstacle(self, x: int, y: int) -> bool:
        """Check if a cell is blocked. Out-of-bounds cells are not obstacles."""
        if not self.in_bounds(x, y):
            return False
        return bool(self._cells[y, x])

    def set_obstacle(self, x: int, y: int):
        if self.in_bounds(x, y):
            self._cells[y, x] = True

    def clear_obstacle(self, x: int, y: int):
        if self.in_bounds(x, y):
            self._cells[y, x] = False

    def toggle_obstacle(self, x: int, y: int) -> bool:
        """Flip a cell's obstacle flag. Returns the new state."""
        if not self.in_bounds(x, y):
            return False
        self._cells[y, x] = not self._cells[y, x]
        return bool(self._cells[y, x])

    def clear(self):
        """Remove every obstacle."""
        self._cells.fill(False)

    def obstacle_count(self) -> int:
        return int(np.count_nonzero(self._cells))

    def obstacles(self) -> Iterator[Coord]:
        """Iterate obstacle coordinates in row-major order."""
        for y, x in np.argwhere(self._cells):
            yield (int(x), int(y))

    def copy(self) -> 'GridStore':
        grid = GridStore(self.width, self.height)
        grid._cells = self._cells.copy()
        return grid

    def __repr__(self) -> str:
        return f"GridStore({self.width}x{self.height}, obstacles={self.obstacle_count()})"
