"""Neighbor generation for 4-connected grid movement."""

from typing import List, Tuple

from .types import Coord, GridQuery

# Right, down, left, up
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((1, 0), (0, 1), (-1, 0), (0, -1))

STEP_COST = 1.0


def in_bounds(coord: Coord, grid: GridQuery) -> bool:
    """Check if coordinate is within grid bounds."""
    x, y = coord
    return 0 <= x < grid.width and 0 <= y < grid.height


def is_walkable(coord: Coord, grid: GridQuery) -> bool:
    """Check if coordinate is in bounds and not an obstacle."""
    return in_bounds(coord, grid) and not grid.is_obstacle(coord[0], coord[1])


def get_neighbors(coord: Coord, grid: GridQuery) -> List[Coord]:
    """Get walkable 4-connected neighbors of a coordinate."""
    x, y = coord
    neighbors = []
    for dx, dy in DIRECTIONS:
        new_coord = (x + dx, y + dy)
        if is_walkable(new_coord, grid):
            neighbors.append(new_coord)
    return neighbors


def is_unit_step(from_coord: Coord, to_coord: Coord) -> bool:
    """Check if two coordinates are 4-connected neighbors."""
    dx = abs(to_coord[0] - from_coord[0])
    dy = abs(to_coord[1] - from_coord[1])
    return dx + dy == 1
