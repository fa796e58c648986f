"""Path reconstruction and validation utilities."""

from typing import List

from .arena import NodeArena
from .neighbors import is_unit_step, is_walkable
from .types import Coord, GridQuery


def reconstruct_path(arena: NodeArena, index: int) -> List[Coord]:
    """
    Reconstruct the path ending at arena[index] by following parent indices.
    Returns the path from start to that node as plain coordinate tuples.
    """
    path = []
    current = index

    while current is not None:
        node = arena.get(current)
        path.append((node.coord[0], node.coord[1]))
        current = node.parent

    # Reverse to get path from start to goal
    path.reverse()
    return path


def path_length(path: List[Coord]) -> int:
    """Number of unit steps in a path."""
    return max(len(path) - 1, 0)


def validate_path(path: List[Coord], grid: GridQuery, start: Coord, goal: Coord) -> bool:
    """
    Validate that a path is walkable, connected and joins start to goal.
    Returns True if path is valid.
    """
    if not path:
        return False

    if path[0] != start or path[-1] != goal:
        return False

    for coord in path:
        if not is_walkable(coord, grid):
            return False

    for i in range(1, len(path)):
        if not is_unit_step(path[i - 1], path[i]):
            return False

    return True
