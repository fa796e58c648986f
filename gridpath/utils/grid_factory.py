"""Grid factory for creating and randomizing obstacle grids."""

from typing import Iterable, Optional

from ..domain.grid import GridStore
from ..domain.types import Coord
from .rng import SeededRNG, default_rng


def create_empty_grid(width: int, height: int) -> GridStore:
    """
    Create a new grid with no obstacles.

    Args:
        width: Grid width (must be > 0)
        height: Grid height (must be > 0)

    Raises:
        ValueError: If width or height <= 0
    """
    return GridStore(width, height)


def create_demo_grid(width: int, height: int) -> GridStore:
    """
    Create the starting layout: a horizontal wall across the middle row
    covering the central half of the columns, open at both ends.
    For a 20x20 grid this blocks row 10 from x=5 to x=14.
    """
    grid = create_empty_grid(width, height)
    row = height // 2
    for x in range(width // 4, width - width // 4):
        grid.set_obstacle(x, row)
    return grid


def add_random_obstacles(grid: GridStore, density: float,
                         rng: Optional[SeededRNG] = None,
                         keep: Iterable[Coord] = ()) -> int:
    """
    Block a random share of the currently free cells.

    Args:
        grid: Grid to modify
        density: Fraction of all cells to turn into obstacles (0.0 to 1.0)
        rng: Random number generator to use (uses default if None)
        keep: Coordinates that must stay free

    Returns:
        Number of obstacles placed
    """
    if not (0.0 <= density <= 1.0):
        raise ValueError(f"Density must be between 0.0 and 1.0, got {density}")

    if rng is None:
        rng = default_rng

    protected = set(keep)
    free_coords = [
        (x, y)
        for y in range(grid.height)
        for x in range(grid.width)
        if not grid.is_obstacle(x, y) and (x, y) not in protected
    ]

    num_obstacles = min(int(grid.width * grid.height * density), len(free_coords))
    for x, y in rng.sample(free_coords, num_obstacles):
        grid.set_obstacle(x, y)

    return num_obstacles
