"""A* Grid Pathfinding Visualizer.

Paint obstacles on a grid, place a start and a goal, and watch the shortest
4-connected path found by A* with a Manhattan distance heuristic.
"""

from .domain.astar import find_path, search

__version__ = "1.0.0"

__all__ = ["find_path", "search"]
