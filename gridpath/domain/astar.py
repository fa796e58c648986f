"""Core A* pathfinding algorithm implementation."""

import logging
from typing import List, Optional, Set

from .arena import NodeArena
from .heuristics import manhattan_distance
from .neighbors import STEP_COST, get_neighbors, is_walkable
from .path import reconstruct_path
from .priority_queue import OpenSet
from .types import Coord, GridQuery, PathfindingResult, SearchNode

logger = logging.getLogger(__name__)


class AStarSearch:
    """
    A* search over a 4-connected grid with unit step costs.
    Framework-agnostic pure Python implementation.

    Closed coordinates are final: a cheaper route discovered to an already
    expanded coordinate is ignored. With the Manhattan heuristic on a
    unit-cost grid this never costs optimality, but it would with an
    inconsistent heuristic.
    """

    def __init__(self):
        self.reset()

    def reset(self):
        """Reset the search state."""
        self.arena = NodeArena()
        self.open_set = OpenSet()
        self.closed_set: Set[Coord] = set()
        self.grid: Optional[GridQuery] = None
        self.start_coord: Optional[Coord] = None
        self.goal_coord: Optional[Coord] = None
        self.nodes_explored = 0

    def initialize(self, grid: GridQuery, start: Coord, goal: Coord):
        """Initialize the search with start and goal positions."""
        if not is_walkable(start, grid):
            raise ValueError(f"Start position {start} is out of bounds or blocked")
        if not is_walkable(goal, grid):
            raise ValueError(f"Goal position {goal} is out of bounds or blocked")

        self.reset()
        self.grid = grid
        self.start_coord = (start[0], start[1])
        self.goal_coord = (goal[0], goal[1])

        start_node = SearchNode(
            coord=self.start_coord,
            g=0.0,
            h=manhattan_distance(self.start_coord, self.goal_coord),
        )
        index = self.arena.add(start_node)
        self.open_set.push(start_node.coord, start_node.f, start_node.g, index)

    def step(self) -> Optional[PathfindingResult]:
        """
        Expand one node.
        Returns PathfindingResult if the search is complete, None otherwise.
        """
        if self.grid is None or self.goal_coord is None:
            raise ValueError("Search not initialized")

        popped = self.open_set.pop()
        if popped is None:
            return PathfindingResult(found=False, nodes_explored=self.nodes_explored)

        current_coord, current_index = popped
        current = self.arena.get(current_index)
        self.nodes_explored += 1
        logger.debug("Processing node %s with f: %.1f", current_coord, current.f)

        if current_coord == self.goal_coord:
            return PathfindingResult(
                path=reconstruct_path(self.arena, current_index),
                path_cost=current.g,
                nodes_explored=self.nodes_explored,
                found=True,
            )

        self.closed_set.add(current_coord)

        for neighbor_coord in get_neighbors(current_coord, self.grid):
            if neighbor_coord in self.closed_set:
                continue

            tentative_g = current.g + STEP_COST

            neighbor = SearchNode(
                coord=neighbor_coord,
                g=tentative_g,
                h=manhattan_distance(neighbor_coord, self.goal_coord),
                parent=current_index,
            )
            # The node is only stored once the open set accepts it
            if self.open_set.push(neighbor_coord, neighbor.f, neighbor.g, len(self.arena)):
                self.arena.add(neighbor)
                logger.debug(
                    "Considering neighbor %s with g: %.1f h: %.1f f: %.1f",
                    neighbor_coord, neighbor.g, neighbor.h, neighbor.f,
                )

        return None  # Search continues

    def run_complete(self, max_steps: Optional[int] = None) -> PathfindingResult:
        """
        Run the search until it finishes or max_steps expansions are used.
        Returns the final PathfindingResult.
        """
        steps = 0
        while max_steps is None or steps < max_steps:
            result = self.step()
            if result is not None:
                return result
            steps += 1

        logger.debug("Search stopped after %d expansions without reaching the goal", steps)
        return PathfindingResult(found=False, nodes_explored=self.nodes_explored)

    def open_coords(self) -> List[Coord]:
        """Get all coordinates currently in the open set."""
        return self.open_set.coords()

    def closed_coords(self) -> List[Coord]:
        """Get all coordinates currently in the closed set."""
        return sorted(self.closed_set)


def search(grid: GridQuery, start: Coord, goal: Coord,
           max_steps: Optional[int] = None) -> PathfindingResult:
    """
    Run A* from start to goal and report the path with statistics.

    Args:
        grid: Grid to search in
        start: Starting coordinate
        goal: Goal coordinate
        max_steps: Optional cap on node expansions

    Returns:
        PathfindingResult; not found if the endpoints are invalid, the goal
        is unreachable or the expansion budget runs out
    """
    algorithm = AStarSearch()
    try:
        algorithm.initialize(grid, start, goal)
    except ValueError as e:
        logger.debug("Search skipped: %s", e)
        return PathfindingResult(found=False, nodes_explored=0)
    return algorithm.run_complete(max_steps)


def find_path(grid: GridQuery, start: Coord, goal: Coord) -> List[Coord]:
    """Shortest 4-connected path from start to goal, or [] if there is none."""
    return search(grid, start, goal).path
