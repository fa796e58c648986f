"""Main application controller connecting UI and domain logic."""

import logging
from typing import List, Optional

from PySide6.QtCore import QObject, Signal

from ..config import AppConfig
from ..domain.astar import search
from ..domain.grid import GridStore
from ..domain.types import Coord, PathfindingResult
from ..utils.grid_factory import add_random_obstacles, create_demo_grid, create_empty_grid
from ..utils.rng import SeededRNG
from .fsm import PlacementState, PlacementStateMachine

logger = logging.getLogger(__name__)

PLACE_CUE = "place"
RESET_CUE = "reset"


class GridController(QObject):
    """
    Controller that owns the grid and endpoints and runs the search.

    Signals:
        state_changed: Emitted when the placement state changes
        path_computed: Emitted with the PathfindingResult after the goal is placed
        grid_updated: Emitted when the grid needs to be redrawn
    """

    # Qt Signals
    state_changed = Signal(object)  # PlacementState
    path_computed = Signal(object)  # PathfindingResult
    grid_updated = Signal()

    def __init__(self, config: Optional[AppConfig] = None, cue_player=None):
        super().__init__()

        self._config = config or AppConfig()
        self._cue_player = cue_player
        self._state_machine = PlacementStateMachine()
        self._start_coord: Optional[Coord] = None
        self._goal_coord: Optional[Coord] = None
        self._result: Optional[PathfindingResult] = None

        if self._config.demo_wall:
            self._grid = create_demo_grid(self._config.grid_width, self._config.grid_height)
        else:
            self._grid = create_empty_grid(self._config.grid_width, self._config.grid_height)

        self._setup_state_callbacks()

    def _setup_state_callbacks(self):
        """Setup callbacks for state machine transitions."""
        for state in PlacementState:
            self._state_machine.on_state_enter(state, self._on_state_entered)

    # Properties

    @property
    def grid(self) -> GridStore:
        """Get the current grid."""
        return self._grid

    @property
    def config(self) -> AppConfig:
        return self._config

    @property
    def start_coord(self) -> Optional[Coord]:
        """Get the start coordinate."""
        return self._start_coord

    @property
    def goal_coord(self) -> Optional[Coord]:
        """Get the goal coordinate."""
        return self._goal_coord

    @property
    def path(self) -> List[Coord]:
        """Path from the last search, empty if none."""
        return self._result.path if self._result else []

    @property
    def search_finished(self) -> bool:
        """True once the goal is placed and the search has run."""
        return self._state_machine.is_finished()

    @property
    def current_state(self) -> PlacementState:
        """Get the current placement state."""
        return self._state_machine.current_state

    @property
    def state_description(self) -> str:
        return self._state_machine.get_state_description()

    # Grid editing

    def toggle_obstacle(self, coord: Coord) -> bool:
        """Toggle the obstacle flag of a cell. The current path is left as is."""
        x, y = coord
        if not self._grid.in_bounds(x, y):
            return False

        self._grid.toggle_obstacle(x, y)
        logger.debug("Left-clicked coordinates: (%d, %d)", x, y)
        self.grid_updated.emit()
        return True

    def clear_obstacles(self):
        """Remove every obstacle from the grid."""
        self._grid.clear()
        logger.info("Cleared all obstacles")
        self.grid_updated.emit()

    def scatter_obstacles(self, density: Optional[float] = None, seed: Optional[int] = None) -> bool:
        """Block a random share of free cells, sparing the placed endpoints."""
        if density is None:
            density = self._config.random_obstacle_density

        keep = [c for c in (self._start_coord, self._goal_coord) if c is not None]
        try:
            placed = add_random_obstacles(self._grid, density, SeededRNG(seed), keep=keep)
        except ValueError as e:
            logger.error("Failed to scatter obstacles: %s", e)
            return False

        logger.info("Placed %d random obstacles (density %.2f)", placed, density)
        self.grid_updated.emit()
        return True

    # Endpoint placement

    def place_endpoint(self, coord: Coord) -> bool:
        """
        Place the start on the first call and the goal on the second.
        Placing the goal runs the search. Further calls are ignored until reset.
        """
        x, y = coord
        if not self._grid.in_bounds(x, y) or not self._state_machine.is_accepting_endpoint():
            return False

        logger.debug("Right-clicked coordinates: (%d, %d)", x, y)
        # Ignored right-clicks stay silent, only accepted placements get the cue
        self._play(PLACE_CUE)

        if self.current_state == PlacementState.AWAITING_START:
            self._start_coord = (x, y)
            self._state_machine.start_placed()
        else:
            self._goal_coord = (x, y)
            self._run_search()

        self.grid_updated.emit()
        return True

    def _run_search(self):
        """Search from start to goal and record the outcome."""
        self._result = search(
            self._grid, self._start_coord, self._goal_coord,
            max_steps=self._config.search_step_budget,
        )

        if self._result.success:
            logger.info(
                "Path found from %s to %s: %d steps, %d nodes explored",
                self._start_coord, self._goal_coord, self._result.steps,
                self._result.nodes_explored,
            )
            self._state_machine.path_found({"result": self._result})
        else:
            logger.info("No path from %s to %s", self._start_coord, self._goal_coord)
            self._state_machine.no_path({"result": self._result})

        self.path_computed.emit(self._result)

    def reset(self) -> bool:
        """Clear start, goal and path. Obstacles stay."""
        self._start_coord = None
        self._goal_coord = None
        self._result = None
        self._play(RESET_CUE)
        reset = self._state_machine.reset()
        self.grid_updated.emit()
        return reset

    # Helpers

    def _play(self, cue: str):
        if self._cue_player is not None:
            self._cue_player.play(cue)

    def _on_state_entered(self, context):
        """Called when entering any placement state."""
        self.state_changed.emit(self._state_machine.current_state)

    def statistics(self) -> dict:
        """Get current grid and search statistics."""
        result = self._result
        return {
            "state": self.current_state.value,
            "state_description": self.state_description,
            "obstacles": self._grid.obstacle_count(),
            "path_steps": result.steps if result and result.success else 0,
            "nodes_explored": result.nodes_explored if result else 0,
        }
