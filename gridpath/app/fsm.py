"""Finite State Machine for start/goal placement phases."""

from enum import Enum
from typing import Callable, Optional, Set


class PlacementState(Enum):
    """States for endpoint placement and search outcome."""
    AWAITING_START = "awaiting_start"
    AWAITING_GOAL = "awaiting_goal"
    PATH_FOUND = "path_found"
    NO_PATH = "no_path"


class PlacementStateMachine:
    """
    Finite State Machine for placing endpoints and showing the search result.

    State Transitions:
    AWAITING_START -> AWAITING_GOAL (start placed)
    AWAITING_GOAL -> PATH_FOUND (goal placed, path exists)
    AWAITING_GOAL -> NO_PATH (goal placed, no path)
    any state -> AWAITING_START (reset)
    """

    def __init__(self):
        self._current_state = PlacementState.AWAITING_START
        self._state_callbacks = {}
        self._valid_transitions = self._build_transition_map()

    def _build_transition_map(self) -> dict[PlacementState, Set[PlacementState]]:
        """Build the valid state transition map."""
        return {
            PlacementState.AWAITING_START: {PlacementState.AWAITING_GOAL, PlacementState.AWAITING_START},
            PlacementState.AWAITING_GOAL: {
                PlacementState.PATH_FOUND, PlacementState.NO_PATH, PlacementState.AWAITING_START
            },
            PlacementState.PATH_FOUND: {PlacementState.AWAITING_START},
            PlacementState.NO_PATH: {PlacementState.AWAITING_START},
        }

    @property
    def current_state(self) -> PlacementState:
        """Get the current state."""
        return self._current_state

    def can_transition_to(self, target_state: PlacementState) -> bool:
        """Check if transition to target state is valid."""
        return target_state in self._valid_transitions.get(self._current_state, set())

    def transition_to(self, target_state: PlacementState, context: dict = None) -> bool:
        """
        Attempt to transition to the target state.

        Args:
            target_state: The state to transition to
            context: Optional context data for the transition

        Returns:
            True if transition was successful, False otherwise
        """
        if not self.can_transition_to(target_state):
            return False

        self._current_state = target_state

        if target_state in self._state_callbacks:
            self._state_callbacks[target_state](context)

        return True

    def on_state_enter(self, state: PlacementState, callback: Callable[[Optional[dict]], None]):
        """Register a callback for when entering a specific state."""
        self._state_callbacks[state] = callback

    # Convenience methods for common operations

    def is_accepting_endpoint(self) -> bool:
        """Check if a right click should place an endpoint."""
        return self._current_state in (PlacementState.AWAITING_START, PlacementState.AWAITING_GOAL)

    def is_finished(self) -> bool:
        """Check if a search has run (path found or not)."""
        return self._current_state in (PlacementState.PATH_FOUND, PlacementState.NO_PATH)

    def start_placed(self, context: dict = None) -> bool:
        return self.transition_to(PlacementState.AWAITING_GOAL, context)

    def path_found(self, context: dict = None) -> bool:
        return self.transition_to(PlacementState.PATH_FOUND, context)

    def no_path(self, context: dict = None) -> bool:
        return self.transition_to(PlacementState.NO_PATH, context)

    def reset(self, context: dict = None) -> bool:
        """Return to AWAITING_START."""
        return self.transition_to(PlacementState.AWAITING_START, context)

    def get_state_description(self) -> str:
        """Get a human-readable description of the current state."""
        descriptions = {
            PlacementState.AWAITING_START: "Right-click to place the start",
            PlacementState.AWAITING_GOAL: "Right-click to place the goal",
            PlacementState.PATH_FOUND: "Path found",
            PlacementState.NO_PATH: "No path exists",
        }
        return descriptions.get(self._current_state, "Unknown state")
