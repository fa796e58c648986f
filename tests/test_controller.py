import pytest

pytest.importorskip("PySide6")

from gridpath.app.controller import PLACE_CUE, RESET_CUE, GridController
from gridpath.app.fsm import PlacementState
from gridpath.config import AppConfig


class FakeCuePlayer:
    def __init__(self):
        self.played = []

    def play(self, name):
        self.played.append(name)


@pytest.fixture
def cues():
    return FakeCuePlayer()


@pytest.fixture
def controller(qt_app, cues):
    return GridController(AppConfig(), cues)


def test_starts_with_demo_wall(controller):
    assert controller.grid.obstacle_count() == 10
    assert controller.grid.is_obstacle(5, 10)
    assert controller.current_state == PlacementState.AWAITING_START


def test_demo_wall_can_be_disabled(qt_app):
    controller = GridController(AppConfig(demo_wall=False, grid_width=8, grid_height=6))
    assert controller.grid.obstacle_count() == 0
    assert (controller.grid.width, controller.grid.height) == (8, 6)


def test_placing_goal_runs_search(controller, cues):
    results = []
    controller.path_computed.connect(results.append)

    assert controller.place_endpoint((0, 10))
    assert controller.current_state == PlacementState.AWAITING_GOAL
    assert not controller.search_finished
    assert controller.place_endpoint((19, 10))

    assert controller.search_finished
    assert controller.current_state == PlacementState.PATH_FOUND
    assert controller.path[0] == (0, 10)
    assert controller.path[-1] == (19, 10)
    assert len(results) == 1 and results[0].success
    assert cues.played == [PLACE_CUE, PLACE_CUE]


def test_further_placements_ignored_until_reset(controller, cues):
    controller.place_endpoint((0, 0))
    controller.place_endpoint((3, 0))

    assert not controller.place_endpoint((5, 5))
    assert controller.goal_coord == (3, 0)
    assert cues.played == [PLACE_CUE, PLACE_CUE]


def test_unreachable_goal_reports_no_path(controller):
    for x in range(controller.grid.width):
        controller.grid.set_obstacle(x, 10)

    controller.place_endpoint((0, 0))
    controller.place_endpoint((19, 19))

    assert controller.current_state == PlacementState.NO_PATH
    assert controller.path == []
    assert controller.statistics()["path_steps"] == 0


def test_goal_on_obstacle_reports_no_path(controller):
    controller.place_endpoint((0, 0))
    controller.place_endpoint((5, 10))

    assert controller.current_state == PlacementState.NO_PATH
    assert controller.path == []


def test_reset_keeps_obstacles(controller, cues):
    states = []
    controller.state_changed.connect(states.append)
    controller.toggle_obstacle((1, 1))
    controller.place_endpoint((0, 0))
    controller.place_endpoint((2, 2))

    assert controller.reset()

    assert controller.start_coord is None
    assert controller.goal_coord is None
    assert controller.path == []
    assert controller.grid.is_obstacle(1, 1)
    assert not controller.search_finished
    assert cues.played[-1] == RESET_CUE
    assert states[-1] == PlacementState.AWAITING_START


def test_toggle_obstacle_does_not_replan(controller):
    controller.place_endpoint((0, 0))
    controller.place_endpoint((3, 0))
    path = list(controller.path)

    assert controller.toggle_obstacle((1, 0))

    assert controller.path == path
    assert controller.grid.is_obstacle(1, 0)


def test_toggle_obstacle_out_of_bounds(controller):
    updates = []
    controller.grid_updated.connect(lambda: updates.append(True))

    assert not controller.toggle_obstacle((20, 0))
    assert updates == []


def test_clear_and_scatter_obstacles(controller):
    controller.clear_obstacles()
    assert controller.grid.obstacle_count() == 0

    controller.place_endpoint((0, 0))
    assert controller.scatter_obstacles(0.5, seed=3)
    assert controller.grid.obstacle_count() == 200
    assert not controller.grid.is_obstacle(0, 0)

    assert not controller.scatter_obstacles(2.0)


def test_statistics(controller):
    controller.place_endpoint((0, 0))
    controller.place_endpoint((19, 19))

    stats = controller.statistics()
    assert stats["state"] == "path_found"
    assert stats["path_steps"] == 38
    assert stats["nodes_explored"] > 0
    assert stats["obstacles"] == 10
