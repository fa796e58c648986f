from gridpath.app.fsm import PlacementState, PlacementStateMachine


def test_full_placement_cycle():
    fsm = PlacementStateMachine()
    assert fsm.current_state == PlacementState.AWAITING_START
    assert fsm.is_accepting_endpoint()

    assert fsm.start_placed()
    assert fsm.current_state == PlacementState.AWAITING_GOAL

    assert fsm.path_found()
    assert fsm.is_finished()
    assert not fsm.is_accepting_endpoint()

    assert fsm.reset()
    assert fsm.current_state == PlacementState.AWAITING_START


def test_invalid_transitions_are_rejected():
    fsm = PlacementStateMachine()

    assert not fsm.path_found()
    assert not fsm.no_path()
    assert fsm.current_state == PlacementState.AWAITING_START

    fsm.start_placed()
    fsm.no_path()
    assert not fsm.start_placed()
    assert fsm.current_state == PlacementState.NO_PATH


def test_entry_callbacks_receive_context():
    fsm = PlacementStateMachine()
    entered = []

    fsm.on_state_enter(PlacementState.AWAITING_GOAL, lambda ctx: entered.append(ctx))
    fsm.on_state_enter(PlacementState.NO_PATH, lambda ctx: entered.append("no path"))

    fsm.start_placed({"coord": (1, 2)})
    fsm.no_path()
    # Rejected transitions fire nothing
    fsm.path_found()

    assert entered == [{"coord": (1, 2)}, "no path"]


def test_state_descriptions():
    fsm = PlacementStateMachine()
    assert "start" in fsm.get_state_description()
    fsm.start_placed()
    assert "goal" in fsm.get_state_description()
