import pytest

from core import DragReorderInterpreter, Dragging, Idle, ReorderDecision, decide, target_index


def _gesture(interpreter, row_index, row_count, *samples):
    interpreter.on_gesture_start(row_index, row_count)
    for dy in samples:
        interpreter.on_gesture_move(dy)
    return interpreter.on_gesture_end()


def test_move_up_past_threshold():
    assert _gesture(DragReorderInterpreter(), 2, 5, -61) is ReorderDecision.MOVE_UP


def test_below_threshold_is_noop():
    assert _gesture(DragReorderInterpreter(), 2, 5, -59) is ReorderDecision.NO_OP


def test_move_down_on_last_row_is_noop():
    assert _gesture(DragReorderInterpreter(), 4, 5, 61) is ReorderDecision.NO_OP


def test_move_up_on_first_row_is_noop():
    assert _gesture(DragReorderInterpreter(), 0, 5, -200) is ReorderDecision.NO_OP


def test_move_down_past_threshold():
    assert _gesture(DragReorderInterpreter(), 1, 5, 61) is ReorderDecision.MOVE_DOWN


@pytest.mark.parametrize("dy", [60, -60, 60.0, -60.0])
def test_exact_threshold_does_not_move(dy):
    assert _gesture(DragReorderInterpreter(), 2, 5, dy) is ReorderDecision.NO_OP


def test_only_final_displacement_counts():
    interpreter = DragReorderInterpreter()
    assert _gesture(interpreter, 2, 5, -80, -150, 90, 10) is ReorderDecision.NO_OP
    assert _gesture(interpreter, 2, 5, 80, 200, -70) is ReorderDecision.MOVE_UP


def test_state_transitions_and_visual_offset():
    interpreter = DragReorderInterpreter()
    assert interpreter.state == Idle()
    assert interpreter.visual_offset == 0
    interpreter.on_gesture_start(1, 3, start_offset=48)
    assert interpreter.state == Dragging(row_index=1, row_count=3, start_offset=48.0, dy=0.0)
    assert interpreter.on_gesture_move(-30) == -30
    assert interpreter.visual_offset == -30
    assert interpreter.row_index == 1
    interpreter.on_gesture_end()
    assert isinstance(interpreter.state, Idle)
    assert interpreter.visual_offset == 0
    assert interpreter.row_index is None


def test_move_and_end_while_idle_are_ignored():
    interpreter = DragReorderInterpreter()
    assert interpreter.on_gesture_move(500) == 0
    assert interpreter.on_gesture_end() is ReorderDecision.NO_OP
    assert not interpreter.dragging


def test_second_end_emits_nothing():
    interpreter = DragReorderInterpreter()
    assert _gesture(interpreter, 2, 5, -61) is ReorderDecision.MOVE_UP
    assert interpreter.on_gesture_end() is ReorderDecision.NO_OP


def test_restart_replaces_unfinished_gesture():
    interpreter = DragReorderInterpreter()
    interpreter.on_gesture_start(3, 5)
    interpreter.on_gesture_move(-100)
    interpreter.on_gesture_start(1, 5)
    assert interpreter.visual_offset == 0
    assert interpreter.on_gesture_end() is ReorderDecision.NO_OP


def test_cancel_returns_to_idle():
    interpreter = DragReorderInterpreter()
    interpreter.on_gesture_start(2, 5)
    interpreter.on_gesture_move(-100)
    interpreter.cancel()
    assert interpreter.on_gesture_end() is ReorderDecision.NO_OP


@pytest.mark.parametrize("row_index,row_count", [(-1, 3), (3, 3), (0, 0)])
def test_start_outside_list_rejected(row_index, row_count):
    with pytest.raises(ValueError):
        DragReorderInterpreter().on_gesture_start(row_index, row_count)


def test_custom_threshold():
    interpreter = DragReorderInterpreter(threshold=10)
    assert _gesture(interpreter, 1, 3, 11) is ReorderDecision.MOVE_DOWN


def test_decide_and_target_index():
    assert decide(2, 5, -61) is ReorderDecision.MOVE_UP
    assert decide(0, 1, 100) is ReorderDecision.NO_OP
    assert target_index(ReorderDecision.MOVE_UP, 2) == 1
    assert target_index(ReorderDecision.MOVE_DOWN, 2) == 3
    assert target_index(ReorderDecision.NO_OP, 2) == 2
