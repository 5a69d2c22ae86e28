"""Gesture-to-reorder interpretation for a single list row.

A gesture is one press-move-release interaction. While dragging only the
cumulative vertical displacement is tracked; the list is never touched. On
release the final displacement is compared against a fixed threshold and at
most one single-slot move is proposed.

States are explicit values (`Idle`, `Dragging`) replaced on every event
instead of flags mutated in place.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Union

DEFAULT_THRESHOLD = 60.0


class ReorderDecision(Enum):
    MOVE_UP = -1
    MOVE_DOWN = 1
    NO_OP = 0


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Dragging:
    row_index: int
    row_count: int
    start_offset: float = 0.0
    dy: float = 0.0


GestureState = Union[Idle, Dragging]

IDLE = Idle()


def decide(row_index: int, row_count: int, dy: float, threshold: float = DEFAULT_THRESHOLD) -> ReorderDecision:
    """Release rule; |dy| == threshold does not move."""
    if dy < -threshold and row_index > 0:
        return ReorderDecision.MOVE_UP
    if dy > threshold and row_index < row_count - 1:
        return ReorderDecision.MOVE_DOWN
    return ReorderDecision.NO_OP


def target_index(decision: ReorderDecision, index: int) -> int:
    return index + decision.value


class DragReorderInterpreter:
    def __init__(self, threshold: float = DEFAULT_THRESHOLD):
        if threshold < 0:
            raise ValueError("threshold must be non-negative")
        self.threshold = float(threshold)
        self.state: GestureState = IDLE

    @property
    def dragging(self) -> bool:
        return isinstance(self.state, Dragging)

    @property
    def row_index(self):
        return self.state.row_index if isinstance(self.state, Dragging) else None

    @property
    def visual_offset(self) -> float:
        """Offset to draw the dragged row at; exactly 0 when idle."""
        return self.state.dy if isinstance(self.state, Dragging) else 0.0

    def on_gesture_start(self, row_index: int, row_count: int, start_offset: float = 0.0) -> None:
        if row_count <= 0 or not 0 <= row_index < row_count:
            raise ValueError(f"row {row_index} outside list of {row_count}")
        # A new press replaces any unfinished gesture without emitting a move.
        self.state = Dragging(row_index=row_index, row_count=row_count, start_offset=float(start_offset))

    def on_gesture_move(self, cumulative_dy: float) -> float:
        if isinstance(self.state, Dragging):
            self.state = replace(self.state, dy=float(cumulative_dy))
        return self.visual_offset

    def on_gesture_end(self) -> ReorderDecision:
        state = self.state
        self.state = IDLE
        if not isinstance(state, Dragging):
            return ReorderDecision.NO_OP
        return decide(state.row_index, state.row_count, state.dy, self.threshold)

    def cancel(self) -> None:
        self.state = IDLE


__all__ = [
    "DEFAULT_THRESHOLD",
    "ReorderDecision",
    "Idle",
    "Dragging",
    "GestureState",
    "IDLE",
    "decide",
    "target_index",
    "DragReorderInterpreter",
]
