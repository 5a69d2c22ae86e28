from .errors import (
    ERR_EMPTY_INPUT,
    ERR_NOT_FOUND,
    ERR_OUT_OF_RANGE,
    ERR_STORE,
    NotFoundError,
    OutOfRangeError,
    StoreError,
    TodoError,
)
from .status_filter import FilterCriteria, StatusFilter
from .todo_record import TaskRecord, new_record_id, now_millis
from .todo_list import TodoListModel, derive_view
from .drag_reorder import (
    DEFAULT_THRESHOLD,
    DragReorderInterpreter,
    Dragging,
    Idle,
    ReorderDecision,
    decide,
    target_index,
)

__all__ = [
    # Errors
    "TodoError",
    "NotFoundError",
    "OutOfRangeError",
    "StoreError",
    "ERR_EMPTY_INPUT",
    "ERR_NOT_FOUND",
    "ERR_OUT_OF_RANGE",
    "ERR_STORE",
    # Model
    "TaskRecord",
    "new_record_id",
    "now_millis",
    "StatusFilter",
    "FilterCriteria",
    "TodoListModel",
    "derive_view",
    # Gestures
    "DEFAULT_THRESHOLD",
    "DragReorderInterpreter",
    "Dragging",
    "Idle",
    "ReorderDecision",
    "decide",
    "target_index",
]
