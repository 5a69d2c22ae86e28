"""Error kinds raised by the todo list core.

All of them are local and non-fatal: the model stays unchanged after a
rejected operation.
"""

ERR_NOT_FOUND = "NOT_FOUND"
ERR_OUT_OF_RANGE = "OUT_OF_RANGE"
ERR_EMPTY_INPUT = "EMPTY_INPUT"
ERR_STORE = "STORE_ERROR"


class TodoError(Exception):
    code = "TODO_ERROR"


class NotFoundError(TodoError, KeyError):
    """Operation referenced an id absent from the list."""

    code = ERR_NOT_FOUND

    def __init__(self, record_id: str):
        super().__init__(record_id)
        self.record_id = record_id

    def __str__(self) -> str:
        return f"Todo not found: {self.record_id}"


class OutOfRangeError(TodoError, IndexError):
    """Reorder indices outside [0, length-1]."""

    code = ERR_OUT_OF_RANGE

    def __init__(self, index: int, length: int):
        super().__init__(index, length)
        self.index = index
        self.length = length

    def __str__(self) -> str:
        return f"Index {self.index} out of range for {self.length} todos"


class StoreError(TodoError):
    """Storage backend failed (I/O, HTTP, malformed payload)."""

    code = ERR_STORE


__all__ = [
    "ERR_NOT_FOUND",
    "ERR_OUT_OF_RANGE",
    "ERR_EMPTY_INPUT",
    "ERR_STORE",
    "TodoError",
    "NotFoundError",
    "OutOfRangeError",
    "StoreError",
]
