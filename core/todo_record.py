import time
import uuid
from dataclasses import dataclass, field
from typing import Optional


def now_millis() -> int:
    """Epoch milliseconds, the unit the backend uses for createdAt."""
    return int(time.time() * 1000)


def new_record_id() -> str:
    return uuid.uuid4().hex


@dataclass
class TaskRecord:
    """A single todo.

    Only `completed` is meant to change after creation; `id`, `text` and
    `created_at` stay as they were when the record was added.
    """

    id: str
    text: str
    completed: bool = False
    created_at: int = field(default_factory=now_millis)
    description: Optional[str] = None
    due_date: Optional[str] = None

    def matches(self, needle: str) -> bool:
        """Case-insensitive substring match on text."""
        return needle.lower() in self.text.lower()
