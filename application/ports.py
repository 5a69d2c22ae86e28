from typing import List, Optional, Protocol, Sequence

from core import TaskRecord


class TodoStore(Protocol):
    def list_all(self) -> List[TaskRecord]:
        ...

    def insert(
        self,
        text: str,
        description: Optional[str] = None,
        due_date: Optional[str] = None,
        created_at: Optional[int] = None,
    ) -> str:
        ...

    def set_completed(self, record_id: str, completed: bool) -> None:
        ...

    def remove(self, record_id: str) -> None:
        ...


class OrderedTodoStore(TodoStore, Protocol):
    """Store that can also persist the user-chosen order."""

    def save_order(self, record_ids: Sequence[str]) -> None:
        ...
