from dataclasses import replace
from typing import Iterable, List, Optional, Sequence

from core import NotFoundError, TaskRecord, new_record_id, now_millis
from application.ports import OrderedTodoStore

SAMPLE_TODOS = (
    ("Complete online JavaScript course", True),
    ("Jog around the park 3x", False),
    ("10 minutes meditation", False),
    ("Read for 1 hour", False),
    ("Pick up groceries", False),
    ("Complete Todo App on Frontend Mentor", False),
)


class InMemoryTodoStore(OrderedTodoStore):
    """Zero-I/O store; records are copied in and out so callers never share state."""

    def __init__(self, records: Optional[Iterable[TaskRecord]] = None):
        self._records: List[TaskRecord] = [replace(r) for r in (records or [])]

    @classmethod
    def with_samples(cls) -> "InMemoryTodoStore":
        store = cls()
        for text, completed in SAMPLE_TODOS:
            rid = store.insert(text)
            if completed:
                store.set_completed(rid, True)
        return store

    def _find(self, record_id: str) -> TaskRecord:
        for record in self._records:
            if record.id == record_id:
                return record
        raise NotFoundError(record_id)

    def list_all(self) -> List[TaskRecord]:
        return [replace(r) for r in self._records]

    def insert(
        self,
        text: str,
        description: Optional[str] = None,
        due_date: Optional[str] = None,
        created_at: Optional[int] = None,
    ) -> str:
        rid = new_record_id()
        self._records.append(
            TaskRecord(
                id=rid,
                text=text,
                completed=False,
                created_at=now_millis() if created_at is None else created_at,
                description=description,
                due_date=due_date,
            )
        )
        return rid

    def set_completed(self, record_id: str, completed: bool) -> None:
        self._find(record_id).completed = bool(completed)

    def remove(self, record_id: str) -> None:
        self._records.remove(self._find(record_id))

    def save_order(self, record_ids: Sequence[str]) -> None:
        rank = {rid: idx for idx, rid in enumerate(record_ids)}
        self._records.sort(key=lambda r: rank.get(r.id, len(rank)))
