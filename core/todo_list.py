"""Authoritative todo list and the pure operations over it.

No I/O happens here: storage lives behind application.ports.TodoStore and is
driven by TodoManager.
"""

from typing import Callable, Iterable, Iterator, List, Optional, Sequence, Tuple

from .errors import NotFoundError, OutOfRangeError
from .status_filter import FilterCriteria
from .todo_record import TaskRecord, new_record_id, now_millis


def derive_view(records: Sequence[TaskRecord], criteria: FilterCriteria) -> Tuple[TaskRecord, ...]:
    """Filtered/search-matched subsequence of `records`, order preserved.

    Search is applied only when the search text has non-blank content; the
    needle itself is used as typed (case-insensitive substring).
    """
    visible: Iterable[TaskRecord] = records
    if criteria.searching:
        needle = criteria.search_text
        visible = [r for r in visible if r.matches(needle)]
    return tuple(r for r in visible if criteria.status_filter.accepts(r.completed))


class TodoListModel:
    def __init__(
        self,
        records: Optional[Iterable[TaskRecord]] = None,
        id_factory: Callable[[], str] = new_record_id,
        clock: Callable[[], int] = now_millis,
    ):
        self._records: List[TaskRecord] = []
        self._id_factory = id_factory
        self._clock = clock
        if records:
            self.load(records)

    # -------------------- queries --------------------
    @property
    def records(self) -> Tuple[TaskRecord, ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[TaskRecord]:
        return iter(tuple(self._records))

    def index_of(self, record_id: str) -> int:
        for idx, record in enumerate(self._records):
            if record.id == record_id:
                return idx
        raise NotFoundError(record_id)

    def get(self, record_id: str) -> TaskRecord:
        return self._records[self.index_of(record_id)]

    def derive_view(self, criteria: FilterCriteria) -> Tuple[TaskRecord, ...]:
        return derive_view(self._records, criteria)

    def count_active(self) -> int:
        """Items-left counter; ignores any search/filter state."""
        return sum(1 for r in self._records if not r.completed)

    # -------------------- mutations --------------------
    def load(self, records: Iterable[TaskRecord]) -> None:
        """Replace the whole list (storage refresh)."""
        incoming = list(records)
        seen = set()
        for record in incoming:
            if record.id in seen:
                raise ValueError(f"Duplicate todo id: {record.id}")
            seen.add(record.id)
        self._records = incoming

    def add(
        self,
        text: str,
        *,
        description: Optional[str] = None,
        due_date: Optional[str] = None,
        record_id: Optional[str] = None,
        created_at: Optional[int] = None,
    ) -> Optional[TaskRecord]:
        """Append a new incomplete todo; blank text is ignored (returns None)."""
        cleaned = (text or "").strip()
        if not cleaned:
            return None
        rid = record_id or self._id_factory()
        if any(r.id == rid for r in self._records):
            raise ValueError(f"Duplicate todo id: {rid}")
        record = TaskRecord(
            id=rid,
            text=cleaned,
            completed=False,
            created_at=self._clock() if created_at is None else created_at,
            description=description,
            due_date=due_date,
        )
        self._records.append(record)
        return record

    def toggle(self, record_id: str) -> TaskRecord:
        record = self.get(record_id)
        record.completed = not record.completed
        return record

    def delete(self, record_id: str) -> TaskRecord:
        return self._records.pop(self.index_of(record_id))

    def clear_completed(self) -> List[TaskRecord]:
        removed = [r for r in self._records if r.completed]
        if removed:
            self._records = [r for r in self._records if not r.completed]
        return removed

    def reorder(self, from_index: int, to_index: int) -> None:
        length = len(self._records)
        for idx in (from_index, to_index):
            if idx < 0 or idx >= length:
                raise OutOfRangeError(idx, length)
        if from_index == to_index:
            return
        record = self._records.pop(from_index)
        self._records.insert(to_index, record)


__all__ = ["TodoListModel", "derive_view"]
