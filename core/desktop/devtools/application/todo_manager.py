"""Application-level todo service: keeps the in-memory list and the store in step."""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence, Tuple

from application.ports import TodoStore
from core import (
    FilterCriteria,
    OutOfRangeError,
    ReorderDecision,
    StoreError,
    TaskRecord,
    TodoListModel,
    now_millis,
    target_index,
)

logger = logging.getLogger("todo_tui.sync")


class TodoManager:
    """Every mutation is validated against the model first, then written to the
    store, then applied to the model. A rejected id never reaches the store and
    a store failure leaves the model untouched.
    """

    def __init__(self, store: TodoStore, model: Optional[TodoListModel] = None, autoload: bool = True):
        self.store = store
        self.model = model or TodoListModel()
        self._lock = threading.RLock()
        if autoload:
            self.load()

    @contextmanager
    def _store_call(self, action: str) -> Iterator[None]:
        try:
            yield
        except StoreError as exc:
            logger.warning("Store %s failed: %s", action, exc)
            raise

    # -------------------- queries --------------------
    @property
    def records(self) -> Tuple[TaskRecord, ...]:
        with self._lock:
            return self.model.records

    def view(self, criteria: FilterCriteria) -> Tuple[TaskRecord, ...]:
        with self._lock:
            return self.model.derive_view(criteria)

    def count_active(self) -> int:
        with self._lock:
            return self.model.count_active()

    def get(self, record_id: str) -> TaskRecord:
        with self._lock:
            return self.model.get(record_id)

    def index_of(self, record_id: str) -> int:
        with self._lock:
            return self.model.index_of(record_id)

    # -------------------- mutations --------------------
    def load(self) -> None:
        with self._lock, self._store_call("list"):
            records = self.store.list_all()
            self.model.load(records)
            logger.debug("Loaded %s todos", len(records))

    def add(self, text: str, description: Optional[str] = None, due_date: Optional[str] = None) -> Optional[TaskRecord]:
        cleaned = (text or "").strip()
        if not cleaned:
            return None
        description = (description or "").strip() or None
        due_date = (due_date or "").strip() or None
        created_at = now_millis()
        with self._lock:
            with self._store_call("insert"):
                record_id = self.store.insert(cleaned, description, due_date, created_at=created_at)
            return self.model.add(
                cleaned, description=description, due_date=due_date, record_id=record_id, created_at=created_at
            )

    def toggle(self, record_id: str) -> TaskRecord:
        with self._lock:
            record = self.model.get(record_id)
            with self._store_call("toggle"):
                self.store.set_completed(record_id, not record.completed)
            return self.model.toggle(record_id)

    def delete(self, record_id: str) -> TaskRecord:
        with self._lock:
            self.model.get(record_id)
            with self._store_call("remove"):
                self.store.remove(record_id)
            return self.model.delete(record_id)

    def clear_completed(self) -> List[TaskRecord]:
        removed: List[TaskRecord] = []
        with self._lock:
            for record in [r for r in self.model.records if r.completed]:
                with self._store_call("remove"):
                    self.store.remove(record.id)
                removed.append(self.model.delete(record.id))
        return removed

    def reorder(self, from_index: int, to_index: int) -> None:
        with self._lock:
            self.model.reorder(from_index, to_index)
            if from_index == to_index:
                return
            try:
                self._persist_order()
            except StoreError:
                self.model.reorder(to_index, from_index)
                raise

    def move_visible(self, view: Sequence[TaskRecord], view_index: int, decision: ReorderDecision) -> bool:
        """Apply a gesture decision made against a derived view.

        The record trades places with its visible neighbour, so under a filter
        it lands where that neighbour sits in the full list.
        """
        if decision is ReorderDecision.NO_OP:
            return False
        neighbour = target_index(decision, view_index)
        if not 0 <= view_index < len(view):
            raise OutOfRangeError(view_index, len(view))
        if not 0 <= neighbour < len(view):
            return False
        with self._lock:
            from_index = self.model.index_of(view[view_index].id)
            to_index = self.model.index_of(view[neighbour].id)
            self.reorder(from_index, to_index)
        return True

    def _persist_order(self) -> None:
        save_order = getattr(self.store, "save_order", None)
        if not callable(save_order):
            return
        with self._store_call("save_order"):
            save_order([r.id for r in self.model.records])


__all__ = ["TodoManager"]
