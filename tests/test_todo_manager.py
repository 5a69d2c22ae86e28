import logging

import pytest

from core import (
    FilterCriteria,
    NotFoundError,
    OutOfRangeError,
    ReorderDecision,
    StatusFilter,
    StoreError,
    TaskRecord,
)
from core.desktop.devtools.application import todo_manager
from core.desktop.devtools.application.todo_manager import TodoManager
from infrastructure.memory_store import InMemoryTodoStore


class RecordingStore(InMemoryTodoStore):
    def __init__(self, records=None, fail_on=()):
        super().__init__(records)
        self.fail_on = set(fail_on)
        self.calls = []

    def _maybe_fail(self, name):
        self.calls.append(name)
        if name in self.fail_on:
            raise StoreError(f"{name} unavailable")

    def insert(self, text, description=None, due_date=None, created_at=None):
        self._maybe_fail("insert")
        return super().insert(text, description, due_date, created_at)

    def set_completed(self, record_id, completed):
        self._maybe_fail("set_completed")
        super().set_completed(record_id, completed)

    def remove(self, record_id):
        self._maybe_fail("remove")
        super().remove(record_id)

    def save_order(self, record_ids):
        self._maybe_fail("save_order")
        super().save_order(record_ids)


class UnorderedStore:
    """Store without save_order."""

    def __init__(self):
        self.inner = InMemoryTodoStore()

    def list_all(self):
        return self.inner.list_all()

    def insert(self, text, description=None, due_date=None, created_at=None):
        return self.inner.insert(text, description, due_date, created_at)

    def set_completed(self, record_id, completed):
        self.inner.set_completed(record_id, completed)

    def remove(self, record_id):
        self.inner.remove(record_id)


def _records(*specs):
    return [TaskRecord(id=rid, text=rid.upper(), completed=done) for rid, done in specs]


def test_load_mirrors_store():
    manager = TodoManager(InMemoryTodoStore.with_samples())
    assert len(manager.records) == 6
    assert manager.count_active() == 5


def test_add_writes_store_with_same_id():
    store = RecordingStore()
    manager = TodoManager(store)
    record = manager.add("  Pick up groceries ", description=" ", due_date="2025-01-01")
    assert record.text == "Pick up groceries"
    assert record.description is None
    assert [r.id for r in store.list_all()] == [record.id]


def test_add_blank_never_reaches_store():
    store = RecordingStore()
    manager = TodoManager(store)
    assert manager.add("   ") is None
    assert store.calls == []
    assert manager.records == ()


def test_toggle_and_delete_follow_store():
    store = RecordingStore(_records(("a", False), ("b", False)))
    manager = TodoManager(store)
    assert manager.toggle("a").completed is True
    assert store.list_all()[0].completed is True
    manager.delete("b")
    assert [r.id for r in store.list_all()] == ["a"]
    assert [r.id for r in manager.records] == ["a"]


def test_unknown_id_rejected_before_store():
    store = RecordingStore(_records(("a", False)))
    manager = TodoManager(store)
    with pytest.raises(NotFoundError):
        manager.toggle("zzz")
    with pytest.raises(NotFoundError):
        manager.delete("zzz")
    assert store.calls == []


def test_store_failure_leaves_model_untouched(caplog):
    store = RecordingStore(_records(("a", False)), fail_on={"set_completed", "insert"})
    manager = TodoManager(store)
    with caplog.at_level(logging.WARNING, logger="todo_tui.sync"):
        with pytest.raises(StoreError):
            manager.toggle("a")
        with pytest.raises(StoreError):
            manager.add("new")
    assert [(r.id, r.completed) for r in manager.records] == [("a", False)]
    assert any("toggle" in rec.message for rec in caplog.records)


def test_clear_completed_removes_from_both():
    store = RecordingStore(_records(("a", False), ("b", True), ("c", False)))
    manager = TodoManager(store)
    removed = manager.clear_completed()
    assert [r.id for r in removed] == ["b"]
    assert [r.id for r in manager.records] == ["a", "c"]
    assert [r.id for r in store.list_all()] == ["a", "c"]
    assert manager.count_active() == 2
    assert manager.clear_completed() == []


def test_reorder_persists_order():
    store = RecordingStore(_records(("a", False), ("b", False), ("c", False)))
    manager = TodoManager(store)
    manager.reorder(2, 0)
    assert [r.id for r in manager.records] == ["c", "a", "b"]
    assert [r.id for r in store.list_all()] == ["c", "a", "b"]


def test_reorder_reverted_when_store_fails():
    store = RecordingStore(_records(("a", False), ("b", False), ("c", False)), fail_on={"save_order"})
    manager = TodoManager(store)
    with pytest.raises(StoreError):
        manager.reorder(0, 2)
    assert [r.id for r in manager.records] == ["a", "b", "c"]


def test_reorder_out_of_range():
    manager = TodoManager(RecordingStore(_records(("a", False))))
    with pytest.raises(OutOfRangeError):
        manager.reorder(0, 1)


def test_reorder_without_save_order_is_session_only():
    store = UnorderedStore()
    for text in ("a", "b"):
        store.insert(text)
    manager = TodoManager(store)
    manager.reorder(0, 1)
    assert [r.text for r in manager.records] == ["b", "a"]
    assert [r.text for r in store.list_all()] == ["a", "b"]


def test_move_visible_swaps_with_visible_neighbour():
    store = RecordingStore(_records(("a", False), ("b", True), ("c", False), ("d", False)))
    manager = TodoManager(store)
    view = manager.view(FilterCriteria(StatusFilter.ACTIVE))
    assert [r.id for r in view] == ["a", "c", "d"]
    assert manager.move_visible(view, 1, ReorderDecision.MOVE_UP) is True
    assert [r.id for r in manager.records] == ["c", "a", "b", "d"]


def test_move_visible_edges_and_noop():
    manager = TodoManager(RecordingStore(_records(("a", False), ("b", False))))
    view = manager.view(FilterCriteria())
    assert manager.move_visible(view, 0, ReorderDecision.MOVE_UP) is False
    assert manager.move_visible(view, 1, ReorderDecision.MOVE_DOWN) is False
    assert manager.move_visible(view, 0, ReorderDecision.NO_OP) is False
    assert [r.id for r in manager.records] == ["a", "b"]
    with pytest.raises(OutOfRangeError):
        manager.move_visible(view, 5, ReorderDecision.MOVE_UP)


def test_autoload_can_be_disabled():
    manager = TodoManager(InMemoryTodoStore.with_samples(), autoload=False)
    assert manager.records == ()
    manager.load()
    assert len(manager.records) == 6


def test_add_stamps_store_and_model_with_one_timestamp(monkeypatch, tmp_path):
    from infrastructure.file_store import FileTodoStore

    monkeypatch.setattr(todo_manager, "now_millis", lambda: 1700000000123)
    for store in (RecordingStore(), FileTodoStore(tmp_path / "todos.yaml")):
        manager = TodoManager(store)
        record = manager.add("Read for 1 hour")
        stored = store.list_all()[-1]
        assert record.created_at == stored.created_at == 1700000000123
        manager.load()
        assert manager.get(record.id) == record
