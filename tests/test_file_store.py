import logging

import pytest
import yaml

from core import NotFoundError, StoreError
from infrastructure.file_store import FileTodoStore


def test_missing_file_is_empty(tmp_path):
    assert FileTodoStore(tmp_path / "none.yaml").list_all() == []


def test_round_trip_through_disk(tmp_path):
    path = tmp_path / "nested" / "todos.yaml"
    store = FileTodoStore(path)
    a = store.insert("Read for 1 hour")
    b = store.insert("Pay rent", description="flat", due_date="2025-02-01")
    store.set_completed(a, True)

    reopened = FileTodoStore(path).list_all()
    assert [(r.id, r.text, r.completed) for r in reopened] == [(a, "Read for 1 hour", True), (b, "Pay rent", False)]
    assert reopened[1].due_date == "2025-02-01"

    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    assert data["version"] == 1
    assert [t["id"] for t in data["todos"]] == [a, b]
    assert not path.with_name("todos.yaml.tmp").exists()


def test_remove_and_save_order(tmp_path):
    store = FileTodoStore(tmp_path / "todos.yaml")
    ids = [store.insert(t) for t in ("a", "b", "c")]
    store.save_order([ids[2], ids[0], ids[1]])
    assert [r.text for r in store.list_all()] == ["c", "a", "b"]
    store.remove(ids[0])
    assert [r.text for r in store.list_all()] == ["c", "b"]


def test_unknown_id_raises_not_found(tmp_path):
    store = FileTodoStore(tmp_path / "todos.yaml")
    store.insert("a")
    with pytest.raises(NotFoundError):
        store.remove("missing")


def test_invalid_yaml_is_store_error(tmp_path):
    path = tmp_path / "todos.yaml"
    path.write_text("todos: [unclosed", encoding="utf-8")
    with pytest.raises(StoreError):
        FileTodoStore(path).list_all()


def test_non_mapping_document_is_store_error(tmp_path):
    path = tmp_path / "todos.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(StoreError):
        FileTodoStore(path).list_all()


def test_malformed_and_duplicate_entries_skipped(tmp_path, caplog):
    path = tmp_path / "todos.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "todos": [
                    {"id": "1", "text": "ok", "due_date": "2025-03-04"},
                    {"id": "2", "text": "   "},
                    {"text": "no id"},
                    {"id": "1", "text": "dupe"},
                    "garbage",
                ]
            }
        ),
        encoding="utf-8",
    )
    with caplog.at_level(logging.WARNING, logger="todo_tui.store"):
        records = FileTodoStore(path).list_all()
    assert [r.text for r in records] == ["ok"]
    assert records[0].due_date == "2025-03-04"
    assert any("duplicate" in rec.message for rec in caplog.records)


def test_hand_edited_string_flags(tmp_path):
    path = tmp_path / "todos.yaml"
    path.write_text(
        'todos:\n  - {id: "1", text: done, completed: "true"}\n  - {id: "2", text: open, completed: "false"}\n',
        encoding="utf-8",
    )
    records = FileTodoStore(path).list_all()
    assert [(r.id, r.completed) for r in records] == [("1", True), ("2", False)]
