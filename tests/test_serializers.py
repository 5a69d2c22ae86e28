from datetime import date

import pytest

from core import TaskRecord
from core.desktop.devtools.interface.serializers import record_from_dict, record_to_dict


def test_record_to_dict_contract():
    record = TaskRecord(id="x", text="Read", completed=True, created_at=5, due_date="2025-01-01")
    assert record_to_dict(record) == {
        "id": "x",
        "text": "Read",
        "completed": True,
        "created_at": 5,
        "description": None,
        "due_date": "2025-01-01",
    }


def test_record_from_backend_shape():
    record = record_from_dict({"_id": "k", "_creationTime": 12.9, "text": " Jog ", "dueDate": "2025-05-05", "description": ""})
    assert (record.id, record.text, record.created_at, record.due_date, record.description) == ("k", "Jog", 12, "2025-05-05", None)
    assert record.completed is False


def test_yaml_date_object_becomes_iso_text():
    assert record_from_dict({"id": 1, "text": "a", "due_date": date(2025, 1, 2)}).due_date == "2025-01-02"


@pytest.mark.parametrize("raw", [{"text": "a"}, {"id": " ", "text": "a"}, {"id": "1", "text": ""}, {"id": "1"}])
def test_missing_id_or_text_rejected(raw):
    with pytest.raises(ValueError):
        record_from_dict(raw)


@pytest.mark.parametrize(
    "raw,expected",
    [(True, True), (False, False), ("false", False), ("False ", False), ("true", True), ("yes", True), ("no", False), (0, False), (1, True), (None, False)],
)
def test_completed_flag_parsing(raw, expected):
    assert record_from_dict({"id": "1", "text": "a", "completed": raw}).completed is expected


def test_completed_garbage_rejected():
    with pytest.raises(ValueError):
        record_from_dict({"id": "1", "text": "a", "completed": "maybe"})
