"""Common serializers for TaskRecord.

This module defines the canonical dict contract for todos. The CLI JSON
output and the YAML file store use `record_to_dict` directly; the Convex
backend payloads (camelCase, `_id`) are read through `record_from_dict`.
"""

from datetime import date, datetime
from typing import Any, Dict, Mapping, Optional

from core import TaskRecord, now_millis


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, (datetime, date)):
        # YAML loaders parse bare ISO dates into date objects.
        return value.isoformat()
    text = str(value).strip()
    return text or None


_TRUE_TOKENS = {"true", "yes", "on", "1"}
_FALSE_TOKENS = {"false", "no", "off", "0", ""}


def _coerce_bool(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    token = str(value).strip().lower()
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS:
        return False
    raise ValueError(f"completed is not a boolean: {value!r}")


def _coerce_millis(value: Any) -> int:
    if value is None or value == "":
        return now_millis()
    if isinstance(value, datetime):
        return int(value.timestamp() * 1000)
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return now_millis()


def record_to_dict(record: TaskRecord) -> Dict[str, Any]:
    return {
        "id": record.id,
        "text": record.text,
        "completed": record.completed,
        "created_at": record.created_at,
        "description": record.description,
        "due_date": record.due_date,
    }


def record_from_dict(data: Mapping[str, Any]) -> TaskRecord:
    """Build a record from either the snake_case or the backend camelCase form."""
    rid = data.get("id", data.get("_id"))
    if rid is None or str(rid).strip() == "":
        raise ValueError("todo without id")
    text = str(data.get("text") or "").strip()
    if not text:
        raise ValueError(f"todo {rid} has empty text")
    created = data.get("created_at", data.get("createdAt", data.get("_creationTime")))
    return TaskRecord(
        id=str(rid),
        text=text,
        completed=_coerce_bool(data.get("completed")),
        created_at=_coerce_millis(created),
        description=_optional_text(data.get("description")),
        due_date=_optional_text(data.get("due_date", data.get("dueDate"))),
    )


__all__ = ["record_to_dict", "record_from_dict"]
