import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from core import NotFoundError, StoreError, TaskRecord, new_record_id, now_millis
from application.ports import OrderedTodoStore
from core.desktop.devtools.interface.serializers import record_from_dict, record_to_dict

SCHEMA_VERSION = 1

logger = logging.getLogger("todo_tui.store")


class FileTodoStore(OrderedTodoStore):
    """Todos kept in a single YAML document, rewritten on every change."""

    def __init__(self, path: Path):
        self.path = Path(path).expanduser()

    def _read(self) -> List[TaskRecord]:
        if not self.path.exists():
            return []
        try:
            data = yaml.safe_load(self.path.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise StoreError(f"Cannot read {self.path}: {exc}") from exc
        if not isinstance(data, dict):
            raise StoreError(f"Unexpected document in {self.path}")
        records: List[TaskRecord] = []
        seen: set[str] = set()
        for raw in data.get("todos") or []:
            if not isinstance(raw, dict):
                continue
            try:
                record = record_from_dict(raw)
            except ValueError as exc:
                logger.warning("Skipping malformed todo in %s: %s", self.path, exc)
                continue
            if record.id in seen:
                logger.warning("Skipping duplicate todo id %s in %s", record.id, self.path)
                continue
            seen.add(record.id)
            records.append(record)
        return records

    def _write(self, records: List[TaskRecord]) -> None:
        payload: Dict[str, Any] = {
            "version": SCHEMA_VERSION,
            "todos": [record_to_dict(r) for r in records],
        }
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(yaml.safe_dump(payload, allow_unicode=True, sort_keys=False), encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as exc:
            raise StoreError(f"Cannot write {self.path}: {exc}") from exc

    @staticmethod
    def _index(records: List[TaskRecord], record_id: str) -> int:
        for idx, record in enumerate(records):
            if record.id == record_id:
                return idx
        raise NotFoundError(record_id)

    def list_all(self) -> List[TaskRecord]:
        return self._read()

    def insert(
        self,
        text: str,
        description: Optional[str] = None,
        due_date: Optional[str] = None,
        created_at: Optional[int] = None,
    ) -> str:
        records = self._read()
        rid = new_record_id()
        records.append(
            TaskRecord(
                id=rid,
                text=text,
                completed=False,
                created_at=now_millis() if created_at is None else created_at,
                description=description,
                due_date=due_date,
            )
        )
        self._write(records)
        return rid

    def set_completed(self, record_id: str, completed: bool) -> None:
        records = self._read()
        records[self._index(records, record_id)].completed = bool(completed)
        self._write(records)

    def remove(self, record_id: str) -> None:
        records = self._read()
        records.pop(self._index(records, record_id))
        self._write(records)

    def save_order(self, record_ids: Sequence[str]) -> None:
        records = self._read()
        rank = {rid: idx for idx, rid in enumerate(record_ids)}
        records.sort(key=lambda r: rank.get(r.id, len(rank)))
        self._write(records)
