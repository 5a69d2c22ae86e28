import logging
import random
import time
from typing import Any, Dict, List, Optional

import requests

from core import NotFoundError, StoreError, TaskRecord
from application.ports import TodoStore
from core.desktop.devtools.interface.serializers import record_from_dict

logger = logging.getLogger("todo_tui.store")

QUERY_LIST = "todos:getTodos"
MUTATION_CREATE = "todos:createTodo"
MUTATION_TOGGLE = "todos:toggleTodo"
MUTATION_DELETE = "todos:deleteTodo"


class ConvexTodoStore(TodoStore):
    """Todos held by a Convex deployment, reached through its HTTP function API.

    The deployment exposes list/create/toggle/delete only, so order changes
    are not persisted and `set_completed` toggles when the state differs.
    """

    def __init__(
        self,
        url: str,
        session: Optional[requests.Session] = None,
        auth_token: Optional[str] = None,
        timeout: int = 15,
        max_attempts: int = 3,
    ) -> None:
        if not url:
            raise ValueError("Convex deployment url is required")
        self.url = url.rstrip("/")
        self.session = session or requests.Session()
        self.auth_token = auth_token
        self.timeout = timeout
        self.max_attempts = max_attempts

    # -------------------- transport --------------------
    def _call(self, kind: str, path: str, args: Dict[str, Any]) -> Any:
        endpoint = f"{self.url}/api/{kind}"
        headers = {"Content-Type": "application/json"}
        if self.auth_token:
            headers["Authorization"] = f"Bearer {self.auth_token}"
        body = {"path": path, "args": args, "format": "json"}
        attempt = 0
        delay = 0.5
        while True:
            attempt += 1
            try:
                response = self.session.post(endpoint, json=body, headers=headers, timeout=self.timeout)
            except requests.RequestException as exc:
                if attempt >= self.max_attempts:
                    raise StoreError(f"Convex network error: {exc}") from exc
                logger.warning("convex %s retry #%s due to %s", path, attempt, exc)
                self._sleep(delay)
                delay *= 2
                continue
            if response.status_code >= 500 and attempt < self.max_attempts:
                logger.warning("convex %s retry #%s due to HTTP %s", path, attempt, response.status_code)
                self._sleep(delay)
                delay *= 2
                continue
            try:
                payload = response.json()
            except ValueError as exc:
                raise StoreError(f"Convex returned non-JSON response (HTTP {response.status_code})") from exc
            if not isinstance(payload, dict):
                raise StoreError(f"Convex returned unexpected payload (HTTP {response.status_code})")
            if payload.get("status") != "success":
                message = payload.get("errorMessage") or f"HTTP {response.status_code}"
                raise StoreError(f"Convex {path} failed: {message}")
            return payload.get("value")

    def _sleep(self, base_delay: float) -> None:
        time.sleep(base_delay + random.uniform(0, base_delay))

    def _find(self, record_id: str) -> TaskRecord:
        for record in self.list_all():
            if record.id == record_id:
                return record
        raise NotFoundError(record_id)

    # -------------------- TodoStore --------------------
    def list_all(self) -> List[TaskRecord]:
        value = self._call("query", QUERY_LIST, {})
        if not isinstance(value, list):
            raise StoreError(f"Convex {QUERY_LIST} returned {type(value).__name__}, expected list")
        records: List[TaskRecord] = []
        for raw in value:
            try:
                records.append(record_from_dict(raw))
            except (TypeError, ValueError, AttributeError) as exc:
                logger.warning("Skipping malformed todo from convex: %s", exc)
        return records

    def insert(
        self,
        text: str,
        description: Optional[str] = None,
        due_date: Optional[str] = None,
        created_at: Optional[int] = None,
    ) -> str:
        # The deployment stamps _creationTime itself, so created_at is not sent.
        args: Dict[str, Any] = {"text": text}
        # Optional schema fields must be omitted rather than sent as null.
        if description:
            args["description"] = description
        if due_date:
            args["dueDate"] = due_date
        value = self._call("mutation", MUTATION_CREATE, args)
        if isinstance(value, str) and value:
            return value
        # createTodo does not return the new id; pick the newest matching row.
        matches = [r for r in self.list_all() if r.text == text.strip()]
        if not matches:
            raise StoreError("Convex createTodo succeeded but the todo is not listed")
        return max(matches, key=lambda r: r.created_at).id

    def set_completed(self, record_id: str, completed: bool) -> None:
        record = self._find(record_id)
        if record.completed != bool(completed):
            self._call("mutation", MUTATION_TOGGLE, {"id": record_id})

    def remove(self, record_id: str) -> None:
        self._find(record_id)
        self._call("mutation", MUTATION_DELETE, {"id": record_id})
