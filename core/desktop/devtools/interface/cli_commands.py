import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict

from core import ERR_EMPTY_INPUT, FilterCriteria, StatusFilter, TaskRecord, TodoError
from core.desktop.devtools.application.todo_manager import TodoManager
from core.desktop.devtools.interface.cli_io import structured_error, structured_response, todo_error_response
from core.desktop.devtools.interface.serializers import record_to_dict
from infrastructure.store_factory import build_store


logger = logging.getLogger("todo_tui.cli")

ManagerFactory = Callable[[], TodoManager]


@dataclass
class CliDeps:
    manager_factory: ManagerFactory
    record_to_dict: Callable[[TaskRecord], Dict[str, Any]] = record_to_dict


def manager_from_args(args) -> TodoManager:
    store_path = getattr(args, "store_path", None)
    store = build_store(
        getattr(args, "store", None),
        Path(store_path) if store_path else None,
        getattr(args, "convex_url", None),
    )
    return TodoManager(store)


def default_deps(args) -> CliDeps:
    return CliDeps(manager_factory=lambda: manager_from_args(args))


def _run(command: str, deps: CliDeps, action: Callable[[TodoManager], int]) -> int:
    try:
        return action(deps.manager_factory())
    except TodoError as exc:
        logger.debug("%s rejected: %s", command, exc)
        return todo_error_response(command, exc)


def cmd_list(args, deps: CliDeps) -> int:
    criteria = FilterCriteria(
        status_filter=StatusFilter.from_string(getattr(args, "filter", "all")),
        search_text=getattr(args, "search", "") or "",
    )

    def action(manager: TodoManager) -> int:
        view = manager.view(criteria)
        payload = {
            "filter": criteria.status_filter.token,
            "search": criteria.search_text,
            "items_left": manager.count_active(),
            "total": len(manager.records),
            "todos": [deps.record_to_dict(r) for r in view],
        }
        return structured_response("list", message=f"{len(view)} shown", payload=payload)

    return _run("list", deps, action)


def cmd_add(args, deps: CliDeps) -> int:
    raw = getattr(args, "text", "")
    text = " ".join(raw) if isinstance(raw, (list, tuple)) else str(raw or "")

    def action(manager: TodoManager) -> int:
        record = manager.add(text, getattr(args, "description", None), getattr(args, "due_date", None))
        if record is None:
            return structured_error("add", "Nothing to add: text is blank", code=ERR_EMPTY_INPUT)
        return structured_response("add", message="Todo created", payload={"todo": deps.record_to_dict(record)})

    return _run("add", deps, action)


def cmd_toggle(args, deps: CliDeps) -> int:
    def action(manager: TodoManager) -> int:
        record = manager.toggle(args.todo_id)
        state = "completed" if record.completed else "active"
        return structured_response("toggle", message=f"Todo marked {state}", payload={"todo": deps.record_to_dict(record)})

    return _run("toggle", deps, action)


def cmd_delete(args, deps: CliDeps) -> int:
    def action(manager: TodoManager) -> int:
        record = manager.delete(args.todo_id)
        return structured_response("delete", message="Todo removed", payload={"todo": deps.record_to_dict(record)})

    return _run("delete", deps, action)


def cmd_clear_completed(args, deps: CliDeps) -> int:
    def action(manager: TodoManager) -> int:
        removed = manager.clear_completed()
        payload = {"removed": [r.id for r in removed], "items_left": manager.count_active()}
        return structured_response("clear-completed", message=f"Removed {len(removed)} completed", payload=payload)

    return _run("clear-completed", deps, action)


def cmd_move(args, deps: CliDeps) -> int:
    def action(manager: TodoManager) -> int:
        current = manager.index_of(args.todo_id)
        if getattr(args, "up", False):
            target = current - 1
        elif getattr(args, "down", False):
            target = current + 1
        else:
            target = int(args.to)
        manager.reorder(current, target)
        payload = {"id": args.todo_id, "from": current, "to": target, "order": [r.id for r in manager.records]}
        return structured_response("move", message="Todo moved", payload=payload)

    return _run("move", deps, action)


__all__ = [
    "CliDeps",
    "manager_from_args",
    "default_deps",
    "cmd_list",
    "cmd_add",
    "cmd_toggle",
    "cmd_delete",
    "cmd_clear_completed",
    "cmd_move",
]
