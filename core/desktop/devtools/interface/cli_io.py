import json
from datetime import datetime, timezone
from typing import Dict, Optional

from core import TodoError


def iso_timestamp() -> str:
    """UTC timestamp for structured CLI output."""
    return datetime.now(timezone.utc).isoformat()


def structured_response(
    command: str,
    *,
    status: str = "OK",
    message: str = "",
    payload: Optional[Dict] = None,
    exit_code: int = 0,
) -> int:
    """Unified JSON response for non-interactive commands."""
    body: Dict[str, object] = {
        "command": command,
        "status": status,
        "message": message,
        "timestamp": iso_timestamp(),
        "payload": payload or {},
    }
    print(json.dumps(body, ensure_ascii=False, indent=2))
    return exit_code


def structured_error(command: str, message: str, *, code: str = "ERROR", payload: Optional[Dict] = None) -> int:
    """Error response; `code` is one of the core error kinds."""
    body = dict(payload or {})
    body["code"] = code
    return structured_response(command, status="ERROR", message=message, payload=body, exit_code=1)


def todo_error_response(command: str, exc: TodoError) -> int:
    return structured_error(command, str(exc), code=exc.code)


__all__ = ["iso_timestamp", "structured_response", "structured_error", "todo_error_response"]
