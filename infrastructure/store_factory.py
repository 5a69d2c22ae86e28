from pathlib import Path
from typing import Optional

from application.ports import TodoStore
from config import get_store_settings
from core import StoreError
from infrastructure.convex_store import ConvexTodoStore
from infrastructure.file_store import FileTodoStore
from infrastructure.memory_store import InMemoryTodoStore


def build_store(backend: Optional[str] = None, path: Optional[Path] = None, url: Optional[str] = None) -> TodoStore:
    """Instantiate the configured store; explicit arguments win over config."""
    settings = get_store_settings()
    kind = (backend or settings["backend"]).strip().lower()
    if kind == "memory":
        return InMemoryTodoStore.with_samples()
    if kind == "convex":
        url = url or settings["url"]
        if not url:
            raise StoreError("Convex deployment url is not configured (TODO_TUI_CONVEX_URL)")
        return ConvexTodoStore(url, auth_token=settings["auth_token"])
    if kind == "file":
        return FileTodoStore(Path(path) if path else settings["path"])
    raise ValueError(f"Unknown store backend: {backend!r}")


__all__ = ["build_store"]
