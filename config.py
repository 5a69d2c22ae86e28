from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict

import yaml

USER_CONFIG_PATH = Path.home() / ".todo_tui_config.yaml"
DEFAULT_STORE_PATH = Path.home() / ".todo_tui" / "todos.yaml"
DEFAULT_ROW_UNITS = 64.0
STORE_BACKENDS = ("file", "memory", "convex")


def _load_config() -> Dict[str, Any]:
    if not USER_CONFIG_PATH.exists():
        return {}
    try:
        data = yaml.safe_load(USER_CONFIG_PATH.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def _save_config(data: Dict[str, Any]) -> None:
    if not data:
        if USER_CONFIG_PATH.exists():
            USER_CONFIG_PATH.unlink()
        return
    USER_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    USER_CONFIG_PATH.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")


def _set_value(key: str, value: str) -> None:
    data = _load_config()
    value = (value or "").strip()
    if value:
        data[key] = value
    else:
        data.pop(key, None)
    _save_config(data)


def get_user_theme() -> str:
    return str(_load_config().get("theme", "") or "").strip()


def set_user_theme(value: str) -> None:
    _set_value("theme", value)


def get_user_lang() -> str:
    return str(_load_config().get("lang", "") or "").strip()


def set_user_lang(value: str) -> None:
    _set_value("lang", value)


def get_store_settings() -> Dict[str, Any]:
    """Resolve storage backend settings.

    Priority: TODO_TUI_* environment variables > config file `store:` section > defaults.
    """
    section = _load_config().get("store") or {}
    if not isinstance(section, dict):
        section = {}
    backend = (os.getenv("TODO_TUI_STORE") or str(section.get("backend") or "file")).strip().lower()
    if backend not in STORE_BACKENDS:
        backend = "file"
    path = os.getenv("TODO_TUI_STORE_PATH") or section.get("path") or DEFAULT_STORE_PATH
    url = os.getenv("TODO_TUI_CONVEX_URL") or section.get("url") or ""
    return {
        "backend": backend,
        "path": Path(str(path)).expanduser(),
        "url": str(url).strip(),
        "auth_token": str(section.get("auth_token") or "").strip() or None,
    }


def get_drag_row_units() -> float:
    section = _load_config().get("drag") or {}
    if not isinstance(section, dict):
        return DEFAULT_ROW_UNITS
    try:
        units = float(section.get("row_units", DEFAULT_ROW_UNITS))
    except (TypeError, ValueError):
        return DEFAULT_ROW_UNITS
    return units if units > 0 else DEFAULT_ROW_UNITS
