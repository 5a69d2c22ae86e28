#!/usr/bin/env python3
"""TUI themes and styling."""

from typing import Dict

from prompt_toolkit.styles import Style


THEMES: Dict[str, Dict[str, str]] = {
    "light": {
        "": "#494c6b bg:#fafafa",
        "header": "bg:#7c3aed #ffffff bold",
        "header.toggle": "bg:#7c3aed #ffffff",
        "card": "bg:#ffffff #494c6b",
        "placeholder": "#9495a5",
        "text": "#494c6b",
        "text.done": "#9495a5 strike",
        "text.dim": "#9495a5",
        "border": "#e3e4f1",
        "check": "#3a7bfd",
        "check.done": "bg:#3a7bfd #ffffff bold",
        "delete": "#9495a5",
        "filter": "#9495a5",
        "filter.active": "#3a7bfd bold",
        "selected": "bg:#e3e4f1",
        "dragging": "bg:#d6d8f0 bold",
        "status.error": "#e06c75 bold",
        "status.info": "#3a7bfd",
    },
    "dark": {
        "": "#c8cbe7 bg:#171823",
        "header": "bg:#5b21b6 #ffffff bold",
        "header.toggle": "bg:#5b21b6 #ffffff",
        "card": "bg:#25273d #c8cbe7",
        "placeholder": "#767992",
        "text": "#c8cbe7",
        "text.done": "#5b5e7e strike",
        "text.dim": "#5b5e7e",
        "border": "#393a4b",
        "check": "#3a7bfd",
        "check.done": "bg:#3a7bfd #ffffff bold",
        "delete": "#5b5e7e",
        "filter": "#5b5e7e",
        "filter.active": "#3a7bfd bold",
        "selected": "bg:#393a4b",
        "dragging": "bg:#4b4d6b bold",
        "status.error": "#ff6b6b bold",
        "status.info": "#3a7bfd",
    },
}

DEFAULT_THEME = "light"


def get_theme_palette(theme: str) -> Dict[str, str]:
    """Get theme palette, falling back to default if theme not found."""
    base = THEMES.get(theme)
    if not base:
        base = THEMES[DEFAULT_THEME]
    return dict(base)


def other_theme(theme: str) -> str:
    return "light" if theme == "dark" else "dark"


def build_style(theme: str) -> Style:
    """Build Style object from theme name."""
    return Style.from_dict(get_theme_palette(theme))
