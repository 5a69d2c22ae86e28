"""Navigation helpers for TodoTUI to keep tui_app slim."""


def move_vertical_selection(tui, delta: int) -> None:
    """Move the selected row by `delta`, clamping to the visible list."""
    total = len(tui.current_view())
    if total <= 0:
        tui.selected_index = 0
    else:
        tui.selected_index = max(0, min(tui.selected_index + delta, total - 1))
    tui.force_render()


def clamp_selection(tui) -> None:
    """Keep the selection inside the view after it shrinks (delete, filter, search)."""
    total = len(tui.current_view())
    tui.selected_index = max(0, min(tui.selected_index, total - 1)) if total else 0


__all__ = ["move_vertical_selection", "clamp_selection"]
