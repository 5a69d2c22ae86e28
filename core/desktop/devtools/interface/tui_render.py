"""FormattedText builders for TodoTUI.

Every builder reads state from the tui object only; click handlers are
attached to fragments and call back into the tui.
"""

from typing import Callable, List, Optional, Tuple

from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.mouse_events import MouseButton, MouseEventType
from wcwidth import wcswidth, wcwidth

from core import StatusFilter, TaskRecord

CHECK_OPEN = " ◯ "
CHECK_DONE = " ✓ "
DELETE_MARK = " ✕ "
DRAG_MARK = " ↕ "
MIN_TEXT_WIDTH = 10


def display_width(text: str) -> int:
    width = wcswidth(text)
    if width < 0:
        return sum(max(0, wcwidth(ch)) for ch in text)
    return width


def trim_display(text: str, width: int) -> str:
    """Cut to `width` terminal cells, marking the cut with an ellipsis."""
    if width <= 0:
        return ""
    if display_width(text) <= width:
        return text
    out: List[str] = []
    used = 0
    for ch in text:
        w = max(0, wcwidth(ch))
        if used + w > width - 1:
            break
        out.append(ch)
        used += w
    return "".join(out) + "…"


def pad_display(text: str, width: int) -> str:
    trimmed = trim_display(text, width)
    return trimmed + " " * max(0, width - display_width(trimmed))


def _on_click(action: Callable[[], None]):
    def handler(mouse_event):
        if mouse_event.event_type == MouseEventType.MOUSE_UP and mouse_event.button == MouseButton.LEFT:
            action()
            return None
        return NotImplemented

    return handler


def _row_style(tui, index: int) -> str:
    if tui.interpreter.dragging and tui.interpreter.row_index == index:
        return "class:dragging"
    if index == tui.selected_index:
        return "class:selected"
    return "class:card"


def _record_fragments(tui, record: TaskRecord, index: int, width: int) -> List[Tuple]:
    row_style = _row_style(tui, index)
    check_style = "class:check.done" if record.completed else "class:check"
    text_style = "class:text.done" if record.completed else "class:text"
    suffix = ""
    if tui.interpreter.dragging and tui.interpreter.row_index == index:
        suffix = f"{DRAG_MARK}{tui.interpreter.visual_offset:+.0f}"
    text_width = max(MIN_TEXT_WIDTH, width - len(CHECK_OPEN) - len(DELETE_MARK) - display_width(suffix) - 1)
    record_id = record.id
    return [
        (f"{row_style} {check_style}", CHECK_DONE if record.completed else CHECK_OPEN, _on_click(lambda: tui.toggle_record(record_id))),
        (f"{row_style} {text_style}", " " + pad_display(record.text, text_width), _on_click(lambda: tui.select_index(index))),
        (f"{row_style} class:text.dim", suffix),
        (f"{row_style} class:delete", DELETE_MARK, _on_click(lambda: tui.delete_record(record_id))),
        ("", "\n"),
    ]


def empty_state_keys(status_filter: StatusFilter, searching: bool) -> Tuple[str, str]:
    if searching:
        return "EMPTY_SEARCH_TITLE", "EMPTY_SEARCH_SUBTITLE"
    if status_filter is StatusFilter.COMPLETED:
        return "EMPTY_COMPLETED_TITLE", "EMPTY_SUBTITLE"
    if status_filter is StatusFilter.ACTIVE:
        return "EMPTY_ACTIVE_TITLE", "EMPTY_SUBTITLE"
    return "EMPTY_ALL_TITLE", "EMPTY_SUBTITLE"


def render_task_list_text(tui, width: Optional[int] = None) -> FormattedText:
    """List body; also rebuilds tui.row_map (line number -> view index)."""
    view = tui.current_view()
    width = width or tui.get_terminal_width()
    tui.row_map = []
    parts: List[Tuple] = []
    if not view:
        title_key, subtitle_key = empty_state_keys(tui.status_filter, tui.criteria.searching)
        parts.append(("class:text.dim", "\n  ✎\n"))
        parts.append(("class:text bold", f"  {tui._t(title_key)}\n"))
        parts.append(("class:text.dim", f"  {tui._t(subtitle_key)}\n"))
        return FormattedText(parts)
    for index, record in enumerate(view):
        tui.row_map.append((index, index))
        parts.extend(_record_fragments(tui, record, index, width))
    return FormattedText(parts)


def render_header_text(tui) -> FormattedText:
    toggle_key = "THEME_TO_LIGHT" if tui.theme == "dark" else "THEME_TO_DARK"
    width = tui.get_terminal_width()
    logo = f"  {tui._t('LOGO')}"
    toggle = f" {tui._t(toggle_key)} "
    gap = max(1, width - display_width(logo) - display_width(toggle))
    return FormattedText([
        ("class:header", logo + " " * gap),
        ("class:header.toggle", toggle, _on_click(tui.toggle_theme)),
    ])


def render_footer_text(tui) -> FormattedText:
    """Items-left counter and Clear Completed; hidden while the view is empty."""
    if not tui.current_view():
        return FormattedText([])
    left = f"  {tui._t('ITEMS_LEFT', count=tui.manager.count_active())}"
    clear = f"{tui._t('CLEAR_COMPLETED')}  "
    gap = max(1, tui.get_terminal_width() - display_width(left) - display_width(clear))
    return FormattedText([
        ("class:text.dim", left + " " * gap),
        ("class:text.dim", clear, _on_click(tui.clear_completed)),
    ])


def render_filter_bar(tui) -> FormattedText:
    parts: List[Tuple] = [("", "  ")]
    for flt in StatusFilter:
        style = "class:filter.active" if flt is tui.status_filter else "class:filter"
        parts.append((style, tui._t(flt.label_key), _on_click(lambda flt=flt: tui.set_filter(flt))))
        parts.append(("", "   "))
    return FormattedText(parts)


def render_search_clear(tui) -> FormattedText:
    if not tui.criteria.searching:
        return FormattedText([])
    return FormattedText([("class:delete", DELETE_MARK, _on_click(tui.clear_search))])


def render_hint_text(tui) -> FormattedText:
    return FormattedText([("class:text.dim", f"  {tui._t('DRAG_HINT')}")])


def render_status_text(tui) -> FormattedText:
    message, is_error = tui.current_status_message()
    if message:
        return FormattedText([("class:status.error" if is_error else "class:status.info", f"  {message}")])
    return FormattedText([("class:text.dim", f"  {tui._t('KEYS_HINT')}")])


__all__ = [
    "display_width",
    "trim_display",
    "pad_display",
    "empty_state_keys",
    "render_task_list_text",
    "render_header_text",
    "render_footer_text",
    "render_filter_bar",
    "render_search_clear",
    "render_hint_text",
    "render_status_text",
]
