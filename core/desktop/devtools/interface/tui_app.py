#!/usr/bin/env python3
"""TUI application - TodoTUI class and cmd_tui command."""

import os
import time
from typing import Callable, List, Optional, Tuple

from prompt_toolkit.application import Application
from prompt_toolkit.filters import Condition, has_focus
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.key_binding.bindings.focus import focus_next, focus_previous
from prompt_toolkit.layout import HSplit, Layout, VSplit, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout.processors import AfterInput, ConditionalProcessor
from prompt_toolkit.mouse_events import MouseEvent
from prompt_toolkit.styles import Style
from prompt_toolkit.widgets import TextArea

from config import get_drag_row_units, get_user_theme, set_user_theme
from core import (
    DragReorderInterpreter,
    Dragging,
    FilterCriteria,
    NotFoundError,
    OutOfRangeError,
    ReorderDecision,
    StatusFilter,
    StoreError,
    TaskRecord,
    TodoError,
    target_index,
)
from core.desktop.devtools.application.todo_manager import TodoManager
from core.desktop.devtools.interface.constants import DRAG_THRESHOLD
from core.desktop.devtools.interface.i18n import translate
from core.desktop.devtools.interface.tui_mouse import RoutedTextControl, handle_body_mouse
from core.desktop.devtools.interface.tui_navigation import clamp_selection, move_vertical_selection
from core.desktop.devtools.interface.tui_render import (
    render_filter_bar,
    render_footer_text,
    render_header_text,
    render_hint_text,
    render_search_clear,
    render_status_text,
    render_task_list_text,
)

from .tui_themes import DEFAULT_THEME, THEMES, build_style, other_theme


class TodoTUI:
    def __init__(
        self,
        manager: TodoManager,
        theme: Optional[str] = None,
        row_units: Optional[float] = None,
        lang: Optional[str] = None,
        input=None,
        output=None,
    ):
        self.manager = manager
        if theme not in THEMES:
            theme = get_user_theme()
        self.theme = theme if theme in THEMES else DEFAULT_THEME
        self.lang = lang
        self.row_units = float(row_units or get_drag_row_units())
        self.interpreter = DragReorderInterpreter(DRAG_THRESHOLD)
        self.status_filter = StatusFilter.ALL
        self.selected_index = 0
        self.row_map: List[Tuple[int, int]] = []
        self._drag_anchor_y = 0
        self.status_message = ""
        self.status_is_error = False
        self.status_message_expires = 0.0

        self.input_field = TextArea(
            multiline=False,
            prompt=" ◯ ",
            style="class:card",
            accept_handler=self._accept_new_todo,
            input_processors=[self._placeholder("INPUT_PLACEHOLDER", lambda: self.input_field)],
        )
        self.search_field = TextArea(
            multiline=False,
            prompt=" ⌕ ",
            style="class:card",
            input_processors=[self._placeholder("SEARCH_PLACEHOLDER", lambda: self.search_field)],
        )
        self.search_field.buffer.on_text_changed += lambda _buf: clamp_selection(self)

        self.body_control = RoutedTextControl(
            self.get_task_list_text,
            focusable=True,
            show_cursor=False,
            router=self._handle_body_mouse,
        )
        self.list_window = Window(content=self.body_control, always_hide_cursor=True, wrap_lines=False, style="class:card")

        root = HSplit([
            Window(content=FormattedTextControl(self.get_header_text), height=1, always_hide_cursor=True),
            Window(height=1, char=" "),
            self.input_field,
            Window(height=1, char="─", style="class:border"),
            VSplit([
                self.search_field,
                Window(content=FormattedTextControl(self.get_search_clear_text), width=3, style="class:card"),
            ]),
            Window(height=1, char="─", style="class:border"),
            self.list_window,
            Window(content=FormattedTextControl(self.get_footer_text), height=1, always_hide_cursor=True),
            Window(content=FormattedTextControl(self.get_filter_text), height=1, always_hide_cursor=True),
            Window(content=FormattedTextControl(self.get_hint_text), height=1, always_hide_cursor=True),
            Window(content=FormattedTextControl(self.get_status_text), height=1, always_hide_cursor=True),
        ])

        self.app = Application(
            layout=Layout(root, focused_element=self.input_field),
            key_bindings=self._build_key_bindings(),
            style=self.build_style(self.theme),
            full_screen=True,
            mouse_support=True,
            refresh_interval=1.0,
            input=input,
            output=output,
        )

    @classmethod
    def build_style(cls, theme: str) -> Style:
        return build_style(theme)

    def _placeholder(self, key: str, get_field: Callable[[], TextArea]) -> ConditionalProcessor:
        return ConditionalProcessor(
            AfterInput(lambda: self._t(key), style="class:placeholder"),
            filter=Condition(lambda: not get_field().buffer.text),
        )

    # -------------------- key bindings --------------------
    def _build_key_bindings(self) -> KeyBindings:
        kb = KeyBindings()
        list_focused = has_focus(self.list_window)
        search_focused = has_focus(self.search_field)

        @kb.add("c-q")
        @kb.add("c-c")
        def _(event):
            event.app.exit()

        @kb.add("c-t")
        def _(event):
            self.toggle_theme()

        kb.add("tab")(focus_next)
        kb.add("s-tab")(focus_previous)

        @kb.add("down", filter=list_focused)
        @kb.add("j", filter=list_focused)
        def _(event):
            self.move_vertical_selection(1)

        @kb.add("up", filter=list_focused)
        @kb.add("k", filter=list_focused)
        def _(event):
            self.move_vertical_selection(-1)

        @kb.add("J", filter=list_focused)
        def _(event):
            self.move_selected(ReorderDecision.MOVE_DOWN)

        @kb.add("K", filter=list_focused)
        def _(event):
            self.move_selected(ReorderDecision.MOVE_UP)

        @kb.add("space", filter=list_focused)
        @kb.add("enter", filter=list_focused)
        def _(event):
            record = self.selected_record()
            if record:
                self.toggle_record(record.id)

        @kb.add("x", filter=list_focused)
        @kb.add("delete", filter=list_focused)
        def _(event):
            record = self.selected_record()
            if record:
                self.delete_record(record.id)

        @kb.add("c", filter=list_focused)
        def _(event):
            self.clear_completed()

        @kb.add("1", filter=list_focused)
        def _(event):
            self.set_filter(StatusFilter.ALL)

        @kb.add("2", filter=list_focused)
        def _(event):
            self.set_filter(StatusFilter.ACTIVE)

        @kb.add("3", filter=list_focused)
        def _(event):
            self.set_filter(StatusFilter.COMPLETED)

        @kb.add("/", filter=list_focused)
        def _(event):
            event.app.layout.focus(self.search_field)

        @kb.add("a", filter=list_focused)
        def _(event):
            event.app.layout.focus(self.input_field)

        @kb.add("escape", filter=list_focused)
        def _(event):
            self.interpreter.cancel()
            self.force_render()

        @kb.add("c-x", filter=search_focused)
        def _(event):
            self.clear_search()

        @kb.add("escape", filter=search_focused)
        def _(event):
            event.app.layout.focus(self.list_window)

        return kb

    # -------------------- state --------------------
    @property
    def criteria(self) -> FilterCriteria:
        return FilterCriteria(status_filter=self.status_filter, search_text=self.search_field.text)

    def current_view(self) -> Tuple[TaskRecord, ...]:
        return self.manager.view(self.criteria)

    def selected_record(self) -> Optional[TaskRecord]:
        view = self.current_view()
        if 0 <= self.selected_index < len(view):
            return view[self.selected_index]
        return None

    def _t(self, key: str, **kwargs) -> str:
        return translate(key, lang=self.lang, **kwargs)

    @staticmethod
    def get_terminal_width() -> int:
        """Get current terminal width, default to 100 if unavailable."""
        try:
            return os.get_terminal_size().columns
        except (AttributeError, ValueError, OSError):
            return 100

    def force_render(self) -> None:
        app = getattr(self, "app", None)
        if app:
            app.invalidate()

    def set_status_message(self, message: str, ttl: float = 4.0, error: bool = False) -> None:
        self.status_message = message
        self.status_is_error = error
        self.status_message_expires = time.time() + ttl

    def current_status_message(self) -> Tuple[str, bool]:
        if self.status_message and time.time() < self.status_message_expires:
            return self.status_message, self.status_is_error
        return "", False

    def _guarded(self, action: Callable[[], object]) -> Optional[object]:
        """Run a manager call, turning rejected operations into status messages."""
        try:
            return action()
        except NotFoundError as exc:
            self.set_status_message(self._t("ERR_NOT_FOUND", id=exc.record_id), error=True)
        except OutOfRangeError:
            self.set_status_message(self._t("ERR_OUT_OF_RANGE"), error=True)
        except StoreError as exc:
            self.set_status_message(self._t("ERR_STORE", error=str(exc)), error=True)
        except TodoError as exc:
            self.set_status_message(str(exc), error=True)
        finally:
            clamp_selection(self)
            self.force_render()
        return None

    # -------------------- actions --------------------
    def _accept_new_todo(self, buffer) -> bool:
        self.add_todo(buffer.text)
        return False

    def add_todo(self, text: str) -> Optional[TaskRecord]:
        record = self._guarded(lambda: self.manager.add(text))
        if record:
            self.set_status_message(self._t("STATUS_ADDED", text=record.text))
        return record

    def toggle_record(self, record_id: str) -> None:
        self._guarded(lambda: self.manager.toggle(record_id))

    def delete_record(self, record_id: str) -> None:
        self._guarded(lambda: self.manager.delete(record_id))

    def clear_completed(self) -> None:
        removed = self._guarded(self.manager.clear_completed)
        if removed:
            self.set_status_message(self._t("STATUS_CLEARED", count=len(removed)))

    def set_filter(self, status_filter: StatusFilter) -> None:
        self.status_filter = status_filter
        clamp_selection(self)
        self.force_render()

    def clear_search(self) -> None:
        self.search_field.text = ""
        clamp_selection(self)
        self.force_render()

    def select_index(self, index: int) -> None:
        self.selected_index = index
        clamp_selection(self)
        self.force_render()

    def move_vertical_selection(self, delta: int) -> None:
        move_vertical_selection(self, delta)

    def toggle_theme(self) -> None:
        self.theme = other_theme(self.theme)
        self.app.style = self.build_style(self.theme)
        set_user_theme(self.theme)
        self.force_render()

    def move_selected(self, decision: ReorderDecision) -> bool:
        return self._apply_move(self.selected_index, decision)

    def _apply_move(self, view_index: int, decision: ReorderDecision) -> bool:
        view = self.current_view()
        if not 0 <= view_index < len(view):
            return False
        moved = self._guarded(lambda: self.manager.move_visible(view, view_index, decision))
        if moved:
            self.selected_index = target_index(decision, view_index)
            self.set_status_message(self._t("STATUS_MOVED", text=view[view_index].text))
        return bool(moved)

    # -------------------- drag gestures --------------------
    def _row_index_from_y(self, y: int) -> Optional[int]:
        for line_no, idx in self.row_map:
            if line_no == y:
                return idx
        return None

    def begin_drag(self, row_index: int, y: int) -> None:
        self._drag_anchor_y = y
        self.selected_index = row_index
        self.interpreter.on_gesture_start(row_index, len(self.current_view()), start_offset=y * self.row_units)
        self.force_render()

    def update_drag(self, y: int) -> None:
        self.interpreter.on_gesture_move((y - self._drag_anchor_y) * self.row_units)
        self.force_render()

    def finish_drag(self) -> bool:
        """End the gesture; True when the pointer actually moved (not a click)."""
        state = self.interpreter.state
        decision = self.interpreter.on_gesture_end()
        if not isinstance(state, Dragging):
            return False
        if decision is not ReorderDecision.NO_OP:
            self._apply_move(state.row_index, decision)
        self.force_render()
        return state.dy != 0

    # -------------------- rendering --------------------
    def get_header_text(self) -> FormattedText:
        return render_header_text(self)

    def get_task_list_text(self) -> FormattedText:
        return render_task_list_text(self)

    def get_footer_text(self) -> FormattedText:
        return render_footer_text(self)

    def get_filter_text(self) -> FormattedText:
        return render_filter_bar(self)

    def get_search_clear_text(self) -> FormattedText:
        return render_search_clear(self)

    def get_hint_text(self) -> FormattedText:
        return render_hint_text(self)

    def get_status_text(self) -> FormattedText:
        return render_status_text(self)

    def _handle_body_mouse(self, mouse_event: MouseEvent):
        return handle_body_mouse(self, mouse_event)

    def run(self):
        self.app.run()


def cmd_tui(args) -> int:
    from core.desktop.devtools.interface.cli_commands import manager_from_args

    tui = TodoTUI(
        manager_from_args(args),
        theme=getattr(args, "theme", None),
        lang=getattr(args, "lang", None),
    )
    tui.run()
    return 0


__all__ = ["TodoTUI", "cmd_tui"]
