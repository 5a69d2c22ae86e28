"""Mouse event handling helpers for TodoTUI.

Press on a row starts a drag gesture, moves feed the cumulative displacement,
release ends it. A release without displacement is left to the fragment click
handlers (checkbox, text, delete mark).
"""

from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.mouse_events import MouseButton, MouseEventType


def _handle_scroll(tui, mouse_event):
    if mouse_event.event_type == MouseEventType.SCROLL_DOWN:
        tui.move_vertical_selection(1)
        return True
    if mouse_event.event_type == MouseEventType.SCROLL_UP:
        tui.move_vertical_selection(-1)
        return True
    return False


def _handle_press(tui, mouse_event):
    if mouse_event.event_type != MouseEventType.MOUSE_DOWN or mouse_event.button != MouseButton.LEFT:
        return False
    idx = tui._row_index_from_y(mouse_event.position.y)
    if idx is None:
        # a release outside the window leaves a stale gesture behind
        tui.interpreter.cancel()
        return False
    tui.begin_drag(idx, mouse_event.position.y)
    return True


def _handle_drag(tui, mouse_event):
    if mouse_event.event_type != MouseEventType.MOUSE_MOVE or mouse_event.button != MouseButton.LEFT:
        return False
    if not tui.interpreter.dragging:
        return False
    tui.update_drag(mouse_event.position.y)
    return True


def _handle_release(tui, mouse_event):
    if mouse_event.event_type != MouseEventType.MOUSE_UP or not tui.interpreter.dragging:
        return False
    return tui.finish_drag()


def handle_body_mouse(tui, mouse_event):
    """Route mouse events for the TodoTUI list body."""
    if _handle_scroll(tui, mouse_event):
        return None
    if _handle_press(tui, mouse_event):
        return None
    if _handle_drag(tui, mouse_event):
        return None
    if _handle_release(tui, mouse_event):
        return None
    return NotImplemented


class RoutedTextControl(FormattedTextControl):
    """Text control whose mouse events go to `router` before the fragment handlers."""

    def __init__(self, *args, router=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.router = router

    def mouse_handler(self, mouse_event):
        if self.router is not None:
            handled = self.router(mouse_event)
            if handled is not NotImplemented:
                return handled
        return super().mouse_handler(mouse_event)


__all__ = ["handle_body_mouse", "RoutedTextControl"]
