"""Key routing for the browser state machine.

``handle_key`` is a pure transition: it mutates ``SessionState`` for one
keypress and reports what the caller should do next. It never clamps detail
scrolling; the detail renderer owns that clamp and writes the result back.
"""

from __future__ import annotations

from enum import Enum

from ..input import KeyEvent
from .state import SessionState, View

# Rows consumed by view chrome when sizing a page jump.
PAGE_CHROME_ROWS = 7


class KeyOutcome(Enum):
    IGNORED = "ignored"
    RENDER = "render"
    QUIT = "quit"


def page_size(rows: int) -> int:
    return max(1, rows - PAGE_CHROME_ROWS)


def is_quit_key(key: KeyEvent) -> bool:
    """``q`` (any case) or Ctrl+C ends the session from any view."""
    return key.name == "q" or (key.ctrl and key.name == "c")


def handle_list_key(state: SessionState, key: KeyEvent, rows: int) -> bool:
    """Apply one list-view key; return ``False`` for unbound keys."""
    name = key.name
    last = state.last_index
    if name in {"up", "k"}:
        state.selected_index = max(0, state.selected_index - 1)
    elif name in {"down", "j"}:
        state.selected_index = min(last, state.selected_index + 1)
    elif name == "home":
        state.selected_index = 0
        state.list_scroll_offset = 0
    elif name == "end":
        state.selected_index = last
    elif name == "pageup":
        state.selected_index = max(0, state.selected_index - page_size(rows))
    elif name == "pagedown":
        state.selected_index = min(last, state.selected_index + page_size(rows))
    elif name in {"return", "enter"}:
        state.active_view = View.DETAIL
        state.detail_scroll_offset = 0
    else:
        return False
    return True


def handle_detail_key(state: SessionState, key: KeyEvent, rows: int) -> bool:
    """Apply one detail-view key; return ``False`` for unbound keys."""
    name = key.name
    if name in {"escape", "backspace"}:
        state.active_view = View.LIST
    elif name in {"up", "k"}:
        state.detail_scroll_offset = max(0, state.detail_scroll_offset - 1)
    elif name in {"down", "j"}:
        state.detail_scroll_offset += 1
    elif name == "pageup":
        state.detail_scroll_offset = max(0, state.detail_scroll_offset - page_size(rows))
    elif name == "pagedown":
        state.detail_scroll_offset += page_size(rows)
    elif name == "home":
        state.detail_scroll_offset = 0
    else:
        return False
    return True


def handle_key(state: SessionState, key: KeyEvent, rows: int) -> KeyOutcome:
    """Route one key: global quit first, then the active view's bindings."""
    if is_quit_key(key):
        return KeyOutcome.QUIT
    if state.active_view is View.LIST:
        handled = handle_list_key(state, key, rows)
    else:
        handled = handle_detail_key(state, key, rows)
    return KeyOutcome.RENDER if handled else KeyOutcome.IGNORED
