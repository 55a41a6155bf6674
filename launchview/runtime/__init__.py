"""Runtime orchestration for the interactive launch browser."""

from .app import LaunchBrowserApp, render_session, start_app
from .controller import KeyOutcome, handle_key, page_size
from .state import SessionState, View

__all__ = [
    "KeyOutcome",
    "LaunchBrowserApp",
    "SessionState",
    "View",
    "handle_key",
    "page_size",
    "render_session",
    "start_app",
]
