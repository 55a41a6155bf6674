"""Interactive launch browser.

Owns the session state, routes keys through the controller, and redraws after
every handled key and on terminal resize. Terminal ownership starts when
:meth:`LaunchBrowserApp.run` is entered and is released on every exit path.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Sequence
from datetime import datetime

from ..input import InputSource, KeyEvent
from ..model import Launch
from ..render import RenderResult, render_detail_view, render_list_view
from ..terminal import TerminalController
from ..ui_theme import DEFAULT_THEME, UITheme
from .controller import KeyOutcome, handle_key
from .state import SessionState, View

logger = logging.getLogger(__name__)


def render_session(
    state: SessionState,
    rows: int,
    cols: int,
    theme: UITheme = DEFAULT_THEME,
    now: datetime | None = None,
) -> RenderResult:
    """Render the active view and store its clamped scroll offset back."""
    if state.active_view is View.LIST:
        result = render_list_view(
            state.launches,
            state.selected_index,
            state.list_scroll_offset,
            rows,
            cols,
            use_local_time=state.use_local_time,
            theme=theme,
        )
        state.list_scroll_offset = result.scroll_offset
    else:
        result = render_detail_view(
            state.selected_launch,
            state.detail_scroll_offset,
            rows,
            cols,
            use_local_time=state.use_local_time,
            theme=theme,
            now=now,
        )
        state.detail_scroll_offset = result.scroll_offset
    return result


class LaunchBrowserApp:
    """Wire terminal, input, state, and renderers together."""

    def __init__(
        self,
        launches: Sequence[Launch],
        use_local_time: bool,
        terminal: TerminalController,
        input_source: InputSource,
        *,
        theme: UITheme = DEFAULT_THEME,
        clock: Callable[[], datetime | None] = lambda: None,
    ) -> None:
        if not launches:
            raise ValueError("launch browser needs at least one launch")
        self.state = SessionState(launches=tuple(launches), use_local_time=use_local_time)
        self.terminal = terminal
        self.input_source = input_source
        self.theme = theme
        self.clock = clock
        self.finished = False
        self._last_size: tuple[int, int] | None = None

    def render(self) -> None:
        rows, cols = self.terminal.get_size()
        self._last_size = (rows, cols)
        result = render_session(self.state, rows, cols, self.theme, self.clock())
        self.terminal.draw(result.lines)

    def on_key(self, key: KeyEvent) -> None:
        rows, _cols = self.terminal.get_size()
        outcome = handle_key(self.state, key, rows)
        if outcome is KeyOutcome.QUIT:
            self.quit()
        elif outcome is KeyOutcome.RENDER:
            self.render()

    def on_idle(self) -> None:
        """Redraw when the terminal size changed since the last frame."""
        if self.terminal.get_size() != self._last_size:
            self.render()

    def quit(self) -> None:
        self.finished = True
        self.input_source.stop()

    def run(self) -> None:
        """Take over the terminal and block until the user quits."""
        logger.debug("starting browser with %d launches", len(self.state.launches))
        try:
            self.terminal.enter_alternate_screen()
            self.terminal.hide_cursor()
            self.render()
            self.input_source.start(self.on_key, on_idle=self.on_idle)
            self.input_source.run()
        finally:
            self.input_source.stop()
        logger.debug("browser session ended")


def start_app(
    launches: Sequence[Launch],
    use_local_time: bool,
    theme: UITheme = DEFAULT_THEME,
) -> None:
    """Run the browser on the process's own stdin/stdout."""
    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stdout.fileno())
    app = LaunchBrowserApp(launches, use_local_time, terminal, InputSource(terminal, stdin_fd), theme=theme)
    app.run()
