"""Terminal control helpers for the browser session.

Owns raw-mode lifecycle, alternate-screen switching, cursor visibility, and
whole-screen redraws. Teardown is funnelled through :meth:`release`, which is
safe to call from any exit path any number of times.
"""

from __future__ import annotations

import os
import termios
import tty

ENTER_ALT_SCREEN = b"\x1b[?1049h"
EXIT_ALT_SCREEN = b"\x1b[?1049l"
HIDE_CURSOR = b"\x1b[?25l"
SHOW_CURSOR = b"\x1b[?25h"
CLEAR_SCREEN = "\x1b[2J\x1b[H"

DEFAULT_ROWS = 24
DEFAULT_COLUMNS = 80


class TerminalController:
    """Manage terminal mode transitions and screen output."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state (when stdin is a tty) and bind file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd) if os.isatty(stdin_fd) else None
        self._raw_input = False
        self._session_open = False

    def _write(self, data: bytes) -> None:
        os.write(self.stdout_fd, data)

    def enter_alternate_screen(self) -> None:
        self._session_open = True
        self._write(ENTER_ALT_SCREEN)

    def exit_alternate_screen(self) -> None:
        self._write(EXIT_ALT_SCREEN)

    def hide_cursor(self) -> None:
        self._session_open = True
        self._write(HIDE_CURSOR)

    def show_cursor(self) -> None:
        self._write(SHOW_CURSOR)

    def get_size(self) -> tuple[int, int]:
        """Return ``(rows, columns)``, defaulting to 24x80 when unknown."""
        try:
            size = os.get_terminal_size(self.stdout_fd)
        except OSError:
            return DEFAULT_ROWS, DEFAULT_COLUMNS
        return size.lines or DEFAULT_ROWS, size.columns or DEFAULT_COLUMNS

    def draw(self, lines: list[str]) -> None:
        """Clear the screen and paint ``lines`` in a single write."""
        # Raw mode disables output post-processing, so rows need an explicit CR.
        payload = CLEAR_SCREEN + "\r\n".join(lines)
        self._write(payload.encode("utf-8", errors="replace"))

    def enable_raw_input(self) -> None:
        """Switch stdin to raw mode; a no-op when stdin is not a tty."""
        if self._saved_tty_state is None:
            return
        self._session_open = True
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        self._raw_input = True

    def restore_input(self) -> None:
        if not self._raw_input or self._saved_tty_state is None:
            return
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
        self._raw_input = False

    def release(self) -> bool:
        """Undo every terminal change made by this session exactly once.

        Shows the cursor, leaves the alternate screen, and restores cooked
        input. Returns ``False`` when there was nothing left to release.
        """
        if not self._session_open:
            return False
        # Flip first so a signal arriving mid-teardown sees a closed session.
        self._session_open = False
        self.show_cursor()
        self.exit_alternate_screen()
        self.restore_input()
        return True

