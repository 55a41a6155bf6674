"""Keyboard event source for the interactive browser.

Puts stdin in raw mode, pumps decoded keys to a callback, and guarantees the
terminal is restored on every way out: the stop handle, SIGINT/SIGTERM/SIGHUP,
or an exception nobody caught.
"""

from __future__ import annotations

import logging
import select
import signal
import sys
import threading
from collections.abc import Callable

from ..terminal import TerminalController
from .reader import KeyEvent, read_key

logger = logging.getLogger(__name__)

POLL_INTERVAL_MS = 200
HANDLED_SIGNALS = tuple(
    sig for sig in (getattr(signal, name, None) for name in ("SIGINT", "SIGTERM", "SIGHUP")) if sig is not None
)

KeyCallback = Callable[[KeyEvent], None]
IdleCallback = Callable[[], None]


class InputSource:
    """Deliver keypresses from ``stdin_fd`` until stopped."""

    def __init__(
        self,
        terminal: TerminalController,
        stdin_fd: int,
        *,
        poll_interval_ms: int = POLL_INTERVAL_MS,
    ) -> None:
        self.terminal = terminal
        self.stdin_fd = stdin_fd
        self.poll_interval_ms = poll_interval_ms
        self._on_key: KeyCallback | None = None
        self._on_idle: IdleCallback | None = None
        self._running = False
        self._stopped = False
        self._input_closed = False
        self._previous_handlers: dict[int, object] = {}
        self._previous_excepthook = None

    @property
    def running(self) -> bool:
        return self._running

    def start(self, on_key: KeyCallback, on_idle: IdleCallback | None = None) -> Callable[[], None]:
        """Enter raw mode, install exit hooks, and return the stop handle.

        ``on_idle`` runs whenever a poll interval passes without input; the
        application uses it to notice terminal resizes.
        """
        self._on_key = on_key
        self._on_idle = on_idle
        self._running = True
        self._stopped = False
        self._input_closed = False
        self.terminal.enable_raw_input()
        self._install_exit_hooks()
        return self.stop

    def stop(self) -> None:
        """Detach the listener, uninstall hooks, and release the terminal.

        Repeated calls (including one racing a signal handler) are no-ops.
        """
        if self._stopped:
            return
        self._stopped = True
        self._running = False
        self._on_key = None
        self._on_idle = None
        self._uninstall_exit_hooks()
        if self.terminal.release():
            logger.debug("terminal session released")

    def run(self) -> None:
        """Block, dispatching keys until :meth:`stop` is called."""
        while self._running:
            if self._input_closed:
                # Keys will never arrive; just keep servicing idle work and signals.
                select.select([], [], [], self.poll_interval_ms / 1000.0)
                key = None
            else:
                try:
                    key = read_key(self.stdin_fd, timeout_ms=self.poll_interval_ms)
                except EOFError:
                    logger.debug("stdin reached end of input; no further keys")
                    self._input_closed = True
                    key = None
            if key is None:
                if self._running and self._on_idle is not None:
                    self._on_idle()
                continue
            if self._on_key is not None:
                self._on_key(key)

    def _install_exit_hooks(self) -> None:
        if threading.current_thread() is threading.main_thread():
            for sig in HANDLED_SIGNALS:
                self._previous_handlers[sig] = signal.signal(sig, self._handle_signal)
        self._previous_excepthook = sys.excepthook
        sys.excepthook = self._handle_fault

    def _uninstall_exit_hooks(self) -> None:
        for sig, handler in self._previous_handlers.items():
            signal.signal(sig, handler)
        self._previous_handlers.clear()
        if self._previous_excepthook is not None:
            if sys.excepthook == self._handle_fault:
                sys.excepthook = self._previous_excepthook
            self._previous_excepthook = None

    def _handle_signal(self, signum: int, _frame) -> None:
        logger.debug("received signal %s; shutting down", signum)
        self.stop()
        raise SystemExit(0)

    def _handle_fault(self, exc_type, exc, tb) -> None:
        previous = self._previous_excepthook or sys.__excepthook__
        self.stop()
        previous(exc_type, exc, tb)
