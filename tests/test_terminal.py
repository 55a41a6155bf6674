"""Tests for terminal mode control sequences and teardown.

Verifies alternate-screen/cursor payloads, raw-mode handling, and that the
session is released exactly once no matter how often teardown is requested.
"""

from __future__ import annotations

import os
import termios
import unittest
from unittest import mock

from launchview.terminal import TerminalController


def _tty_controller() -> TerminalController:
    with mock.patch("launchview.terminal.os.isatty", return_value=True), mock.patch(
        "launchview.terminal.termios.tcgetattr", return_value=[1, 2, 3]
    ):
        return TerminalController(stdin_fd=0, stdout_fd=1)


class TerminalBehaviorTests(unittest.TestCase):
    def test_screen_and_cursor_toggles_emit_expected_sequences(self) -> None:
        controller = _tty_controller()
        with mock.patch("launchview.terminal.os.write") as write_mock:
            controller.enter_alternate_screen()
            controller.hide_cursor()
            controller.show_cursor()
            controller.exit_alternate_screen()

        self.assertEqual(
            write_mock.call_args_list,
            [
                mock.call(1, b"\x1b[?1049h"),
                mock.call(1, b"\x1b[?25l"),
                mock.call(1, b"\x1b[?25h"),
                mock.call(1, b"\x1b[?1049l"),
            ],
        )

    def test_raw_input_uses_setraw_and_restores_saved_state(self) -> None:
        controller = _tty_controller()
        with mock.patch("launchview.terminal.tty.setraw") as setraw_mock, mock.patch(
            "launchview.terminal.termios.tcsetattr"
        ) as setattr_mock, mock.patch("launchview.terminal.os.write"):
            controller.enable_raw_input()
            controller.release()

        setraw_mock.assert_called_once_with(0, termios.TCSAFLUSH)
        setattr_mock.assert_called_once_with(0, termios.TCSAFLUSH, [1, 2, 3])

    def test_release_runs_only_once(self) -> None:
        controller = _tty_controller()
        with mock.patch("launchview.terminal.tty.setraw"), mock.patch(
            "launchview.terminal.termios.tcsetattr"
        ) as setattr_mock, mock.patch("launchview.terminal.os.write") as write_mock:
            controller.enter_alternate_screen()
            controller.hide_cursor()
            controller.enable_raw_input()
            write_mock.reset_mock()

            self.assertTrue(controller.release())
            self.assertFalse(controller.release())
            self.assertFalse(controller.release())

        self.assertEqual(
            write_mock.call_args_list,
            [mock.call(1, b"\x1b[?25h"), mock.call(1, b"\x1b[?1049l")],
        )
        setattr_mock.assert_called_once()

    def test_release_without_session_is_a_noop(self) -> None:
        controller = _tty_controller()
        with mock.patch("launchview.terminal.os.write") as write_mock:
            self.assertFalse(controller.release())
        write_mock.assert_not_called()

    def test_non_tty_stdin_skips_raw_mode(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            controller = TerminalController(stdin_fd=read_fd, stdout_fd=write_fd)
            with mock.patch("launchview.terminal.tty.setraw") as setraw_mock:
                controller.enable_raw_input()
        finally:
            os.close(read_fd)
            os.close(write_fd)

        self.assertFalse(controller.release())
        setraw_mock.assert_not_called()

    def test_get_size_falls_back_to_defaults(self) -> None:
        controller = _tty_controller()
        with mock.patch("launchview.terminal.os.get_terminal_size", side_effect=OSError):
            self.assertEqual(controller.get_size(), (24, 80))
        with mock.patch(
            "launchview.terminal.os.get_terminal_size", return_value=os.terminal_size((132, 50))
        ):
            self.assertEqual(controller.get_size(), (50, 132))
        with mock.patch("launchview.terminal.os.get_terminal_size", return_value=os.terminal_size((0, 0))):
            self.assertEqual(controller.get_size(), (24, 80))

    def test_draw_clears_and_writes_frame_in_one_call(self) -> None:
        controller = _tty_controller()
        with mock.patch("launchview.terminal.os.write") as write_mock:
            controller.draw(["one", "two", "three"])

        write_mock.assert_called_once_with(1, b"\x1b[2J\x1b[Hone\r\ntwo\r\nthree")


if __name__ == "__main__":
    unittest.main()
