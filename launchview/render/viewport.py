"""Scroll and viewport arithmetic shared by both browser views.

These helpers are pure: they never look at the terminal, only at the row
budget and content length handed to them.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderResult:
    """Lines for one full screen plus the scroll offset to persist."""

    lines: list[str]
    scroll_offset: int
    max_scroll: int


def visible_row_count(rows: int, header_lines: int, footer_lines: int) -> int:
    """Rows left for content after chrome, never less than one."""
    return max(1, rows - header_lines - footer_lines)


def max_scroll_offset(total_lines: int, visible_rows: int) -> int:
    return max(0, total_lines - visible_rows)


def clamp_scroll(offset: int, total_lines: int, visible_rows: int) -> int:
    """Clamp ``offset`` into ``[0, max(0, total_lines - visible_rows)]``."""
    return max(0, min(offset, max_scroll_offset(total_lines, visible_rows)))


def follow_selection(selected: int, offset: int, visible_rows: int) -> int:
    """Shift ``offset`` the minimum amount that keeps ``selected`` on screen."""
    if selected < offset:
        return selected
    if selected >= offset + visible_rows:
        return selected - visible_rows + 1
    return offset


def fit_to_rows(lines: list[str], rows: int) -> list[str]:
    """Pad with blank lines (or cut) so exactly ``rows`` lines are returned.

    Padding overwrites stale text left behind after the terminal shrinks.
    """
    rows = max(0, rows)
    if len(lines) >= rows:
        return lines[:rows]
    return lines + [""] * (rows - len(lines))
