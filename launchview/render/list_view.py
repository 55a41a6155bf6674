"""List view: a scrollable, selectable table of upcoming launches.

The selected row is highlighted and the viewport follows the selection so it
always stays visible.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..ansi import clip_ansi_line, pad_ansi, strip_ansi
from ..formatters import format_date_short, format_status_short
from ..model import Launch
from ..ui_theme import DEFAULT_THEME, UITheme
from .viewport import RenderResult, clamp_scroll, fit_to_rows, follow_selection, max_scroll_offset, visible_row_count

# Blank, title, blank, column header.
HEADER_LINES = 4
# Blank, navigation hints, blank.
FOOTER_LINES = 3

TITLE = "Upcoming SpaceX Launches"
DATE_WIDTH = 22
STATUS_WIDTH = 10
ROCKET_WIDTH = 20
SELECTED_MARKER = "▶ "


def _row_text(launch: Launch, use_local_time: bool, theme: UITheme) -> str:
    date = format_date_short(launch.net, use_local_time)
    status = format_status_short(launch.status, theme)
    return (
        f"{pad_ansi(date, DATE_WIDTH)} {pad_ansi(status, STATUS_WIDTH)} "
        f"{pad_ansi(launch.rocket.name, ROCKET_WIDTH)} {launch.display_name}"
    )


def _table_row(launch: Launch, selected: bool, cols: int, use_local_time: bool, theme: UITheme) -> str:
    body = _row_text(launch, use_local_time, theme)
    if not selected:
        return clip_ansi_line(f"  {body}", cols)
    # Inner styles would cancel the reverse-video bar, so the bar is drawn plain.
    bar = pad_ansi(f"{SELECTED_MARKER}{strip_ansi(body)}", cols)
    return theme.paint(theme.reverse, bar)


def _footer(scroll_offset: int, visible_rows: int, total: int, cols: int, theme: UITheme) -> str:
    if total > visible_rows:
        end = min(scroll_offset + visible_rows, total)
        scroll_info = theme.paint(theme.dim, f"  {scroll_offset + 1}-{end} of {total}")
    else:
        scroll_info = theme.paint(theme.dim, f"  {total} launches")
    hints = (
        f"  {theme.paint(theme.dim, '↑↓')} Navigate  {theme.paint(theme.dim, 'Enter')} View details  "
        f"{theme.paint(theme.dim, 'q')} Quit  {scroll_info}"
    )
    return clip_ansi_line(hints, cols)


def render_list_view(
    launches: Sequence[Launch],
    selected_index: int,
    scroll_offset: int,
    rows: int,
    cols: int,
    use_local_time: bool = False,
    theme: UITheme = DEFAULT_THEME,
) -> RenderResult:
    """Build the list screen and the adjusted scroll offset."""
    total = len(launches)
    visible_rows = visible_row_count(rows, HEADER_LINES, FOOTER_LINES)
    scroll_offset = follow_selection(selected_index, scroll_offset, visible_rows)
    scroll_offset = clamp_scroll(scroll_offset, total, visible_rows)

    column_header = (
        f"    {pad_ansi('Date', DATE_WIDTH)} {pad_ansi('Status', STATUS_WIDTH)} "
        f"{pad_ansi('Rocket', ROCKET_WIDTH)} Mission"
    )
    lines = [
        "",
        theme.paint(theme.title, clip_ansi_line(f"  {TITLE}", cols)),
        "",
        theme.paint(theme.heading, clip_ansi_line(column_header, cols)),
    ]

    window = launches[scroll_offset : scroll_offset + visible_rows]
    for offset, launch in enumerate(window):
        selected = scroll_offset + offset == selected_index
        lines.append(_table_row(launch, selected, cols, use_local_time, theme))
    lines.extend([""] * (visible_rows - len(window)))

    lines.append("")
    lines.append(_footer(scroll_offset, visible_rows, total, cols, theme))
    lines.append("")

    return RenderResult(
        lines=fit_to_rows(lines, rows),
        scroll_offset=scroll_offset,
        max_scroll=max_scroll_offset(total, visible_rows),
    )
