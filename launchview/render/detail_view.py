"""Detail view: the full card for one launch, scrollable when it overflows."""

from __future__ import annotations

from datetime import datetime

from ..ansi import clip_ansi_line
from ..formatters import format_launch_detail
from ..model import Launch
from ..ui_theme import DEFAULT_THEME, UITheme
from .viewport import RenderResult, clamp_scroll, fit_to_rows, max_scroll_offset, visible_row_count

# Blank, title, separator, blank.
HEADER_LINES = 4
# Blank, navigation hints, blank.
FOOTER_LINES = 3

TITLE = "Launch Details"


def render_detail_view(
    launch: Launch,
    scroll_offset: int,
    rows: int,
    cols: int,
    use_local_time: bool = False,
    theme: UITheme = DEFAULT_THEME,
    now: datetime | None = None,
) -> RenderResult:
    """Build the detail screen and the clamped scroll offset."""
    content = format_launch_detail(launch, use_local_time, now=now, theme=theme).split("\n")
    visible_rows = visible_row_count(rows, HEADER_LINES, FOOTER_LINES)
    scroll_offset = clamp_scroll(scroll_offset, len(content), visible_rows)

    lines = [
        "",
        theme.paint(theme.title, clip_ansi_line(f"  {TITLE}", cols)),
        theme.paint(theme.dim, clip_ansi_line(f"  {'─' * 40}", cols)),
        "",
    ]
    window = content[scroll_offset : scroll_offset + visible_rows]
    lines.extend(clip_ansi_line(line, cols) for line in window)
    lines.extend([""] * (visible_rows - len(window)))

    scroll_hint = f"  {theme.paint(theme.dim, '↑↓')} Scroll  " if len(content) > visible_rows else "  "
    footer = f"  {theme.paint(theme.dim, 'Esc/Backspace')} Back to list  {scroll_hint}{theme.paint(theme.dim, 'q')} Quit"
    lines.append("")
    lines.append(clip_ansi_line(footer, cols))
    lines.append("")

    return RenderResult(
        lines=fit_to_rows(lines, rows),
        scroll_offset=scroll_offset,
        max_scroll=max_scroll_offset(len(content), visible_rows),
    )
