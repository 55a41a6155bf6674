"""Pure text formatting for launch data.

Used by the one-shot commands and by both browser views. Every function is a
deterministic transform of its arguments; the current time and the palette
are passed in explicitly where they matter.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone

from .ansi import pad_ansi
from .model import Launch, LaunchStatus, parse_timestamp
from .ui_theme import DEFAULT_THEME, UITheme

DESCRIPTION_WRAP_WIDTH = 74
TABLE_DATE_WIDTH = 22
TABLE_STATUS_WIDTH = 14
TABLE_ROCKET_WIDTH = 20


def _now(now: datetime | None) -> datetime:
    return now if now is not None else datetime.now(timezone.utc)


def _display_time(value: str | datetime, use_local_time: bool) -> datetime:
    moment = parse_timestamp(value) if isinstance(value, str) else value
    if use_local_time:
        return moment.astimezone()
    return moment.astimezone(timezone.utc)


def _zone_label(moment: datetime) -> str:
    return moment.tzname() or "UTC"


def format_duration(total_seconds: float) -> str:
    """Render a non-negative duration as ``"2d 5h 32m 10s"``.

    Zero-valued components are omitted; a zero duration reads ``"0s"``.
    """
    seconds = int(max(0, total_seconds))
    minutes, secs = divmod(seconds, 60)
    hours, mins = divmod(minutes, 60)
    days, hrs = divmod(hours, 24)

    parts: list[str] = []
    if days > 0:
        parts.append(f"{days}d")
    if hrs > 0:
        parts.append(f"{hrs}h")
    if mins > 0:
        parts.append(f"{mins}m")
    if secs > 0 or not parts:
        parts.append(f"{secs}s")
    return " ".join(parts)


def format_countdown(net: str, now: datetime | None = None, theme: UITheme = DEFAULT_THEME) -> str:
    """Return ``T- …`` until a future NET or ``T+ …`` since a past one."""
    remaining = (parse_timestamp(net) - _now(now)).total_seconds()
    if remaining <= 0:
        return theme.paint(theme.countdown_past, f"T+ {format_duration(-remaining)}")
    return theme.paint(theme.countdown_future, f"T- {format_duration(remaining)}")


def _status_style(abbrev: str, theme: UITheme) -> str:
    return {
        "Go": theme.status_go,
        "TBC": theme.status_tbc,
        "TBD": theme.status_tbd,
        "Hold": theme.status_hold,
        "Success": theme.status_success,
        "Failure": theme.status_failure,
    }.get(abbrev, "")


def format_status(status: LaunchStatus, theme: UITheme = DEFAULT_THEME) -> str:
    """Colour the status display name by its short code."""
    return theme.paint(_status_style(status.abbrev, theme), status.name)


def format_status_short(status: LaunchStatus, theme: UITheme = DEFAULT_THEME) -> str:
    """Same colouring as :func:`format_status`, showing the short code."""
    return theme.paint(_status_style(status.abbrev, theme), status.abbrev)


def format_date(value: str | datetime, use_local_time: bool = False) -> str:
    """Long date, e.g. ``"Mar 1, 2026 at 12:00 UTC"``."""
    moment = _display_time(value, use_local_time)
    return f"{moment:%b} {moment.day}, {moment.year} at {moment:%H:%M} {_zone_label(moment)}"


def format_date_short(value: str | datetime, use_local_time: bool = False) -> str:
    """Table date, e.g. ``"Mar 1, 12:00 UTC"``."""
    moment = _display_time(value, use_local_time)
    return f"{moment:%b} {moment.day}, {moment:%H:%M} {_zone_label(moment)}"


def word_wrap(text: str, width: int) -> list[str]:
    """Greedy word wrap; runs of whitespace collapse to single spaces."""
    lines: list[str] = []
    current = ""
    for word in text.split():
        if current and len(current) + len(word) + 1 > width:
            lines.append(current)
            current = word
        else:
            current = f"{current} {word}" if current else word
    if current:
        lines.append(current)
    return lines


def _field(theme: UITheme, label: str, value: str) -> str:
    return f"  {theme.paint(theme.label, label.ljust(10))} {value}"


def format_launch_detail(
    launch: Launch,
    use_local_time: bool = False,
    now: datetime | None = None,
    theme: UITheme = DEFAULT_THEME,
) -> str:
    """Multi-line detail card for one launch."""
    lines: list[str] = [
        theme.paint(theme.heading, f"  {launch.name}"),
        "",
        _field(theme, "Status:", format_status(launch.status, theme)),
        _field(theme, "NET:", format_date(launch.net, use_local_time)),
        _field(theme, "Countdown:", format_countdown(launch.net, now, theme)),
    ]
    if launch.window_start != launch.window_end:
        window_start = format_date_short(launch.window_start, use_local_time)
        window_end = format_date_short(launch.window_end, use_local_time)
        lines.append(_field(theme, "Window:", f"{window_start} - {window_end}"))
    lines.append(_field(theme, "Rocket:", launch.rocket.name))
    lines.append(_field(theme, "Pad:", launch.pad.name))
    lines.append(_field(theme, "Location:", launch.pad.location))
    lines.append(_field(theme, "Coords:", f"{launch.pad.latitude:.4f}, {launch.pad.longitude:.4f}"))

    mission = launch.mission
    if mission is not None:
        lines.append("")
        lines.append(_field(theme, "Mission:", mission.name))
        lines.append(_field(theme, "Type:", mission.type))
        if mission.orbit:
            orbit = mission.orbit
            if mission.orbit_abbrev:
                orbit = f"{orbit} ({mission.orbit_abbrev})"
            lines.append(_field(theme, "Orbit:", orbit))
        if mission.description:
            lines.append("")
            for wrapped in word_wrap(mission.description, DESCRIPTION_WRAP_WIDTH):
                lines.append(f"  {theme.paint(theme.dim, wrapped)}")

    if launch.program:
        lines.append("")
        lines.append(_field(theme, "Program:", ", ".join(launch.program)))

    if launch.webcast_live:
        lines.append(_field(theme, "Webcast:", "Live"))
    if launch.image:
        lines.append(_field(theme, "Image:", launch.image))

    lines.append("")
    lines.append(_field(theme, "ID:", launch.id))
    return "\n".join(lines)


def format_launch_table(
    launches: Sequence[Launch],
    use_local_time: bool = False,
    theme: UITheme = DEFAULT_THEME,
) -> str:
    """Static table for the ``list`` command."""
    if not launches:
        return theme.paint(theme.warning, "  No upcoming launches found.")

    header = (
        f"  {pad_ansi('Date', TABLE_DATE_WIDTH)} {pad_ansi('Status', TABLE_STATUS_WIDTH)} "
        f"{pad_ansi('Rocket', TABLE_ROCKET_WIDTH)} Mission"
    )
    lines = [theme.paint(theme.heading, header), theme.paint(theme.dim, f"  {'─' * 76}")]
    for launch in launches:
        date = format_date_short(launch.net, use_local_time)
        status = format_status_short(launch.status, theme)
        lines.append(
            f"  {pad_ansi(date, TABLE_DATE_WIDTH)} {pad_ansi(status, TABLE_STATUS_WIDTH)} "
            f"{pad_ansi(launch.rocket.name, TABLE_ROCKET_WIDTH)} {launch.display_name}"
        )
    lines.append("")
    lines.append(theme.paint(theme.dim, f"  {len(launches)} upcoming launches"))
    return "\n".join(lines)
