"""Handlers behind each ``launchview`` subcommand.

Each handler fetches once, prints, and returns. Fetch and decode failures are
reported here, before the interactive browser could ever take the terminal.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import NoReturn

from . import config
from .client import FetchError, get_launch_by_id, get_upcoming_launches
from .formatters import format_launch_detail, format_launch_table
from .model import LaunchDataError, parse_timestamp, sort_by_net
from .runtime import start_app
from .ui_theme import DEFAULT_THEME, UITheme

logger = logging.getLogger(__name__)


def _fail(message: str, theme: UITheme) -> NoReturn:
    print(theme.paint(theme.error, f"\n  Error: {message}\n"), file=sys.stderr)
    raise SystemExit(1)


def _card_header(title: str, theme: UITheme) -> None:
    print("")
    print(theme.paint(theme.title, f"  {title}"))
    print(theme.paint(theme.dim, f"  {'─' * 40}"))
    print("")


def _updated_footer(updated_at: str, theme: UITheme) -> None:
    if not updated_at:
        return
    try:
        stamp = parse_timestamp(updated_at).astimezone(timezone.utc)
        text = stamp.strftime("%a, %d %b %Y %H:%M:%S GMT")
    except LaunchDataError:
        text = updated_at
    print("")
    print(theme.paint(theme.dim, f"  Data updated: {text}"))
    print("")


def next_command(
    *,
    use_local_time: bool = False,
    base_url: str | None = None,
    theme: UITheme = DEFAULT_THEME,
    now: datetime | None = None,
) -> None:
    """Show the earliest upcoming launch with a countdown."""
    try:
        document = get_upcoming_launches(base_url)
    except FetchError as exc:
        _fail(str(exc), theme)

    launches = sort_by_net(document.launches)
    if not launches:
        print(theme.paint(theme.warning, "\n  No upcoming SpaceX launches found.\n"))
        return

    _card_header("Next SpaceX Launch", theme)
    print(format_launch_detail(launches[0], use_local_time, now=now, theme=theme))
    _updated_footer(document.updated_at, theme)


def list_command(
    *,
    limit: int = 10,
    use_local_time: bool = False,
    base_url: str | None = None,
    theme: UITheme = DEFAULT_THEME,
) -> None:
    """Print a table of the next ``limit`` launches."""
    if limit < 1:
        _fail("--limit must be a positive number", theme)
    try:
        document = get_upcoming_launches(base_url)
    except FetchError as exc:
        _fail(str(exc), theme)

    launches = sort_by_net(document.launches)[:limit]
    print("")
    print(theme.paint(theme.title, "  Upcoming SpaceX Launches"))
    print("")
    print(format_launch_table(launches, use_local_time, theme))
    _updated_footer(document.updated_at, theme)


def detail_command(
    launch_id: str,
    *,
    use_local_time: bool = False,
    base_url: str | None = None,
    theme: UITheme = DEFAULT_THEME,
    now: datetime | None = None,
) -> None:
    """Print the full card for the launch whose id or slug is ``launch_id``."""
    try:
        launch = get_launch_by_id(launch_id, base_url)
    except FetchError as exc:
        _fail(str(exc), theme)

    if launch is None:
        print(theme.paint(theme.error, f'\n  Error: No launch found with ID or slug "{launch_id}"\n'), file=sys.stderr)
        print(theme.paint(theme.dim, "  Tip: Use `launchview list` to see available launches and their IDs.\n"))
        raise SystemExit(1)

    _card_header("Launch Details", theme)
    print(format_launch_detail(launch, use_local_time, now=now, theme=theme))
    print("")


def browse_command(
    *,
    use_local_time: bool = False,
    base_url: str | None = None,
    theme: UITheme = DEFAULT_THEME,
) -> None:
    """Fetch once, then hand the sorted launches to the interactive browser."""
    sys.stdout.write(theme.paint(theme.dim, "\n  Loading launch data...\n"))
    sys.stdout.flush()
    try:
        document = get_upcoming_launches(base_url)
    except FetchError as exc:
        _fail(str(exc), theme)

    if not document.launches:
        print(theme.paint(theme.warning, "\n  No upcoming SpaceX launches found.\n"))
        return

    logger.debug("fetched %d launches; handing over to the browser", len(document.launches))
    start_app(sort_by_net(document.launches), use_local_time, theme)


def config_command(
    *,
    use_local_time: bool | None = None,
    theme_name: str | None = None,
    cdn_url: str | None = None,
) -> None:
    """Persist preferences, then print the effective configuration."""
    if use_local_time is not None:
        config.save_use_local_time(use_local_time)
    if theme_name is not None:
        config.save_theme_name(theme_name)
    if cdn_url is not None:
        config.save_cdn_url(cdn_url)

    print(f"config file: {config.CONFIG_PATH}")
    print(f"data url:    {config.load_cdn_url()}")
    print(f"local time:  {'yes' if config.load_use_local_time() else 'no'}")
    print(f"theme:       {config.load_theme_name() or DEFAULT_THEME.name}")
