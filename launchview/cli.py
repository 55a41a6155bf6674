"""Command-line front door for launchview.

Parses global options and the subcommand, resolves config-backed defaults,
configures logging, and dispatches into ``launchview.commands``.
"""

from __future__ import annotations

import argparse
import logging
import sys

from . import commands, config
from .ui_theme import available_theme_names, resolve_theme

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _on_off(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in {"on", "yes", "true", "1"}:
        return True
    if lowered in {"off", "no", "false", "0"}:
        return False
    raise argparse.ArgumentTypeError(f"expected on/off, got {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="launchview",
        description="Track upcoming SpaceX launches from the command line.",
    )
    parser.add_argument(
        "--local",
        action="store_true",
        default=None,
        help="Show launch times in your local timezone instead of UTC.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on a TTY.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--cdn-url", default=None, help="Base URL serving upcoming.json.")
    parser.add_argument("--debug", action="store_true", help="Log debug output to stderr.")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.add_parser("next", help="Show the next upcoming launch with a countdown.")
    list_parser = subparsers.add_parser("list", help="List upcoming launches.")
    list_parser.add_argument(
        "-l",
        "--limit",
        type=_positive_int,
        default=10,
        help="Number of launches to show (default: 10).",
    )
    detail_parser = subparsers.add_parser("detail", help="Show full details for one launch.")
    detail_parser.add_argument("id", help="Launch ID or slug.")
    subparsers.add_parser("browse", help="Browse launches interactively (default).")
    config_parser = subparsers.add_parser("config", help="Show or change saved preferences.")
    config_parser.add_argument("--local-time", type=_on_off, default=None, metavar="on|off")
    # Same spellings as the global options; separate dests keep the two apart.
    config_parser.add_argument("--theme", dest="config_theme", default=None, choices=available_theme_names())
    config_parser.add_argument("--cdn-url", dest="config_cdn_url", default=None, metavar="URL")
    return parser


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and run the selected subcommand (``browse`` by default)."""
    args = build_parser().parse_args(argv)
    configure_logging(args.debug)

    if args.command == "config":
        commands.config_command(
            use_local_time=args.local_time,
            theme_name=args.config_theme,
            cdn_url=args.config_cdn_url,
        )
        return

    use_local_time = args.local if args.local is not None else config.load_use_local_time()
    theme = resolve_theme(
        args.theme or config.load_theme_name(),
        no_color=args.no_color,
        stream_is_tty=sys.stdout.isatty(),
    )
    base_url = args.cdn_url

    if args.command == "next":
        commands.next_command(use_local_time=use_local_time, base_url=base_url, theme=theme)
    elif args.command == "list":
        commands.list_command(limit=args.limit, use_local_time=use_local_time, base_url=base_url, theme=theme)
    elif args.command == "detail":
        commands.detail_command(args.id, use_local_time=use_local_time, base_url=base_url, theme=theme)
    else:
        commands.browse_command(use_local_time=use_local_time, base_url=base_url, theme=theme)


if __name__ == "__main__":
    main()
