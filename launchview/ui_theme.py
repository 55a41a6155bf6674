"""UI theme definitions and selection helpers.

Themes are ANSI palettes shared by the static command output and the
interactive browser. The ``plain`` theme emits no escape sequences at all.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by formatters and renderers."""

    name: str
    reset: str
    reverse: str
    title: str
    heading: str
    dim: str
    label: str
    marker: str
    error: str
    warning: str
    status_go: str
    status_tbc: str
    status_tbd: str
    status_hold: str
    status_success: str
    status_failure: str
    countdown_future: str
    countdown_past: str

    def paint(self, style: str, text: str) -> str:
        """Wrap ``text`` in ``style`` and a reset; no-op when the style is empty."""
        if not style:
            return text
        return f"{style}{text}{self.reset}"


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    reverse="\033[7m",
    title="\033[1;36m",
    heading="\033[1;37m",
    dim="\033[2m",
    label="\033[2m",
    marker="\033[36m",
    error="\033[31m",
    warning="\033[33m",
    status_go="\033[1;32m",
    status_tbc="\033[33m",
    status_tbd="\033[90m",
    status_hold="\033[31m",
    status_success="\033[32m",
    status_failure="\033[1;31m",
    countdown_future="\033[32m",
    countdown_past="\033[33m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    reverse="",
    title="",
    heading="",
    dim="",
    label="",
    marker="",
    error="",
    warning="",
    status_go="",
    status_tbc="",
    status_tbd="",
    status_hold="",
    status_success="",
    status_failure="",
    countdown_future="",
    countdown_past="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    PLAIN_THEME.name: PLAIN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    return tuple(_THEMES)


def get_theme(name: str | None) -> UITheme:
    """Resolve a theme by name, falling back to the default palette."""
    if not name:
        return DEFAULT_THEME
    return _THEMES.get(name.strip().lower(), DEFAULT_THEME)


def resolve_theme(name: str | None, *, no_color: bool = False, stream_is_tty: bool = True) -> UITheme:
    """Pick the palette for this run.

    ``--no-color``, a non-empty ``NO_COLOR`` environment variable, or output
    that is not a terminal all force the plain theme.
    """
    if no_color or os.environ.get("NO_COLOR") or not stream_is_tty:
        return PLAIN_THEME
    return get_theme(name)
