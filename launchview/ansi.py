"""ANSI-aware text measurement and column shaping utilities.

Styled text carries escape sequences that occupy no terminal cells. These
helpers measure, clip, and pad by visible columns so table columns line up
regardless of colour codes and wide characters.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
RESET = "\033[0m"


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns and East Asian wide/fullwidth
    characters consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def visible_width(text: str) -> int:
    """Return display columns used by ``text`` with escape sequences ignored."""
    return sum(char_display_width(ch) for ch in strip_ansi(text))


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    ANSI escape sequences are preserved verbatim and do not count toward width.
    A reset is appended when clipping cut through styled text so colour does
    not bleed into the following cells.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    i = 0
    n = len(text)
    styled = False
    while i < n:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                styled = True
                i = match.end()
                continue
        w = char_display_width(text[i])
        if col + w > max_cols:
            if styled:
                out.append(RESET)
            return "".join(out)
        out.append(text[i])
        col += w
        i += 1

    return "".join(out)


def pad_ansi(text: str, width: int) -> str:
    """Fit a styled cell to exactly ``width`` visible columns.

    Longer text is clipped, shorter text is right-padded with spaces.
    """
    clipped = clip_ansi_line(text, width)
    return clipped + " " * max(0, width - visible_width(clipped))
