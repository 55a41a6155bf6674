"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into :class:`KeyEvent` values.
Handles ESC-sequence timing, CSI/SS3 navigation keys, and modifier flags.
"""

from __future__ import annotations

import os
import select
from dataclasses import dataclass, replace

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []

_CSI_FINAL_KEYS = {
    b"A": "up",
    b"B": "down",
    b"C": "right",
    b"D": "left",
    b"H": "home",
    b"F": "end",
}
_CSI_TILDE_KEYS = {
    "1": "home",
    "2": "insert",
    "3": "delete",
    "4": "end",
    "5": "pageup",
    "6": "pagedown",
    "7": "home",
    "8": "end",
    "11": "f1",
    "12": "f2",
    "13": "f3",
    "14": "f4",
    "15": "f5",
    "17": "f6",
    "18": "f7",
    "19": "f8",
    "20": "f9",
    "21": "f10",
    "23": "f11",
    "24": "f12",
}
_SS3_KEYS = {
    **_CSI_FINAL_KEYS,
    b"P": "f1",
    b"Q": "f2",
    b"R": "f3",
    b"S": "f4",
}
_SINGLE_BYTE_KEYS = {
    b"\r": "return",
    b"\n": "enter",
    b"\t": "tab",
    b"\x7f": "backspace",
    b"\x08": "backspace",
    b" ": "space",
}


@dataclass(frozen=True)
class KeyEvent:
    """One decoded keypress.

    ``meta`` marks a key sent with an ESC prefix (Alt+key). A complete escape
    sequence with no known meaning decodes to ``UNKNOWN_KEY``; ``"escape"`` is
    reserved for a lone ESC or a sequence cut off by the timeout.
    """

    name: str
    ctrl: bool = False
    shift: bool = False
    meta: bool = False


UNKNOWN_KEY = "unknown"


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _apply_modifier(name: str, modifier: str) -> KeyEvent:
    """Map an xterm modifier parameter (``1;2A`` style) onto flags."""
    try:
        code = int(modifier) - 1
    except ValueError:
        return KeyEvent(name)
    return KeyEvent(name, ctrl=bool(code & 4), shift=bool(code & 1), meta=bool(code & 2))


def _read_csi(fd: int) -> KeyEvent:
    params: list[bytes] = []
    while True:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return KeyEvent("escape")
        if b"0" <= part <= b"9" or part == b";":
            params.append(part)
            if len(params) > 16:
                return KeyEvent(UNKNOWN_KEY)
            continue
        break

    fields = b"".join(params).decode("ascii").split(";")
    modifier = fields[1] if len(fields) > 1 else ""
    if part == b"~":
        name = _CSI_TILDE_KEYS.get(fields[0])
    elif part == b"Z":
        # Back-tab is Shift+Tab.
        return KeyEvent("tab", shift=True)
    else:
        name = _CSI_FINAL_KEYS.get(part)
    if name is None:
        return KeyEvent(UNKNOWN_KEY)
    return _apply_modifier(name, modifier) if modifier else KeyEvent(name)


def _decode_plain(ch: bytes, fd: int) -> KeyEvent:
    named = _SINGLE_BYTE_KEYS.get(ch)
    if named is not None:
        return KeyEvent(named)
    code = ch[0]
    if 1 <= code <= 26:
        return KeyEvent(chr(code + ord("a") - 1), ctrl=True)
    if code < 0x80:
        text = ch.decode("ascii")
        if "A" <= text <= "Z":
            return KeyEvent(text.lower(), shift=True)
        return KeyEvent(text)

    # Multi-byte UTF-8: the lead byte tells how many continuation bytes follow.
    extra = 3 if code >= 0xF0 else 2 if code >= 0xE0 else 1
    buf = bytearray(ch)
    for _ in range(extra):
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            break
        buf += nxt
    return KeyEvent(bytes(buf).decode("utf-8", errors="replace"))


def read_key(fd: int, timeout_ms: int | None = None) -> KeyEvent | None:
    """Read and decode one keypress from ``fd``.

    Returns ``None`` when ``timeout_ms`` elapses without input and raises
    ``EOFError`` once the stream is exhausted.
    """
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return None

        ch = os.read(fd, 1)
        if not ch:
            raise EOFError("input stream closed")

    if ch != b"\x1b":
        return _decode_plain(ch, fd)

    # Escape / navigation key sequences.
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return KeyEvent("escape")
    if seq == b"[":
        return _read_csi(fd)
    if seq == b"O":
        final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if final is None:
            return KeyEvent("escape")
        name = _SS3_KEYS.get(final)
        return KeyEvent(name) if name is not None else KeyEvent(UNKNOWN_KEY)
    if seq == b"\x1b":
        # Two escapes in a row: report the first, decode the second next time.
        _PENDING_BYTES.append(seq)
        return KeyEvent("escape")
    # ESC followed by any other byte is how terminals send Alt+key.
    return replace(_decode_plain(seq, fd), meta=True)
