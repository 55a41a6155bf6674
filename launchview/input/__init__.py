"""Input-layer public API: raw key decoding and the keyboard event source."""

from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, UNKNOWN_KEY, KeyEvent, read_key
from .source import InputSource

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "UNKNOWN_KEY",
    "KeyEvent",
    "InputSource",
]
