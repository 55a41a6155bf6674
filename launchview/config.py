"""Persistent JSON config helpers.

Stores the data URL, the UTC/local-time preference, and the UI theme name.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "launchview"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_CDN_URL = "https://paul2234.github.io/spacex-launches-cli-data"
CDN_URL_ENV = "SPACEX_CLI_CDN_URL"
FETCH_TIMEOUT_SECONDS = 10.0


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are ignored so an unwritable config directory never
    breaks a command.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def _load_str(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_cdn_url() -> str:
    """Resolve the base URL for ``upcoming.json``.

    The environment variable wins over the config file, which wins over the
    built-in default. Trailing slashes are dropped.
    """
    env_value = os.environ.get(CDN_URL_ENV, "").strip()
    url = env_value or _load_str("cdn_url") or DEFAULT_CDN_URL
    return url.rstrip("/")


def save_cdn_url(url: str) -> None:
    stripped = str(url).strip()
    if not stripped:
        return
    config = load_config()
    config["cdn_url"] = stripped
    save_config(config)


def load_use_local_time() -> bool:
    """Return the persisted local-time preference.

    Only explicit boolean values are accepted; anything else means UTC.
    """
    value = load_config().get("local_time")
    return bool(value) if isinstance(value, bool) else False


def save_use_local_time(use_local_time: bool) -> None:
    config = load_config()
    config["local_time"] = bool(use_local_time)
    save_config(config)


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    return _load_str("theme")


def save_theme_name(theme_name: str) -> None:
    stripped = str(theme_name).strip()
    if not stripped:
        return
    config = load_config()
    config["theme"] = stripped
    save_config(config)
