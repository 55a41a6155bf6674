"""Fetch the published launch document over HTTP.

One synchronous request per command; there is no retry or pagination. Every
failure is surfaced as :class:`FetchError` so commands can report it before
the interactive browser is ever started.
"""

from __future__ import annotations

import logging

import httpx

from .config import FETCH_TIMEOUT_SECONDS, load_cdn_url
from .model import Launch, LaunchDataError, UpcomingLaunches, find_launch

logger = logging.getLogger(__name__)

UPCOMING_DOCUMENT = "upcoming.json"


class FetchError(RuntimeError):
    """Raised when launch data cannot be retrieved or decoded."""


def upcoming_url(base_url: str | None = None) -> str:
    base = (base_url or load_cdn_url()).rstrip("/")
    return f"{base}/{UPCOMING_DOCUMENT}"


def get_upcoming_launches(
    base_url: str | None = None,
    *,
    timeout: float = FETCH_TIMEOUT_SECONDS,
    client: httpx.Client | None = None,
) -> UpcomingLaunches:
    """Download and decode ``upcoming.json``.

    ``client`` lets callers (and tests) supply a preconfigured
    ``httpx.Client``; otherwise a short-lived one is created.
    """
    url = upcoming_url(base_url)
    logger.debug("fetching %s", url)
    try:
        if client is None:
            with httpx.Client(timeout=timeout, follow_redirects=True) as owned:
                response = owned.get(url)
        else:
            response = client.get(url, timeout=timeout)
    except httpx.TimeoutException as exc:
        raise FetchError(f"Request timed out after {int(timeout * 1000)}ms") from exc
    except httpx.HTTPError as exc:
        raise FetchError(f"Failed to fetch launch data ({exc})") from exc

    if not response.is_success:
        raise FetchError(f"Failed to fetch launch data (HTTP {response.status_code})")

    try:
        document = UpcomingLaunches.from_dict(response.json())
    except ValueError as exc:
        # json.JSONDecodeError and LaunchDataError are both ValueErrors.
        raise FetchError(f"Invalid launch data: {exc}") from exc
    logger.debug("received %d launches (updated %s)", len(document.launches), document.updated_at)
    return document


def get_launch_by_id(
    key: str,
    base_url: str | None = None,
    *,
    timeout: float = FETCH_TIMEOUT_SECONDS,
    client: httpx.Client | None = None,
) -> Launch | None:
    """Return the launch whose id or slug equals ``key``, or ``None``."""
    document = get_upcoming_launches(base_url, timeout=timeout, client=client)
    return find_launch(document.launches, key)


__all__ = [
    "FetchError",
    "LaunchDataError",
    "get_launch_by_id",
    "get_upcoming_launches",
    "upcoming_url",
]
