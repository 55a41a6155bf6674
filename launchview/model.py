"""Launch record types decoded from the published ``upcoming.json`` document.

The data pipeline flattens Launch Library responses into a small camelCase
JSON shape. These frozen dataclasses mirror it; nothing in the browser ever
mutates a record once it has been decoded.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime, timezone


class LaunchDataError(ValueError):
    """Raised when launch JSON does not have the expected shape."""


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp into an aware ``datetime``.

    A trailing ``Z`` is accepted and naive values are treated as UTC.
    """
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as exc:
        raise LaunchDataError(f"invalid timestamp: {value!r}") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _require(data: Mapping[str, object], key: str, kind: type | tuple[type, ...]):
    value = data.get(key)
    if not isinstance(value, kind) or (isinstance(value, bool) and kind is not bool):
        raise LaunchDataError(f"field {key!r} is missing or has the wrong type")
    return value


def _optional_str(data: Mapping[str, object], key: str) -> str | None:
    value = data.get(key)
    return value if isinstance(value, str) else None


def _mapping(value: object, what: str) -> Mapping[str, object]:
    if not isinstance(value, Mapping):
        raise LaunchDataError(f"{what} must be an object")
    return value


@dataclass(frozen=True)
class LaunchStatus:
    id: int
    name: str
    abbrev: str

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> LaunchStatus:
        return cls(
            id=_require(data, "id", int),
            name=_require(data, "name", str),
            abbrev=_require(data, "abbrev", str),
        )


@dataclass(frozen=True)
class Mission:
    name: str
    type: str
    description: str
    orbit: str | None = None
    orbit_abbrev: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Mission:
        return cls(
            name=_require(data, "name", str),
            type=_optional_str(data, "type") or "",
            description=_optional_str(data, "description") or "",
            orbit=_optional_str(data, "orbit"),
            orbit_abbrev=_optional_str(data, "orbitAbbrev"),
        )


@dataclass(frozen=True)
class Rocket:
    name: str
    variant: str
    family: str

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Rocket:
        return cls(
            name=_require(data, "name", str),
            variant=_optional_str(data, "variant") or "",
            family=_optional_str(data, "family") or "",
        )


@dataclass(frozen=True)
class Pad:
    name: str
    location: str
    latitude: float
    longitude: float

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Pad:
        return cls(
            name=_require(data, "name", str),
            location=_optional_str(data, "location") or "",
            latitude=float(_require(data, "latitude", (int, float))),
            longitude=float(_require(data, "longitude", (int, float))),
        )


@dataclass(frozen=True)
class Launch:
    """One upcoming launch. ``net`` is the "No Earlier Than" time (ISO-8601)."""

    id: str
    name: str
    slug: str
    status: LaunchStatus
    net: str
    window_start: str
    window_end: str
    mission: Mission | None
    rocket: Rocket
    pad: Pad
    image: str | None = None
    webcast_live: bool = False
    program: tuple[str, ...] = ()

    @property
    def net_datetime(self) -> datetime:
        return parse_timestamp(self.net)

    @property
    def display_name(self) -> str:
        """Mission name when known, otherwise the launch name."""
        if self.mission is not None:
            return self.mission.name
        return self.name

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Launch:
        raw_mission = data.get("mission")
        raw_program = data.get("program") or []
        if not isinstance(raw_program, list):
            raise LaunchDataError("field 'program' must be a list")
        net = _require(data, "net", str)
        parse_timestamp(net)
        return cls(
            id=_require(data, "id", str),
            name=_require(data, "name", str),
            slug=_optional_str(data, "slug") or "",
            status=LaunchStatus.from_dict(_mapping(data.get("status"), "status")),
            net=net,
            window_start=_optional_str(data, "windowStart") or net,
            window_end=_optional_str(data, "windowEnd") or net,
            mission=None if raw_mission is None else Mission.from_dict(_mapping(raw_mission, "mission")),
            rocket=Rocket.from_dict(_mapping(data.get("rocket"), "rocket")),
            pad=Pad.from_dict(_mapping(data.get("pad"), "pad")),
            image=_optional_str(data, "image"),
            webcast_live=data.get("webcastLive") is True,
            program=tuple(str(item) for item in raw_program),
        )


@dataclass(frozen=True)
class UpcomingLaunches:
    """The whole published document: launches plus the pipeline run time."""

    launches: tuple[Launch, ...]
    updated_at: str

    @classmethod
    def from_dict(cls, data: object) -> UpcomingLaunches:
        document = _mapping(data, "launch document")
        raw_launches = document.get("launches")
        if not isinstance(raw_launches, list):
            raise LaunchDataError("field 'launches' must be a list")
        launches = tuple(Launch.from_dict(_mapping(item, "launch")) for item in raw_launches)
        return cls(launches=launches, updated_at=_optional_str(document, "updatedAt") or "")


def sort_by_net(launches: Iterable[Launch]) -> tuple[Launch, ...]:
    """Return launches ordered ascending by NET as an immutable tuple."""
    return tuple(sorted(launches, key=lambda launch: launch.net_datetime))


def find_launch(launches: Iterable[Launch], key: str) -> Launch | None:
    """Look up a launch by id or slug."""
    for launch in launches:
        if launch.id == key or launch.slug == key:
            return launch
    return None
