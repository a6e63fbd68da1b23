# tz_common.py
"""Offset oracles over the platform timezone databases.

An oracle answers one question: what is the (offset, daylight flag,
abbreviation) of a zone at a given instant. Instants are integer milliseconds
since the Unix epoch so that the transition search can bisect down to a
single tick.
"""
from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo
from importlib import metadata
from typing import NamedTuple, Protocol
import zoneinfo

import pytz

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
ONE_MILLI = timedelta(milliseconds=1)
ONE_DAY_MILLIS = 24 * 60 * 60 * 1000

MIN_YEAR = 1
MAX_YEAR = 9999

# astimezone() overflows for instants within an offset of the datetime limits,
# and no zone records a transition there, so those instants are read one day in.
_SAFE_MIN = datetime(MIN_YEAR, 1, 2, tzinfo=timezone.utc)
_SAFE_MAX = datetime(MAX_YEAR, 12, 30, tzinfo=timezone.utc)


class ZoneNotFound(LookupError):
    """The zone id is not known to the timezone database."""

    def __init__(self, zone_id: str):
        super().__init__(f"Unknown timezone: {zone_id!r}")
        self.zone_id = zone_id


class InvalidRange(ValueError):
    """The requested year range is empty or not representable."""


class ZoneState(NamedTuple):
    utc_offset_seconds: int
    is_daylight: bool
    abbreviation: str

    def same_as(self, other: ZoneState) -> bool:
        """Transition equality: the abbreviation is for display only."""
        return (self.utc_offset_seconds == other.utc_offset_seconds
                and self.is_daylight == other.is_daylight)


def instant_from_datetime(dt: datetime) -> int:
    return (dt - EPOCH) // ONE_MILLI


def datetime_from_instant(instant: int) -> datetime:
    return EPOCH + timedelta(milliseconds=instant)


def year_start(year: int) -> int:
    """Instant of midnight UTC on 1 January of `year`."""
    return instant_from_datetime(datetime(year, 1, 1, tzinfo=timezone.utc))


def _state_from_local(local: datetime) -> ZoneState:
    offset_td = local.utcoffset() or timedelta(0)
    dst_td = local.dst() or timedelta(0)
    return ZoneState(int(offset_td.total_seconds()), dst_td != timedelta(0), local.tzname() or "")


_SAFE_MIN_INSTANT = instant_from_datetime(_SAFE_MIN)
_SAFE_MAX_INSTANT = instant_from_datetime(_SAFE_MAX)


def _utc_datetime(instant: int) -> datetime:
    return datetime_from_instant(min(max(instant, _SAFE_MIN_INSTANT), _SAFE_MAX_INSTANT))


class OffsetOracle(Protocol):
    name: str

    def resolve_zone(self, zone_id: str) -> tzinfo: ...

    def state_at(self, zone: tzinfo, instant: int) -> ZoneState: ...

    def zone_ids(self) -> list[str]: ...

    def version(self) -> str: ...


class ZoneinfoOracle:
    """Python's own zoneinfo (system tz data, falling back to `tzdata`)."""

    name = "zoneinfo"

    def resolve_zone(self, zone_id: str) -> tzinfo:
        try:
            return zoneinfo.ZoneInfo(zone_id)
        except (zoneinfo.ZoneInfoNotFoundError, ValueError, OSError) as e:
            raise ZoneNotFound(zone_id) from e

    def state_at(self, zone: tzinfo, instant: int) -> ZoneState:
        return _state_from_local(_utc_datetime(instant).astimezone(zone))

    def zone_ids(self) -> list[str]:
        return sorted(zoneinfo.available_timezones())

    def version(self) -> str:
        try:
            return metadata.version("tzdata")
        except metadata.PackageNotFoundError:
            return "system"


class PytzOracle:
    """pytz with its bundled Olson database."""

    name = "pytz"

    def resolve_zone(self, zone_id: str) -> tzinfo:
        try:
            return pytz.timezone(zone_id)
        except pytz.UnknownTimeZoneError as e:
            raise ZoneNotFound(zone_id) from e

    def state_at(self, zone: tzinfo, instant: int) -> ZoneState:
        # pytz zones implement fromutc(), so astimezone() picks the right period
        return _state_from_local(_utc_datetime(instant).astimezone(zone))

    def zone_ids(self) -> list[str]:
        return sorted(pytz.all_timezones)

    def version(self) -> str:
        return pytz.OLSON_VERSION


ORACLES = {
    ZoneinfoOracle.name: ZoneinfoOracle,
    PytzOracle.name: PytzOracle,
}


def get_oracle(name: str) -> OffsetOracle:
    try:
        return ORACLES[name]()
    except KeyError:
        raise ValueError(f"Unknown timezone source {name!r}; choose from {', '.join(sorted(ORACLES))}") from None
