"""Dump timezone offset transitions as reported by a platform tz database."""
from .tz_common import (
    ONE_DAY_MILLIS,
    InvalidRange,
    OffsetOracle,
    PytzOracle,
    ZoneinfoOracle,
    ZoneNotFound,
    ZoneState,
    get_oracle,
)
from .transitions import (
    MIN_SUPPORTED_YEAR,
    Transition,
    ZoneHistory,
    find_next_transition,
    list_transitions,
)

__all__ = [
    "ONE_DAY_MILLIS",
    "MIN_SUPPORTED_YEAR",
    "InvalidRange",
    "OffsetOracle",
    "PytzOracle",
    "Transition",
    "ZoneHistory",
    "ZoneNotFound",
    "ZoneState",
    "ZoneinfoOracle",
    "find_next_transition",
    "get_oracle",
    "list_transitions",
]
