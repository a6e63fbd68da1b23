# transitions.py
"""Find offset transitions using nothing but point queries against an oracle."""
from __future__ import annotations

from datetime import tzinfo
from typing import Iterator, NamedTuple

from .tz_common import (
    MAX_YEAR,
    MIN_YEAR,
    ONE_DAY_MILLIS,
    InvalidRange,
    OffsetOracle,
    ZoneState,
    year_start,
)

# Given the way transitions are found, scanning from any earlier is slow and
# the platform data is unreliable that far back anyway.
MIN_SUPPORTED_YEAR = 1800


class Transition(NamedTuple):
    instant: int
    state: ZoneState


class ZoneHistory(NamedTuple):
    zone_id: str
    initial: ZoneState
    transitions: Iterator[Transition]


def find_next_transition(oracle: OffsetOracle, zone: tzinfo, after: int, end: int) -> int | None:
    """Return the first instant after `after` where the zone's state changes.

    Days are checked one at a time up to and including `end`, assuming no more
    than one transition per day; a second change within the same day is never
    seen. Once a day containing a change is found, a binary search pins down
    the exact instant. A change landing exactly on `end` is not reported.
    """
    start_state = oracle.state_at(zone, after)

    now = after + ONE_DAY_MILLIS
    # Inclusive upper bound so transitions within the last day are found.
    while now <= end:
        if not oracle.state_at(zone, now).same_as(start_state):
            # The change lies in (now - ONE_DAY_MILLIS, now].
            upper_inclusive = now
            lower_exclusive = now - ONE_DAY_MILLIS
            while upper_inclusive > lower_exclusive + 1:
                candidate = (upper_inclusive + lower_exclusive) // 2
                if oracle.state_at(zone, candidate).same_as(start_state):
                    lower_exclusive = candidate
                else:
                    upper_inclusive = candidate
            return None if upper_inclusive == end else upper_inclusive
        now += ONE_DAY_MILLIS
    return None


def _check_range(from_year: int, to_year: int, min_year: int) -> None:
    for year in (from_year, to_year, min_year):
        if not MIN_YEAR <= year <= MAX_YEAR:
            raise InvalidRange(f"Year {year} is outside {MIN_YEAR}-{MAX_YEAR}")
    if from_year >= to_year:
        raise InvalidRange(f"From year {from_year} must be before to year {to_year}")


def _iter_transitions(oracle: OffsetOracle, zone: tzinfo, start: int, end: int) -> Iterator[Transition]:
    transition = find_next_transition(oracle, zone, start - 1, end)
    while transition is not None:
        yield Transition(transition, oracle.state_at(zone, transition))
        transition = find_next_transition(oracle, zone, transition, end)


def list_transitions(
    oracle: OffsetOracle,
    zone_id: str,
    from_year: int,
    to_year: int,
    min_year: int = MIN_SUPPORTED_YEAR,
) -> ZoneHistory:
    """Resolve `zone_id` and describe its transitions in [from_year, to_year).

    The range check and zone lookup happen immediately; the transitions
    themselves are computed lazily as the returned iterator is consumed.
    """
    _check_range(from_year, to_year, min_year)
    zone = oracle.resolve_zone(zone_id)

    if from_year < min_year:
        from_year = min_year
    start = year_start(from_year)
    end = year_start(to_year)
    early = year_start(MIN_YEAR)

    initial = oracle.state_at(zone, early)
    return ZoneHistory(zone_id, initial, _iter_transitions(oracle, zone, start, end))
