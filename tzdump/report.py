# report.py
"""Canonical text layout for transition dumps."""
from __future__ import annotations

import hashlib
from typing import Iterable

from .transitions import ZoneHistory
from .tz_common import ZoneState, datetime_from_instant

DUMP_FORMAT = "tzvalidate-0.1"
INITIAL_PREFIX = "Initially:           "


def format_instant(instant: int) -> str:
    dt = datetime_from_instant(instant)
    return f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d} {dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}Z"


def format_offset(seconds: int) -> str:
    sign = "-" if seconds < 0 else "+"
    seconds = abs(seconds)
    return f"{sign}{seconds // 3600:02d}:{(seconds // 60) % 60:02d}:{seconds % 60:02d}"


def format_state(state: ZoneState) -> str:
    kind = "daylight" if state.is_daylight else "standard"
    return f"{format_offset(state.utc_offset_seconds)} {kind} {state.abbreviation}"


def format_zone(history: ZoneHistory) -> list[str]:
    """Lines for one zone: id, initial state, then one line per transition."""
    lines = [history.zone_id, INITIAL_PREFIX + format_state(history.initial)]
    for transition in history.transitions:
        lines.append(f"{format_instant(transition.instant)} {format_state(transition.state)}")
    return lines


def format_body(histories: Iterable[ZoneHistory]) -> str:
    parts = []
    for history in histories:
        parts.append("\n".join(format_zone(history)) + "\n\n")
    return "".join(parts)


def format_dump(
    histories: Iterable[ZoneHistory],
    *,
    version: str,
    from_year: int,
    to_year: int,
    generator: str,
) -> str:
    """Full dump: header (with a SHA-1 of the body) followed by the body."""
    body = format_body(histories)
    header = [
        f"Version: {version}",
        f"Body SHA-1: {hashlib.sha1(body.encode('utf-8')).hexdigest()}",
        f"Format: {DUMP_FORMAT}",
        f"Range: {from_year}-{to_year}",
        f"Generator: {generator}",
    ]
    return "\n".join(header) + "\n\n" + body
