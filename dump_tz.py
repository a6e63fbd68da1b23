#!/usr/bin/env python3
"""Dump the offset transitions of timezones as seen by a Python tz database.

For every zone the dump lists the state in year 1, followed by each instant
(UTC) where the offset or daylight flag changes within the requested years:

    Europe/London
    Initially:           -00:01:15 standard LMT
    1847-12-01 00:01:15Z +00:00:00 standard GMT
    ...

Usage:
    # Every zone known to zoneinfo, 1800-2035
    python dump_tz.py --out zoneinfo.txt
    # A couple of zones from pytz
    python dump_tz.py -s pytz -z Europe/London -z America/New_York -f 2000 -t 2030

Dumps from different sources (or machines) can be compared with
`compare_tz_dumps.py`.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List

from tzdump.report import format_body, format_dump
from tzdump.transitions import MIN_SUPPORTED_YEAR, list_transitions
from tzdump.tz_common import ORACLES, InvalidRange, ZoneNotFound, get_oracle

DEFAULT_FROM_YEAR = 1
DEFAULT_TO_YEAR = 2035


def build_dump(source: str, zone_ids: List[str] | None, from_year: int, to_year: int,
               min_year: int = MIN_SUPPORTED_YEAR) -> str:
    """Return the dump text. A full catalogue dump carries a header; named zones do not."""
    oracle = get_oracle(source)
    full = not zone_ids
    if full:
        zone_ids = oracle.zone_ids()
        print(f"Dumping {len(zone_ids)} zones from {oracle.name} ({oracle.version()})...", file=sys.stderr)
    else:
        zone_ids = list(dict.fromkeys(zone_ids))

    # Resolve everything up front so a bad zone aborts before any output.
    histories = [list_transitions(oracle, zone_id, from_year, to_year, min_year) for zone_id in zone_ids]

    if full:
        return format_dump(histories, version=oracle.version(), from_year=from_year,
                           to_year=to_year, generator=oracle.name)
    return format_body(histories)


def main(argv: List[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Dump timezone offset transitions reported by a Python timezone database"
    )
    parser.add_argument("-s", "--source", choices=sorted(ORACLES), default="zoneinfo",
                        help="Timezone database to query (default: zoneinfo)")
    parser.add_argument("-z", "--zone", action="append", dest="zones", metavar="ID",
                        help="Zone to dump; may be repeated (default: every zone)")
    parser.add_argument("-f", "--from-year", type=int, default=DEFAULT_FROM_YEAR,
                        help=f"First year to scan, inclusive (default: {DEFAULT_FROM_YEAR})")
    parser.add_argument("-t", "--to-year", type=int, default=DEFAULT_TO_YEAR,
                        help=f"Year to stop scanning at, exclusive (default: {DEFAULT_TO_YEAR})")
    parser.add_argument(
        "--min-year",
        type=int,
        default=MIN_SUPPORTED_YEAR,
        help=f"Earlier from-years are raised to this one (default: {MIN_SUPPORTED_YEAR})",
    )
    parser.add_argument("-o", "--out", type=Path, help="Output file (default: stdout)")
    parser.add_argument("--list-zones", action="store_true", help="Print the zone ids and exit")
    args = parser.parse_args(argv)

    if args.list_zones:
        print("\n".join(get_oracle(args.source).zone_ids()))
        return

    try:
        text = build_dump(args.source, args.zones, args.from_year, args.to_year, args.min_year)
    except (ZoneNotFound, InvalidRange) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    if args.out is None:
        sys.stdout.write(text)
        return
    try:
        with args.out.open("w", encoding="utf-8", newline="\n") as f:
            f.write(text)
    except OSError as e:
        print(f"ERROR: Could not write to file {args.out}: {e}", file=sys.stderr)
        sys.exit(1)
    print(f"Written transitions to {args.out}", file=sys.stderr)


if __name__ == "__main__":
    main()
