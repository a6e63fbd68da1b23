#!/usr/bin/env python3
"""Compare two transition dumps produced by `dump_tz.py` (or a compatible tool).

Either side may be a local file or an http(s) URL, e.g. a reference dump
published alongside a tz data release.

Usage:
    python compare_tz_dumps.py reference.txt zoneinfo.txt
    python compare_tz_dumps.py https://example.org/tzvalidate/2024a.txt pytz.txt --diff

Exit status: 0 identical, 1 differences found, 2 a dump could not be loaded.

Dependencies:
    pip install requests
"""
from __future__ import annotations

import argparse
import difflib
import sys
from pathlib import Path
from typing import Dict, List, NamedTuple

import requests

DOWNLOAD_TIMEOUT_SECONDS = 60


class Comparison(NamedTuple):
    only_expected: List[str]
    only_actual: List[str]
    different: List[str]

    @property
    def identical(self) -> bool:
        return not (self.only_expected or self.only_actual or self.different)


def load_dump(source: str) -> str:
    """Return the text of a dump from a path or URL."""
    if source.startswith(("http://", "https://")):
        resp = requests.get(source, timeout=DOWNLOAD_TIMEOUT_SECONDS)
        resp.raise_for_status()
        return resp.text
    return Path(source).read_text(encoding="utf-8")


def parse_dump(text: str) -> Dict[str, List[str]]:
    """Split a dump into {zone_id: lines after the id}. The header, if any, is dropped."""
    zones: Dict[str, List[str]] = {}
    blocks = [b for b in text.replace("\r\n", "\n").split("\n\n") if b.strip()]
    if blocks and ": " in blocks[0].splitlines()[0]:
        blocks = blocks[1:]  # header
    for block in blocks:
        lines = block.strip("\n").splitlines()
        zones[lines[0]] = lines[1:]
    return zones


def compare_dumps(expected: Dict[str, List[str]], actual: Dict[str, List[str]]) -> Comparison:
    return Comparison(
        only_expected=sorted(expected.keys() - actual.keys()),
        only_actual=sorted(actual.keys() - expected.keys()),
        different=sorted(z for z in expected.keys() & actual.keys() if expected[z] != actual[z]),
    )


def first_difference(expected: List[str], actual: List[str]) -> str:
    for exp_line, act_line in zip(expected, actual):
        if exp_line != act_line:
            return f"expected {exp_line!r}, got {act_line!r}"
    if len(expected) > len(actual):
        return f"missing {expected[len(actual)]!r}"
    return f"unexpected {actual[len(expected)]!r}"


def print_report(comparison: Comparison, expected: Dict[str, List[str]],
                 actual: Dict[str, List[str]], show_diff: bool = False) -> None:
    for zone_id in comparison.only_expected:
        print(f"Missing zone: {zone_id}")
    for zone_id in comparison.only_actual:
        print(f"Extra zone: {zone_id}")
    for zone_id in comparison.different:
        if show_diff:
            print(f"Zone {zone_id} differs:")
            for line in difflib.unified_diff(expected[zone_id], actual[zone_id],
                                             "expected", "actual", lineterm="", n=1):
                print(f"  {line}")
        else:
            print(f"Zone {zone_id} differs: {first_difference(expected[zone_id], actual[zone_id])}")

    common = len(expected.keys() & actual.keys())
    print(
        f"{common} zones compared, {len(comparison.different)} different, "
        f"{len(comparison.only_expected)} missing, {len(comparison.only_actual)} extra."
    )


def main(argv: List[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Compare two timezone transition dumps")
    parser.add_argument("expected", help="Reference dump (path or http(s) URL)")
    parser.add_argument("actual", help="Dump to check (path or http(s) URL)")
    parser.add_argument("--diff", action="store_true", help="Show a unified diff for each differing zone")
    args = parser.parse_args(argv)

    dumps = []
    for source in (args.expected, args.actual):
        try:
            dumps.append(parse_dump(load_dump(source)))
        except (requests.RequestException, OSError) as e:
            print(f"ERROR: Could not load {source}: {e}", file=sys.stderr)
            sys.exit(2)
    expected, actual = dumps

    comparison = compare_dumps(expected, actual)
    print_report(comparison, expected, actual, show_diff=args.diff)
    if not comparison.identical:
        sys.exit(1)


if __name__ == "__main__":
    main()
