"""Tests for the dump_tz command line."""

import pytest

import dump_tz
from tzdump.tz_common import PytzOracle, ZoneinfoOracle

LONDON_2020 = (
    "Europe/London\n"
    "Initially:           -00:01:15 standard LMT\n"
    "2020-03-29 01:00:00Z +01:00:00 daylight BST\n"
    "2020-10-25 01:00:00Z +00:00:00 standard GMT\n"
    "\n"
)


class TestMain:
    def test_single_zone(self, capsys):
        dump_tz.main(["-z", "Europe/London", "-f", "2020", "-t", "2021"])

        assert capsys.readouterr().out == LONDON_2020

    def test_several_zones_keep_requested_order(self, capsys):
        dump_tz.main(["-z", "UTC", "-z", "Europe/London", "-f", "2020", "-t", "2021"])

        out = capsys.readouterr().out
        assert out.startswith("UTC\nInitially:           +00:00:00 standard UTC\n\n")
        assert out.endswith(LONDON_2020)

    def test_pytz_source(self, capsys):
        dump_tz.main(["-s", "pytz", "-z", "Europe/London", "-f", "2020", "-t", "2021"])

        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "Europe/London"
        assert lines[2:] == LONDON_2020.splitlines()[2:]

    def test_unknown_zone_aborts_without_output(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            dump_tz.main(["-z", "Europe/London", "-z", "Not/AZone", "-f", "2020", "-t", "2021"])

        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Not/AZone" in captured.err

    def test_invalid_range(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            dump_tz.main(["-z", "Europe/London", "-f", "2021", "-t", "2020"])

        assert exc_info.value.code == 1
        assert capsys.readouterr().err.startswith("ERROR:")

    def test_min_year_out_of_range(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            dump_tz.main(["-z", "UTC", "-f", "1", "-t", "3", "--min-year", "0"])

        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("ERROR:")

    def test_from_year_one(self, capsys):
        dump_tz.main(["-z", "UTC", "-f", "1", "-t", "3", "--min-year", "1"])

        assert capsys.readouterr().out == "UTC\nInitially:           +00:00:00 standard UTC\n\n"

    def test_repeated_zone_is_dumped_once(self, capsys):
        dump_tz.main(["-z", "Europe/London", "-z", "UTC", "-z", "Europe/London", "-f", "2020", "-t", "2021"])

        out = capsys.readouterr().out
        assert out.startswith(LONDON_2020)
        assert out.count("Europe/London\n") == 1
        assert out.endswith("UTC\nInitially:           +00:00:00 standard UTC\n\n")

    def test_out_file(self, tmp_path, capsys):
        out = tmp_path / "london.txt"

        dump_tz.main(["-z", "Europe/London", "-f", "2020", "-t", "2021", "-o", str(out)])

        assert out.read_text(encoding="utf-8") == LONDON_2020
        assert capsys.readouterr().out == ""

    def test_list_zones(self, capsys):
        dump_tz.main(["-s", "pytz", "--list-zones"])

        assert "Europe/London" in capsys.readouterr().out.splitlines()


class TestBuildDump:
    def test_full_catalogue_has_header(self, monkeypatch, capsys):
        monkeypatch.setattr(ZoneinfoOracle, "zone_ids", lambda self: ["Europe/London", "UTC"])

        text = dump_tz.build_dump("zoneinfo", None, 2020, 2021)

        header, body = text.split("\n\n", 1)
        assert "Format: tzvalidate-0.1" in header.splitlines()
        assert "Range: 2020-2021" in header.splitlines()
        assert body.startswith(LONDON_2020)
        assert "Dumping 2 zones from zoneinfo" in capsys.readouterr().err

    def test_sources_agree_on_recent_years(self):
        zones = ["America/New_York", "Australia/Sydney", "Europe/Paris"]

        zoneinfo_text = dump_tz.build_dump("zoneinfo", zones, 2010, 2025)
        pytz_text = dump_tz.build_dump("pytz", zones, 2010, 2025)

        def transitions_only(text):
            return [line for line in text.splitlines() if line[:1].isdigit()]

        assert transitions_only(zoneinfo_text) == transitions_only(pytz_text)
        assert len(transitions_only(pytz_text)) == 3 * 15 * 2

    def test_pytz_full_catalogue_version(self, monkeypatch):
        monkeypatch.setattr(PytzOracle, "zone_ids", lambda self: ["UTC"])

        text = dump_tz.build_dump("pytz", [], 2020, 2021)

        assert text.startswith(f"Version: {PytzOracle().version()}\n")
