"""Tests for JSON and text rendering of parsed records."""

import doctest
import json

import pytest

from gpslib import ParseError, formatters, parse
from gpslib.formatters import (
    format_error_json,
    format_sample_json,
    format_sample_text,
    sample_to_dict,
)

RMC_VALID = "$GNRMC,211041.00,A,4024.98796,N,00340.22512,W,0.027,,010218,,,D*7B"
GSV_VALID = "$GPGSV,2,1,08,01,40,083,46,02,17,308,41,12,07,344,39,14,22,228,45*75"


class TestSampleToDict:
    def test_rmc(self):
        payload = sample_to_dict(parse(RMC_VALID))
        assert payload["type"] == "$GNRMC"
        data = payload["data"]
        assert data["utc_time"] == "211041.00"
        assert data["latitude"]["value"] == pytest.approx(40.2498796)
        assert data["latitude"]["direction"] == "N"
        assert data["longitude"]["value"] == pytest.approx(-3.4022512)
        assert data["course"] == ""

    def test_gsv_satellites_are_plain_lists(self):
        data = sample_to_dict(parse(GSV_VALID))["data"]
        assert data["satellites"] == [
            {"id": "02", "elevation": "17", "azimuth": "308", "snr": "41"},
            {"id": "12", "elevation": "07", "azimuth": "344", "snr": "39"},
        ]

    def test_gsa_ids_are_list(self):
        data = sample_to_dict(parse("$GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1*39"))["data"]
        assert data["satellites"][:2] == ["04", "05"]
        assert len(data["satellites"]) == 12


class TestJSON:
    def test_sample_json_round_trips_through_json(self):
        text = format_sample_json(parse(RMC_VALID))
        assert json.loads(text) == sample_to_dict(parse(RMC_VALID))

    def test_indent(self):
        assert "\n" in format_sample_json(parse(RMC_VALID), indent=2)

    def test_error_json(self):
        payload = json.loads(format_error_json(ParseError.MISSING_FIELDS, "$GPGSV,1,1*55"))
        assert payload == {"error": "MissingFields", "sentence": "$GPGSV,1,1*55"}


class TestText:
    def test_zda(self):
        text = format_sample_text(parse("$GPZDA,201530.00,04,07,2002,00,00*60"))
        assert text == "ZDA: 201530.00, 04, 07, 2002, 00, 00"

    def test_vtg(self):
        text = format_sample_text(parse("$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B"))
        assert text == "VTG: 054.7, 005.5, 010.2"

    def test_rmc(self):
        text = format_sample_text(parse(RMC_VALID))
        assert text.startswith("RMC: 211041.00, A, ")
        assert text.endswith(", 0.027, , 010218, ")

    def test_gsv_lists_each_satellite(self):
        lines = format_sample_text(parse(GSV_VALID)).splitlines()
        assert lines[0] == "GSV: 2, 1, 08, 2"
        assert lines[1] == "Satellite ID: 02, Elevation: 17, Azimuth: 308, SNR: 41"
        assert len(lines) == 3

    def test_docstring_example_runs(self):
        results = doctest.testmod(formatters)
        assert results.attempted > 0
        assert results.failed == 0

    def test_gsa_lists_each_slot(self):
        lines = format_sample_text(parse("$GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1*39")).splitlines()
        assert lines[0] == "GSA: A, 3, 12, 2.5, 1.3, 2.1"
        assert lines[1] == "Satellite: 04"
        assert len(lines) == 13
