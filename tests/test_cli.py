"""Tests for the command-line driver."""

import io
import json
import logging

from gpslib.cli import (
    EXIT_INPUT_ERROR,
    EXIT_OK,
    EXIT_PARSE_ERROR,
    main,
    parse_args,
    process_file,
)

RMC_VALID = "$GNRMC,211041.00,A,4024.98796,N,00340.22512,W,0.027,,010218,,,D*7B"
ZDA_VALID = "$GPZDA,201530.00,04,07,2002,00,00*60"
UNSUPPORTED = "$GPXXX,1,2,3*53"


def _write_log(tmp_path, *lines):
    path = tmp_path / "track.nmea"
    path.write_text("\r\n".join(lines) + "\r\n", encoding="ascii")
    return path


class TestParseArgs:
    def test_defaults(self):
        args = parse_args([])
        assert args.files == ["-"]
        assert args.format == "text"
        assert args.output is None
        assert args.log_level == "WARNING"
        assert args.strict is False

    def test_options(self):
        args = parse_args(["a.nmea", "b.nmea", "--format", "json", "--strict"])
        assert args.files == ["a.nmea", "b.nmea"]
        assert args.format == "json"
        assert args.strict is True


class TestProcessFile:
    def test_counts_and_text_output(self, tmp_path):
        path = _write_log(tmp_path, ZDA_VALID, UNSUPPORTED, "", RMC_VALID)
        out = io.StringIO()
        assert process_file(str(path), out) == (2, 1)
        lines = out.getvalue().splitlines()
        assert lines[0] == "ZDA: 201530.00, 04, 07, 2002, 00, 00"
        assert lines[1].startswith("RMC: ")

    def test_json_output(self, tmp_path):
        path = _write_log(tmp_path, ZDA_VALID)
        out = io.StringIO()
        process_file(str(path), out, output_format="json")
        assert json.loads(out.getvalue())["type"] == "$GPZDA"

    def test_strict_stops_at_first_rejection(self, tmp_path):
        path = _write_log(tmp_path, UNSUPPORTED, RMC_VALID)
        out = io.StringIO()
        assert process_file(str(path), out, strict=True) == (0, 1)
        assert out.getvalue() == ""

    def test_rejections_are_logged(self, tmp_path, caplog):
        path = _write_log(tmp_path, RMC_VALID, UNSUPPORTED)
        with caplog.at_level(logging.WARNING, logger="gpslib.cli"):
            process_file(str(path), io.StringIO())
        assert f"{path}:2: UnsupportedType: {UNSUPPORTED}" in caplog.text

    def test_logged_line_number_counts_blank_lines(self, tmp_path, caplog):
        path = _write_log(tmp_path, RMC_VALID, "", "", UNSUPPORTED)
        with caplog.at_level(logging.WARNING, logger="gpslib.cli"):
            assert process_file(str(path), io.StringIO()) == (1, 1)
        assert f"{path}:4: UnsupportedType: {UNSUPPORTED}" in caplog.text

    def test_non_ascii_sentence(self, tmp_path):
        path = tmp_path / "track.nmea"
        path.write_text("$GPZDA,201530.00,04,07,2002,00,\u00e9*0A\n", encoding="utf-8")
        out = io.StringIO()
        assert process_file(str(path), out, output_format="json") == (1, 0)
        assert json.loads(out.getvalue())["data"]["local_zone_minutes"] == "\u00e9"

    def test_undecodable_byte_checksummed_as_is(self, tmp_path):
        path = tmp_path / "track.nmea"
        path.write_bytes(b"$GPZDA,201530.00,04,07,2002,00,\xe9*89\n")
        assert process_file(str(path), io.StringIO(), output_format="json") == (1, 0)


class TestMain:
    def test_success(self, tmp_path, capsys):
        path = _write_log(tmp_path, ZDA_VALID, UNSUPPORTED)
        assert main([str(path)]) == EXIT_OK
        assert capsys.readouterr().out == "ZDA: 201530.00, 04, 07, 2002, 00, 00\n"

    def test_strict_failure(self, tmp_path):
        path = _write_log(tmp_path, UNSUPPORTED)
        assert main([str(path), "--strict"]) == EXIT_PARSE_ERROR

    def test_missing_file(self, tmp_path):
        assert main([str(tmp_path / "absent.nmea")]) == EXIT_INPUT_ERROR

    def test_output_file(self, tmp_path):
        path = _write_log(tmp_path, ZDA_VALID)
        output = tmp_path / "out.jsonl"
        assert main([str(path), "--format", "json", "--output", str(output)]) == EXIT_OK
        assert json.loads(output.read_text(encoding="utf-8"))["data"]["utc_year"] == "2002"

    def test_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO(ZDA_VALID + "\n"))
        assert main([]) == EXIT_OK
        assert capsys.readouterr().out.startswith("ZDA: ")
