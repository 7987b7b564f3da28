"""Command-line driver: parse NMEA log files and print the records.

Usage::

    gpslib track.nmea --format json
    cat track.nmea | gpslib --strict
"""

import argparse
import logging
import sys
from collections.abc import Iterator, Sequence
from typing import TextIO

from gpslib.formatters import format_sample_json, format_sample_text
from gpslib.nmea.parser import parse
from gpslib.nmea.types import ParseError, Sample

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_INPUT_ERROR = 2

_STDIN = "-"


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gpslib",
        description="Parse NMEA 0183 sentences (GGA, GLL, GSA, GSV, RMC, VTG, ZDA)",
    )
    parser.add_argument(
        "files",
        nargs="*",
        default=[_STDIN],
        help="Files with one sentence per line ('-' or nothing for stdin)",
    )
    parser.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        help="Output rendering (default: text)",
    )
    parser.add_argument("--output", help="Write records here instead of stdout")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity (default: WARNING)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Stop with exit status 1 at the first sentence that fails to parse",
    )
    return parser.parse_args(argv)


def _read_lines(path: str) -> Iterator[str]:
    if path == _STDIN:
        yield from sys.stdin
        return
    with open(path, encoding="utf-8", errors="surrogateescape") as f:
        yield from f


def _render(sample: Sample, output_format: str) -> str:
    if output_format == "json":
        return format_sample_json(sample)
    return format_sample_text(sample)


def process_file(
    path: str,
    out: TextIO,
    output_format: str = "text",
    strict: bool = False,
) -> tuple[int, int]:
    """Parse every sentence in ``path`` and write the records to ``out``.

    Returns:
        ``(parsed, rejected)`` counts. With ``strict`` the count stops at the
        first rejected sentence.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    parsed = 0
    rejected = 0
    for number, line in enumerate(_read_lines(path), start=1):
        sentence = line.rstrip("\r\n")
        if not sentence.strip():
            continue
        result = parse(sentence)
        if isinstance(result, ParseError):
            rejected += 1
            logger.warning("%s:%d: %s: %s", path, number, result.value, sentence)
            if strict:
                break
            continue
        parsed += 1
        out.write(_render(result, output_format) + "\n")
    return parsed, rejected


def run(args: argparse.Namespace, out: TextIO) -> int:
    total_parsed = 0
    total_rejected = 0
    for path in args.files:
        try:
            parsed, rejected = process_file(path, out, args.format, args.strict)
        except OSError as e:
            logger.error("Cannot read %s: %s", path, e)
            return EXIT_INPUT_ERROR
        total_parsed += parsed
        total_rejected += rejected
        if args.strict and rejected:
            return EXIT_PARSE_ERROR

    logger.info("Parsed %d sentences, rejected %d", total_parsed, total_rejected)
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.output is None:
        return run(args, sys.stdout)

    try:
        with open(args.output, "w", encoding="utf-8", errors="surrogateescape") as out:
            return run(args, out)
    except OSError as e:
        logger.error("Cannot write %s: %s", args.output, e)
        return EXIT_INPUT_ERROR


if __name__ == "__main__":
    sys.exit(main())
