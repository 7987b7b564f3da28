"""Sentence dispatch: from a raw NMEA line to a typed record.

``parse`` performs:
1. Checksum validation (an invalid checksum stops here, nothing is extracted)
2. Tokenization
3. Sentence type detection from the identifier token
4. Field extraction by the matching per-type parser

Talker IDs vary (``$GPGGA``, ``$GNGGA``, ``$GLGSV`` ...), so the type is found
by looking for the three-letter code anywhere in the identifier, trying the
codes in ``SentenceType`` order.
"""

import logging
from collections.abc import Callable, Iterable, Iterator
from enum import Enum

from gpslib.nmea.checksum import is_valid
from gpslib.nmea.gga import extract_gga
from gpslib.nmea.gll import extract_gll
from gpslib.nmea.gsa import extract_gsa
from gpslib.nmea.gsv import extract_gsv
from gpslib.nmea.rmc import extract_rmc
from gpslib.nmea.tokenizer import tokenize
from gpslib.nmea.types import ParseError, Sample
from gpslib.nmea.vtg import extract_vtg
from gpslib.nmea.zda import extract_zda

logger = logging.getLogger(__name__)


class SentenceType(Enum):
    """Supported sentence types, in detection priority order."""

    GGA = "GGA"
    GLL = "GLL"
    GSA = "GSA"
    GSV = "GSV"
    RMC = "RMC"
    VTG = "VTG"
    ZDA = "ZDA"


_EXTRACTORS: dict[SentenceType, Callable[[list[str]], Sample | ParseError]] = {
    SentenceType.GGA: extract_gga,
    SentenceType.GLL: extract_gll,
    SentenceType.GSA: extract_gsa,
    SentenceType.GSV: extract_gsv,
    SentenceType.RMC: extract_rmc,
    SentenceType.VTG: extract_vtg,
    SentenceType.ZDA: extract_zda,
}


def detect_sentence_type(identifier: str) -> SentenceType | None:
    """Return the first sentence type whose code occurs in ``identifier``.

    Example:
        >>> detect_sentence_type("$GNRMC")
        <SentenceType.RMC: 'RMC'>
        >>> detect_sentence_type("$PUBX") is None
        True
    """
    for sentence_type in SentenceType:
        if sentence_type.value in identifier:
            return sentence_type
    return None


def parse(sentence: str) -> Sample | ParseError:
    """Parse one NMEA sentence into a record.

    Args:
        sentence: A single sentence such as
            ``"$GNRMC,211041.00,A,4024.98796,N,00340.22512,W,0.027,,010218,,,D*7B"``.
            Line terminators must already be removed.

    Returns:
        The record for the sentence type, or a ``ParseError``:
        - INVALID_FORMAT if the checksum is missing or does not match
        - UNSUPPORTED_TYPE if the identifier names no supported type
        - MISSING_FIELDS if there are too few tokens or a required number
          is malformed
        - INVALID_DIRECTION if a hemisphere letter is absent or illegal
        - UNKNOWN_ERROR if tokenization produced nothing

    Example:
        >>> result = parse("$GNRMC,211041.00,A,4024.98796,N,00340.22512,W,0.027,,010218,,,D*7B")
        >>> result.latitude.direction
        'N'
    """
    if not is_valid(sentence):
        logger.debug("Rejected sentence with bad checksum: %r", sentence)
        return ParseError.INVALID_FORMAT

    tokens = tokenize(sentence)
    if not tokens:
        return ParseError.UNKNOWN_ERROR

    sentence_type = detect_sentence_type(tokens[0])
    if sentence_type is None:
        logger.debug("Unsupported sentence type: %r", tokens[0])
        return ParseError.UNSUPPORTED_TYPE

    return _EXTRACTORS[sentence_type](tokens)


def parse_many(lines: Iterable[str]) -> Iterator[tuple[str, Sample | ParseError]]:
    """Parse an iterable of text lines lazily.

    Trailing CR/LF is stripped from each line and blank lines are skipped.

    Yields:
        ``(sentence, result)`` pairs, where ``sentence`` is the stripped line.
    """
    for line in lines:
        sentence = line.rstrip("\r\n")
        if not sentence.strip():
            continue
        yield sentence, parse(sentence)
