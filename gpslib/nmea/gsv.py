"""GSV sentence parser.

GSV (GNSS Satellites in View) carries elevation, azimuth and SNR for the
satellites a receiver can see, spread over several sentences.

GSV Sentence Format:
    $GPGSV,3,1,11,03,03,111,00,04,15,270,00,06,01,010,00,13,06,292,00*XX
           | | |  +----------+ +----------+ ...
           | | |  satellite quadruples: id, elevation, azimuth, SNR
           | | +-- Satellites in view
           | +-- Sequence number of this sentence
           +-- Number of messages

The number of quadruples read is driven by the "number of messages" field,
and reading starts at token 8. Reading stops early when the tokens run out.
"""

import logging

from gpslib.nmea.layouts import GSV_LAYOUT, GSV_SATELLITES
from gpslib.nmea.types import GSVData, ParseError, Satellite

logger = logging.getLogger(__name__)


def _build_satellite(tokens: list[str], offset: int) -> Satellite:
    return Satellite(
        id=tokens[offset],
        elevation=tokens[offset + 1],
        azimuth=tokens[offset + 2],
        snr=tokens[offset + 3],
    )


def extract_gsv(tokens: list[str]) -> GSVData | ParseError:
    """Construct a GSVData object from sentence tokens.

    Returns:
        GSVData, or ParseError.MISSING_FIELDS if there are fewer than 4
        tokens or the number of messages is not an integer
    """
    if len(tokens) < GSV_LAYOUT.minimum_tokens:
        return ParseError.MISSING_FIELDS

    fields = GSV_LAYOUT.copy_fields(tokens)
    try:
        count = int(fields["number_of_messages"])
    except ValueError:
        logger.debug("GSV number of messages is not an integer: %r", fields["number_of_messages"])
        return ParseError.MISSING_FIELDS

    offsets = GSV_SATELLITES.offsets(len(tokens), count)
    return GSVData(
        satellites=tuple(_build_satellite(tokens, offset) for offset in offsets),
        **fields,
    )
