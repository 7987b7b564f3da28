"""RMC sentence parser.

RMC (Recommended Minimum Specific GNSS Data) carries the essentials of a fix:
time, status, position, speed, course and date.

RMC Sentence Format:
    $GNRMC,211041.00,A,4024.98796,N,00340.22512,W,0.027,,010218,,,D*7B
           |         | |          | |           | |     | |      | | |
           |         | |          | |           | |     | |      | | +-- FAA mode (not stored)
           |         | |          | |           | |     | |      | +-- Variation E/W, stored as mode
           |         | |          | |           | |     | |      +-- Magnetic variation (not stored)
           |         | |          | |           | |     | +-- UTC date (DDMMYY)
           |         | |          | |           | |     +-- Course over ground
           |         | |          | |           | +-- Speed over ground (knots)
           |         | |          | +-----------+-- Longitude + E/W
           |         | +----------+-- Latitude + N/S
           |         +-- Status (A=active, V=void)
           +-- UTC time (HHMMSS.ss)

The record's ``mode`` is read from token 11, which on NMEA 2.3 receivers is
the magnetic variation direction and usually empty.
"""

import logging

from gpslib.nmea.layouts import RMC_LAYOUT
from gpslib.nmea.position import extract_position
from gpslib.nmea.types import ParseError, RMCData

logger = logging.getLogger(__name__)


def extract_rmc(tokens: list[str]) -> RMCData | ParseError:
    """Construct an RMCData object from sentence tokens.

    Speed and course stay verbatim; use ``parse_speed`` to convert the speed
    from knots.

    Returns:
        RMCData, or ParseError.MISSING_FIELDS / ParseError.INVALID_DIRECTION
    """
    if len(tokens) < RMC_LAYOUT.minimum_tokens:
        logger.debug("RMC has %d tokens, needs %d", len(tokens), RMC_LAYOUT.minimum_tokens)
        return ParseError.MISSING_FIELDS

    position = extract_position(tokens, RMC_LAYOUT)
    if isinstance(position, ParseError):
        return position

    latitude, longitude = position
    return RMCData(
        latitude=latitude,
        longitude=longitude,
        **RMC_LAYOUT.copy_fields(tokens),
    )
