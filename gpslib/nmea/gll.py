"""GLL sentence parser.

GLL Sentence Format:
    $GPGLL,4916.45,N,12311.12,W,225444,A,A*XX
           |       | |        | |      | +-- Mode indicator (not stored)
           |       | |        | |      +-- Status (A=active, V=void)
           |       | |        | +-- UTC time (HHMMSS.ss)
           |       | +--------+-- Longitude + E/W
           +-------+-- Latitude + N/S

Time and status are read from tokens 5 and 6, the positions that fit within
the 7-token minimum. Some older readers took them from tokens 6 and 7, which
labels the mode indicator as status and indexes past a 7-token sentence.
"""

from gpslib.nmea.layouts import GLL_LAYOUT
from gpslib.nmea.position import extract_position
from gpslib.nmea.types import GLLData, ParseError


def extract_gll(tokens: list[str]) -> GLLData | ParseError:
    """Construct a GLLData object from sentence tokens."""
    if len(tokens) < GLL_LAYOUT.minimum_tokens:
        return ParseError.MISSING_FIELDS

    position = extract_position(tokens, GLL_LAYOUT)
    if isinstance(position, ParseError):
        return position

    latitude, longitude = position
    return GLLData(
        latitude=latitude,
        longitude=longitude,
        **GLL_LAYOUT.copy_fields(tokens),
    )
