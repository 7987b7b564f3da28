"""GGA sentence parser.

GGA (Global Positioning System Fix Data) is one of the most important NMEA
sentences, providing position fix information including coordinates, altitude,
fix quality, and satellite/accuracy metrics.

GGA Sentence Format:
    $GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,0000*XX
           |         |        | |         | | |  |   |       |       |
           |         |        | |         | | |  |   |       |       +-- DGPS station ID
           |         |        | |         | | |  |   |       +-- Geoid separation (M=meters)
           |         |        | |         | | |  |   +-- Altitude above MSL (M=meters)
           |         |        | |         | | |  +-- HDOP (horizontal dilution)
           |         |        | |         | | +-- Number of satellites
           |         |        | |         | +-- Fix quality (0-6)
           |         |        | +---------+-- Longitude + E/W
           |         +--------+-- Latitude + N/S
           +-- UTC time (HHMMSS.ss)

The unit letters after altitude and separation, and the age of differential
data, are not stored.
"""

import logging

from gpslib.nmea.layouts import GGA_LAYOUT
from gpslib.nmea.position import extract_position
from gpslib.nmea.types import GGAData, ParseError

logger = logging.getLogger(__name__)


def extract_gga(tokens: list[str]) -> GGAData | ParseError:
    """Construct a GGAData object from sentence tokens.

    Maps token indices to GGAData attributes:
        tokens[0]  -> type
        tokens[1]  -> utc_time (HHMMSS.ss format)
        tokens[2]  -> latitude (DDMM.MMMM format)
        tokens[3]  -> latitude direction (N/S)
        tokens[4]  -> longitude (DDDMM.MMMM format)
        tokens[5]  -> longitude direction (E/W)
        tokens[6]  -> quality (0-6)
        tokens[7]  -> satellites_used
        tokens[8]  -> hdop
        tokens[9]  -> altitude
        tokens[11] -> geoidal_separation
        tokens[14] -> dgps

    Args:
        tokens: Tokens of a checksum-validated sentence

    Returns:
        GGAData, or:
        - ParseError.MISSING_FIELDS if there are fewer than 15 tokens or a
          coordinate is not a number
        - ParseError.INVALID_DIRECTION if a hemisphere letter is illegal
    """
    if len(tokens) < GGA_LAYOUT.minimum_tokens:
        logger.debug("GGA has %d tokens, needs %d", len(tokens), GGA_LAYOUT.minimum_tokens)
        return ParseError.MISSING_FIELDS

    position = extract_position(tokens, GGA_LAYOUT)
    if isinstance(position, ParseError):
        return position

    latitude, longitude = position
    return GGAData(
        latitude=latitude,
        longitude=longitude,
        **GGA_LAYOUT.copy_fields(tokens),
    )
