"""GSA sentence parser.

GSA (GNSS DOP and Active Satellites) lists the satellites used in the fix and
the dilution of precision values.

GSA Sentence Format:
    $GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1*XX
           | | |                      |   |   |
           | | |                      |   |   +-- VDOP
           | | |                      |   +-- HDOP
           | | |                      +-- PDOP
           | | +-- 12 satellite ID slots (tokens 3-14, may be empty)
           | +-- Fix type (1=none, 2=2D, 3=3D)
           +-- Mode (M=manual, A=automatic)
"""

from gpslib.nmea.layouts import GSA_LAYOUT, GSA_SATELLITE_IDS
from gpslib.nmea.types import GSAData, ParseError


def extract_gsa(tokens: list[str]) -> GSAData | ParseError:
    """Construct a GSAData object from sentence tokens.

    Satellite slots are copied as transmitted, empty ones included, so the
    tuple position matches the slot number.
    """
    if len(tokens) < GSA_LAYOUT.minimum_tokens:
        return ParseError.MISSING_FIELDS

    offsets = GSA_SATELLITE_IDS.offsets(len(tokens))
    return GSAData(
        satellites=tuple(tokens[offset] for offset in offsets),
        **GSA_LAYOUT.copy_fields(tokens),
    )
