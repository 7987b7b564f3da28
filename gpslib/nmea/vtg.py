"""VTG sentence parser.

VTG (Track Made Good and Ground Speed) provides velocity information from GNSS.

VTG Sentence Format:
    $GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B
           |     | |     | |     | |     | |
           |     | |     | |     | |     | +-- Mode indicator (A/D/E/N)
           |     | |     | |     | +-----+-- Speed in km/h
           |     | |     | +-----+-- Speed in knots
           |     | +-----+-- Track (magnetic north, degrees)
           +-----+-- Track (true north, degrees)

Note: When stationary, the track angle may be empty (no heading when not moving).
"""

from gpslib.nmea.layouts import VTG_LAYOUT
from gpslib.nmea.types import ParseError, VTGData


def extract_vtg(tokens: list[str]) -> VTGData | ParseError:
    """Construct a VTGData object from sentence tokens.

    The mode indicator is required: sentences without it (pre NMEA 2.3) have
    only 9 tokens and are rejected with ParseError.MISSING_FIELDS.
    """
    if len(tokens) < VTG_LAYOUT.minimum_tokens:
        return ParseError.MISSING_FIELDS
    return VTGData(**VTG_LAYOUT.copy_fields(tokens))
