"""ZDA sentence parser (UTC time, day, month, year and local zone offset)."""

from gpslib.nmea.layouts import ZDA_LAYOUT
from gpslib.nmea.types import ParseError, ZDAData


def extract_zda(tokens: list[str]) -> ZDAData | ParseError:
    if len(tokens) < ZDA_LAYOUT.minimum_tokens:
        return ParseError.MISSING_FIELDS
    return ZDAData(**ZDA_LAYOUT.copy_fields(tokens))
