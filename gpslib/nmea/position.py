"""Latitude/longitude extraction shared by the GGA, GLL and RMC parsers."""

from gpslib.nmea.fields import parse_latitude, parse_longitude
from gpslib.nmea.layouts import SentenceLayout
from gpslib.nmea.types import Latitude, Longitude, ParseError

_LATITUDE_DIRECTIONS = ("N", "S")
_LONGITUDE_DIRECTIONS = ("E", "W")


def _direction(token: str, legal: tuple[str, ...]) -> str | None:
    """Return the hemisphere letter of ``token``, or None if it is not legal.

    Only the first character is inspected, so ``"N"`` and ``"North"`` both
    read as ``"N"``.
    """
    letter = token[:1]
    if letter not in legal:
        return None
    return letter


def extract_position(
    tokens: list[str],
    layout: SentenceLayout,
) -> tuple[Latitude, Longitude] | ParseError:
    """Build the latitude and longitude of a sentence from its tokens.

    Checks run in a fixed order: latitude value, latitude direction,
    longitude direction, longitude value. The first failure wins.

    Args:
        tokens: Sentence tokens, already checked against
            ``layout.minimum_tokens``.
        layout: Layout with both ``latitude`` and ``longitude`` set.

    Returns:
        ``(Latitude, Longitude)``, or:
        - ``ParseError.MISSING_FIELDS`` if a coordinate value is not a number
        - ``ParseError.INVALID_DIRECTION`` if a direction is empty or not
          legal for its axis
    """
    if layout.latitude is None or layout.longitude is None:
        raise ValueError("layout has no position fields")
    latitude_index, latitude_direction_index = layout.latitude
    longitude_index, longitude_direction_index = layout.longitude

    try:
        latitude_value = parse_latitude(tokens[latitude_index])
    except ValueError:
        return ParseError.MISSING_FIELDS

    latitude_direction = _direction(
        tokens[latitude_direction_index], _LATITUDE_DIRECTIONS
    )
    if latitude_direction is None:
        return ParseError.INVALID_DIRECTION

    longitude_direction = _direction(
        tokens[longitude_direction_index], _LONGITUDE_DIRECTIONS
    )
    if longitude_direction is None:
        return ParseError.INVALID_DIRECTION

    try:
        longitude_value = parse_longitude(
            tokens[longitude_index], longitude_direction
        )
    except ValueError:
        return ParseError.MISSING_FIELDS

    return (
        Latitude(value=latitude_value, direction=latitude_direction),
        Longitude(value=longitude_value, direction=longitude_direction),
    )
