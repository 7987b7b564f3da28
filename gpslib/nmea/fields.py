"""NMEA field parsing utilities.

Small pure functions converting raw string fields into typed values. Unlike
the record extractors, these raise on bad input; the extractors catch the
errors and report them as ``ParseError`` values.
"""

from enum import Enum


class MalformedNumberError(ValueError):
    """Raised when a numeric field is not a valid floating-point literal."""


class SpeedUnit(Enum):
    """Target unit for ``parse_speed``, valued by its factor from knots."""

    METERS_PER_SECOND = 0.514444444
    KILOMETERS_PER_HOUR = 1.85


# Latitude and longitude are scaled, not converted: DDMM.MMMM / 100.
_COORDINATE_SCALE = 100.0


def parse_number(value: str) -> float:
    """Parse a field as a float, raising ``MalformedNumberError`` if invalid.

    Example:
        >>> parse_number("545.4")
        545.4
        >>> parse_number("")
        Traceback (most recent call last):
        ...
        gpslib.nmea.fields.MalformedNumberError: not a number: ''
    """
    try:
        return float(value)
    except ValueError as e:
        raise MalformedNumberError(f"not a number: {value!r}") from e


def _slice_pairs(value: str, kind: str) -> tuple[str, str, str]:
    if len(value) < 6:
        raise ValueError(f"{kind} needs 6 characters, got {value!r}")
    return value[0:2], value[2:4], value[4:6]


def parse_utc_time(value: str) -> tuple[str, str, str]:
    """Split an ``HHMMSS`` time into ``(hours, minutes, seconds)``.

    Anything after the sixth character (fractional seconds) is ignored. The
    parts are not range-checked.

    Raises:
        ValueError: If ``value`` is shorter than 6 characters.

    Example:
        >>> parse_utc_time("211041.00")
        ('21', '10', '41')
    """
    return _slice_pairs(value, "UTC time")


def parse_utc_date(value: str) -> tuple[str, str, str]:
    """Split a ``DDMMYY`` date into ``(day, month, year)``.

    Raises:
        ValueError: If ``value`` is shorter than 6 characters.
    """
    return _slice_pairs(value, "UTC date")


def parse_latitude(value: str) -> float:
    """Scale a ``DDMM.MMMM`` latitude by 1/100.

    Example:
        >>> round(parse_latitude("4024.98796"), 7)
        40.2498796
    """
    return parse_number(value) / _COORDINATE_SCALE


def parse_longitude(value: str, direction: str) -> float:
    """Scale a ``DDDMM.MMMM`` longitude by 1/100, negative for West.

    Example:
        >>> round(parse_longitude("00340.22512", "W"), 7)
        -3.4022512
    """
    sign = -1.0 if direction == "W" else 1.0
    return sign * parse_number(value) / _COORDINATE_SCALE


def parse_speed(value: str, unit: SpeedUnit) -> float:
    """Convert a speed in knots to ``unit``.

    Example:
        >>> parse_speed("10.0", SpeedUnit.KILOMETERS_PER_HOUR)
        18.5
    """
    return parse_number(value) * unit.value
