"""NMEA data types for parsed sentences.

This module defines the immutable records produced by the parser, one per
supported sentence type, plus the error tags returned when a sentence is
rejected.

Design Decisions:
    1. Verbatim string fields: apart from latitude and longitude, every field
       is the raw token as transmitted. Empty fields stay empty strings, so
       consumers can tell "no data" apart from "zero" without a conversion
       layer guessing for them.

    2. Frozen dataclasses: a record is built once, after checksum and field
       count checks pass, and never mutated afterwards. Sequences inside a
       record are tuples for the same reason.

    3. Errors as values: ``ParseError`` is returned, not raised. Callers
       branch on ``isinstance(result, ParseError)`` and decide whether to log,
       skip or abort.
"""

from dataclasses import dataclass
from enum import Enum


class ParseError(Enum):
    """Reason a sentence could not be turned into a record.

    The member values are the tags used in JSON output.
    """

    INVALID_DIRECTION = "InvalidDirection"
    INVALID_FORMAT = "InvalidFormat"
    MISSING_FIELDS = "MissingFields"
    UNKNOWN_ERROR = "UnknownError"
    UNSUPPORTED_TYPE = "UnsupportedType"


@dataclass(frozen=True)
class Latitude:
    """Latitude scaled from ``DDMM.MMMM`` and its hemisphere letter.

    Attributes:
        value: ``DDMM.MMMM / 100``. This is the legacy scaling downstream
            consumers rely on, not a true degrees-minutes conversion.
        direction: ``"N"`` or ``"S"``.
    """

    value: float
    direction: str


@dataclass(frozen=True)
class Longitude:
    """Longitude scaled from ``DDDMM.MMMM`` and its hemisphere letter.

    Attributes:
        value: ``DDDMM.MMMM / 100``, negative when ``direction`` is ``"W"``.
        direction: ``"E"`` or ``"W"``.
    """

    value: float
    direction: str


@dataclass(frozen=True)
class Satellite:
    """One satellite entry of a GSV sentence."""

    id: str
    elevation: str
    azimuth: str
    snr: str


@dataclass(frozen=True)
class GGAData:
    """Parsed GGA (Global Positioning System Fix Data) sentence.

    Attributes:
        type: Sentence identifier token, e.g. ``"$GNGGA"``.
        utc_time: UTC time in ``HHMMSS.ss`` format.
        latitude: Scaled latitude and N/S direction.
        longitude: Scaled, signed longitude and E/W direction.
        quality: Fix quality indicator (0 = invalid, 1 = GPS, 2 = DGPS,
            4 = RTK fixed, 5 = RTK float, 6 = dead reckoning).
        satellites_used: Number of satellites in the solution.
        hdop: Horizontal dilution of precision.
        altitude: Altitude above mean sea level.
        geoidal_separation: Geoid height above the WGS84 ellipsoid.
        dgps: Differential reference station ID.
    """

    type: str
    utc_time: str
    latitude: Latitude
    longitude: Longitude
    quality: str
    satellites_used: str
    hdop: str
    altitude: str
    geoidal_separation: str
    dgps: str


@dataclass(frozen=True)
class GLLData:
    """Parsed GLL (Geographic Position, Latitude/Longitude) sentence.

    Attributes:
        type: Sentence identifier token.
        latitude: Scaled latitude and N/S direction.
        longitude: Scaled, signed longitude and E/W direction.
        utc_time: UTC time in ``HHMMSS.ss`` format.
        status: ``"A"`` for active, ``"V"`` for void.
    """

    type: str
    latitude: Latitude
    longitude: Longitude
    utc_time: str
    status: str


@dataclass(frozen=True)
class GSAData:
    """Parsed GSA (GNSS DOP and Active Satellites) sentence.

    Attributes:
        type: Sentence identifier token.
        mode: Selection mode (``"M"`` manual, ``"A"`` automatic).
        fix_type: 1 = no fix, 2 = 2D, 3 = 3D.
        satellites: Up to 12 satellite IDs, in transmitted order. Empty
            slots are kept as empty strings.
        pdop: Position dilution of precision.
        hdop: Horizontal dilution of precision.
        vdop: Vertical dilution of precision.
    """

    type: str
    mode: str
    fix_type: str
    satellites: tuple[str, ...]
    pdop: str
    hdop: str
    vdop: str


@dataclass(frozen=True)
class GSVData:
    """Parsed GSV (GNSS Satellites in View) sentence."""

    type: str
    number_of_messages: str
    sequence_number: str
    satellites_in_view: str
    satellites: tuple[Satellite, ...]


@dataclass(frozen=True)
class RMCData:
    """Parsed RMC (Recommended Minimum Specific GNSS Data) sentence.

    Attributes:
        type: Sentence identifier token.
        utc_time: UTC time in ``HHMMSS.ss`` format.
        status: ``"A"`` for active, ``"V"`` for void.
        latitude: Scaled latitude and N/S direction.
        longitude: Scaled, signed longitude and E/W direction.
        speed: Speed over ground in knots.
        course: Course over ground in degrees.
        utc_date: UTC date in ``DDMMYY`` format.
        mode: FAA mode indicator (A/D/E/N).
    """

    type: str
    utc_time: str
    status: str
    latitude: Latitude
    longitude: Longitude
    speed: str
    course: str
    utc_date: str
    mode: str


@dataclass(frozen=True)
class VTGData:
    """Parsed VTG (Track Made Good and Ground Speed) sentence.

    Attributes:
        type: Sentence identifier token.
        course: Track relative to true north, in degrees.
        course_magnetic: Track relative to magnetic north, in degrees.
        speed_kn: Ground speed in knots.
        speed_kh: Ground speed in km/h.
        mode: FAA mode indicator (A/D/E/N).
    """

    type: str
    course: str
    course_magnetic: str
    speed_kn: str
    speed_kh: str
    mode: str


@dataclass(frozen=True)
class ZDAData:
    """Parsed ZDA (Time and Date) sentence."""

    type: str
    utc_time: str
    utc_day: str
    utc_month: str
    utc_year: str
    local_zone_hours: str
    local_zone_minutes: str


Sample = GGAData | GLLData | GSAData | GSVData | RMCData | VTGData | ZDAData
