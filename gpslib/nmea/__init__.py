"""NMEA 0183 parser for GGA, GLL, GSA, GSV, RMC, VTG and ZDA sentences."""

from gpslib.nmea.checksum import compute_checksum, is_valid
from gpslib.nmea.fields import (
    MalformedNumberError,
    SpeedUnit,
    parse_latitude,
    parse_longitude,
    parse_speed,
    parse_utc_date,
    parse_utc_time,
)
from gpslib.nmea.parser import SentenceType, detect_sentence_type, parse, parse_many
from gpslib.nmea.tokenizer import split, tokenize
from gpslib.nmea.types import (
    GGAData,
    GLLData,
    GSAData,
    GSVData,
    Latitude,
    Longitude,
    ParseError,
    RMCData,
    Sample,
    Satellite,
    VTGData,
    ZDAData,
)

__all__ = [
    "GGAData",
    "GLLData",
    "GSAData",
    "GSVData",
    "Latitude",
    "Longitude",
    "MalformedNumberError",
    "ParseError",
    "RMCData",
    "Sample",
    "Satellite",
    "SentenceType",
    "SpeedUnit",
    "VTGData",
    "ZDAData",
    "compute_checksum",
    "detect_sentence_type",
    "is_valid",
    "parse",
    "parse_latitude",
    "parse_longitude",
    "parse_many",
    "parse_speed",
    "parse_utc_date",
    "parse_utc_time",
    "split",
    "tokenize",
]
