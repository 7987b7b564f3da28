"""gpslib: NMEA 0183 GPS sentence parsing."""

from gpslib.nmea import (
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
    SpeedUnit,
    VTGData,
    ZDAData,
    is_valid,
    parse,
    parse_latitude,
    parse_longitude,
    parse_many,
    parse_speed,
    parse_utc_date,
    parse_utc_time,
    tokenize,
)

__all__ = [
    "GGAData",
    "GLLData",
    "GSAData",
    "GSVData",
    "Latitude",
    "Longitude",
    "ParseError",
    "RMCData",
    "Sample",
    "Satellite",
    "SpeedUnit",
    "VTGData",
    "ZDAData",
    "is_valid",
    "parse",
    "parse_latitude",
    "parse_longitude",
    "parse_many",
    "parse_speed",
    "parse_utc_date",
    "parse_utc_time",
    "tokenize",
]
