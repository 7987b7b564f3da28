"""JSON and text formatting utilities for parsed NMEA records."""

import json
from dataclasses import fields
from typing import Any

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
    "format_error_json",
    "format_sample_json",
    "format_sample_text",
    "sample_to_dict",
]


def _to_plain(value: Any) -> Any:
    if isinstance(value, (Latitude, Longitude)):
        return {"value": value.value, "direction": value.direction}
    if isinstance(value, Satellite):
        return {
            "id": value.id,
            "elevation": value.elevation,
            "azimuth": value.azimuth,
            "snr": value.snr,
        }
    if isinstance(value, tuple):
        return [_to_plain(item) for item in value]
    return value


def sample_to_dict(sample: Sample) -> dict[str, Any]:
    """Convert a record into ``{"type": ..., "data": {...}}`` of plain values."""
    data = {
        field.name: _to_plain(getattr(sample, field.name))
        for field in fields(sample)
    }
    return {"type": sample.type, "data": data}


def format_sample_json(sample: Sample, indent: int | None = None) -> str:
    """Serialize a record into a JSON string."""
    return json.dumps(sample_to_dict(sample), indent=indent)


def format_error_json(error: ParseError, sentence: str) -> str:
    """Serialize a parse failure into a JSON string."""
    return json.dumps({"error": error.value, "sentence": sentence})


def _join(*values: object) -> str:
    return ", ".join(str(value) for value in values)


def _format_gga(data: GGAData) -> list[str]:
    return [
        "GGA: " + _join(
            data.utc_time,
            data.latitude.value,
            data.latitude.direction,
            data.longitude.value,
            data.longitude.direction,
            data.quality,
            data.satellites_used,
            data.hdop,
            data.altitude,
            data.geoidal_separation,
        )
    ]


def _format_gll(data: GLLData) -> list[str]:
    return [
        "GLL: " + _join(
            data.latitude.value,
            data.latitude.direction,
            data.longitude.value,
            data.longitude.direction,
            data.utc_time,
            data.status,
        )
    ]


def _format_gsa(data: GSAData) -> list[str]:
    lines = [
        "GSA: " + _join(
            data.mode,
            data.fix_type,
            len(data.satellites),
            data.pdop,
            data.hdop,
            data.vdop,
        )
    ]
    lines.extend(f"Satellite: {satellite}" for satellite in data.satellites)
    return lines


def _format_gsv(data: GSVData) -> list[str]:
    lines = [
        "GSV: " + _join(
            data.number_of_messages,
            data.sequence_number,
            data.satellites_in_view,
            len(data.satellites),
        )
    ]
    lines.extend(
        f"Satellite ID: {s.id}, Elevation: {s.elevation}, "
        f"Azimuth: {s.azimuth}, SNR: {s.snr}"
        for s in data.satellites
    )
    return lines


def _format_rmc(data: RMCData) -> list[str]:
    return [
        "RMC: " + _join(
            data.utc_time,
            data.status,
            data.latitude.value,
            data.latitude.direction,
            data.longitude.value,
            data.longitude.direction,
            data.speed,
            data.course,
            data.utc_date,
            data.mode,
        )
    ]


def _format_vtg(data: VTGData) -> list[str]:
    return ["VTG: " + _join(data.course, data.speed_kn, data.speed_kh)]


def _format_zda(data: ZDAData) -> list[str]:
    return [
        "ZDA: " + _join(
            data.utc_time,
            data.utc_day,
            data.utc_month,
            data.utc_year,
            data.local_zone_hours,
            data.local_zone_minutes,
        )
    ]


_TEXT_FORMATTERS = {
    GGAData: _format_gga,
    GLLData: _format_gll,
    GSAData: _format_gsa,
    GSVData: _format_gsv,
    RMCData: _format_rmc,
    VTGData: _format_vtg,
    ZDAData: _format_zda,
}


def format_sample_text(sample: Sample) -> str:
    """Render a record as human-readable text.

    The first line is a comma-separated summary prefixed with the sentence
    type; GSA and GSV add one line per satellite.

    Example:
        >>> from gpslib import parse
        >>> format_sample_text(parse("$GPZDA,201530.00,04,07,2002,00,00*60"))
        'ZDA: 201530.00, 04, 07, 2002, 00, 00'
    """
    return "\n".join(_TEXT_FORMATTERS[type(sample)](sample))
