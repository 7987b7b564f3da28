"""Token index tables for each supported sentence type.

Each layout states the minimum token count a sentence must reach before a
record is built, which record attribute is copied from which token, and where
the latitude/longitude value and direction tokens sit. Tokens that are not
listed (unit letters such as GGA's altitude ``M``) are skipped.

GGA Sentence Format:
    $GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,0000*XX
      0    1         2        3 4         5 6 7  8   9     10 11  12 13 14
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class SentenceLayout:
    """Positional contract between a sentence type and its record.

    Attributes:
        minimum_tokens: Sentences with fewer tokens are rejected.
        fields: Record attribute name -> token index, copied verbatim.
        latitude: ``(value_index, direction_index)`` or None.
        longitude: ``(value_index, direction_index)`` or None.
    """

    minimum_tokens: int
    fields: Mapping[str, int]
    latitude: tuple[int, int] | None = None
    longitude: tuple[int, int] | None = None

    def copy_fields(self, tokens: list[str]) -> dict[str, str]:
        """Return the verbatim fields of ``tokens`` keyed by attribute name."""
        return {name: tokens[index] for name, index in self.fields.items()}


@dataclass(frozen=True)
class RepeatedGroup:
    """A run of fixed-width groups inside a sentence (GSA IDs, GSV satellites).

    Attributes:
        start: Token index of the first group.
        width: Tokens per group.
        limit: Maximum number of groups, or None when the sentence decides.
    """

    start: int
    width: int = 1
    limit: int | None = None

    def offsets(self, token_count: int, count: int | None = None) -> list[int]:
        """Start offsets of up to ``count`` groups that fit in ``token_count``.

        ``count`` defaults to ``limit``, and ``limit`` caps it either way.
        """
        if count is None:
            count = self.limit or 0
        elif self.limit is not None:
            count = min(count, self.limit)
        result = []
        for group in range(count):
            offset = self.start + group * self.width
            if offset + self.width > token_count:
                break
            result.append(offset)
        return result


def _table(**indices: int) -> Mapping[str, int]:
    return MappingProxyType(dict(indices))


GGA_LAYOUT = SentenceLayout(
    minimum_tokens=15,
    fields=_table(
        type=0,
        utc_time=1,
        quality=6,
        satellites_used=7,
        hdop=8,
        altitude=9,
        geoidal_separation=11,
        dgps=14,
    ),
    latitude=(2, 3),
    longitude=(4, 5),
)

GLL_LAYOUT = SentenceLayout(
    minimum_tokens=7,
    fields=_table(type=0, utc_time=5, status=6),
    latitude=(1, 2),
    longitude=(3, 4),
)

GSA_LAYOUT = SentenceLayout(
    minimum_tokens=18,
    fields=_table(type=0, mode=1, fix_type=2, pdop=15, hdop=16, vdop=17),
)
GSA_SATELLITE_IDS = RepeatedGroup(start=3, width=1, limit=12)

GSV_LAYOUT = SentenceLayout(
    minimum_tokens=4,
    fields=_table(
        type=0,
        number_of_messages=1,
        sequence_number=2,
        satellites_in_view=3,
    ),
)
# Quadruples are read from token 8 on; tokens 4-7 are not consumed.
GSV_SATELLITES = RepeatedGroup(start=8, width=4)

RMC_LAYOUT = SentenceLayout(
    minimum_tokens=12,
    fields=_table(
        type=0,
        utc_time=1,
        status=2,
        speed=7,
        course=8,
        utc_date=9,
        mode=11,
    ),
    latitude=(3, 4),
    longitude=(5, 6),
)

VTG_LAYOUT = SentenceLayout(
    minimum_tokens=10,
    fields=_table(
        type=0,
        course=1,
        course_magnetic=3,
        speed_kn=5,
        speed_kh=7,
        mode=9,
    ),
)

ZDA_LAYOUT = SentenceLayout(
    minimum_tokens=7,
    fields=_table(
        type=0,
        utc_time=1,
        utc_day=2,
        utc_month=3,
        utc_year=4,
        local_zone_hours=5,
        local_zone_minutes=6,
    ),
)
