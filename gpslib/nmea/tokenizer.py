"""Sentence tokenization.

An NMEA sentence is split in two stages: the checksum suffix is cut off at
the first ``*``, then the remaining payload is split on commas. Token indices
are positional contracts, so empty fields are kept as empty strings.

Example:
    >>> tokenize("$GNVTG,054.7,T,,M*3B")
    ['$GNVTG', '054.7', 'T', '', 'M']
"""

CHECKSUM_DELIMITER = "*"
FIELD_DELIMITER = ","


def split(text: str, separator: str) -> list[str]:
    """Split ``text`` at every occurrence of ``separator``.

    Always returns at least one element, and keeps the trailing empty segment
    when ``text`` ends with the separator.

    Example:
        >>> split("a,,b,", ",")
        ['a', '', 'b', '']
        >>> split("", ",")
        ['']
    """
    return text.split(separator)


def tokenize(sentence: str) -> list[str]:
    """Return the comma-separated fields of ``sentence`` before its checksum.

    The leading ``$`` is not removed, so token 0 is the sentence identifier
    exactly as transmitted (e.g. ``"$GNRMC"``).
    """
    payload = split(sentence, CHECKSUM_DELIMITER)[0]
    return split(payload, FIELD_DELIMITER)
