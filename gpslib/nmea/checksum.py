"""NMEA checksum validation.

NMEA 0183 sentences use a simple XOR checksum for data integrity verification.
The checksum is calculated over all characters between '$' and '*' (exclusive),
then represented as a two-digit uppercase hexadecimal number after the '*'.

Example sentence structure:
    $GNRMC,211041.00,A,4024.98796,N,00340.22512,W,0.027,,010218,,,D*7B
    ^                       checksum content                         ^^
    start                                                  checksum (0x7B)

The comparison is textual: "7b" and "07B" are rejected even though they
denote the same number.
"""

from gpslib.nmea.tokenizer import CHECKSUM_DELIMITER, split

_START_DELIMITER = "$"


def compute_checksum(payload: str) -> int:
    """Calculate the XOR checksum of a payload string.

    Args:
        payload: The string between '$' and '*' (exclusive). Non-ASCII
            text is checksummed over its UTF-8 bytes.

    Returns:
        Integer checksum value (0-255)

    Example:
        >>> compute_checksum("GPGLL,4916.45,N,12311.12,W,225444,A")
        49
    """
    result = 0
    for byte in payload.encode("utf-8", "surrogateescape"):
        result ^= byte
    return result


def format_checksum(value: int) -> str:
    """Render a checksum as two uppercase, zero-padded hex digits."""
    return f"{value:02X}"


def is_valid(sentence: str) -> bool:
    """Validate the checksum of an NMEA sentence.

    Args:
        sentence: Complete NMEA sentence including '*' and checksum. A single
            leading '$' is optional. Line terminators are not stripped.

    Returns:
        True if the checksum is valid, False if:
        - There is no '*' delimiter
        - Nothing follows the '*'
        - The recomputed checksum differs from the transmitted text

    Example:
        >>> is_valid("$GNRMC,211041.00,A,4024.98796,N,00340.22512,W,0.027,,010218,,,D*7B")
        True
        >>> is_valid("$GNRMC,211041.00,A,4024.98796,N,00340.22512,W,0.027,,010218,,,D*7b")
        False
    """
    parts = split(sentence, CHECKSUM_DELIMITER)
    if len(parts) < 2 or not parts[1]:
        return False

    payload = parts[0]
    if payload.startswith(_START_DELIMITER):
        payload = payload[1:]

    return format_checksum(compute_checksum(payload)) == parts[1]
