"""XOR checksum of NMEA-0183 sentences.

The checksum of a sentence is the XOR of all the characters between the
leading ``$`` and the ``*`` that separates the body from the checksum,
rendered as two uppercase hexadecimal digits::

    $GPGGA,215909.285,5232.252,N,01321.913,E,1,12,1.0,0.0,M,0.0,M,,*6E
     ^                       XOR'ed range                         ^ ^^
"""

from typing import Optional

__all__ = (
    "calculate_nmea_checksum",
    "compute_checksum",
    "split_checksum",
    "verify_checksum",
)


def calculate_nmea_checksum(body: str, offset: int = 1) -> int:
    """Calculates the XOR checksum of a sentence body.

    Parameters:
        body: the sentence body, without the ``*HH`` suffix
        offset: index of the first character to include; the default skips
            the leading ``$``

    Returns:
        the low byte of the XOR of the character codes
    """
    value = 0
    for i in range(offset, len(body)):
        value ^= ord(body[i])
    return value & 0xFF


def compute_checksum(body: str) -> str:
    """Returns the checksum suffix (``*HH``) for the given sentence body.

    The body must not contain the ``*`` separator; every character after the
    leading ``$`` is part of the checksum.
    """
    return f"*{calculate_nmea_checksum(body):02X}"


def verify_checksum(body: str, expected: str) -> bool:
    """Returns whether the checksum of the given sentence body matches the
    expected value.

    Parameters:
        body: the sentence body, without the ``*HH`` suffix
        expected: the expected checksum as a hexadecimal string, without the
            ``*`` separator

    Returns:
        whether the checksums are equal. Malformed hexadecimal strings never
        match.
    """
    try:
        value = int(expected, 16)
    except ValueError:
        return False
    return calculate_nmea_checksum(body) == value


def split_checksum(sentence: str) -> tuple[str, Optional[str]]:
    """Splits a sentence into its body and its checksum.

    Returns:
        the body of the sentence and the checksum after the ``*`` separator,
        or ``None`` if the sentence has no checksum
    """
    body, sep, checksum = sentence.partition("*")
    return body, (checksum.strip() if sep else None)
