"""GSA sentences: dilution of precision and active satellites.

::

    $GPGSA,a,x,xx,xx,xx,xx,xx,xx,xx,xx,xx,xx,xx,xx,x.x,x.x,x.x*hh

    1     = selection of 2D or 3D fix (A = automatic, M = manual)
    2     = fix type (1 = no fix, 2 = 2D fix, 3 = 3D fix)
    3-14  = satellites used for the fix (always 12 slots)
    15    = position dilution of precision (PDOP)
    16    = horizontal dilution of precision (HDOP)
    17    = vertical dilution of precision (VDOP)
"""

from typing import Any, Mapping

from trackdraw.nmea.config import CodecConfig
from trackdraw.nmea.fields import (
    encode_fixed,
    encode_value,
    parse_float_or_zero,
    parse_int_or_zero,
)
from trackdraw.nmea.registry import Record

from .utils import join_fields, prepare_tokens

__all__ = ("encode_gsa", "parse_gsa")


#: Number of satellite slots in a GSA sentence
SATELLITE_SLOTS = 12

#: Minimum number of tokens in a GSA sentence, including the identifier
MIN_TOKENS = 3 + SATELLITE_SLOTS + 3


def parse_gsa(tokens: list[str]) -> Record:
    """Parses the tokens of a GSA sentence. Empty satellite slots are
    skipped.
    """
    tokens = prepare_tokens(tokens, MIN_TOKENS)
    slots = tokens[3 : 3 + SATELLITE_SLOTS]
    return {
        "id": tokens[0][1:],
        "mode": tokens[1],
        "fix": parse_int_or_zero(tokens[2]),
        "satellites": [parse_int_or_zero(slot) for slot in slots if slot],
        "pdop": parse_float_or_zero(tokens[15]),
        "hdop": parse_float_or_zero(tokens[16]),
        "vdop": parse_float_or_zero(tokens[17]),
    }


def encode_gsa(identifier: str, data: Mapping[str, Any], config: CodecConfig) -> str:
    """Encodes a GSA sentence, without checksum.

    Keys of the record: ``status`` (selection mode), ``fix``, ``satellites``
    (number of satellites used), ``pdop``, ``hdop`` and ``vdop``.

    Only the number of satellites is known here, so the used slots are
    numbered by their position (``01``, ``02``, ...) and not by the PRN of
    the satellite.
    """
    num_satellites = parse_int_or_zero(encode_value(data.get("satellites")))
    slots = [
        f"{i:02}" if i <= num_satellites else ""
        for i in range(1, SATELLITE_SLOTS + 1)
    ]
    return join_fields(
        identifier,
        (
            encode_value(data.get("status")),
            encode_value(data.get("fix")),
            *slots,
            encode_fixed(data.get("pdop"), 1),
            encode_fixed(data.get("hdop"), 1),
            encode_fixed(data.get("vdop"), 1),
        ),
    )
