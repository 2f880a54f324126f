"""RMC sentences: recommended minimum specific GPS/TRANSIT data.

::

    $GPRMC,hhmmss.sss,A,llll.lll,a,yyyyy.yyy,a,x.x,x.x,ddmmyy,x.x,a*hh

    1  = UTC time of position fix
    2  = data status (A = valid, V = navigation receiver warning)
    3  = latitude of fix
    4  = N or S
    5  = longitude of fix
    6  = E or W
    7  = speed over ground, in knots
    8  = track made good, in degrees true
    9  = UTC date
    10 = magnetic variation, in degrees (easterly variation subtracts from
         true course)
    11 = E or W
"""

from typing import Any, Mapping

from trackdraw.nmea.config import CodecConfig
from trackdraw.nmea.fields import (
    encode_date,
    encode_degrees,
    encode_knots,
    encode_latitude,
    encode_longitude,
    encode_magnetic_variation,
    encode_time,
    encode_value,
    parse_float_or_zero,
    parse_latitude,
    parse_longitude,
    parse_magnetic_variation,
)
from trackdraw.nmea.registry import Record

from .utils import join_fields, prepare_tokens

__all__ = ("encode_rmc", "parse_rmc")


#: Minimum number of tokens in an RMC sentence, including the identifier
MIN_TOKENS = 12


def parse_rmc(tokens: list[str]) -> Record:
    """Parses the tokens of an RMC sentence."""
    tokens = prepare_tokens(tokens, MIN_TOKENS)
    return {
        "id": tokens[0][1:],
        "time": tokens[1],
        "valid": tokens[2],
        "latitude": parse_latitude(tokens[3], tokens[4]),
        "longitude": parse_longitude(tokens[5], tokens[6]),
        "speed": parse_float_or_zero(tokens[7]),
        "course": parse_float_or_zero(tokens[8]),
        "date": tokens[9],
        "variation": parse_magnetic_variation(tokens[10], tokens[11]),
    }


def encode_rmc(identifier: str, data: Mapping[str, Any], config: CodecConfig) -> str:
    """Encodes an RMC sentence, without checksum.

    Keys of the record: ``date`` (timestamp, both the time of day and the
    date are used), ``status``, ``lat``, ``lon``, ``speed`` (knots),
    ``course`` (degrees) and ``variation`` (degrees, easterly negative).
    """
    date = data.get("date")
    return join_fields(
        identifier,
        (
            encode_time(date),
            encode_value(data.get("status")),
            encode_latitude(data.get("lat"), config.latitude_precision),
            encode_longitude(data.get("lon"), config.longitude_precision),
            encode_knots(data.get("speed")),
            encode_degrees(data.get("course")),
            encode_date(date),
            encode_magnetic_variation(data.get("variation")),
        ),
    )
