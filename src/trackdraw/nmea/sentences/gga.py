"""GGA sentences: Global Positioning System fix data.

::

    $GPGGA,hhmmss.sss,llll.lll,a,yyyyy.yyy,a,x,xx,x.x,x.x,M,x.x,M,x,xxxx*hh

    1  = UTC time of position
    2  = latitude
    3  = N or S
    4  = longitude
    5  = E or W
    6  = GPS quality indicator (0 = invalid, 1 = GPS fix, 2 = differential fix)
    7  = number of satellites in use (not those in view)
    8  = horizontal dilution of precision
    9  = antenna altitude above/below mean sea level (geoid)
    10 = unit of antenna altitude
    11 = geoidal separation (difference between the WGS-84 ellipsoid and
         mean sea level)
    12 = unit of geoidal separation
    13 = age of differential corrections, in seconds
    14 = differential reference station ID
"""

from typing import Any, Mapping

from trackdraw.nmea.config import CodecConfig
from trackdraw.nmea.fields import (
    encode_altitude,
    encode_fixed,
    encode_latitude,
    encode_longitude,
    encode_time,
    encode_value,
    pad_left,
    parse_altitude,
    parse_float_or_zero,
    parse_int_or_zero,
    parse_latitude,
    parse_longitude,
)
from trackdraw.nmea.registry import Record

from .utils import join_fields, prepare_tokens, token_at

__all__ = ("encode_gga", "parse_gga")


#: Minimum number of tokens in a GGA sentence, including the identifier
MIN_TOKENS = 14


def parse_gga(tokens: list[str]) -> Record:
    """Parses the tokens of a GGA sentence."""
    tokens = prepare_tokens(tokens, MIN_TOKENS)
    return {
        "id": tokens[0][1:],
        "time": tokens[1],
        "latitude": parse_latitude(tokens[2], tokens[3]),
        "longitude": parse_longitude(tokens[4], tokens[5]),
        "fix": parse_int_or_zero(tokens[6]),
        "satellites": parse_int_or_zero(tokens[7]),
        "hdop": parse_float_or_zero(tokens[8]),
        "altitude": parse_altitude(tokens[9], tokens[10]),
        "above_geoid": parse_altitude(tokens[11], tokens[12]),
        "dgps_update": tokens[13],
        "dgps_reference": token_at(tokens, 14),
    }


def encode_gga(identifier: str, data: Mapping[str, Any], config: CodecConfig) -> str:
    """Encodes a GGA sentence, without checksum.

    The record may contain the following keys; missing ones are left blank:

    - ``date``: timestamp of the fix (only the UTC time of day is used)
    - ``lat``, ``lon``: position in decimal degrees (north and east positive)
    - ``fix``: GPS quality indicator
    - ``satellites``: number of satellites in use
    - ``hdop``: horizontal dilution of precision
    - ``altitude``, ``above_geoid``: altitude and geoidal separation in metres
    - ``dgps_update``: seconds since the last differential update
    - ``dgps_reference``: differential reference station ID
    """
    satellites = data.get("satellites")
    return join_fields(
        identifier,
        (
            encode_time(data.get("date")),
            encode_latitude(data.get("lat"), config.latitude_precision),
            encode_longitude(data.get("lon"), config.longitude_precision),
            encode_value(data.get("fix")),
            pad_left(encode_value(satellites), 2) if satellites is not None else "",
            encode_fixed(data.get("hdop"), 1),
            encode_altitude(data.get("altitude")),
            encode_altitude(data.get("above_geoid")),
            encode_fixed(data.get("dgps_update"), 0),
            encode_value(data.get("dgps_reference")),
        ),
    )
