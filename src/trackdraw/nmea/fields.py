"""Encoders and decoders for the individual fields of NMEA sentences.

Encoders return textual fragments (without checksum) that are joined with
commas by the sentence encoders. Fields that span two slots (coordinates,
altitudes and the magnetic variation) encode into a fragment that already
contains the separating comma. Absent values encode into empty slots so the
number of commas in a sentence never depends on which values are known.

Decoders are lenient: empty or malformed numeric fields decode to zero
instead of failing the whole sentence.
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Optional

__all__ = (
    "FEET_TO_METERS",
    "encode_altitude",
    "encode_date",
    "encode_degrees",
    "encode_fixed",
    "encode_knots",
    "encode_latitude",
    "encode_longitude",
    "encode_magnetic_variation",
    "encode_time",
    "encode_value",
    "format_latitude",
    "format_longitude",
    "pad_left",
    "parse_altitude",
    "parse_float_or_zero",
    "parse_int_or_zero",
    "parse_latitude",
    "parse_longitude",
    "parse_magnetic_variation",
    "to_fixed",
)


#: Conversion factor from feet to metres
FEET_TO_METERS = 0.3048

#: Number of degree digits in a latitude, keyed by the width of its integer part
_LATITUDE_DEGREE_DIGITS = {4: 2, 3: 1}

#: Number of degree digits in a longitude, keyed by the width of its integer part
_LONGITUDE_DEGREE_DIGITS = {5: 3, 4: 2, 3: 1}


####################################################################
# Formatting helpers


def pad_left(text: str, width: int, fill: str = "0") -> str:
    """Pads a string from the left to the given width."""
    return text.rjust(width, fill)


def to_fixed(value: float, digits: int) -> str:
    """Formats a number in fixed-point notation with the given number of
    fractional digits.

    Ties are rounded away from zero, based on the exact binary value of the
    number; ``format(value, ".3f")`` would round ties to even instead.
    """
    quantum = Decimal(1).scaleb(-digits)
    result = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)
    if result.is_zero():
        result = abs(result)
    return f"{result:f}"


def _format_number(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


####################################################################
# Field encoders


def format_latitude(lat: float, precision: int = 3) -> tuple[str, str]:
    """Formats a latitude in ``DDMM.mmm`` format.

    Args:
        lat: the latitude, in decimal degrees (north is positive)
        precision: number of fractional digits of the minutes

    Returns:
        the formatted coordinate and the sign (North or South)
    """
    sign = "S" if lat < 0 else "N"
    deg, min_frac = divmod(abs(lat), 1)
    return f"{int(deg):02}{_format_minutes(min_frac * 60, precision)}", sign


def format_longitude(lon: float, precision: int = 3) -> tuple[str, str]:
    """Formats a longitude in ``DDDMM.mmm`` format.

    Args:
        lon: the longitude, in decimal degrees (east is positive)
        precision: number of fractional digits of the minutes

    Returns:
        the formatted coordinate and the sign (East or West)
    """
    sign = "W" if lon < 0 else "E"
    deg, min_frac = divmod(abs(lon), 1)
    return f"{int(deg):03}{_format_minutes(min_frac * 60, precision)}", sign


def _format_minutes(minutes: float, precision: int) -> str:
    result = to_fixed(minutes, precision)
    return "0" + result if minutes < 10 else result


def encode_latitude(lat: Optional[float], precision: int = 3) -> str:
    """Encodes a latitude into a ``DDMM.mmm,H`` fragment."""
    if lat is None:
        return ","
    return ",".join(format_latitude(lat, precision))


def encode_longitude(lon: Optional[float], precision: int = 3) -> str:
    """Encodes a longitude into a ``DDDMM.mmm,H`` fragment."""
    if lon is None:
        return ","
    return ",".join(format_longitude(lon, precision))


def encode_altitude(alt: Optional[float] = None) -> str:
    """Encodes an altitude in metres, with one decimal digit."""
    if alt is None:
        return ",M"
    return to_fixed(alt, 1) + ",M"


def encode_magnetic_variation(value: Optional[float] = None) -> str:
    """Encodes a magnetic variation (easterly variation is negative) into a
    fragment of seven characters such as ``003.1,W``.
    """
    if value is None:
        return ","
    hemisphere = "E" if value < 0 else "W"
    return pad_left(f"{to_fixed(abs(value), 1)},{hemisphere}", 7)


def encode_degrees(value: Optional[float] = None) -> str:
    """Encodes an angle in degrees such as a course over ground."""
    if value is None:
        return ""
    return pad_left(to_fixed(value, 1), 5)


def encode_knots(value: Optional[float] = None) -> str:
    """Encodes a speed in knots."""
    if value is None:
        return ""
    return pad_left(to_fixed(value, 1), 5)


def encode_value(value: Any = None) -> str:
    """Encodes an arbitrary value using its textual representation."""
    if value is None:
        return ""
    return _format_number(value)


def encode_fixed(value: Optional[float], digits: int) -> str:
    """Encodes a number with a fixed number of fractional digits."""
    if value is None:
        return ""
    return to_fixed(value, digits)


def _as_utc(dt: datetime) -> datetime:
    # naive datetimes are assumed to be in UTC already
    return dt.astimezone(timezone.utc) if dt.tzinfo is not None else dt


def encode_date(dt: Optional[datetime]) -> str:
    """Encodes the UTC date of a timestamp in ``DDMMYY`` format."""
    if dt is None:
        return ""
    dt = _as_utc(dt)
    return f"{dt.day:02}{dt.month:02}{dt.year % 100:02}"


def encode_time(dt: Optional[datetime]) -> str:
    """Encodes the UTC time of day of a timestamp in ``HHMMSS.mmm`` format."""
    if dt is None:
        return ""
    dt = _as_utc(dt)
    return (
        f"{dt.hour:02}{dt.minute:02}{dt.second:02}.{dt.microsecond // 1000:03}"
    )


####################################################################
# Field decoders


def parse_float_or_zero(value: str) -> float:
    """Parses a floating-point field; empty or malformed fields are treated
    as zero.
    """
    try:
        return float(value)
    except ValueError:
        return 0.0


def parse_int_or_zero(value: str) -> int:
    """Parses an integer field; only the leading digits of the field are
    taken into account, and empty or malformed fields are treated as zero.
    """
    value = value.strip()
    end = 1 if value[:1] in ("+", "-") else 0
    while end < len(value) and value[end].isdigit():
        end += 1
    try:
        return int(value[:end])
    except ValueError:
        return 0


def _parse_coordinate(
    value: str, negative: bool, degree_digits_by_width: dict[int, int]
) -> float:
    width = len(value.partition(".")[0])
    num_degree_digits = degree_digits_by_width.get(width, 0)

    degrees = parse_float_or_zero(value[:num_degree_digits] or "0")
    minutes = parse_float_or_zero(value[num_degree_digits:])

    result = degrees + minutes / 60.0
    return round(-result if negative else result, 8)


def parse_latitude(value: str, hemisphere: str) -> float:
    """Parses a latitude in ``DDMM.mmm`` format.

    Receivers that drop the leading zero of the degrees are also handled by
    inferring the number of degree digits from the width of the integer part.

    Returns:
        the latitude in decimal degrees, rounded to 8 fractional digits;
        negative on the southern hemisphere
    """
    return _parse_coordinate(value, hemisphere == "S", _LATITUDE_DEGREE_DIGITS)


def parse_longitude(value: str, hemisphere: str) -> float:
    """Parses a longitude in ``DDDMM.mmm`` format.

    Returns:
        the longitude in decimal degrees, rounded to 8 fractional digits;
        negative on the western hemisphere
    """
    return _parse_coordinate(value, hemisphere == "W", _LONGITUDE_DEGREE_DIGITS)


def parse_altitude(value: str, unit: str) -> float:
    """Parses an altitude and converts it to metres if it is given in feet."""
    scale = FEET_TO_METERS if unit == "F" else 1.0
    return parse_float_or_zero(value) * scale


def parse_magnetic_variation(value: str, hemisphere: str) -> float:
    """Parses a magnetic variation; easterly variations are negative."""
    result = parse_float_or_zero(value)
    return -result if hemisphere == "E" else result
