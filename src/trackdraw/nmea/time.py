"""Time and date related utility functions for NMEA sentences.

NMEA sentences carry the UTC time of day as ``HHMMSS.sss`` and the date as
``DDMMYY``; the century of the year is not transmitted.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from .errors import InvalidDateTimeError

__all__ = (
    "MILLISECONDS_IN_DAY",
    "parse_date_time",
    "time_to_milliseconds",
    "year_to_full_year",
)


#: Number of milliseconds in a day
MILLISECONDS_IN_DAY = 86400000


def _int_or_zero(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        return 0


def year_to_full_year(year: int, *, now: Optional[datetime] = None) -> int:
    """Converts a two-digit year into a four-digit one.

    Years that are not larger than the last two digits of the current year
    are assumed to be in the current century, the rest in the previous one.
    Dates that are more than a hundred years old are therefore mapped into
    the wrong century.

    Parameters:
        year: the year, without century information
        now: the time to compare the year to; `None` means the current time
    """
    if now is None:
        now = datetime.now(timezone.utc)

    two_digit_year_now = now.year % 100
    century_now = now.year - two_digit_year_now

    return year + (century_now if year <= two_digit_year_now else century_now - 100)


def time_to_milliseconds(time: str) -> int:
    """Converts an NMEA time of day in ``HHMMSS.sss`` format into the number of
    milliseconds since midnight.
    """
    hours = _int_or_zero(time[0:2])
    minutes = _int_or_zero(time[2:4])
    seconds = _int_or_zero(time[4:6])
    # fractional seconds may have fewer or more than three digits
    millis = _int_or_zero((time[7:] + "000")[:3]) if len(time) > 7 else 0
    return 3600000 * hours + 60000 * minutes + 1000 * seconds + millis


def parse_date_time(
    date: str, time: str, *, now: Optional[datetime] = None
) -> datetime:
    """Combines an NMEA date in ``DDMMYY`` format and an NMEA time of day in
    ``HHMMSS.sss`` format into a timezone-aware UTC datetime object.

    Parameters:
        date: the date
        time: the time of day
        now: the time used to infer the century of the date; `None` means
            the current time

    Raises:
        InvalidDateTimeError: if the date is not a valid calendar date or the
            time of day is out of range
    """
    if len(date) != 6 or not (date.isascii() and date.isdigit()):
        raise InvalidDateTimeError(date, time)

    day = int(date[0:2])
    month = int(date[2:4])
    year = year_to_full_year(int(date[4:6]), now=now)

    try:
        midnight = datetime(year, month, day, tzinfo=timezone.utc)
    except ValueError:
        raise InvalidDateTimeError(date, time) from None

    millis = time_to_milliseconds(time)
    if not 0 <= millis < MILLISECONDS_IN_DAY:
        raise InvalidDateTimeError(date, time)

    return midnight + timedelta(milliseconds=millis)
