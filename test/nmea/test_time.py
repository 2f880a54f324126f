from datetime import datetime, timezone
from pytest import mark, raises

from trackdraw.nmea.errors import InvalidDateTimeError
from trackdraw.nmea.time import (
    MILLISECONDS_IN_DAY,
    parse_date_time,
    time_to_milliseconds,
    year_to_full_year,
)

NOW = datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


@mark.parametrize(
    ("year", "output"),
    [(0, 2000), (16, 2016), (24, 2024), (25, 1925), (99, 1999)],
)
def test_year_to_full_year(year: int, output: int):
    assert year_to_full_year(year, now=NOW) == output


def test_year_to_full_year_uses_current_time():
    # smoke testing only
    assert year_to_full_year(0) % 100 == 0
    assert year_to_full_year(datetime.now().year % 100) >= 2000


@mark.parametrize(
    ("input", "output"),
    [
        ("000000", 0),
        ("000000.000", 0),
        ("215909.285", 79149285),
        ("235959.8", MILLISECONDS_IN_DAY - 200),
        ("120000.12345", 43200123),
        ("", 0),
    ],
)
def test_time_to_milliseconds(input: str, output: int):
    assert time_to_milliseconds(input) == output


def test_parse_date_time():
    assert parse_date_time("251216", "215909.285", now=NOW) == datetime(
        2016, 12, 25, 21, 59, 9, 285000, tzinfo=timezone.utc
    )
    assert parse_date_time("010199", "000000", now=NOW) == datetime(
        1999, 1, 1, tzinfo=timezone.utc
    )
    assert parse_date_time("290224", "235959.999", now=NOW) == datetime(
        2024, 2, 29, 23, 59, 59, 999000, tzinfo=timezone.utc
    )


def test_parse_date_time_is_timezone_aware():
    result = parse_date_time("051216", "140355.726", now=NOW)
    assert result.tzinfo is not None
    assert result.utcoffset().total_seconds() == 0


@mark.parametrize(
    ("date", "time"),
    [
        ("", "235947.000"),
        ("321316", "120000"),
        ("001216", "120000"),
        ("0512", "120000"),
        ("05121a", "120000"),
        ("051216", "250000.000"),
    ],
)
def test_parse_date_time_invalid(date: str, time: str):
    with raises(InvalidDateTimeError) as excinfo:
        parse_date_time(date, time, now=NOW)

    assert excinfo.value.date == date
    assert excinfo.value.time == time
