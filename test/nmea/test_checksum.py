from pytest import mark

from trackdraw.nmea.checksum import (
    calculate_nmea_checksum,
    compute_checksum,
    split_checksum,
    verify_checksum,
)

GGA_BODY = "$GPGGA,215909.285,5232.252,N,01321.913,E,1,12,1.0,0.0,M,0.0,M,,"
GSA_BODY = "$GPGSA,A,3,01,02,03,04,05,06,07,08,09,10,11,12,1.0,1.0,1.0"


@mark.parametrize(
    ("body", "checksum"),
    [
        (GGA_BODY, "*6E"),
        (GSA_BODY, "*30"),
        (
            "$GPRMC,215909.285,A,5232.252,N,01321.913,E,1314.7,090.0,251216,000.0,W",
            "*40",
        ),
        ("$GPGSA,A,3,10,07,05,02,29,04,08,13,,,,,1.72,1.03,1.38", "*0A"),
    ],
)
def test_compute_checksum(body: str, checksum: str):
    assert compute_checksum(body) == checksum


def test_checksum_skips_leading_marker():
    assert calculate_nmea_checksum("$A") == ord("A")
    assert calculate_nmea_checksum("$AB") == ord("A") ^ ord("B")
    assert calculate_nmea_checksum("$") == 0
    assert compute_checksum("$") == "*00"


def test_verify_checksum():
    assert verify_checksum(GGA_BODY, "6E")
    assert verify_checksum(GGA_BODY, "6e")
    assert not verify_checksum(GGA_BODY, "6F")
    assert not verify_checksum(GGA_BODY, "")
    assert not verify_checksum(GGA_BODY, "XY")


@mark.parametrize("body", [GGA_BODY, GSA_BODY, "$A", "$GPXXX,,,,", "$ "])
def test_verify_computed_checksum(body: str):
    assert verify_checksum(body, compute_checksum(body)[1:])


def test_single_character_change_breaks_checksum():
    checksum = compute_checksum(GGA_BODY)[1:]
    for index in range(1, len(GGA_BODY)):
        original = GGA_BODY[index]
        replacement = "0" if original != "0" else "1"
        corrupted = GGA_BODY[:index] + replacement + GGA_BODY[index + 1 :]
        assert not verify_checksum(corrupted, checksum), index


def test_split_checksum():
    assert split_checksum(GGA_BODY + "*6E") == (GGA_BODY, "6E")
    assert split_checksum(GGA_BODY + "*6E\r\n") == (GGA_BODY, "6E")
    assert split_checksum(GGA_BODY) == (GGA_BODY, None)
    assert split_checksum("$GPGGA*") == ("$GPGGA", "")
