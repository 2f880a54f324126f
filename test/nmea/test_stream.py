from datetime import datetime, timezone
from pytest import raises

from trackdraw.nmea.codec import NMEACodec
from trackdraw.nmea.errors import UnknownSentenceTypeError
from trackdraw.nmea.stream import (
    MAX_SENTENCE_LENGTH,
    NMEAStreamParser,
    create_nmea_encoder,
    create_nmea_parser,
)

GGA = b"$GPGGA,092750.000,5321.6802,N,00630.3372,W,1,8,1.03,61.7,M,55.2,M,,*76"
GSA = b"$GPGSA,A,3,10,07,05,02,29,04,08,13,,,,,1.72,1.03,1.38*0A"
GSV = b"$GPGSV,3,1,11,10,63,137,17,07,61,098,15,05,59,290,20,08,54,157,30*70"


def test_nmea_parser():
    parser = create_nmea_parser(NMEACodec())
    data = GGA + b"\r\n" + GSA + b"\r\n" + GSV + b"\r\n"

    records = parser(data)
    assert [record["id"] for record in records] == ["GPGGA", "GPGSA", "GPGSV"]
    assert records[1]["satellites"] == [10, 7, 5, 2, 29, 4, 8, 13]


def test_nmea_parser_with_split_chunks():
    parser = create_nmea_parser(NMEACodec())
    data = GGA + b"\r\n" + GSA + b"\n"

    records = []
    for i in range(0, len(data), 7):
        records.extend(parser(data[i : i + 7]))

    assert [record["id"] for record in records] == ["GPGGA", "GPGSA"]


def test_nmea_parser_skips_invalid_lines():
    parser = NMEAStreamParser(NMEACodec())
    data = b"".join(
        (
            b"garbage\r\n",
            b"\r\n",
            GGA[:-1] + b"0\r\n",
            b"$GPGGA,\xff\xfe\r\n",
            b"$" + b"X" * (MAX_SENTENCE_LENGTH + 10) + b"\r\n",
            GSA + b"\r\n",
        )
    )
    assert [record["id"] for record in parser.feed(data)] == ["GPGSA"]


def test_nmea_parser_reset():
    parser = NMEAStreamParser(NMEACodec())
    assert parser.feed(GGA[:20]) == []
    parser.reset()
    assert parser.feed(GGA[20:] + b"\r\n") == []
    assert len(parser.feed(GSV + b"\r\n")) == 1


def test_nmea_encoder():
    encoder = create_nmea_encoder(NMEACodec())
    record = {
        "msgs": 3,
        "mnum": 1,
        "count": 11,
        "sat": [
            {"prn": 10, "el": 63, "az": 137, "ss": 17},
            {"prn": 7, "el": 61, "az": 98, "ss": 15},
            {"prn": 5, "el": 59, "az": 290, "ss": 20},
            {"prn": 8, "el": 54, "az": 157, "ss": 30},
        ],
    }
    assert encoder("GPGSV", record) == GSV + b"\r\n"

    record = {
        "date": datetime(2016, 12, 25, 21, 59, 9, 285000, tzinfo=timezone.utc),
        "lat": 52.537525,
        "lon": 13.365224,
        "fix": 1,
        "satellites": 12,
        "hdop": 1.0,
        "altitude": 0.0,
        "above_geoid": 0.0,
    }
    assert encoder("GPGGA", record) == (
        b"$GPGGA,215909.285,5232.252,N,01321.913,E,1,12,1.0,0.0,M,0.0,M,,*6E\r\n"
    )


def test_nmea_encoder_unknown_sentence_type():
    encoder = create_nmea_encoder(NMEACodec())
    with raises(UnknownSentenceTypeError):
        encoder("GPXXX", {})
