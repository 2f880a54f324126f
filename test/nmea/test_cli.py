import json

from click.testing import CliRunner
from datetime import datetime, timezone
from pytest import fixture

from trackdraw.nmea.cli import main
from trackdraw.nmea.track import Track, generate_nmea_log, load_csv

CSV_POINTS = (
    "52.537525,13.365224\n"
    "52.537525,13.375224\n"
    "52.547525,13.375224\n"
    "52.547525,13.365224\n"
)
START = datetime(2016, 12, 25, 21, 59, 9, 285000, tzinfo=timezone.utc)
NMEA_LOG = generate_nmea_log(Track(points=load_csv(CSV_POINTS)[0], start=START))


@fixture
def runner() -> CliRunner:
    return CliRunner()


def test_checksum(runner: CliRunner):
    body = "$GPGGA,215909.285,5232.252,N,01321.913,E,1,12,1.0,0.0,M,0.0,M,,"

    result = runner.invoke(main, ["checksum", body])
    assert result.exit_code == 0
    assert result.output == "*6E\n"

    result = runner.invoke(main, ["checksum", body[1:]])
    assert result.output == "*6E\n"

    result = runner.invoke(main, ["checksum", body + "*00"])
    assert result.output == "*6E\n"


def test_encode(runner: CliRunner, tmp_path):
    path = tmp_path / "track.csv"
    path.write_text(CSV_POINTS)

    result = runner.invoke(
        main, ["encode", str(path), "--start", "2016-12-25T21:59:09.285Z"]
    )
    assert result.exit_code == 0
    assert result.output == NMEA_LOG
    assert result.output.startswith(
        "$GPGGA,215909.285,5232.252,N,01321.913,E,1,12,1.0,0.0,M,0.0,M,,*6E\n"
    )


def test_encode_with_precision(runner: CliRunner, tmp_path):
    path = tmp_path / "track.csv"
    path.write_text(CSV_POINTS)

    result = runner.invoke(
        main,
        [
            "encode",
            str(path),
            "--start",
            "2016-12-25T21:59:09.285+00:00",
            "--lat-precision",
            "5",
            "--lon-precision",
            "5",
        ],
    )
    assert result.exit_code == 0
    assert result.output.startswith(
        "$GPGGA,215909.285,5232.25150,N,01321.91344,E,1,12,1.0,0.0,M,0.0,M,,*68\n"
    )


def test_encode_invalid_arguments(runner: CliRunner, tmp_path):
    path = tmp_path / "track.csv"
    path.write_text(CSV_POINTS)

    result = runner.invoke(main, ["encode", str(path), "--frequency", "0"])
    assert result.exit_code == 2

    result = runner.invoke(main, ["encode", str(path), "--start", "yesterday"])
    assert result.exit_code == 2
    assert "invalid ISO 8601 timestamp" in result.output


def test_encode_skips_invalid_lines(runner: CliRunner, tmp_path):
    path = tmp_path / "track.csv"
    path.write_text(CSV_POINTS + "not,a point\n")

    result = runner.invoke(main, ["encode", str(path)])
    assert result.exit_code == 0
    assert "Skipped 1 invalid line(s)" in result.output
    assert result.output.count("$GPGGA") == 4


def test_decode(runner: CliRunner, tmp_path):
    path = tmp_path / "track.nmea"
    path.write_text(NMEA_LOG)

    result = runner.invoke(main, ["decode", str(path)])
    assert result.exit_code == 0
    assert result.output == (
        "52.53753333,13.36521667\n"
        "52.53753333,13.37521667\n"
        "52.54753333,13.37521667\n"
        "52.54753333,13.36521667\n"
    )


def test_decode_json(runner: CliRunner, tmp_path):
    path = tmp_path / "track.nmea"
    path.write_text(NMEA_LOG)

    result = runner.invoke(main, ["decode", str(path), "--format", "json"])
    assert result.exit_code == 0

    summary = json.loads(result.output)
    assert summary["start"] == "2016-12-25T21:59:09.285000+00:00"
    assert summary["frequency"] == 1.0
    assert summary["gga"] == 4
    assert summary["rmc"] == 4
    assert summary["other"] == 4
    assert summary["points"][0] == [52.53753333, 13.36521667]


def test_encode_then_decode(runner: CliRunner, tmp_path):
    csv_path = tmp_path / "track.csv"
    csv_path.write_text(CSV_POINTS * 2)
    nmea_path = tmp_path / "track.nmea"

    result = runner.invoke(main, ["encode", str(csv_path), "--frequency", "2"])
    assert result.exit_code == 0
    nmea_path.write_text(result.output)

    result = runner.invoke(main, ["decode", str(nmea_path), "--format", "json"])
    summary = json.loads(result.output)
    assert summary["frequency"] == 2.0
    assert len(summary["points"]) == 8


def test_encode_skips_non_finite_coordinates(runner: CliRunner, tmp_path):
    path = tmp_path / "track.csv"
    path.write_text("nan,nan\n" + CSV_POINTS + "52.5,inf\n")

    result = runner.invoke(main, ["encode", str(path)])
    assert result.exit_code == 0
    assert "Skipped 2 invalid line(s)" in result.output
    assert result.output.count("$GPRMC") == 4


def test_decode_log_with_void_rmc_sentence(runner: CliRunner, tmp_path):
    path = tmp_path / "track.nmea"
    path.write_text("$GPRMC,235947.000,V,,,,,,,,,*21\n" + NMEA_LOG)

    result = runner.invoke(main, ["decode", str(path), "--format", "json"])
    assert result.exit_code == 0

    summary = json.loads(result.output)
    assert summary["rmc"] == 4
    assert summary["other"] == 5
    assert summary["start"] == "2016-12-25T21:59:09.285000+00:00"
