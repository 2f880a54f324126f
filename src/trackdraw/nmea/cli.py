"""Command line interface for converting tracks to and from NMEA logs."""

from __future__ import annotations

import click
import logging
import sys

from datetime import datetime, timezone
from typing import Optional

from .checksum import compute_checksum
from .codec import NMEACodec
from .config import CodecConfig
from .track import Track, generate_csv, generate_nmea_log, load_csv, load_nmea_log

__all__ = ("main",)


def _parse_start_time(value: Optional[str]) -> datetime:
    if not value:
        return datetime.now(timezone.utc)

    try:
        result = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        raise click.BadParameter(f"invalid ISO 8601 timestamp: {value!r}") from None

    return result if result.tzinfo else result.replace(tzinfo=timezone.utc)


@click.group()
@click.option(
    "-v", "--verbose", is_flag=True, default=False, help="show diagnostic messages"
)
def main(verbose: bool = False):
    """Converts GPS tracks between CSV files and NMEA-0183 logs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


@main.command()
@click.argument("file", type=click.File("r"))
@click.option(
    "--start",
    metavar="TIME",
    default=None,
    help="time of the first point in ISO 8601 format; defaults to the current time",
)
@click.option(
    "--frequency",
    metavar="HZ",
    default=1.0,
    type=click.FloatRange(min=0, min_open=True),
    help="sampling frequency of the points, in Hz",
)
@click.option(
    "--lat-precision",
    metavar="DIGITS",
    default=3,
    type=click.IntRange(min=0),
    help="number of fractional minute digits in latitudes",
)
@click.option(
    "--lon-precision",
    metavar="DIGITS",
    default=3,
    type=click.IntRange(min=0),
    help="number of fractional minute digits in longitudes",
)
def encode(
    file,
    start: Optional[str] = None,
    frequency: float = 1.0,
    lat_precision: int = 3,
    lon_precision: int = 3,
):
    """Converts a CSV file with one 'latitude,longitude' pair per line into
    an NMEA log.
    """
    points, invalid = load_csv(file.read())
    if invalid:
        click.echo(f"Skipped {invalid} invalid line(s)", err=True)

    track = Track(points=points, start=_parse_start_time(start), frequency=frequency)
    codec = NMEACodec(
        CodecConfig(latitude_precision=lat_precision, longitude_precision=lon_precision)
    )
    click.echo(generate_nmea_log(track, codec), nl=False)


@main.command()
@click.argument("file", type=click.File("r"))
@click.option(
    "--format",
    default="csv",
    type=click.Choice(["csv", "json"]),
    help=(
        "the output format. 'csv' prints the points of the track. 'json' "
        "prints the points together with the inferred start time, sampling "
        "frequency and sentence counts."
    ),
)
def decode(file, format: str = "csv"):
    """Extracts the track from an NMEA log."""
    loaded = load_nmea_log(file.read())

    if format == "json":
        from json import dumps

        track = loaded.track
        summary = {
            "start": track.start.isoformat(),
            "frequency": track.frequency,
            "gga": loaded.gga_count,
            "rmc": loaded.rmc_count,
            "other": loaded.other_count,
            "points": [[point.lat, point.lon] for point in track.points],
        }
        click.echo(dumps(summary, indent=2))
    else:
        click.echo(generate_csv(loaded.points), nl=False)


@main.command()
@click.argument("body")
def checksum(body: str):
    """Prints the checksum of a sentence body such as '$GPGGA,...'."""
    if not body.startswith("$"):
        body = "$" + body
    click.echo(compute_checksum(body.partition("*")[0]))


if __name__ == "__main__":
    main()  # type: ignore
