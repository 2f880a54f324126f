"""Conversion between drawn GPS tracks and NMEA or CSV logs.

A track is a sequence of points that are assumed to have been sampled by a GPS
receiver at a constant frequency, starting at a given time. Exporting a track
produces a GGA, a GSA and an RMC sentence per point; importing a log recovers
the points from the GGA sentences and infers the sampling frequency and the
start time from the GGA and RMC sentences.
"""

from __future__ import annotations

import logging

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from math import isfinite
from typing import Iterable, Optional

from .codec import NMEACodec
from .constants import KNOTS_PER_METER_PER_SECOND
from .distances import haversine, initial_bearing
from .errors import InvalidDateTimeError
from .fields import encode_value
from .registry import Record
from .time import MILLISECONDS_IN_DAY, parse_date_time, time_to_milliseconds

__all__ = (
    "generate_csv",
    "generate_nmea_log",
    "infer_frequency",
    "infer_start_time",
    "load_csv",
    "load_nmea_log",
    "LoadedTrack",
    "Track",
    "TrackPoint",
)

log = logging.getLogger(__name__)


#: Number of satellites reported in the generated GGA and GSA sentences
DEFAULT_SATELLITE_COUNT = 12

#: Identifier of the sentences that carry the points of a track
POSITION_SENTENCE = "GPGGA"

#: Identifier of the sentences that carry the date of a track
DATE_SENTENCE = "GPRMC"


@dataclass(frozen=True)
class TrackPoint:
    """A single point of a track, in decimal degrees."""

    lat: float
    lon: float


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Track:
    """A sequence of points sampled at a constant frequency."""

    points: list[TrackPoint] = field(default_factory=list)
    """The points of the track"""

    start: datetime = field(default_factory=_utc_now)
    """Time when the first point was sampled"""

    frequency: float = 1.0
    """Sampling frequency, in Hz"""

    def __len__(self) -> int:
        return len(self.points)

    def bearing_at(self, index: int) -> Optional[float]:
        """Returns the bearing of the track at the given point, in degrees.

        The bearing of a point is the bearing of the segment that starts at
        the point; the last point uses the segment that ends there.

        Returns:
            the bearing, or `None` if the track has less than two points
        """
        if len(self.points) < 2:
            return None

        src, dst = index, index + 1
        if dst == len(self.points):
            src, dst = index - 1, index

        return initial_bearing(self.points[src], self.points[dst])

    def distance_to_next(self, index: int) -> Optional[float]:
        """Returns the distance between a point and the next one in metres,
        or `None` for the last point.
        """
        if index + 1 >= len(self.points):
            return None
        return haversine(self.points[index], self.points[index + 1])

    def distance_to_previous(self, index: int) -> Optional[float]:
        """Returns the distance between a point and the previous one in
        metres, or `None` for the first point.
        """
        if index <= 0:
            return None
        return haversine(self.points[index], self.points[index - 1])

    def speed_at(self, index: int) -> Optional[float]:
        """Returns the speed at the given point, in knots.

        The speed is derived from the distance to the next point, or to the
        previous one if the next point is missing or at the same location.

        Returns:
            the speed, or `None` if the track has less than two points
        """
        if len(self.points) < 2:
            return None
        distance = (
            self.distance_to_next(index) or self.distance_to_previous(index) or 0.0
        )
        return distance * self.frequency * KNOTS_PER_METER_PER_SECOND

    def time_at(self, index: int) -> datetime:
        """Returns the time when the given point was sampled. Fractions of
        milliseconds are truncated.
        """
        return self.start + timedelta(milliseconds=int(1000 * index / self.frequency))


@dataclass
class LoadedTrack:
    """Track loaded from an NMEA log, with statistics about the log."""

    track: Track
    """The track recovered from the log"""

    gga_count: int = 0
    """Number of valid position sentences in the log"""

    rmc_count: int = 0
    """Number of valid recommended minimum sentences in the log"""

    other_count: int = 0
    """Number of other or invalid sentences in the log"""

    @property
    def points(self) -> list[TrackPoint]:
        return self.track.points


def generate_nmea_log(
    track: Track,
    codec: Optional[NMEACodec] = None,
    satellites: int = DEFAULT_SATELLITE_COUNT,
) -> str:
    """Generates an NMEA log from a track.

    Each point is represented by a GGA, a GSA and an RMC sentence, each of
    them terminated by a newline.

    Parameters:
        track: the track to export
        codec: the codec to encode the sentences with; `None` means to use a
            codec with the default configuration
        satellites: number of satellites to report in the GGA and GSA
            sentences

    Raises:
        NMEAError: if the codec cannot encode one of the sentences
    """
    codec = codec or NMEACodec()
    lines = []

    for index, point in enumerate(track.points):
        date = track.time_at(index)
        gga = {
            "date": date,
            "lat": point.lat,
            "lon": point.lon,
            "fix": 1,
            "satellites": satellites,
            "hdop": 1.0,
            "altitude": 0.0,
            "above_geoid": 0.0,
        }
        gsa = {
            "status": "A",
            "fix": 3,
            "satellites": satellites,
            "pdop": 1.0,
            "hdop": 1.0,
            "vdop": 1.0,
        }
        rmc = {
            "date": date,
            "status": "A",
            "lat": point.lat,
            "lon": point.lon,
            "speed": track.speed_at(index),
            "course": track.bearing_at(index),
            "variation": 0.0,
        }

        lines.append(codec.encode("GPGGA", gga).unwrap())
        lines.append(codec.encode("GPGSA", gsa).unwrap())
        lines.append(codec.encode("GPRMC", rmc).unwrap())

    return "".join(line + "\n" for line in lines)


def infer_frequency(times: list[str]) -> Optional[float]:
    """Infers the sampling frequency of a log from the times of its first two
    position sentences.

    The time between two consecutive samples is assumed to be less than a
    day, so a second sample with a smaller time of day was taken after
    midnight.

    Parameters:
        times: times of day in ``HHMMSS.sss`` format

    Returns:
        the frequency in Hz, or `None` if it cannot be determined
    """
    if len(times) < 2:
        return None

    t0 = time_to_milliseconds(times[0])
    t1 = time_to_milliseconds(times[1])
    period = t1 + (MILLISECONDS_IN_DAY if t1 < t0 else 0) - t0

    return 1000.0 / period if period > 0 else None


def infer_start_time(
    gga_times: list[str],
    rmc_times: list[str],
    rmc_dates: list[str],
    gga_first: bool,
    *,
    now: Optional[datetime] = None,
) -> datetime:
    """Infers the start time of a log from its first GGA and RMC sentences.

    Parameters:
        gga_times: times of day of the GGA sentences
        rmc_times: times of day of the RMC sentences
        rmc_dates: dates of the RMC sentences
        gga_first: whether the first GGA sentence precedes the first RMC one
        now: the current time; used when the log has no date information

    Returns:
        the inferred start time, in UTC

    Raises:
        InvalidDateTimeError: if the first RMC sentence has an invalid date;
            :func:`load_nmea_log()` never passes such sentences here
    """
    if now is None:
        now = _utc_now()
    elif now.tzinfo is None:
        # naive datetimes are assumed to be in UTC already
        now = now.replace(tzinfo=timezone.utc)

    if not rmc_times:
        if not gga_times:
            return now
        midnight = now.astimezone(timezone.utc).replace(
            hour=0, minute=0, second=0, microsecond=0
        )
        return midnight + timedelta(milliseconds=time_to_milliseconds(gga_times[0]))

    if not gga_first:
        return parse_date_time(rmc_dates[0], rmc_times[0], now=now)

    result = parse_date_time(rmc_dates[0], "", now=now) + timedelta(
        milliseconds=time_to_milliseconds(gga_times[0])
    )
    if time_to_milliseconds(rmc_times[0]) < time_to_milliseconds(gga_times[0]):
        # the first GGA sentence was sent before midnight, the first RMC after it
        result -= timedelta(days=1)
    return result


def _has_valid_date(record: Record, now: Optional[datetime]) -> bool:
    try:
        parse_date_time(record["date"], record["time"], now=now)
    except InvalidDateTimeError:
        log.debug(f"Ignoring RMC sentence without valid date: {record['date']!r}")
        return False
    return True


def load_nmea_log(
    text: str, codec: Optional[NMEACodec] = None, *, now: Optional[datetime] = None
) -> LoadedTrack:
    """Loads a track from an NMEA log.

    Sentences that cannot be decoded are counted and skipped.

    Parameters:
        text: the contents of the log, one sentence per line
        codec: the codec to decode the sentences with; `None` means to use a
            codec with the default configuration
        now: the current time; used to fill in missing date information and
            to infer the century of dates

    Returns:
        the loaded track and the statistics of the log
    """
    codec = codec or NMEACodec()

    points: list[TrackPoint] = []
    gga_times: list[str] = []
    rmc_times: list[str] = []
    rmc_dates: list[str] = []
    gga_first: Optional[bool] = None
    other_count = 0

    for result in codec.iter_decode(text.split("\n")):
        record = result.value if result.ok else None
        identifier = record.get("id") if record else None

        if identifier == POSITION_SENTENCE:
            points.append(TrackPoint(record["latitude"], record["longitude"]))
            gga_times.append(record["time"])
            if gga_first is None:
                gga_first = True
        elif identifier == DATE_SENTENCE and _has_valid_date(record, now):
            rmc_times.append(record["time"])
            rmc_dates.append(record["date"])
            if gga_first is None:
                gga_first = False
        else:
            other_count += 1

    frequency = infer_frequency(gga_times)
    if frequency is not None:
        log.info(f"GPS frequency computed: {frequency}Hz")
    else:
        frequency = 1.0
        log.info(f"Could not determine the GPS frequency (will use {frequency}Hz)")

    start = infer_start_time(gga_times, rmc_times, rmc_dates, bool(gga_first), now=now)
    log.info(f"Start time: {start.isoformat()}")
    log.info(
        f"Read {len(gga_times)} GGA, {len(rmc_times)} RMC and {other_count} "
        f"other/invalid sentences"
    )

    return LoadedTrack(
        track=Track(points=points, start=start, frequency=frequency),
        gga_count=len(gga_times),
        rmc_count=len(rmc_times),
        other_count=other_count,
    )


def generate_csv(points: Iterable[TrackPoint]) -> str:
    """Generates a CSV file with one ``latitude,longitude`` line per point."""
    return "".join(
        f"{encode_value(point.lat)},{encode_value(point.lon)}\n" for point in points
    )


def load_csv(text: str) -> tuple[list[TrackPoint], int]:
    """Loads the points of a track from a CSV file with one
    ``latitude,longitude`` line per point.

    Returns:
        the points and the number of lines that did not contain a valid
        coordinate pair
    """
    points: list[TrackPoint] = []
    invalid = 0

    for line in text.split("\n"):
        if not line:
            continue

        parts = line.strip().split(",")
        try:
            lat, lon = float(parts[0]), float(parts[1])
        except (IndexError, ValueError):
            invalid += 1
            continue

        if isfinite(lat) and isfinite(lon):
            points.append(TrackPoint(lat, lon))
        else:
            invalid += 1

    if invalid:
        log.info(f"Skipped {invalid} invalid coordinates")

    return points, invalid
