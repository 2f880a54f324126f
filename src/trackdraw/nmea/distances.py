"""Distance and bearing calculation routines."""

from math import asin, atan2, cos, degrees, radians, sin, sqrt
from typing import Protocol

from .constants import SPHERICAL_EARTH

__all__ = ("haversine", "initial_bearing")


class LatLon(Protocol):
    """Interface of objects that have a latitude and a longitude, in
    decimal degrees.
    """

    @property
    def lat(self) -> float: ...

    @property
    def lon(self) -> float: ...


def haversine(first: LatLon, second: LatLon, datum=SPHERICAL_EARTH) -> float:
    """Returns the distance of two points given in spherical coordinates
    (latitude and longitude) using the Haversine formula.

    Parameters:
        first: the first point
        second: the second point

    Returns:
        the distance of the two points, in metres
    """
    first_lat = radians(first.lat)
    second_lat = radians(second.lat)
    lat_diff = first_lat - second_lat
    lon_diff = radians(first.lon - second.lon)
    d = (
        sin(lat_diff * 0.5) ** 2
        + cos(first_lat) * cos(second_lat) * sin(lon_diff * 0.5) ** 2
    )
    return 2 * datum.MEAN_RADIUS_IN_METERS * asin(sqrt(d))


def initial_bearing(first: LatLon, second: LatLon) -> float:
    """Returns the initial bearing of the great circle path from the first
    point to the second one.

    Returns:
        the bearing in degrees; zero is true North and the angle increases
        clockwise up to 360 degrees
    """
    first_lat = radians(first.lat)
    second_lat = radians(second.lat)
    lon_diff = radians(second.lon - first.lon)

    y = sin(lon_diff) * cos(second_lat)
    x = cos(first_lat) * sin(second_lat) - sin(first_lat) * cos(second_lat) * cos(
        lon_diff
    )
    return (degrees(atan2(y, x)) + 360) % 360
