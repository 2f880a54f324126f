"""Constants used in several places throughout the package."""

__all__ = ("KNOTS_PER_METER_PER_SECOND", "SPHERICAL_EARTH")


class SPHERICAL_EARTH:
    """Spherical Earth model used for distances and bearings along a drawn
    track.
    """

    MEAN_RADIUS_IN_METERS: float = 6371000.0
    """Mean radius of Earth, as used by common web mapping libraries"""


#: Conversion factor from metres per second to knots
KNOTS_PER_METER_PER_SECOND = 1.943844
