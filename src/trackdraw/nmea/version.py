"""Version information for the trackdraw NMEA package."""

__version_info__ = (1, 0, 0)
__version__ = ".".join(str(x) for x in __version_info__)
