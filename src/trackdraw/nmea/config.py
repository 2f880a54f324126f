"""Configuration of the NMEA codec."""

from dataclasses import dataclass, replace
from typing import Callable, Optional

__all__ = ("CodecConfig", "ErrorHandler")


ErrorHandler = Callable[[str], None]
"""Type of functions that are notified about decoding and encoding errors
with a human-readable message.
"""


@dataclass(frozen=True)
class CodecConfig:
    """Immutable snapshot of the settings of an NMEA codec.

    Codecs never modify a configuration object; changing a setting replaces
    the snapshot of the codec with a new one, so an encoder that is already
    running keeps on using the settings that were in effect when it started.
    """

    latitude_precision: int = 3
    """Number of fractional minute digits in encoded latitudes"""

    longitude_precision: int = 3
    """Number of fractional minute digits in encoded longitudes"""

    error_handler: Optional[ErrorHandler] = None
    """Function to notify about decoding and encoding failures; ``None`` if
    failures should only be reported in the results
    """

    def __post_init__(self):
        if self.latitude_precision < 0:
            raise ValueError("latitude precision must be non-negative")
        if self.longitude_precision < 0:
            raise ValueError("longitude precision must be non-negative")

    def with_precision(
        self, latitude: Optional[int] = None, longitude: Optional[int] = None
    ) -> "CodecConfig":
        """Returns a copy of this configuration with the given precisions.

        Parameters:
            latitude: the new latitude precision; `None` means to leave the
                current value intact.
            longitude: the new longitude precision; `None` means to leave the
                current value intact.
        """
        changes = {}
        if latitude is not None:
            changes["latitude_precision"] = int(latitude)
        if longitude is not None:
            changes["longitude_precision"] = int(longitude)
        return replace(self, **changes) if changes else self

    def with_error_handler(self, handler: Optional[ErrorHandler]) -> "CodecConfig":
        """Returns a copy of this configuration with the given error handler."""
        return replace(self, error_handler=handler)
