"""Exception classes that are thrown or reported by the NMEA codec."""

from typing import Optional

__all__ = (
    "Error",
    "NMEAError",
    "NotAStringError",
    "MalformedIdentifierError",
    "ChecksumMismatchError",
    "UnknownSentenceTypeError",
    "InsufficientFieldsError",
    "InvalidRecordError",
    "InvalidDateTimeError",
    "RegistrationError",
)


class Error(RuntimeError):
    """Base class for all exceptions that are thrown from the package."""

    pass


class NMEAError(Error):
    """Superclass for all the errors that may occur while decoding or
    encoding a single NMEA sentence.
    """

    pass


class NotAStringError(NMEAError):
    """Error reported when the sentence to decode is not a string."""

    def __init__(self, value: object):
        super().__init__(f"sentence is not a string: {type(value).__name__}")
        self.value = value


class MalformedIdentifierError(NMEAError):
    """Error reported when the sentence identifier after the leading ``$``
    marker is not exactly five characters long.
    """

    def __init__(self, identifier: str):
        super().__init__(
            f"sentence identifier must be exactly 5 characters: {identifier!r}"
        )
        self.identifier = identifier


class ChecksumMismatchError(NMEAError):
    """Error reported when the checksum at the end of a sentence does not
    match the checksum computed from its body.
    """

    def __init__(self, expected: str, actual: str):
        """Constructor.

        Parameters:
            expected: the checksum that was found in the sentence
            actual: the checksum computed from the body of the sentence
        """
        super().__init__(f"checksum mismatch: expected {expected!r}, got {actual!r}")
        self.expected = expected
        self.actual = actual


class UnknownSentenceTypeError(NMEAError):
    """Error reported when there is no parser or encoder registered for a
    sentence identifier.
    """

    def __init__(self, identifier: str):
        super().__init__(f"sentence id not found: {identifier!r}")
        self.identifier = identifier


class InsufficientFieldsError(NMEAError):
    """Error thrown by sentence parsers when the sentence has fewer tokens
    than the minimum required by its shape.
    """

    def __init__(self, identifier: Optional[str], required: int, actual: int):
        super().__init__(
            f"{identifier or 'sentence'}: not enough tokens "
            f"(need at least {required}, got {actual})"
        )
        self.identifier = identifier
        self.required = required
        self.actual = actual


class RegistrationError(Error):
    """Error thrown when a sentence type cannot be registered."""

    pass


class InvalidRecordError(NMEAError):
    """Error thrown by sentence encoders when the record to encode does not
    fit the shape of the sentence.
    """

    pass


class InvalidDateTimeError(NMEAError):
    """Error thrown when an NMEA date or time of day does not denote a valid
    point in time, e.g. the empty date of a void RMC sentence.
    """

    def __init__(self, date: str, time: str):
        super().__init__(f"invalid date or time: {date!r}, {time!r}")
        self.date = date
        self.time = time
