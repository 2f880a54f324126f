"""NMEA-0183 sentence codec for drawn GPS tracks."""

from .checksum import compute_checksum, verify_checksum
from .codec import (
    DecodeResult,
    EncodeResult,
    NMEACodec,
    decode,
    encode,
    get_default_codec,
    register_sentence_type,
    set_error_handler,
    set_latitude_precision,
    set_longitude_precision,
)
from .config import CodecConfig
from .errors import (
    ChecksumMismatchError,
    Error,
    InsufficientFieldsError,
    InvalidDateTimeError,
    InvalidRecordError,
    MalformedIdentifierError,
    NMEAError,
    NotAStringError,
    RegistrationError,
    UnknownSentenceTypeError,
)
from .registry import SentenceRegistry
from .time import year_to_full_year
from .version import __version__, __version_info__

__all__ = (
    "__version__",
    "__version_info__",
    "ChecksumMismatchError",
    "CodecConfig",
    "compute_checksum",
    "decode",
    "DecodeResult",
    "encode",
    "EncodeResult",
    "Error",
    "get_default_codec",
    "InsufficientFieldsError",
    "InvalidDateTimeError",
    "InvalidRecordError",
    "MalformedIdentifierError",
    "NMEACodec",
    "NMEAError",
    "NotAStringError",
    "register_sentence_type",
    "RegistrationError",
    "SentenceRegistry",
    "set_error_handler",
    "set_latitude_precision",
    "set_longitude_precision",
    "UnknownSentenceTypeError",
    "verify_checksum",
    "year_to_full_year",
)
