"""NMEA-0183 sentence codec that converts between raw sentences and records.

Decoding and encoding never raise for problems with the sentence or the
record itself; they return a result object that holds either the value or
the error. The error handler of the codec (if any) is notified about each
failure as well, which is handy for logging.
"""

from __future__ import annotations

import logging

from dataclasses import dataclass
from typing import Any, Generic, Iterable, Iterator, Mapping, Optional, TypeVar

from .checksum import compute_checksum, split_checksum, verify_checksum
from .config import CodecConfig, ErrorHandler
from .errors import (
    ChecksumMismatchError,
    MalformedIdentifierError,
    NMEAError,
    NotAStringError,
    RegistrationError,
    UnknownSentenceTypeError,
)
from .registry import (
    IDENTIFIER_LENGTH,
    Record,
    SentenceEncoder,
    SentenceParser,
    SentenceRegistry,
)
from .sentences import register_standard_sentence_types

__all__ = (
    "DecodeResult",
    "EncodeResult",
    "NMEACodec",
    "Result",
    "decode",
    "encode",
    "get_default_codec",
    "register_sentence_type",
    "set_error_handler",
    "set_latitude_precision",
    "set_longitude_precision",
)

log = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a decoding or encoding operation: either a value or an
    error.
    """

    value: Optional[T] = None
    error: Optional[NMEAError] = None

    def __bool__(self) -> bool:
        return self.error is None

    @property
    def ok(self) -> bool:
        """Whether the operation succeeded."""
        return self.error is None

    def unwrap(self) -> T:
        """Returns the value of a successful operation.

        Raises:
            NMEAError: the error of the operation if it failed
        """
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore


class DecodeResult(Result[Record]):
    """Result of decoding a single sentence; the value is the record."""

    pass


class EncodeResult(Result[str]):
    """Result of encoding a single record; the value is the sentence with
    its checksum.
    """

    pass


class NMEACodec:
    """Codec that decodes NMEA-0183 sentences into records and encodes records
    into NMEA-0183 sentences, using the parsers and encoders in its sentence
    registry.
    """

    _config: CodecConfig
    _registry: SentenceRegistry

    def __init__(
        self,
        config: Optional[CodecConfig] = None,
        registry: Optional[SentenceRegistry] = None,
    ):
        """Constructor.

        Parameters:
            config: the configuration of the codec; `None` means to use the
                default configuration
            registry: the sentence registry of the codec; `None` means to
                create a new registry with the standard sentence types
        """
        self._config = config if config is not None else CodecConfig()
        self._registry = (
            registry
            if registry is not None
            else register_standard_sentence_types(SentenceRegistry())
        )

    @property
    def config(self) -> CodecConfig:
        """The current configuration snapshot of the codec."""
        return self._config

    @config.setter
    def config(self, value: CodecConfig) -> None:
        self._config = value

    @property
    def registry(self) -> SentenceRegistry:
        """The sentence registry of the codec."""
        return self._registry

    def decode(self, sentence: Any) -> DecodeResult:
        """Decodes a single sentence.

        Parameters:
            sentence: the sentence to decode, optionally followed by a line
                terminator

        Returns:
            the decoded record or the reason why the sentence was rejected
        """
        try:
            record = self._parse(sentence)
        except NMEAError as ex:
            self._report(ex)
            return DecodeResult(error=ex)
        return DecodeResult(value=record)

    def decode_many(self, lines: Iterable[str]) -> list[DecodeResult]:
        """Decodes multiple sentences, one result per non-empty line. Failing
        sentences do not prevent the decoding of the remaining ones.
        """
        return list(self.iter_decode(lines))

    def iter_decode(self, lines: Iterable[str]) -> Iterator[DecodeResult]:
        """Lazy variant of :meth:`decode_many()`."""
        for line in lines:
            if line.strip():
                yield self.decode(line)

    def encode(self, identifier: str, record: Mapping[str, Any]) -> EncodeResult:
        """Encodes a record into a sentence.

        Parameters:
            identifier: the five-character identifier of the sentence
            record: the fields of the sentence; the accepted keys depend on
                the sentence type

        Returns:
            the sentence with its checksum, without line terminator, or the
            reason why the record could not be encoded
        """
        config = self._config
        try:
            encoder = self._registry.lookup_encoder(identifier)
            if encoder is None:
                raise UnknownSentenceTypeError(identifier)
            body = encoder(identifier, record, config)
        except NMEAError as ex:
            self._report(ex)
            return EncodeResult(error=ex)
        return EncodeResult(value=body + compute_checksum(body))

    def register_sentence_type(
        self,
        identifier: str,
        parser: Optional[SentenceParser] = None,
        encoder: Optional[SentenceEncoder] = None,
    ) -> None:
        """Registers a parser and/or an encoder for a sentence identifier,
        replacing any earlier registration.
        """
        try:
            self._registry.register(identifier, parser=parser, encoder=encoder)
        except RegistrationError as ex:
            self._report(ex)
            raise

    def set_error_handler(self, handler: Optional[ErrorHandler]) -> None:
        """Sets the function to notify about failures; `None` to disable
        notifications.
        """
        self._config = self._config.with_error_handler(handler)

    def set_latitude_precision(self, precision: int) -> None:
        """Sets the number of fractional minute digits of encoded latitudes."""
        self._config = self._config.with_precision(latitude=precision)

    def set_longitude_precision(self, precision: int) -> None:
        """Sets the number of fractional minute digits of encoded longitudes."""
        self._config = self._config.with_precision(longitude=precision)

    def _parse(self, sentence: Any) -> Record:
        if not isinstance(sentence, str):
            raise NotAStringError(sentence)

        body, checksum = split_checksum(sentence.rstrip("\r\n"))
        if checksum is not None and not verify_checksum(body, checksum):
            raise ChecksumMismatchError(checksum, compute_checksum(body)[1:])

        tokens = body.split(",")

        identifier = tokens[0][1:]
        if len(identifier) != IDENTIFIER_LENGTH:
            raise MalformedIdentifierError(identifier)

        parser = self._registry.lookup_parser(identifier)
        if parser is None:
            raise UnknownSentenceTypeError(identifier)

        return parser(tokens)

    def _report(self, error: Exception) -> None:
        message = str(error)
        log.debug(message)
        handler = self._config.error_handler
        if handler is not None:
            handler(message)


_default_codec: Optional[NMEACodec] = None


def get_default_codec() -> NMEACodec:
    """Returns the process-wide codec that is used by the module-level
    functions.
    """
    global _default_codec
    if _default_codec is None:
        _default_codec = NMEACodec()
    return _default_codec


def decode(sentence: Any) -> DecodeResult:
    """Decodes a sentence with the default codec."""
    return get_default_codec().decode(sentence)


def encode(identifier: str, record: Mapping[str, Any]) -> EncodeResult:
    """Encodes a record with the default codec."""
    return get_default_codec().encode(identifier, record)


def register_sentence_type(
    identifier: str,
    parser: Optional[SentenceParser] = None,
    encoder: Optional[SentenceEncoder] = None,
) -> None:
    """Registers a sentence type in the default codec."""
    get_default_codec().register_sentence_type(identifier, parser, encoder)


def set_error_handler(handler: Optional[ErrorHandler]) -> None:
    """Sets the error handler of the default codec."""
    get_default_codec().set_error_handler(handler)


def set_latitude_precision(precision: int) -> None:
    """Sets the latitude precision of the default codec."""
    get_default_codec().set_latitude_precision(precision)


def set_longitude_precision(precision: int) -> None:
    """Sets the longitude precision of the default codec."""
    get_default_codec().set_longitude_precision(precision)
