"""Registry that maps sentence identifiers to sentence parsers and encoders."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Mapping, Optional, TYPE_CHECKING

from .errors import RegistrationError

if TYPE_CHECKING:
    from .config import CodecConfig

__all__ = (
    "IDENTIFIER_LENGTH",
    "Record",
    "SentenceEncoder",
    "SentenceParser",
    "SentenceRegistry",
)


Record = dict[str, Any]
"""Structured representation of a decoded sentence: a mapping from field
names to values. The available fields depend on the type of the sentence.
"""

SentenceParser = Callable[[list[str]], Record]
"""Type of functions that turn the comma-separated tokens of a sentence into
a record. The first token is the ``$`` marker followed by the identifier.
"""

SentenceEncoder = Callable[[str, Mapping[str, Any], "CodecConfig"], str]
"""Type of functions that encode a record into the body of a sentence (without
checksum), given the sentence identifier and the configuration of the codec.
"""


#: Length of sentence identifiers (talker ID and sentence type)
IDENTIFIER_LENGTH = 5


class SentenceRegistry:
    """Ordered registry of sentence parsers and encoders, keyed by the
    five-character sentence identifier (e.g. ``GPGGA``).

    Registering a parser or an encoder for an identifier that already has one
    replaces the old one; lookups always see the latest registration.
    """

    _parsers: dict[str, SentenceParser]
    _encoders: dict[str, SentenceEncoder]

    def __init__(self):
        self._parsers = {}
        self._encoders = {}

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._parsers or identifier in self._encoders

    def __iter__(self) -> Iterator[str]:
        return iter(self.identifiers)

    def copy(self) -> SentenceRegistry:
        """Returns a shallow copy of the registry."""
        result = self.__class__()
        result._parsers.update(self._parsers)
        result._encoders.update(self._encoders)
        return result

    @property
    def identifiers(self) -> list[str]:
        """The identifiers that have a parser or an encoder, in registration
        order.
        """
        return list(dict.fromkeys([*self._parsers, *self._encoders]))

    def lookup_encoder(self, identifier: str) -> Optional[SentenceEncoder]:
        """Returns the encoder registered for the given identifier, or
        ``None`` if there is no such encoder.
        """
        return self._encoders.get(identifier)

    def lookup_parser(self, identifier: str) -> Optional[SentenceParser]:
        """Returns the parser registered for the given identifier, or
        ``None`` if there is no such parser.
        """
        return self._parsers.get(identifier)

    def register(
        self,
        identifier: str,
        parser: Optional[SentenceParser] = None,
        encoder: Optional[SentenceEncoder] = None,
    ) -> None:
        """Registers a parser, an encoder or both for a sentence identifier.

        Parameters:
            identifier: the five-character sentence identifier
            parser: the parser to register; `None` leaves the current parser
                of the identifier intact
            encoder: the encoder to register; `None` leaves the current
                encoder of the identifier intact

        Raises:
            RegistrationError: if the identifier is invalid or neither a parser
                nor an encoder was given
        """
        if not isinstance(identifier, str) or len(identifier) != IDENTIFIER_LENGTH:
            raise RegistrationError(
                f"sentence identifier must be exactly {IDENTIFIER_LENGTH} "
                f"characters: {identifier!r}"
            )

        if parser is None and encoder is None:
            raise RegistrationError(
                f"invalid sentence type {identifier!r}: no parser or encoder"
            )

        if parser is not None:
            # re-inserting moves the identifier to the end of the order
            self._parsers.pop(identifier, None)
            self._parsers[identifier] = parser

        if encoder is not None:
            self._encoders.pop(identifier, None)
            self._encoders[identifier] = encoder

    def unregister(self, identifier: str) -> None:
        """Removes the parser and the encoder of the given identifier. Does
        nothing if the identifier is not registered.
        """
        self._parsers.pop(identifier, None)
        self._encoders.pop(identifier, None)
