"""Parsers and encoders of the standard NMEA-0183 sentence types."""

from typing import Iterable, NamedTuple, Optional

from trackdraw.nmea.registry import SentenceEncoder, SentenceParser, SentenceRegistry

from .gga import encode_gga, parse_gga
from .gsa import encode_gsa, parse_gsa
from .gsv import encode_gsv, parse_gsv
from .rmc import encode_rmc, parse_rmc

__all__ = (
    "encode_gga",
    "encode_gsa",
    "encode_gsv",
    "encode_rmc",
    "parse_gga",
    "parse_gsa",
    "parse_gsv",
    "parse_rmc",
    "register_standard_sentence_types",
    "SentenceType",
    "STANDARD_SENTENCE_TYPES",
)


class SentenceType(NamedTuple):
    """Parser and encoder of a sentence type, without talker ID."""

    parser: Optional[SentenceParser]
    encoder: Optional[SentenceEncoder]


#: Standard sentence types, keyed by their three-character type code
STANDARD_SENTENCE_TYPES: dict[str, SentenceType] = {
    "GGA": SentenceType(parse_gga, encode_gga),
    "RMC": SentenceType(parse_rmc, encode_rmc),
    "GSA": SentenceType(parse_gsa, encode_gsa),
    "GSV": SentenceType(parse_gsv, encode_gsv),
}


def register_standard_sentence_types(
    registry: SentenceRegistry, talkers: Iterable[str] = ("GP",)
) -> SentenceRegistry:
    """Registers the standard sentence types in a registry.

    Identifiers are opaque to the registry, so each talker gets its own
    registration (e.g. ``GPGGA`` and ``GNGGA`` for ``talkers=("GP", "GN")``).

    Returns:
        the registry itself
    """
    for talker in talkers:
        for type, sentence_type in STANDARD_SENTENCE_TYPES.items():
            registry.register(
                talker + type,
                parser=sentence_type.parser,
                encoder=sentence_type.encoder,
            )
    return registry
