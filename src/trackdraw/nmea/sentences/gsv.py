"""GSV sentences: satellites in view.

::

    $GPGSV,x,x,xx,xx,xx,xxx,xx,...*hh

    1 = total number of GSV sentences in this cycle
    2 = number of this sentence
    3 = total number of satellites in view
    4 = satellite PRN number
    5 = elevation, in degrees (at most 90)
    6 = azimuth, in degrees true (000 to 359)
    7 = signal to noise ratio, in dB (00 to 99; empty when not tracking)

Fields 4-7 are repeated for up to four satellites per sentence.
"""

from typing import Any, Mapping, Optional

from trackdraw.nmea.config import CodecConfig
from trackdraw.nmea.errors import InvalidRecordError
from trackdraw.nmea.fields import encode_value, pad_left, parse_int_or_zero
from trackdraw.nmea.registry import Record

from .utils import join_fields, prepare_tokens, token_at

__all__ = ("encode_gsv", "parse_gsv")


#: Minimum number of tokens in a GSV sentence, including the identifier
MIN_TOKENS = 4

#: Maximum number of satellites described by a single GSV sentence
MAX_SATELLITES_PER_SENTENCE = 4


def parse_gsv(tokens: list[str]) -> Record:
    """Parses the tokens of a GSV sentence. Incomplete satellite blocks at
    the end of the sentence are padded with zeros.
    """
    tokens = prepare_tokens(tokens, MIN_TOKENS)
    satellites = [
        {
            "prn": parse_int_or_zero(token_at(tokens, i)),
            "el": parse_int_or_zero(token_at(tokens, i + 1)),
            "az": parse_int_or_zero(token_at(tokens, i + 2)),
            "ss": parse_int_or_zero(token_at(tokens, i + 3)),
        }
        for i in range(4, len(tokens), 4)
    ]
    return {
        "id": tokens[0][1:],
        "msgs": parse_int_or_zero(tokens[1]),
        "mnum": parse_int_or_zero(tokens[2]),
        "count": parse_int_or_zero(tokens[3]),
        "sat": satellites,
    }


def _encode_padded(value: Optional[int], width: int) -> str:
    return pad_left(encode_value(value), width) if value is not None else ""


def encode_gsv(identifier: str, data: Mapping[str, Any], config: CodecConfig) -> str:
    """Encodes a GSV sentence, without checksum.

    Keys of the record: ``msgs`` (number of sentences), ``mnum`` (index of
    this sentence), ``count`` (satellites in view) and ``sat``, a list of at
    most four mappings with ``prn``, ``el``, ``az`` and ``ss`` keys.
    """
    satellites = list(data.get("sat") or ())
    if len(satellites) > MAX_SATELLITES_PER_SENTENCE:
        raise InvalidRecordError(
            f"at most {MAX_SATELLITES_PER_SENTENCE} satellites fit in a GSV "
            f"sentence, got {len(satellites)}"
        )

    fields = [
        encode_value(data.get("msgs")),
        encode_value(data.get("mnum")),
        _encode_padded(data.get("count"), 2),
    ]
    for satellite in satellites:
        fields.extend(
            (
                _encode_padded(satellite.get("prn"), 2),
                _encode_padded(satellite.get("el"), 2),
                _encode_padded(satellite.get("az"), 3),
                _encode_padded(satellite.get("ss"), 2),
            )
        )

    return join_fields(identifier, fields)
