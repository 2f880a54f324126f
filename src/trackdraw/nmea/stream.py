"""Parser and encoder functions for streams of NMEA-0183 sentences."""

from typing import Any, Callable, Mapping, Optional

from .codec import NMEACodec, get_default_codec
from .registry import Record

__all__ = (
    "create_nmea_encoder",
    "create_nmea_parser",
    "MAX_SENTENCE_LENGTH",
    "NMEAStreamEncoder",
    "NMEAStreamParser",
)


#: Maximum length of an NMEA-0183 sentence, excluding the line terminator
MAX_SENTENCE_LENGTH = 82


class NMEAStreamParser:
    """Incremental NMEA-0183 parser that splits a byte stream into lines and
    decodes them one by one. Lines that cannot be decoded are skipped.
    """

    _buffer: list[bytes]
    _codec: Optional[NMEACodec]
    _total: int

    def __init__(self, codec: Optional[NMEACodec] = None):
        """Constructor.

        Parameters:
            codec: the codec to decode the sentences with; `None` means to
                use the default codec
        """
        self._buffer = []
        self._codec = codec
        self._total = 0

    def feed(self, data: bytes) -> list[Record]:
        """Feeds some raw bytes into the parser.

        Returns:
            the records of the sentences that were completed by the bytes
        """
        codec = self._codec or get_default_codec()
        result: list[Record] = []

        while data:
            pre, sep, data = data.partition(b"\n")

            self._buffer.append(pre)
            self._total += len(pre)

            if sep:
                line = b"".join(self._buffer).rstrip(b"\r")
                if line and len(line) <= MAX_SENTENCE_LENGTH:
                    try:
                        decoded = codec.decode(line.decode("ascii"))
                    except UnicodeDecodeError:
                        pass
                    else:
                        if decoded.ok:
                            result.append(decoded.value)  # type: ignore

                self.reset()

            else:
                if self._total > MAX_SENTENCE_LENGTH + 1:
                    # Exceeded max sentence length
                    self.reset()

        return result

    def reset(self) -> None:
        self._buffer.clear()
        self._total = 0


class NMEAStreamEncoder:
    """NMEA-0183 sentence encoder that produces CR-LF terminated bytes."""

    def __init__(self, codec: Optional[NMEACodec] = None):
        self._codec = codec

    def encode(self, identifier: str, record: Mapping[str, Any]) -> bytes:
        """Encodes a record into a line of the stream.

        Raises:
            NMEAError: if the record cannot be encoded
        """
        codec = self._codec or get_default_codec()
        sentence = codec.encode(identifier, record).unwrap()
        return sentence.encode("ascii") + b"\r\n"


def create_nmea_parser(
    codec: Optional[NMEACodec] = None,
) -> Callable[[bytes], list[Record]]:
    """Creates an NMEA-0183 parser function that turns chunks of a byte
    stream into decoded records.

    Returns:
        the parser function
    """
    return NMEAStreamParser(codec).feed


def create_nmea_encoder(
    codec: Optional[NMEACodec] = None,
) -> Callable[[str, Mapping[str, Any]], bytes]:
    """Creates an NMEA-0183 encoder function that turns records into
    CR-LF terminated sentences.

    Returns:
        the encoder function
    """
    return NMEAStreamEncoder(codec).encode
