from typing import Iterable, Sequence

from trackdraw.nmea.errors import InsufficientFieldsError

__all__ = ("join_fields", "prepare_tokens", "token_at")


def prepare_tokens(tokens: Sequence[str], required: int) -> list[str]:
    """Checks whether a sentence has enough tokens for its shape and returns
    the tokens with leading and trailing whitespace removed.

    Parameters:
        tokens: the comma-separated tokens of the sentence, starting with the
            ``$`` marker and the identifier
        required: the minimum number of tokens, including the first one

    Raises:
        InsufficientFieldsError: if there are not enough tokens
    """
    if len(tokens) < required:
        identifier = tokens[0][1:] if tokens else None
        raise InsufficientFieldsError(identifier, required, len(tokens))
    return [token.strip() for token in tokens]


def token_at(tokens: Sequence[str], index: int) -> str:
    """Returns the token at the given index, or an empty string if the
    sentence is shorter.
    """
    return tokens[index] if index < len(tokens) else ""


def join_fields(identifier: str, fields: Iterable[str]) -> str:
    """Joins the encoded fields of a sentence, prefixed with the ``$`` marker
    and the identifier.
    """
    return ",".join(("$" + identifier, *fields))
