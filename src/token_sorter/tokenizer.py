"""Split raw input text into a typed token stream.

Integer pieces that do not parse are logged and dropped; parsing goes on
with the remaining pieces. The whole input must already be read: the
tokenizer works on one complete string.
"""

from __future__ import annotations

import logging
import re

from token_sorter.types import DataType, Token, TokenStream

logger = logging.getLogger("token_sorter")

# Bounds of a signed 64-bit integer.
LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1

_LONG_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_long(piece: str) -> int | None:
    """Parse *piece* as a signed 64-bit integer.

    Only an optional sign followed by ASCII digits is accepted, so forms
    that ``int()`` would take (underscores, non-ASCII digits) are rejected.

    Args:
        piece: A single whitespace-free piece of input.

    Returns:
        The integer value, or ``None`` if *piece* is not a valid number.
    """
    if not _LONG_PATTERN.fullmatch(piece):
        return None
    value = int(piece)
    if not LONG_MIN <= value <= LONG_MAX:
        return None
    return value


def split_lines(text: str) -> list[str]:
    """Return the lines of *text* without their terminators.

    Empty lines are kept. A trailing terminator does not start another
    line, but a last line without one is still a line.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _tokenize_longs(text: str) -> list[Token]:
    tokens: list[Token] = []
    for piece in text.split():
        value = parse_long(piece)
        if value is None:
            logger.warning('"%s" is not a valid number; it will be skipped.', piece)
            continue
        tokens.append(value)
    return tokens


def tokenize(text: str, data_type: DataType) -> TokenStream:
    """Build the token stream for *text*.

    Args:
        text: Complete input.
        data_type: Which kind of token to produce.

    Returns:
        TokenStream with the tokens in input order.
    """
    if data_type is DataType.LONG:
        tokens = _tokenize_longs(text)
    elif data_type is DataType.LINE:
        tokens = split_lines(text)
    else:
        tokens = list(text.split())
    return TokenStream(data_type=data_type, tokens=tuple(tokens))
