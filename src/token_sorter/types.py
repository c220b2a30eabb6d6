"""Core data types shared by the tokenizer, sorters and report formatter."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

Token = Union[int, str]


class DataType(str, Enum):
    """Kind of token read from the input."""

    LONG = "long"
    LINE = "line"
    WORD = "word"

    @property
    def noun(self) -> str:
        """Plural noun used in the report header."""
        return _NOUNS[self]


_NOUNS = {
    DataType.LONG: "numbers",
    DataType.LINE: "lines",
    DataType.WORD: "words",
}


class SortingType(str, Enum):
    """Ordering strategy applied to the token stream."""

    NATURAL = "natural"
    BY_COUNT = "byCount"


@dataclass(frozen=True, slots=True)
class TokenStream:
    """All tokens of one run, in input order.

    Attributes:
        data_type: Variant shared by every token in the stream.
        tokens: Token values in the order they were read.
    """

    data_type: DataType
    tokens: tuple[Token, ...]

    def __len__(self) -> int:
        return len(self.tokens)


@dataclass(frozen=True, slots=True)
class NaturalOrder:
    """Every token value, duplicates kept, in ascending order."""

    data_type: DataType
    values: tuple[Token, ...]

    @property
    def total(self) -> int:
        return len(self.values)


@dataclass(frozen=True, slots=True)
class FrequencyGroup:
    """Distinct values that occur exactly ``count`` times, ascending."""

    count: int
    values: tuple[Token, ...]


@dataclass(frozen=True, slots=True)
class FrequencyGrouping:
    """Distinct token values grouped by occurrence count.

    Groups are ordered by ascending count. Every distinct value of the
    stream appears in exactly one group, so the sum of
    ``count * len(values)`` over all groups equals ``total``.

    Attributes:
        data_type: Variant of the grouped tokens.
        total: Number of tokens in the source stream.
        groups: Frequency groups, ascending by count.
    """

    data_type: DataType
    total: int
    groups: tuple[FrequencyGroup, ...]


SortResult = Union[NaturalOrder, FrequencyGrouping]


@dataclass(frozen=True, slots=True)
class Report:
    """Rendered report, one entry per output line."""

    lines: tuple[str, ...]
