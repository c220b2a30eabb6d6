"""Base class for sort strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from token_sorter.types import SortResult, TokenStream


class SortStrategy(ABC):
    """Abstract base class for sort strategies.

    A strategy consumes one token stream and returns an immutable result
    for the report formatter. It never mutates the stream.
    """

    @abstractmethod
    def sort(self, stream: TokenStream) -> SortResult:
        """Order the tokens of *stream*.

        Args:
            stream: Tokens of a single data type, in input order.

        Returns:
            The sorted result (shape depends on the strategy).
        """
