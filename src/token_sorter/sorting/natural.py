"""Natural order: every token, ascending by its own comparison."""

from __future__ import annotations

from typing import TYPE_CHECKING

from token_sorter.sorting.base import SortStrategy
from token_sorter.sorting.registry import SortStrategyRegistry
from token_sorter.types import NaturalOrder

if TYPE_CHECKING:
    from token_sorter.types import TokenStream


@SortStrategyRegistry.register("natural")
class NaturalSortStrategy(SortStrategy):
    """Sorts integers numerically and text by code point.

    Duplicates are kept, so the result has as many values as the stream.
    """

    def sort(self, stream: TokenStream) -> NaturalOrder:
        return NaturalOrder(data_type=stream.data_type, values=tuple(sorted(stream.tokens)))
