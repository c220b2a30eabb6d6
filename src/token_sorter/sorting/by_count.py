"""Frequency order: distinct tokens grouped by how often they occur.

Runs in two phases. One pass over the stream counts every value, then the
counts are inverted into count -> distinct values, each group sorted in
natural order and the groups ordered by ascending count.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from typing import TYPE_CHECKING

from token_sorter.sorting.base import SortStrategy
from token_sorter.sorting.registry import SortStrategyRegistry
from token_sorter.types import FrequencyGroup, FrequencyGrouping

if TYPE_CHECKING:
    from token_sorter.types import Token, TokenStream


def count_occurrences(tokens: tuple[Token, ...]) -> Counter[Token]:
    """Map each distinct token value to its number of occurrences."""
    return Counter(tokens)


def group_by_count(counts: Counter[Token]) -> tuple[FrequencyGroup, ...]:
    """Invert *counts* into frequency groups, ascending by count.

    Args:
        counts: Occurrence count per distinct value.

    Returns:
        One FrequencyGroup per distinct count, values sorted ascending.
    """
    by_count: defaultdict[int, list[Token]] = defaultdict(list)
    for value, count in counts.items():
        by_count[count].append(value)
    return tuple(
        FrequencyGroup(count=count, values=tuple(sorted(by_count[count])))
        for count in sorted(by_count)
    )


@SortStrategyRegistry.register("byCount")
class ByCountSortStrategy(SortStrategy):
    """Groups distinct values by occurrence count.

    An empty stream yields no groups and a total of zero.
    """

    def sort(self, stream: TokenStream) -> FrequencyGrouping:
        counts = count_occurrences(stream.tokens)
        return FrequencyGrouping(
            data_type=stream.data_type,
            total=len(stream),
            groups=group_by_count(counts),
        )
