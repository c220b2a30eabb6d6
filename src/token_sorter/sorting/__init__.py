"""Sort strategy subsystem for token-sorter.

Orders a token stream either naturally (every token, ascending) or by
occurrence count (distinct tokens grouped by frequency).
"""

from token_sorter.sorting.base import SortStrategy
from token_sorter.sorting.by_count import ByCountSortStrategy
from token_sorter.sorting.natural import NaturalSortStrategy
from token_sorter.sorting.registry import SortStrategyRegistry

__all__ = [
    "ByCountSortStrategy",
    "NaturalSortStrategy",
    "SortStrategy",
    "SortStrategyRegistry",
]
