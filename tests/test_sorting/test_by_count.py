"""Tests for the ByCountSortStrategy and its two phases."""

from __future__ import annotations

from collections import Counter

import pytest

from token_sorter.sorting.by_count import ByCountSortStrategy, count_occurrences, group_by_count
from token_sorter.sorting.registry import SortStrategyRegistry
from token_sorter.types import DataType, FrequencyGroup, FrequencyGrouping, TokenStream


@pytest.fixture()
def strategy() -> ByCountSortStrategy:
    return ByCountSortStrategy()


class TestCountOccurrences:
    """Phase one: value -> occurrence count."""

    def test_counts_each_value(self) -> None:
        assert count_occurrences((3, 1, 2, 1)) == Counter({1: 2, 2: 1, 3: 1})

    def test_exact_equality(self) -> None:
        """Case differences make different values."""
        assert count_occurrences(("a", "A", "a")) == Counter({"a": 2, "A": 1})


class TestGroupByCount:
    """Phase two: count -> sorted distinct values."""

    def test_groups_ascending_by_count(self) -> None:
        groups = group_by_count(Counter({"x": 3, "b": 1, "a": 1, "y": 2}))
        assert groups == (
            FrequencyGroup(count=1, values=("a", "b")),
            FrequencyGroup(count=2, values=("y",)),
            FrequencyGroup(count=3, values=("x",)),
        )

    def test_empty_counts(self) -> None:
        assert group_by_count(Counter()) == ()


class TestByCountSortStrategy:
    """Tests for ByCountSortStrategy."""

    def test_numbers(self, strategy: ByCountSortStrategy, number_stream: TokenStream) -> None:
        result = strategy.sort(number_stream)
        assert isinstance(result, FrequencyGrouping)
        assert result.total == 4
        assert result.groups == (
            FrequencyGroup(count=1, values=(2, 3)),
            FrequencyGroup(count=2, values=(1,)),
        )

    def test_words(self, strategy: ByCountSortStrategy, word_stream: TokenStream) -> None:
        result = strategy.sort(word_stream)
        assert result.total == 3
        assert result.groups == (
            FrequencyGroup(count=1, values=("b",)),
            FrequencyGroup(count=2, values=("a",)),
        )

    def test_value_appears_once_in_its_group(self, strategy: ByCountSortStrategy) -> None:
        stream = TokenStream(data_type=DataType.WORD, tokens=("z",) * 5)
        result = strategy.sort(stream)
        assert result.groups == (FrequencyGroup(count=5, values=("z",)),)

    def test_weighted_sum_equals_total(
        self, strategy: ByCountSortStrategy, number_stream: TokenStream
    ) -> None:
        result = strategy.sort(number_stream)
        assert sum(g.count * len(g.values) for g in result.groups) == result.total

    def test_empty_stream(self, strategy: ByCountSortStrategy, empty_stream: TokenStream) -> None:
        result = strategy.sort(empty_stream)
        assert result.total == 0
        assert result.groups == ()

    def test_line_data_type_kept(self, strategy: ByCountSortStrategy) -> None:
        stream = TokenStream(data_type=DataType.LINE, tokens=("", "x y", ""))
        result = strategy.sort(stream)
        assert result.data_type is DataType.LINE
        assert result.groups == (
            FrequencyGroup(count=1, values=("x y",)),
            FrequencyGroup(count=2, values=("",)),
        )

    def test_registered(self) -> None:
        """ByCountSortStrategy should be in the registry as 'byCount'."""
        assert SortStrategyRegistry.get("byCount") is ByCountSortStrategy
