"""Tests for the SortStrategyRegistry."""

from __future__ import annotations

import pytest

from token_sorter.sorting import ByCountSortStrategy, NaturalSortStrategy, SortStrategy
from token_sorter.sorting.registry import SortStrategyRegistry
from token_sorter.types import NaturalOrder, SortingType, TokenStream


class TestSortStrategyRegistry:
    """Tests for the decorator-based registry."""

    def setup_method(self) -> None:
        """Save registry state before each test."""
        self._saved_registry = dict(SortStrategyRegistry._registry)

    def teardown_method(self) -> None:
        """Restore registry state after each test."""
        SortStrategyRegistry._registry = self._saved_registry

    def test_list_registered(self) -> None:
        names = SortStrategyRegistry.list_registered()
        assert names == ["byCount", "natural"]

    def test_every_sorting_type_is_registered(self) -> None:
        for sorting_type in SortingType:
            assert sorting_type.value in SortStrategyRegistry.list_registered()

    def test_build_from_enum(self) -> None:
        assert isinstance(SortStrategyRegistry.build(SortingType.NATURAL), NaturalSortStrategy)
        assert isinstance(SortStrategyRegistry.build(SortingType.BY_COUNT), ByCountSortStrategy)

    def test_build_from_name(self) -> None:
        assert isinstance(SortStrategyRegistry.build("byCount"), ByCountSortStrategy)

    def test_unknown_strategy_raises(self) -> None:
        with pytest.raises(KeyError, match="Unknown sort strategy 'shuffle'"):
            SortStrategyRegistry.get("shuffle")

    def test_duplicate_registration_raises(self) -> None:
        with pytest.raises(ValueError, match="already registered"):

            @SortStrategyRegistry.register("natural")
            class Again(NaturalSortStrategy):
                pass

    def test_register_custom_strategy(self) -> None:
        @SortStrategyRegistry.register("reverse")
        class ReverseSortStrategy(SortStrategy):
            def sort(self, stream: TokenStream) -> NaturalOrder:
                return NaturalOrder(
                    data_type=stream.data_type,
                    values=tuple(sorted(stream.tokens, reverse=True)),
                )

        assert SortStrategyRegistry.get("reverse") is ReverseSortStrategy
        assert "reverse" in SortStrategyRegistry.list_registered()
