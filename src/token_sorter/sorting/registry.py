"""Registry for sort strategy implementations.

Each strategy class is filed under the value the ``-sortingType`` flag
takes to select it (``natural``, ``byCount``). The pipeline looks the class
up by the configured SortingType and instantiates it once per run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from token_sorter.types import SortingType

if TYPE_CHECKING:
    from collections.abc import Callable

    from token_sorter.sorting.base import SortStrategy


class SortStrategyRegistry:
    """Maps sorting-type selector values to SortStrategy classes."""

    _registry: ClassVar[dict[str, type[SortStrategy]]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[SortStrategy]], type[SortStrategy]]:
        """Class decorator filing a strategy under a sorting-type value.

        Args:
            name: The selector value that picks this strategy, spelled
                exactly as on the command line (``'byCount'``, not
                ``'by_count'``).

        Returns:
            Decorator returning the strategy class unchanged.

        Raises:
            ValueError: If another strategy already answers to *name*.
        """

        def decorator(klass: type[SortStrategy]) -> type[SortStrategy]:
            if name in cls._registry:
                raise ValueError(f"Sort strategy '{name}' is already registered")
            cls._registry[name] = klass
            return klass

        return decorator

    @classmethod
    def get(cls, name: str) -> type[SortStrategy]:
        """Look up the strategy class for a sorting-type value.

        Raises:
            KeyError: If no strategy answers to *name*; the message lists
                the values that do.
        """
        try:
            return cls._registry[name]
        except KeyError:
            available = ", ".join(sorted(cls._registry)) or "(none)"
            raise KeyError(f"Unknown sort strategy '{name}'. Available: {available}") from None

    @classmethod
    def build(cls, sorting_type: SortingType | str) -> SortStrategy:
        """Instantiate the strategy for *sorting_type*."""
        name = sorting_type.value if isinstance(sorting_type, SortingType) else sorting_type
        return cls.get(name)()

    @classmethod
    def list_registered(cls) -> list[str]:
        """Sorting-type values with a registered strategy, sorted."""
        return sorted(cls._registry)
