"""token-sorter: sort numbers, lines or words and report the result.

Reads every token from a file or standard input, orders them naturally or
by occurrence count, and writes a short text report to a file or standard
output.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("token-sorter")
except PackageNotFoundError:
    __version__ = "0.0.0"

from token_sorter.config import SorterConfig, load_config, resolve_config, validate_selectors
from token_sorter.exceptions import (
    ConfigValidationError,
    InputSourceError,
    OutputSinkError,
    TokenSorterError,
)
from token_sorter.pipeline import run_pipeline, sort_text
from token_sorter.types import DataType, Report, SortingType

__all__ = [
    "ConfigValidationError",
    "DataType",
    "InputSourceError",
    "OutputSinkError",
    "Report",
    "SorterConfig",
    "SortingType",
    "TokenSorterError",
    "__version__",
    "load_config",
    "resolve_config",
    "run_pipeline",
    "sort_text",
    "validate_selectors",
]
