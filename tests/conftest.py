"""Shared pytest fixtures for token-sorter tests.

Every test runs in an empty working directory with no TOKEN_SORTER_*
environment variables, so a stray .env file or shell setting cannot leak
into the configuration.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

import pytest

from token_sorter.config import SorterConfig
from token_sorter.types import DataType, TokenStream

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Clear TOKEN_SORTER_* variables, chdir to a temp dir, reset the logger."""
    for key in list(os.environ):
        if key.startswith("TOKEN_SORTER_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    yield
    logging.getLogger("token_sorter").setLevel(logging.NOTSET)


@pytest.fixture
def default_config() -> SorterConfig:
    """Return a SorterConfig with all default values."""
    return SorterConfig(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def number_stream() -> TokenStream:
    """Integer stream from the input ``3 1 2 1``."""
    return TokenStream(data_type=DataType.LONG, tokens=(3, 1, 2, 1))


@pytest.fixture
def word_stream() -> TokenStream:
    """Word stream from the input ``a b a``."""
    return TokenStream(data_type=DataType.WORD, tokens=("a", "b", "a"))


@pytest.fixture
def empty_stream() -> TokenStream:
    """Word stream with no tokens."""
    return TokenStream(data_type=DataType.WORD, tokens=())
