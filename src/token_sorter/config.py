"""Configuration system for token-sorter.

Uses pydantic-settings for declarative, layered configuration:
command-line overrides -> environment variables (TOKEN_SORTER_*) -> .env
file -> field defaults.

Command-line selectors are checked by validate_selectors() before the
pipeline runs, then merged with resolve_config(), which creates a new
config instance without mutating the defaults.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from token_sorter.exceptions import ConfigValidationError
from token_sorter.types import DataType, SortingType

# Fatal messages for a selector flag given without a recognized value.
_SELECTOR_ERRORS: dict[str, str] = {
    "sorting_type": "No sorting type defined!",
    "data_type": "No data type defined!",
}


class SorterConfig(BaseSettings):
    """Configuration for one token-sorter run.

    Resolution order: init kwargs -> env vars (TOKEN_SORTER_*) -> .env file
    -> defaults. An unset input or output file means standard input or
    standard output.
    """

    model_config = SettingsConfigDict(
        env_prefix="TOKEN_SORTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    data_type: DataType = Field(
        default=DataType.WORD,
        description="Token kind: 'long', 'line' or 'word'",
    )
    sorting_type: SortingType = Field(
        default=SortingType.NATURAL,
        description="Ordering strategy: 'natural' or 'byCount'",
    )
    input_file: Path | None = Field(
        default=None,
        description="File to read tokens from (unset = standard input)",
    )
    output_file: Path | None = Field(
        default=None,
        description="File the report is appended to (unset = standard output)",
    )
    log_level: str = Field(
        default="INFO",
        description="Level applied to the 'token_sorter' logger",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level '{value}'")
        return level


def load_config(**kwargs: Any) -> SorterConfig:
    """Build the base configuration from the environment.

    Args:
        **kwargs: Explicit field values, passed through to SorterConfig.

    Returns:
        The validated configuration.

    Raises:
        ConfigValidationError: If an environment value fails validation.
    """
    try:
        return SorterConfig(**kwargs)
    except ValidationError as exc:
        raise ConfigValidationError(f"Invalid configuration: {exc}") from exc


def validate_selectors(
    sorting_type: str | None,
    data_type: str | None,
) -> dict[str, Any]:
    """Check the command-line selector values and turn them into overrides.

    ``None`` means the flag was absent and the configured value stands.
    The sorting type is checked first.

    Args:
        sorting_type: Raw value given to the sorting-type flag, if any.
        data_type: Raw value given to the data-type flag, if any.

    Returns:
        Overrides keyed by config field name.

    Raises:
        ConfigValidationError: If a selector is present but empty or not
            one of the recognized values.
    """
    overrides: dict[str, Any] = {}
    selectors = (
        ("sorting_type", sorting_type, SortingType),
        ("data_type", data_type, DataType),
    )
    for field_name, raw, choices in selectors:
        if raw is None:
            continue
        try:
            overrides[field_name] = choices(raw)
        except ValueError:
            raise ConfigValidationError(_SELECTOR_ERRORS[field_name]) from None
    return overrides


def resolve_config(
    defaults: SorterConfig,
    overrides: dict[str, Any] | None,
) -> SorterConfig:
    """Create a new config instance merging defaults with overrides.

    Args:
        defaults: The base configuration loaded from the environment.
        overrides: Field values taken from the command line.

    Returns:
        A new SorterConfig with overrides applied, or *defaults* itself
        when there is nothing to override.

    Raises:
        ConfigValidationError: If an override names an unknown field or
            fails validation.
    """
    if not overrides:
        return defaults

    unknown = set(overrides) - set(SorterConfig.model_fields)
    if unknown:
        raise ConfigValidationError(f"Unknown config field(s): {', '.join(sorted(unknown))}")

    # model_validate on a merged dict so that raw strings are coerced.
    merged = defaults.model_dump()
    merged.update(overrides)
    try:
        return SorterConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigValidationError(f"Invalid configuration: {exc}") from exc
