"""Configuration for the staccato command line.

Values come from ``STACCATO_*`` environment variables; CLI options
override them by being passed as init kwargs.
"""

from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings

from staccato.models import OutputFormat, SortingPolicy
from staccato.percentiles import DEFAULT_PERCENTILES, PercentileSpec


class StaccatoSettings(BaseSettings):
    """Presentation and slicing options, validated before reaching the core."""

    percentiles: list[PercentileSpec] = Field(
        default_factory=lambda: list(DEFAULT_PERCENTILES),
        description="Percentiles (1-99) to compute in addition to the global statistics",
    )
    separator: str = Field(
        default="colon",
        description="Key/value separator: 'tab', 'colon', or a literal string",
    )
    sort: SortingPolicy = Field(
        default=SortingPolicy.SORTED,
        description="Unsorted skips sorting and is only valid without percentiles",
    )
    output_format: OutputFormat = Field(default=OutputFormat.TEXT, description="text or json")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING", description="Root log level"
    )

    model_config = {"env_prefix": "STACCATO_"}

    @model_validator(mode="after")
    def _unsorted_needs_no_percentiles(self) -> "StaccatoSettings":
        if self.sort == SortingPolicy.UNSORTED and self.percentiles:
            raise ValueError("Unsorted input cannot be used with percentiles")
        return self
