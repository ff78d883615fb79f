"""Staccato models: Statistics snapshots, bundles, and presentation options."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class SortingPolicy(StrEnum):
    SORTED = "sorted"
    UNSORTED = "unsorted"


class OutputFormat(StrEnum):
    TEXT = "text"
    JSON = "json"


class SeparatorKind(StrEnum):
    TAB = "tab"
    COLON = "colon"
    CUSTOM = "custom"


class Statistics(BaseModel):
    """Aggregates over one slice of a series.

    ``percentile`` is None for the whole series. Instances only exist for
    non-empty slices; an empty slice has no Statistics at all.
    """

    percentile: int | None = None
    count: int
    sum: float
    mean: float
    upper: float
    lower: float
    median: float
    stddev: float

    model_config = {"frozen": True}


class StatisticsBundle(BaseModel):
    """Global statistics plus the non-empty percentile slices, in request order."""

    global_stats: Statistics
    percentiles: tuple[Statistics, ...] = ()

    model_config = {"frozen": True}

    def all_stats(self) -> list[Statistics]:
        return [self.global_stats, *self.percentiles]


class KeyValueSeparator(BaseModel):
    kind: SeparatorKind
    text: str

    model_config = {"frozen": True}

    @classmethod
    def tab(cls) -> KeyValueSeparator:
        return cls(kind=SeparatorKind.TAB, text="\t")

    @classmethod
    def colon(cls) -> KeyValueSeparator:
        return cls(kind=SeparatorKind.COLON, text=": ")

    @classmethod
    def custom(cls, text: str) -> KeyValueSeparator:
        return cls(kind=SeparatorKind.CUSTOM, text=text)

    @classmethod
    def parse(cls, value: str) -> KeyValueSeparator:
        """Resolve a separator option: 'tab', 'colon', or a literal string."""
        match value:
            case SeparatorKind.TAB:
                return cls.tab()
            case SeparatorKind.COLON:
                return cls.colon()
            case _:
                return cls.custom(value)
