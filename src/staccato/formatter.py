"""Key/value text rendering for Statistics and bundles.

Each Statistics renders as seven lines in a fixed order:

    count, sum, mean, upper, lower, median, stddev

Percentile entries suffix every key with the percentile, e.g. ``mean_90``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from staccato.models import KeyValueSeparator

if TYPE_CHECKING:
    from staccato.models import Statistics, StatisticsBundle

PRECISION = 5
FIELD_ORDER: tuple[str, ...] = ("count", "sum", "mean", "upper", "lower", "median", "stddev")
NL = "\n"


def _key(field: str, percentile: int | None) -> str:
    return field if percentile is None else f"{field}_{percentile}"


def _value(stats: Statistics, field: str) -> str:
    value = getattr(stats, field)
    if field == "count":
        return str(value)
    return f"{value:.{PRECISION}f}"


def format_lines(stats: Statistics, separator: KeyValueSeparator | None = None) -> list[str]:
    """Render one Statistics as ``key<sep>value`` lines without terminators."""
    sep = (separator or KeyValueSeparator.colon()).text
    return [
        f"{_key(field, stats.percentile)}{sep}{_value(stats, field)}" for field in FIELD_ORDER
    ]


def format_statistics(stats: Statistics, separator: KeyValueSeparator | None = None) -> str:
    return "".join(line + NL for line in format_lines(stats, separator))


def format_bundle(bundle: StatisticsBundle, separator: KeyValueSeparator | None = None) -> str:
    """Render the global block first, then each percentile block in bundle order."""
    return "".join(format_statistics(stats, separator) for stats in bundle.all_stats())
