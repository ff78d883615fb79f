"""Statistics calculator for a single sorted slice.

The calculation:
1. count is the slice length (an empty slice yields no Statistics)
2. lower, upper and sum in one linear scan
3. mean = sum / count
4. median from the middle element(s) of the sorted slice
5. population standard deviation in a second pass over the slice
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from staccato.models import Statistics
from staccato.percentiles import slice_percentile

if TYPE_CHECKING:
    from collections.abc import Sequence


def compute_statistics(
    values: Sequence[float],
    percentile: int | None = None,
) -> Statistics | None:
    """Compute Statistics for an already sliced, sorted sequence.

    Returns None when the sequence is empty.
    """
    count = len(values)
    if count == 0:
        return None

    lower, upper, total = _min_max_sum(values)
    mean = total / count

    return Statistics(
        percentile=percentile,
        count=count,
        sum=total,
        mean=mean,
        upper=upper,
        lower=lower,
        median=_median(values),
        stddev=_stddev(values, mean),
    )


def compute_percentile(values: Sequence[float], percentile: int) -> Statistics | None:
    """Compute Statistics over the lowest ``percentile`` percent of a sorted sequence."""
    return compute_statistics(slice_percentile(values, percentile), percentile)


def _min_max_sum(values: Sequence[float]) -> tuple[float, float, float]:
    lower = math.inf
    upper = -math.inf
    total = 0.0

    for value in values:
        if value > upper:
            upper = value
        if value < lower:
            lower = value
        total += value

    return lower, upper, total


def _median(values: Sequence[float]) -> float:
    mid = len(values) // 2
    if len(values) % 2:
        return values[mid]

    lo, hi = values[mid - 1], values[mid]
    median = (lo + hi) / 2
    if math.isinf(median):
        # lo + hi overflowed; halve first
        median = lo / 2 + hi / 2
    return min(max(median, lo), hi)


def _stddev(values: Sequence[float], mean: float) -> float:
    # Population deviation (divide by n). delta * delta overflows to inf where ** raises
    total = 0.0
    for value in values:
        delta = value - mean
        total += delta * delta
    deviance = total / len(values)
    return math.sqrt(deviance)
