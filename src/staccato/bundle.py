"""Statistics bundle: the global snapshot plus each requested percentile."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TextIO

from staccato.calculator import compute_percentile, compute_statistics
from staccato.ingest import read_values
from staccato.models import SortingPolicy, StatisticsBundle

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger("staccato.bundle")


def build_bundle(
    values: Sequence[float],
    percentiles: Sequence[int],
) -> StatisticsBundle | None:
    """Build a bundle from a sorted series.

    Percentiles keep the caller's order and duplicates. A percentile whose
    slice is empty is left out. Returns None when the series is empty.
    """
    global_stats = compute_statistics(values)
    if global_stats is None:
        return None

    percentile_stats = []
    for p in percentiles:
        stats = compute_percentile(values, p)
        if stats is None:
            logger.debug("Percentile %d is empty for %d values, omitting", p, len(values))
            continue
        percentile_stats.append(stats)

    return StatisticsBundle(global_stats=global_stats, percentiles=tuple(percentile_stats))


def bundle_from_stream(stream: TextIO, percentiles: Sequence[int]) -> StatisticsBundle | None:
    """Read a text stream, sort it and build a bundle."""
    values = read_values(stream, policy=SortingPolicy.SORTED)
    return build_bundle(values, percentiles)
