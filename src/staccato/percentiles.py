"""Percentile slicing and percentile option parsing."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated

from pydantic import Field

if TYPE_CHECKING:
    from collections.abc import Sequence

DEFAULT_PERCENTILES: tuple[int, ...] = (75, 90, 95, 99)

MIN_PERCENTILE = 1
MAX_PERCENTILE = 99

PercentileSpec = Annotated[int, Field(ge=MIN_PERCENTILE, le=MAX_PERCENTILE)]


class InvalidPercentileError(ValueError):
    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(
            f"Invalid percentile '{token}'. Use whole numbers from "
            f"{MIN_PERCENTILE} to {MAX_PERCENTILE}"
        )


def slice_percentile(values: Sequence[float], percentile: int) -> Sequence[float]:
    """Return the lowest ``percentile`` percent of a sorted sequence.

    The end index is ``percentile * n // 100``, in integer arithmetic, so
    there is no rounding and no interpolation between ranks. For example
    p = 90 over n = 25 values keeps the first 22.
    """
    end = (percentile * len(values)) // 100
    return values[:end]


def parse_percentiles(text: str) -> list[int]:
    """Parse a comma separated percentile list such as ``"75,90,99"``.

    Order and duplicates are kept. An empty string or ``none`` disables
    percentiles.
    """
    stripped = text.strip()
    if not stripped or stripped.lower() == "none":
        return []

    percentiles: list[int] = []
    for raw in stripped.split(","):
        token = raw.strip()
        try:
            value = int(token)
        except ValueError:
            raise InvalidPercentileError(token) from None
        if not MIN_PERCENTILE <= value <= MAX_PERCENTILE:
            raise InvalidPercentileError(token)
        percentiles.append(value)
    return percentiles
