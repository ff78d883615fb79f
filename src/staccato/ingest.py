"""Value ingestion: parse one number per line, dropping anything unparsable.

Parsing is best-effort: a line that is not a finite decimal number is
skipped, never raised. The only failure is an input that cannot be read.
"""

from __future__ import annotations

import io
import logging
import math
import re
import sys
from typing import TYPE_CHECKING, TextIO

from staccato.models import SortingPolicy

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

logger = logging.getLogger("staccato.ingest")

# ASCII decimal with optional sign, fraction and exponent. float() alone would
# also take "1_000", full-width digits, "nan" and "inf".
_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


class IngestionError(Exception):
    """Raised when the input source cannot be read at all."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        super().__init__(f"Could not read values from {source}: {reason}")


def parse_values(lines: Iterable[str]) -> list[float]:
    """Parse finite floats from lines, in input order."""
    values: list[float] = []
    dropped = 0
    for line in lines:
        text = line.strip()
        if not _DECIMAL.fullmatch(text):
            dropped += 1
            continue
        value = float(text)
        if not math.isfinite(value):
            dropped += 1
            continue
        values.append(value)

    logger.debug("Parsed %d values, dropped %d lines", len(values), dropped)
    return values


def sort_values(values: list[float]) -> list[float]:
    """Sort ascending in place and return the same list.

    Non-finite values are filtered by ``parse_values``, so plain float
    ordering is total here.
    """
    values.sort()
    return values


def read_values(
    stream: TextIO,
    *,
    policy: SortingPolicy = SortingPolicy.SORTED,
    source: str = "<stream>",
) -> list[float]:
    """Read a text stream to completion and parse it."""
    try:
        lines = stream.readlines()
    except OSError as e:
        raise IngestionError(source, str(e)) from e

    values = parse_values(lines)
    if policy == SortingPolicy.SORTED:
        sort_values(values)
    return values


def read_path(
    path: Path | None,
    *,
    policy: SortingPolicy = SortingPolicy.SORTED,
) -> list[float]:
    """Read values from a file, or from stdin when path is None.

    Undecodable bytes are replaced, so a line of bad UTF-8 is dropped
    like any other unparsable line.
    """
    if path is None:
        stdin = io.TextIOWrapper(sys.stdin.buffer, encoding="utf-8", errors="replace")
        try:
            return read_values(stdin, policy=policy, source="<stdin>")
        finally:
            # Leave sys.stdin usable once the wrapper is collected
            stdin.detach()

    try:
        with path.open(encoding="utf-8", errors="replace") as f:
            return read_values(f, policy=policy, source=str(path))
    except OSError as e:
        raise IngestionError(str(path), e.strerror or str(e)) from e
