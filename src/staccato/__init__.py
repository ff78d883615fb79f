"""Staccato - statistics from a stream of numbers.

Quick Start:
    from staccato.bundle import build_bundle
    from staccato.formatter import format_bundle
    from staccato.ingest import parse_values, sort_values

    values = sort_values(parse_values(["1", "2", "5", "7", "9", "12"]))
    bundle = build_bundle(values, [50, 90])
    if bundle is not None:
        print(format_bundle(bundle), end="")
"""

__version__ = "0.1.0"
