"""Unit tests for key/value rendering and separators."""

from staccato.bundle import build_bundle
from staccato.calculator import compute_statistics
from staccato.formatter import FIELD_ORDER, format_bundle, format_lines, format_statistics
from staccato.models import KeyValueSeparator, SeparatorKind

GLOBAL_TEXT = (
    "count: 6\n"
    "sum: 36.00000\n"
    "mean: 6.00000\n"
    "upper: 12.00000\n"
    "lower: 1.00000\n"
    "median: 6.00000\n"
    "stddev: 3.82971\n"
)

P50_TEXT = (
    "count_50: 3\n"
    "sum_50: 8.00000\n"
    "mean_50: 2.66667\n"
    "upper_50: 5.00000\n"
    "lower_50: 1.00000\n"
    "median_50: 2.00000\n"
    "stddev_50: 1.69967\n"
)


class TestFormatStatistics:
    def test_global_block(self, sample_values):
        stats = compute_statistics(sample_values)
        assert format_statistics(stats) == GLOBAL_TEXT

    def test_field_order(self, sample_values):
        stats = compute_statistics(sample_values)
        keys = [line.split(": ")[0] for line in format_lines(stats)]
        assert keys == list(FIELD_ORDER)

    def test_fixed_precision_for_large_values(self):
        stats = compute_statistics([123456789.0])
        assert "sum: 123456789.00000" in format_lines(stats)

    def test_tab_separator(self, sample_values):
        stats = compute_statistics(sample_values)
        assert format_lines(stats, KeyValueSeparator.tab())[0] == "count\t6"


class TestFormatBundle:
    def test_global_then_percentiles(self, sample_values):
        bundle = build_bundle(sample_values, [50])
        assert format_bundle(bundle) == GLOBAL_TEXT + P50_TEXT

    def test_custom_separator_only_changes_joiner(self, sample_values):
        bundle = build_bundle(sample_values, [50])
        colon = format_bundle(bundle).splitlines()
        custom = format_bundle(bundle, KeyValueSeparator.custom(" = ")).splitlines()
        assert [line.replace(": ", " = ", 1) for line in colon] == custom


class TestKeyValueSeparator:
    def test_parse_tab(self):
        sep = KeyValueSeparator.parse("tab")
        assert sep.kind == SeparatorKind.TAB
        assert sep.text == "\t"

    def test_parse_colon(self):
        sep = KeyValueSeparator.parse("colon")
        assert sep.kind == SeparatorKind.COLON
        assert sep.text == ": "

    def test_parse_literal(self):
        sep = KeyValueSeparator.parse(",")
        assert sep.kind == SeparatorKind.CUSTOM
        assert sep.text == ","
