"""Pytest configuration and fixtures for the staccato tests."""

import os

import pytest


@pytest.fixture
def sample_values() -> list[float]:
    """Sorted series used across the calculator, bundle and formatter tests."""
    return [1.0, 2.0, 5.0, 7.0, 9.0, 12.0]


@pytest.fixture
def sample_lines() -> list[str]:
    """Raw input lines for sample_values, shuffled and with noise."""
    return ["9", "  2  ", "not-a-number", "12", "", "1", "7\n", "5.0", "nan", "inf"]


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Keep STACCATO_* variables from the developer shell out of a test."""
    for key in list(os.environ):
        if key.startswith("STACCATO_"):
            monkeypatch.delenv(key)
    return monkeypatch
