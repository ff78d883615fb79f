"""Unit tests for StaccatoSettings: defaults, environment, and validation."""

import pytest
from pydantic import ValidationError

from staccato.config import StaccatoSettings
from staccato.models import OutputFormat, SortingPolicy


@pytest.fixture(autouse=True)
def _isolated_env(clean_env):
    return clean_env


class TestDefaults:
    def test_defaults(self):
        settings = StaccatoSettings()
        assert settings.percentiles == [75, 90, 95, 99]
        assert settings.separator == "colon"
        assert settings.sort == SortingPolicy.SORTED
        assert settings.output_format == OutputFormat.TEXT
        assert settings.log_level == "WARNING"


class TestEnvironment:
    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("STACCATO_PERCENTILES", "[50, 90]")
        monkeypatch.setenv("STACCATO_SEPARATOR", "tab")
        monkeypatch.setenv("STACCATO_OUTPUT_FORMAT", "json")
        settings = StaccatoSettings()
        assert settings.percentiles == [50, 90]
        assert settings.separator == "tab"
        assert settings.output_format == OutputFormat.JSON

    def test_init_kwargs_beat_env(self, monkeypatch):
        monkeypatch.setenv("STACCATO_SEPARATOR", "tab")
        assert StaccatoSettings(separator=";").separator == ";"

    def test_env_percentile_out_of_range(self, monkeypatch):
        monkeypatch.setenv("STACCATO_PERCENTILES", "[0, 50]")
        with pytest.raises(ValidationError):
            StaccatoSettings()


class TestValidation:
    @pytest.mark.parametrize("bad", [0, 100, -1])
    def test_percentile_range(self, bad):
        with pytest.raises(ValidationError):
            StaccatoSettings(percentiles=[bad])

    def test_unsorted_with_percentiles_rejected(self):
        with pytest.raises(ValidationError, match="Unsorted input cannot be used with percentiles"):
            StaccatoSettings(sort=SortingPolicy.UNSORTED)

    def test_unsorted_without_percentiles(self):
        settings = StaccatoSettings(sort="unsorted", percentiles=[])
        assert settings.sort == SortingPolicy.UNSORTED

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            StaccatoSettings(log_level="LOUD")
