"""Tests for settings."""

import pytest
from pydantic import ValidationError

from statify.config import Settings, get_settings


def test_defaults() -> None:
    """Test default settings."""
    settings = Settings(_env_file=None)
    assert settings.default_num_classes == 5
    assert settings.display_precision == 4
    assert settings.histogram_bins == 8
    assert settings.outlier_iqr_multiplier == 1.5
    assert settings.min_recommended_sample_size == 30


def test_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test STATIFY_ environment variables override defaults."""
    monkeypatch.setenv("STATIFY_DISPLAY_PRECISION", "2")
    monkeypatch.setenv("STATIFY_LOG_LEVEL", "DEBUG")
    settings = Settings(_env_file=None)
    assert settings.display_precision == 2
    assert settings.log_level == "DEBUG"


def test_invalid_value(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test invalid values are rejected."""
    monkeypatch.setenv("STATIFY_HISTOGRAM_BINS", "0")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_get_settings() -> None:
    """Test the global settings instance."""
    assert get_settings() is get_settings()
