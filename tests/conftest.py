"""Pytest configuration and fixtures for Statify tests."""

import pytest


@pytest.fixture
def even_sample() -> list[float]:
    """Return an even-length sample with known quartiles."""
    return [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0]


@pytest.fixture
def textbook_sample() -> list[float]:
    """Return the classic sample with population variance 4."""
    return [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]


@pytest.fixture
def outlier_sample() -> list[float]:
    """Return a small sample with one obvious outlier."""
    return [1.0, 2.0, 3.0, 4.0, 5.0, 100.0]


@pytest.fixture
def single_value_sample() -> list[float]:
    """Return a sample holding one value."""
    return [42.0]
