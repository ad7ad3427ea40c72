"""Global test configuration and fixtures."""

import pytest
import structlog


@pytest.fixture
def sample_numbers():
    """Return an unsorted sample with a repeated value."""
    return [5, 1, 9, 3, 3]


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo logging configuration performed by a test."""
    yield
    structlog.reset_defaults()
