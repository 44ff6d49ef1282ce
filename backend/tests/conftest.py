"""Shared test configuration and fixtures."""

import pytest

from factories import make_requirement


@pytest.fixture
def two_requirements():
    return [make_requirement(1, 3, "Python"), make_requirement(2, 4, "React")]


@pytest.fixture(autouse=True)
def _disable_rate_limit():
    from api.router import limiter
    original = limiter.enabled
    limiter.enabled = False
    yield
    limiter.enabled = original
