"""Shared test fixtures."""

import pytest
from docroutes.config import Options, normalize_options


@pytest.fixture
def options() -> Options:
    """Options rooted at /docs with the trailing-slash policy disabled."""
    return normalize_options("/docs")


@pytest.fixture
def slash_options() -> Options:
    """Options rooted at /docs with the trailing-slash policy enabled."""
    return normalize_options("/docs", trailing_slash=True)
