"""Shared fixtures."""

import pytest

from slopsense.factors import ensure_punkt


@pytest.fixture(scope="session", autouse=True)
def punkt_model():
    """Sentence splitting needs the NLTK punkt model installed once."""
    ensure_punkt()
