"""Pytest configuration — ensures the project root is importable."""

import os
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from number_words.converter import WordConverter  # noqa: E402


@pytest.fixture
def converter() -> WordConverter:
    """A fresh converter with default options; tests may change its mode freely."""
    return WordConverter()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch):
    """Keep NUMBER_WORDS_* settings from the developer's shell out of the suite."""
    for name in list(os.environ):
        if name.startswith("NUMBER_WORDS_"):
            monkeypatch.delenv(name)
    yield
