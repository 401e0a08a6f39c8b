"""Global pytest fixtures and configuration."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from poker_hand_evaluator.config.settings import get_settings
from poker_hand_evaluator.evaluation.hand_classifier import HandClassifier
from poker_hand_evaluator.models.hand import Card


@pytest.fixture
def classifier() -> HandClassifier:
    """Create a HandClassifier instance."""
    return HandClassifier()


@pytest.fixture
def make_hand() -> Callable[[str], list[Card]]:
    """Build a hand from a space-separated string like 'Ah Kh Qh Jh Th'."""

    def _make(text: str) -> list[Card]:
        return [Card.from_string(s) for s in text.split()]

    return _make


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch: pytest.MonkeyPatch):
    """Keep cached settings and stray env vars from leaking between tests."""
    for name in ("LOG_LEVEL", "DEBUG", "MAX_SELECTION"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
