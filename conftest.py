"""
Shared pytest fixtures for the engine tests.
"""

import random

import pytest

from engine import AIPlayer, Difficulty, EngineConfig


@pytest.fixture
def rng():
    """Seeded random source so AI choices are repeatable."""
    return random.Random(1234)


@pytest.fixture
def make_ai(rng):
    """Build an AIPlayer for a difficulty, sharing the seeded rng."""
    def _make(difficulty: Difficulty, **config_overrides) -> AIPlayer:
        return AIPlayer(difficulty, EngineConfig(**config_overrides), rng=rng)
    return _make
