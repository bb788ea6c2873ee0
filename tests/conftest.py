"""Root conftest for all tests - shared fixtures and configuration."""
import os
import random

import pytest

# Headless pygame for the client tests; must be set before pygame opens a display
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from lane_runner.data_models import GameSettings
from lane_runner.game_engine import GameEngine

SEED = 1234


@pytest.fixture
def rng():
    """Seeded random source shared by an engine and its expectations."""
    return random.Random(SEED)


@pytest.fixture
def classic_engine(rng):
    """Engine with 175 px/s obstacles and no automatic jumps."""
    return GameEngine(GameSettings.classic(), rng)


@pytest.fixture
def scored_engine(rng):
    """Engine with 250 px/s obstacles and timer-driven jumps."""
    return GameEngine(GameSettings.scored(), rng)
