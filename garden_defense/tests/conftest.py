"""
Pytest fixtures for Garden Defense tests.
"""
import random

import pytest

from garden_defense.gameplay.config import GameSettings
from garden_defense.gameplay.events import GamePhase
from garden_defense.gameplay.game import Game
from garden_defense.gameplay.world import World


@pytest.fixture
def settings() -> GameSettings:
    """Seeded default settings."""
    return GameSettings(seed=1234, starting_balance=10000, waves_total=5)


@pytest.fixture
def game(settings) -> Game:
    """A fresh, idle game."""
    return Game(settings)


@pytest.fixture
def world() -> World:
    """A bare running world, for driving tick() directly."""
    w = World(rng=random.Random(7))
    w.phase = GamePhase.RUNNING
    return w
