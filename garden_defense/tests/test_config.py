"""
Tests for settings loading.
"""
import pytest
from pydantic import ValidationError

from garden_defense.gameplay.config import GameSettings, get_settings
from garden_defense.gameplay.game import Game


class TestSettings:
    """Tests for GameSettings."""

    def test_defaults(self, monkeypatch):
        """Defaults match the built-in game."""
        monkeypatch.delenv("GARDEN_STARTING_BALANCE", raising=False)
        monkeypatch.delenv("GARDEN_WAVES_TOTAL", raising=False)
        settings = GameSettings()
        assert settings.starting_balance == 10000
        assert settings.waves_total == 5
        assert settings.max_step == 0.05
        assert not settings.auto_next_wave

    def test_env_override(self, monkeypatch):
        """GARDEN_* environment variables override defaults."""
        monkeypatch.setenv("GARDEN_STARTING_BALANCE", "500")
        monkeypatch.setenv("GARDEN_AUTO_NEXT_WAVE", "true")
        settings = GameSettings()
        assert settings.starting_balance == 500
        assert settings.auto_next_wave

    def test_rejects_negative_balance(self):
        """A negative starting balance is invalid."""
        with pytest.raises(ValidationError):
            GameSettings(starting_balance=-1)

    def test_rejects_zero_waves(self):
        with pytest.raises(ValidationError):
            GameSettings(waves_total=0)

    def test_get_settings_cached(self):
        """get_settings returns one shared instance."""
        assert get_settings() is get_settings()

    def test_game_uses_settings(self):
        """The session starts from the configured balance."""
        game = Game(GameSettings(starting_balance=300))
        assert game.balance == 300

    def test_seed_is_reproducible(self):
        """Two games with the same seed roll the same waves and sun."""
        a = Game(GameSettings(seed=99))
        b = Game(GameSettings(seed=99))

        assert a.world.economy.next_drop == b.world.economy.next_drop
        assert a.world.spawner.plan_wave(3) == b.world.spawner.plan_wave(3)
