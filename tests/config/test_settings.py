"""Tests for low_roller/config/settings.py."""

import pytest

from low_roller.config.settings import SIMULATION_SEED, Settings, get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("DEBUG", "LOG_LEVEL", "SIMULATE_PLAY", "RANDOM_SEED", "SIMULATED_PLAYER_NAMES"):
        monkeypatch.delenv(f"LOW_ROLLER_{key}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        settings = Settings()
        assert settings.simulate_play is False
        assert settings.random_seed is None
        assert settings.effective_seed is None
        assert settings.effective_log_level == "WARNING"

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("LOW_ROLLER_SIMULATE_PLAY", "true")
        monkeypatch.setenv("LOW_ROLLER_LOG_LEVEL", "info")
        monkeypatch.setenv("LOW_ROLLER_SIMULATED_PLAYER_NAMES", '["A", "B", "C", "D"]')
        settings = Settings()
        assert settings.simulate_play is True
        assert settings.effective_log_level == "INFO"
        assert settings.simulated_player_names == ["A", "B", "C", "D"]

    def test_simulation_seed_default(self):
        assert Settings(simulate_play=True).effective_seed == SIMULATION_SEED

    def test_explicit_seed_wins(self):
        assert Settings(simulate_play=True, random_seed=3).effective_seed == 3

    def test_debug_forces_debug_level(self):
        assert Settings(debug=True, log_level="ERROR").effective_log_level == "DEBUG"

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
