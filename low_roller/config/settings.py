"""
Low Roller - Application Settings

Loads configuration from environment variables using Pydantic Settings.
Game rules are fixed in ``GameConfig``; only runtime concerns live here.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

SIMULATION_SEED = 42


class Settings(BaseSettings):
    """Application settings loaded from ``LOW_ROLLER_*`` environment variables."""

    # Application
    debug: bool = False
    log_level: str = "WARNING"

    # Simulation
    simulate_play: bool = False
    random_seed: int | None = None
    simulated_player_names: list[str] = Field(
        default_factory=lambda: ["Tyler", "David", "Joe", "Tom"]
    )

    model_config = {
        "env_prefix": "LOW_ROLLER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level.upper()

    @property
    def effective_seed(self) -> int | None:
        """Seed for the die source; simulations are reproducible by default."""
        if self.random_seed is None and self.simulate_play:
            return SIMULATION_SEED
        return self.random_seed


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()
