"""
Low Roller Configuration.

Environment variables, settings, and logging configuration.
"""

from low_roller.config.logging_config import configure_logging
from low_roller.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
