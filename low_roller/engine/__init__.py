"""
Low Roller Game Engine.

Pure Python game logic with zero console dependencies.
Handles dice rolling, keep decisions, scoring and round orchestration.
"""

from low_roller.engine.base import (
    GameConfig,
    GameResult,
    PlayerState,
    RoundResult,
    TurnView,
)
from low_roller.engine.dice import DieSource, RandomDieSource
from low_roller.engine.errors import (
    ConfigurationError,
    GameStateError,
    InvalidChoiceError,
    LowRollerError,
)
from low_roller.engine.events import EventPayload, EventRecorder, EventSink, GameEvent
from low_roller.engine.game import Game
from low_roller.engine.order import RoundOrderSelector
from low_roller.engine.turn import KeepChooser, TurnEngine

__all__ = [
    # Data Classes
    "GameConfig",
    "GameResult",
    "PlayerState",
    "RoundResult",
    "TurnView",
    # Events
    "EventPayload",
    "EventRecorder",
    "EventSink",
    "GameEvent",
    # Errors
    "ConfigurationError",
    "GameStateError",
    "InvalidChoiceError",
    "LowRollerError",
    # Engines
    "DieSource",
    "Game",
    "KeepChooser",
    "RandomDieSource",
    "RoundOrderSelector",
    "TurnEngine",
]
