"""
Low Roller - Engine Event Definitions

Event types and payloads emitted while a game is played. The console
renders them; tests inspect them.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable


class GameEvent(Enum):
    """Events that can occur during a game."""

    GAME_STARTED = auto()
    ROUND_STARTED = auto()
    TURN_STARTED = auto()
    DICE_ROLLED = auto()
    DICE_KEPT = auto()
    INVALID_CHOICE = auto()
    TURN_ENDED = auto()
    ROUND_SCORED = auto()
    ROUND_WON = auto()
    GAME_WON = auto()


@dataclass
class EventPayload:
    """Wrapper for event data."""

    event: GameEvent
    round_number: int | None = None
    player_index: int | None = None
    data: dict[str, Any] = field(default_factory=dict)


EventSink = Callable[[EventPayload], None]


def null_sink(payload: EventPayload) -> None:
    """Discard an event."""


class EventRecorder:
    """Sink that keeps every payload it receives."""

    def __init__(self) -> None:
        self.events: list[EventPayload] = []

    def __call__(self, payload: EventPayload) -> None:
        self.events.append(payload)

    def of_type(self, event: GameEvent) -> list[EventPayload]:
        return [p for p in self.events if p.event == event]

    def clear(self) -> None:
        self.events.clear()
