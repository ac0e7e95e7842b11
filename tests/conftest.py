"""
Low Roller - Test Configuration and Fixtures

Scripted collaborators and common game fixtures for all test modules.
"""

import logging
from typing import Iterable, Sequence

import pytest

from low_roller.engine.base import GameConfig, PlayerState, TurnView
from low_roller.engine.events import EventRecorder


# =============================================================================
# SCRIPTED COLLABORATORS
# =============================================================================

class ScriptedDieSource:
    """Die source that returns pre-arranged values in order."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = iter(values)
        self.calls: list[int] = []

    def roll(self, face_count: int) -> int:
        self.calls.append(face_count)
        value = next(self._values)
        assert 1 <= value <= face_count, f"scripted value {value} exceeds d{face_count}"
        return value


class ScriptedChooser:
    """Chooser that replays pre-arranged answers and records every request."""

    def __init__(
        self,
        keep_counts: Sequence[str | int] = (),
        die_indices: Sequence[str | int] = (),
    ) -> None:
        self._keep_counts = iter(keep_counts)
        self._die_indices = iter(die_indices)
        self.keep_count_requests: list[tuple[TurnView, bool]] = []
        self.die_index_requests: list[tuple[TurnView, bool]] = []

    def choose_keep_count(self, view: TurnView, retry: bool) -> str | int:
        self.keep_count_requests.append((view, retry))
        return next(self._keep_counts)

    def choose_die_index(self, view: TurnView, retry: bool) -> str | int:
        self.die_index_requests.append((view, retry))
        return next(self._die_indices)


class KeepOneChooser:
    """Keeps exactly one die (the first unkept) per roll."""

    def choose_keep_count(self, view: TurnView, retry: bool) -> int:
        return 1

    def choose_die_index(self, view: TurnView, retry: bool) -> int:
        return view.kept.index(False) + 1


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def config() -> GameConfig:
    """Default rules: 4 rounds, 4 players, 5d6, fours score zero."""
    return GameConfig()


@pytest.fixture
def player(config: GameConfig) -> PlayerState:
    return PlayerState.create(0, "Tyler", config)


@pytest.fixture
def player_names() -> list[str]:
    return ["Tyler", "David", "Joe", "Tom"]


@pytest.fixture
def recorder() -> EventRecorder:
    return EventRecorder()


@pytest.fixture
def scripted_dice():
    """Factory for a ``ScriptedDieSource``."""
    return ScriptedDieSource


@pytest.fixture
def scripted_chooser():
    """Factory for a ``ScriptedChooser``."""
    return ScriptedChooser


@pytest.fixture
def keep_one_chooser() -> KeepOneChooser:
    return KeepOneChooser()


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo any ``configure_logging`` call made by a test."""
    root = logging.getLogger("low_roller")
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
