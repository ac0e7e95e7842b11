"""
Low Roller - Turn Engine

Drives one player through one round: roll every unkept die, show the
dice, lock in at least one die, repeat until all dice are kept, then
tally the round score and reset the player's dice.

Keep policy per roll:
    - One die left: it is kept automatically.
    - Otherwise the player picks how many dice to keep (1 to unkept).
      Keeping every remaining die skips the per-die prompts; any smaller
      count asks for that many die indices (1-based).

Invalid input is re-requested inside the same call until it is valid.
"""

import logging
from typing import Protocol

from low_roller.engine.base import GameConfig, PlayerState, TurnView
from low_roller.engine.dice import DieSource
from low_roller.engine.errors import GameStateError, InvalidChoiceError
from low_roller.engine.events import EventPayload, EventSink, GameEvent, null_sink
from low_roller.engine.scoring import tally_round_score
from low_roller.engine.validators import validate_die_index, validate_keep_count

logger = logging.getLogger(__name__)


class KeepChooser(Protocol):
    """Source of a player's keep decisions (console, simulation or test script)."""

    def choose_keep_count(self, view: TurnView, retry: bool) -> str | int:
        """How many of the ``view.unkept_count`` dice to keep."""
        ...

    def choose_die_index(self, view: TurnView, retry: bool) -> str | int:
        """1-based index of a die to keep."""
        ...


class TurnEngine:
    """
    Runs the roll/keep loop for a single player's turn.

    The engine holds no per-turn state of its own; everything lives on the
    ``PlayerState`` passed to ``take_turn``.
    """

    def __init__(
        self,
        config: GameConfig,
        die_source: DieSource,
        chooser: KeepChooser,
        emit: EventSink | None = None,
    ) -> None:
        self.config = config
        self.die_source = die_source
        self.chooser = chooser
        self.emit = emit or null_sink

    def take_turn(self, player: PlayerState, round_number: int) -> int:
        """
        Play ``player``'s turn for ``round_number`` and record the score.

        Args:
            player: The player taking the turn
            round_number: Current round (1-based)

        Returns:
            The tallied round score
        """
        player.check_round_slot(round_number)
        if player.has_finished_turn:
            raise GameStateError(f"{player.name} has no dice left to roll.")

        self.emit(EventPayload(
            GameEvent.TURN_STARTED, round_number, player.index, {"player": player.name},
        ))

        roll_number = 0
        while not player.has_finished_turn:
            roll_number += 1
            self.populate_round_dice(player)
            view = TurnView.from_player(player, round_number, roll_number)
            logger.debug("%s roll %d: %s", player.name, roll_number, view.dice)
            self.emit(EventPayload(
                GameEvent.DICE_ROLLED,
                round_number,
                player.index,
                {
                    "player": player.name,
                    "roll": roll_number,
                    "dice": list(view.dice),
                    "kept": list(view.kept),
                },
            ))
            self.choose_kept_dice(player, view)

        score = tally_round_score(player.current_round_dice, self.config.zero_face)
        player.record_round_score(round_number, score)
        self.emit(EventPayload(
            GameEvent.TURN_ENDED,
            round_number,
            player.index,
            {"player": player.name, "score": score, "dice": list(player.current_round_dice)},
        ))
        logger.debug("%s scored %d in round %d", player.name, score, round_number)

        player.clear_round()
        return score

    def populate_round_dice(self, player: PlayerState) -> None:
        """Roll every die that is not kept."""
        for i in player.unkept_indices:
            player.current_round_dice[i] = self.die_source.roll(self.config.die_faces)

    def choose_kept_dice(self, player: PlayerState, view: TurnView) -> tuple[int, ...]:
        """
        Apply one keep decision to ``player``.

        Returns:
            0-based indices kept by this decision (never empty)
        """
        unkept = player.unkept_count

        if unkept == 1:
            kept = player.keep_all()
            self._emit_kept(player, view, kept, "auto")
            return kept

        count = self._request_keep_count(player, view, unkept)

        if count == unkept:
            kept = player.keep_all()
            self._emit_kept(player, view, kept, "all")
            return kept

        chosen = []
        for _ in range(count):
            index = self._request_die_index(player, view)
            player.keep_die(index)
            chosen.append(index)
            view = TurnView.from_player(player, view.round_number, view.roll_number)

        kept = tuple(chosen)
        self._emit_kept(player, view, kept, "chosen")
        return kept

    def _request_keep_count(self, player: PlayerState, view: TurnView, unkept: int) -> int:
        retry = False
        while True:
            raw = self.chooser.choose_keep_count(view, retry)
            try:
                return validate_keep_count(raw, unkept)
            except InvalidChoiceError as exc:
                self._reject(player, view, "keep_count", raw, exc)
                retry = True

    def _request_die_index(self, player: PlayerState, view: TurnView) -> int:
        retry = False
        while True:
            raw = self.chooser.choose_die_index(view, retry)
            try:
                return validate_die_index(raw, player.kept_dice)
            except InvalidChoiceError as exc:
                self._reject(player, view, "die_index", raw, exc)
                retry = True

    def _reject(
        self,
        player: PlayerState,
        view: TurnView,
        prompt: str,
        raw: str | int,
        exc: InvalidChoiceError,
    ) -> None:
        logger.warning("Rejected %s %r from %s: %s", prompt, raw, player.name, exc)
        self.emit(EventPayload(
            GameEvent.INVALID_CHOICE,
            view.round_number,
            player.index,
            {"player": player.name, "prompt": prompt, "value": raw, "reason": str(exc)},
        ))

    def _emit_kept(
        self,
        player: PlayerState,
        view: TurnView,
        indices: tuple[int, ...],
        mode: str,
    ) -> None:
        self.emit(EventPayload(
            GameEvent.DICE_KEPT,
            view.round_number,
            player.index,
            {
                "player": player.name,
                "mode": mode,
                "indices": list(indices),
                "values": [player.current_round_dice[i] for i in indices],
            },
        ))
