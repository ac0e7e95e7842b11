"""
Low Roller - Game

Round and game orchestration. Each round every player takes a turn in
the order chosen by ``RoundOrderSelector``; the lowest round score wins
the round. After the last round the lowest cumulative score wins the
game. Ties go to the lowest seat index.
"""

import logging
from typing import Sequence

from low_roller.engine.base import GameConfig, GameResult, PlayerState, RoundResult
from low_roller.engine.dice import DieSource
from low_roller.engine.errors import GameStateError
from low_roller.engine.events import EventPayload, EventSink, GameEvent, null_sink
from low_roller.engine.order import RoundOrderSelector
from low_roller.engine.scoring import lowest_score_index
from low_roller.engine.turn import KeepChooser, TurnEngine
from low_roller.engine.validators import validate_player_names
from low_roller.models import GameSummary, PlayerSummary

logger = logging.getLogger(__name__)


class Game:
    """
    A single play session.

    Attributes:
        config: Fixed rules
        players: One ``PlayerState`` per seat
        round_results: Completed rounds, in order
        current_round_number: Next round to play (1-based)
    """

    def __init__(
        self,
        player_names: Sequence[str],
        die_source: DieSource,
        chooser: KeepChooser,
        config: GameConfig | None = None,
        emit: EventSink | None = None,
    ) -> None:
        self.config = config or GameConfig()
        self.emit = emit or null_sink

        names = validate_player_names(player_names, self.config.num_players)
        self.players = tuple(
            PlayerState.create(i, name, self.config) for i, name in enumerate(names)
        )
        self.order_selector = RoundOrderSelector(self.config.num_players, die_source)
        self.turn_engine = TurnEngine(self.config, die_source, chooser, self.emit)

        self.round_results: list[RoundResult] = []
        self.current_round_number = 1
        self._game_winner: int | None = None

    @property
    def round_winners(self) -> tuple[int, ...]:
        return tuple(result.winner for result in self.round_results)

    @property
    def is_over(self) -> bool:
        """True once every round has been played."""
        return self.current_round_number > self.config.num_rounds

    @property
    def game_winner(self) -> int:
        if self._game_winner is None:
            raise GameStateError("The game winner has not been decided yet.")
        return self._game_winner

    def play(self) -> GameResult:
        """Play every remaining round, then decide the game winner."""
        self.emit(EventPayload(
            GameEvent.GAME_STARTED,
            data={
                "players": [p.name for p in self.players],
                "rounds": self.config.num_rounds,
            },
        ))

        while not self.is_over:
            self.play_round()

        winner = self.calculate_game_winner()
        result = self.result()
        logger.info("%s won the game with %d", self.players[winner].name, result.winning_score)
        self.emit(EventPayload(
            GameEvent.GAME_WON,
            player_index=winner,
            data={"player": result.winner_name, "score": result.winning_score},
        ))
        return result

    def play_round(self) -> RoundResult:
        """
        Play one full round.

        Raises:
            GameStateError: If every round has already been played
        """
        if self.is_over:
            raise GameStateError(f"All {self.config.num_rounds} rounds have been played.")

        round_number = self.current_round_number
        order = self.order_selector.get_round_player_order()
        self.emit(EventPayload(
            GameEvent.ROUND_STARTED,
            round_number,
            order[0],
            {"order": list(order), "starter": self.players[order[0]].name},
        ))

        for index in order:
            self.turn_engine.take_turn(self.players[index], round_number)

        for index in order:
            player = self.players[index]
            self.emit(EventPayload(
                GameEvent.ROUND_SCORED,
                round_number,
                index,
                {"player": player.name, "score": player.round_score(round_number)},
            ))

        winner = self.calculate_round_winner(round_number)
        result = RoundResult(
            round_number=round_number,
            player_order=order,
            scores=tuple(p.round_score(round_number) for p in self.players),
            winner=winner,
        )
        self.round_results.append(result)
        self.current_round_number += 1

        winning_score = result.scores[winner]
        logger.info(
            "Round %d won by %s with %d", round_number, self.players[winner].name, winning_score
        )
        self.emit(EventPayload(
            GameEvent.ROUND_WON,
            round_number,
            winner,
            {"player": self.players[winner].name, "score": winning_score},
        ))
        return result

    def calculate_round_winner(self, round_number: int) -> int:
        """Seat index with the lowest score for ``round_number``."""
        scores = [player.round_score(round_number) for player in self.players]
        return lowest_score_index(scores)

    def calculate_game_winner(self) -> int:
        """
        Decide the game winner from cumulative scores. Can only happen once.

        Raises:
            GameStateError: If rounds are missing or the winner is already set
        """
        if self._game_winner is not None:
            raise GameStateError("The game winner has already been decided.")

        for player in self.players:
            if player.rounds_recorded != self.config.num_rounds:
                raise GameStateError(
                    f"{player.name} has only {player.rounds_recorded} of "
                    f"{self.config.num_rounds} round scores."
                )

        self._game_winner = lowest_score_index([p.total_score for p in self.players])
        return self._game_winner

    def result(self) -> GameResult:
        winner = self.game_winner
        return GameResult(
            rounds=tuple(self.round_results),
            totals=tuple(p.total_score for p in self.players),
            winner=winner,
            winner_name=self.players[winner].name,
        )

    def summary(self) -> GameSummary:
        """Serializable overview of the game so far."""
        return GameSummary(
            players=[
                PlayerSummary(
                    index=p.index,
                    name=p.name,
                    round_scores=[s for s in p.round_scores if s is not None],
                    total_score=p.total_score,
                )
                for p in self.players
            ],
            round_winners=list(self.round_winners),
            rounds_played=len(self.round_results),
            game_winner=self._game_winner,
        )
