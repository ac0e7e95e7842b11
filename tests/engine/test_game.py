"""
Low Roller - Game Orchestration Tests

Tests for rounds, round winners and the game winner.
"""

import pytest

from low_roller.console.prompts import SimulatedChooser
from low_roller.engine.base import GameConfig
from low_roller.engine.dice import RandomDieSource
from low_roller.engine.errors import ConfigurationError, GameStateError
from low_roller.engine.events import GameEvent
from low_roller.engine.game import Game
from low_roller.engine.scoring import lowest_score_index


@pytest.fixture
def game(player_names, recorder) -> Game:
    return Game(player_names, RandomDieSource(seed=42), SimulatedChooser(), emit=recorder)


def record_scores(game: Game, rounds: list[list[int]]) -> None:
    """Write ``rounds[r][p]`` as player p's score for round r + 1."""
    for round_index, scores in enumerate(rounds):
        for player, score in zip(game.players, scores):
            player.record_round_score(round_index + 1, score)


# === Setup ===


class TestGameSetup:
    """Tests for Game construction."""

    def test_players_created(self, game):
        assert [p.name for p in game.players] == ["Tyler", "David", "Joe", "Tom"]
        assert [p.index for p in game.players] == [0, 1, 2, 3]
        assert game.current_round_number == 1
        assert game.round_winners == ()

    def test_wrong_name_count(self):
        with pytest.raises(ConfigurationError):
            Game(["Solo"], RandomDieSource(), SimulatedChooser())

    def test_winner_unknown_before_play(self, game):
        with pytest.raises(GameStateError, match="not been decided"):
            game.game_winner


# === Round winner ===


class TestRoundWinner:
    """Tests for Game.calculate_round_winner()."""

    def test_strict_lowest(self, game):
        record_scores(game, [[12, 12, 9, 15]])
        assert game.calculate_round_winner(1) == 2

    def test_tie_goes_to_lowest_index(self, game):
        record_scores(game, [[10, 10, 15, 20]])
        assert game.calculate_round_winner(1) == 0

    def test_missing_score_raises(self, game):
        game.players[0].record_round_score(1, 5)
        with pytest.raises(GameStateError):
            game.calculate_round_winner(1)


# === Game winner ===


class TestGameWinner:
    """Tests for Game.calculate_game_winner()."""

    def test_first_of_tied_minimum(self, game):
        record_scores(game, [
            [10, 8, 10, 20],
            [10, 10, 8, 10],
            [10, 10, 10, 10],
            [10, 10, 10, 10],
        ])
        assert [p.total_score for p in game.players] == [40, 38, 38, 50]
        assert game.calculate_game_winner() == 1
        assert game.game_winner == 1

    def test_requires_every_round(self, game):
        record_scores(game, [[1, 2, 3, 4]])
        with pytest.raises(GameStateError, match="only 1 of 4"):
            game.calculate_game_winner()

    def test_decided_once(self, game):
        record_scores(game, [[1, 2, 3, 4]] * 4)
        game.calculate_game_winner()
        with pytest.raises(GameStateError, match="already been decided"):
            game.calculate_game_winner()


# === Full play ===


class TestPlay:
    """Tests for Game.play_round() and Game.play()."""

    def test_play_round(self, game, recorder):
        result = game.play_round()

        assert result.round_number == 1
        assert sorted(result.player_order) == [0, 1, 2, 3]
        assert result.winner == lowest_score_index(result.scores)
        assert game.current_round_number == 2
        assert game.round_winners == (result.winner,)
        assert len(recorder.of_type(GameEvent.TURN_STARTED)) == 4

    def test_turns_follow_round_order(self, game, recorder):
        result = game.play_round()
        turn_order = tuple(e.player_index for e in recorder.of_type(GameEvent.TURN_STARTED))
        assert turn_order == result.player_order

    def test_full_game(self, game, recorder):
        result = game.play()

        assert len(result.rounds) == 4
        assert [r.round_number for r in result.rounds] == [1, 2, 3, 4]
        assert sorted(r.starter for r in result.rounds) == [0, 1, 2, 3]
        for index, player in enumerate(game.players):
            assert result.totals[index] == sum(r.scores[index] for r in result.rounds)
            assert player.round_scores == [r.scores[index] for r in result.rounds]
        assert result.winner == lowest_score_index(result.totals)
        assert result.winner_name == game.players[result.winner].name
        assert game.is_over

    def test_full_game_events(self, game, recorder):
        game.play()
        events = [e.event for e in recorder.events]
        assert events[0] == GameEvent.GAME_STARTED
        assert events[-1] == GameEvent.GAME_WON
        assert events.count(GameEvent.ROUND_WON) == 4
        assert events.count(GameEvent.ROUND_SCORED) == 16

    def test_round_after_last_raises(self, game):
        game.play()
        with pytest.raises(GameStateError, match="rounds have been played"):
            game.play_round()

    def test_seeded_games_repeat(self, player_names):
        first = Game(player_names, RandomDieSource(7), SimulatedChooser()).play()
        second = Game(player_names, RandomDieSource(7), SimulatedChooser()).play()
        assert first == second

    def test_more_rounds_than_players(self):
        config = GameConfig(num_rounds=6, num_players=3)
        game = Game(["Ann", "Bo", "Cy"], RandomDieSource(3), SimulatedChooser(), config=config)
        result = game.play()

        starters = [r.starter for r in result.rounds]
        assert sorted(starters[:3]) == [0, 1, 2]
        assert sorted(starters[3:]) == [0, 1, 2]


# === Summary ===


class TestSummary:
    """Tests for Game.summary()."""

    def test_before_play(self, game):
        summary = game.summary()
        assert summary.rounds_played == 0
        assert summary.game_winner is None
        assert summary.winner is None
        assert all(p.round_scores == [] for p in summary.players)

    def test_after_play(self, game):
        result = game.play()
        summary = game.summary()
        assert summary.rounds_played == 4
        assert summary.game_winner == result.winner
        assert summary.winner.name == result.winner_name
        assert [p.total_score for p in summary.players] == list(result.totals)
        assert summary.model_dump()["round_winners"] == list(game.round_winners)
