"""
Low Roller - Round Order Selection

Picks a random play order for each round. The starter is drawn from the
players who have not started yet in the current fairness cycle; once
every player has started a round, the cycle resets. The rest of the order
is drawn at random without repeats.
"""

import logging

from low_roller.engine.dice import DieSource
from low_roller.engine.validators import validate_player_count

logger = logging.getLogger(__name__)


class RoundOrderSelector:
    """
    Fairness-constrained turn order generator.

    Indices are drawn by rolling a die with one face per player and
    re-rolling any index that is not allowed.
    """

    def __init__(self, num_players: int, die_source: DieSource) -> None:
        self.num_players = validate_player_count(num_players)
        self.die_source = die_source
        self._started: set[int] = set()

    @property
    def started_players(self) -> frozenset[int]:
        """Players who have started a round in the current cycle."""
        return frozenset(self._started)

    def has_player_gone_first(self, index: int) -> bool:
        return index in self._started

    def get_round_player_order(self) -> tuple[int, ...]:
        """
        Determine the play order for the next round.

        Returns:
            Tuple of every player index exactly once, starter first
        """
        if len(self._started) == self.num_players:
            logger.debug("Every player has started a round; resetting starter cycle")
            self._started.clear()

        starter = self._draw_player()
        while self.has_player_gone_first(starter):
            starter = self._draw_player()
        self._started.add(starter)

        order = [starter]
        while len(order) < self.num_players:
            candidate = self._draw_player()
            if candidate not in order:
                order.append(candidate)

        logger.debug("Round order: %s", order)
        return tuple(order)

    def _draw_player(self) -> int:
        return self.die_source.roll(self.num_players) - 1
