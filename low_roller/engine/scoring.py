"""
Low Roller - Scoring

Round tallies and lowest-score winner selection. Lowest score wins both a
round and the game; ties go to the lowest seat index.
"""

from typing import Sequence

from low_roller.engine.errors import ConfigurationError


def tally_round_score(dice: Sequence[int], zero_face: int) -> int:
    """
    Sum the dice, counting every die showing ``zero_face`` as zero.

    Example:
        >>> tally_round_score((4, 4, 3, 6, 2), zero_face=4)
        11
    """
    return sum(value for value in dice if value != zero_face)


def lowest_score_index(scores: Sequence[int]) -> int:
    """
    Index of the strictly lowest score, first one wins on a tie.

    Raises:
        ConfigurationError: If ``scores`` is empty
    """
    if not scores:
        raise ConfigurationError("Cannot pick a winner from zero scores.")

    winner = 0
    for i, score in enumerate(scores):
        if score < scores[winner]:
            winner = i
    return winner
