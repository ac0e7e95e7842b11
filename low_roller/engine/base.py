"""
Low Roller - Game Engine Base Classes

This module defines the rule constants and the state containers used
throughout the engine. Configuration and snapshots are immutable (frozen
dataclasses); ``PlayerState`` is the one mutable container, owned by the
game and reset explicitly at the end of every turn.
"""

from dataclasses import dataclass, field

from low_roller.engine.errors import ConfigurationError, GameStateError


@dataclass(frozen=True)
class GameConfig:
    """
    Fixed rules for a game session.

    Attributes:
        num_rounds: Number of rounds played
        num_players: Number of players seated
        num_dice: Dice rolled by each player per round
        die_faces: Faces on each die
        zero_face: Face value that scores nothing
    """
    num_rounds: int = 4
    num_players: int = 4
    num_dice: int = 5
    die_faces: int = 6
    zero_face: int = 4

    def __post_init__(self) -> None:
        """Validate configuration."""
        for name in ("num_rounds", "num_players", "num_dice", "die_faces"):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 1:
                raise ConfigurationError(f"{name} must be a positive integer, got {value!r}.")

        if not (1 <= self.zero_face <= self.die_faces):
            raise ConfigurationError(
                f"zero_face must be between 1 and {self.die_faces}, got {self.zero_face}."
            )

    @property
    def max_round_score(self) -> int:
        """Highest score a single round can produce."""
        return self.num_dice * self.die_faces

    @property
    def max_game_score(self) -> int:
        """Highest cumulative score over all rounds."""
        return self.max_round_score * self.num_rounds


@dataclass
class PlayerState:
    """
    Per-player state for a whole game.

    Attributes:
        index: Seat index (0-based)
        name: Display name
        round_scores: One slot per round, ``None`` until that round is tallied
        current_round_dice: Face values for this round (0 = not rolled yet)
        kept_dice: Parallel to ``current_round_dice``; True once a die is locked
    """
    index: int
    name: str
    round_scores: list[int | None] = field(default_factory=list)
    current_round_dice: list[int] = field(default_factory=list)
    kept_dice: list[bool] = field(default_factory=list)

    @classmethod
    def create(cls, index: int, name: str, config: GameConfig) -> "PlayerState":
        """Create a player with empty round slots sized for ``config``."""
        return cls(
            index=index,
            name=name,
            round_scores=[None] * config.num_rounds,
            current_round_dice=[0] * config.num_dice,
            kept_dice=[False] * config.num_dice,
        )

    @property
    def unkept_count(self) -> int:
        """Number of dice still to be re-rolled."""
        return self.kept_dice.count(False)

    @property
    def unkept_indices(self) -> tuple[int, ...]:
        """0-based indices of dice that are not kept."""
        return tuple(i for i, kept in enumerate(self.kept_dice) if not kept)

    @property
    def has_finished_turn(self) -> bool:
        """True once every die has been kept."""
        return all(self.kept_dice)

    @property
    def total_score(self) -> int:
        """Sum of every recorded round score."""
        return sum(score for score in self.round_scores if score is not None)

    @property
    def rounds_recorded(self) -> int:
        return sum(1 for score in self.round_scores if score is not None)

    def is_die_kept(self, index: int) -> bool:
        return self.kept_dice[index]

    def keep_die(self, index: int) -> None:
        """Lock a single die (0-based)."""
        if self.kept_dice[index]:
            raise GameStateError(f"Die {index + 1} is already kept.")
        self.kept_dice[index] = True

    def keep_all(self) -> tuple[int, ...]:
        """Lock every remaining die, returning the indices that changed."""
        newly_kept = self.unkept_indices
        for i in newly_kept:
            self.kept_dice[i] = True
        return newly_kept

    def round_score(self, round_number: int) -> int:
        """Score of a completed round (1-based)."""
        score = self.round_scores[round_number - 1]
        if score is None:
            raise GameStateError(f"{self.name} has no score for round {round_number}.")
        return score

    def check_round_slot(self, round_number: int) -> None:
        """
        Ensure ``round_number`` exists and has no score yet.

        Raises:
            GameStateError: If the round is out of range or already scored
        """
        if not (1 <= round_number <= len(self.round_scores)):
            raise GameStateError(f"Round {round_number} does not exist.")
        if self.round_scores[round_number - 1] is not None:
            raise GameStateError(
                f"{self.name} already has a score for round {round_number}."
            )

    def record_round_score(self, round_number: int, score: int) -> None:
        """Write a round score; each round can be written only once."""
        self.check_round_slot(round_number)
        self.round_scores[round_number - 1] = score

    def clear_round(self) -> None:
        """Reset the round-scoped dice state for the next round."""
        self.current_round_dice = [0] * len(self.current_round_dice)
        self.kept_dice = [False] * len(self.kept_dice)


@dataclass(frozen=True)
class TurnView:
    """
    Immutable snapshot of a player's dice, handed to choosers and renderers.

    Attributes:
        player_name: Name of the active player
        round_number: Current round (1-based)
        roll_number: Roll within this turn (1-based)
        dice: Current face values
        kept: Kept flags, parallel to ``dice``
    """
    player_name: str
    round_number: int
    roll_number: int
    dice: tuple[int, ...]
    kept: tuple[bool, ...]

    @classmethod
    def from_player(cls, player: PlayerState, round_number: int, roll_number: int) -> "TurnView":
        return cls(
            player_name=player.name,
            round_number=round_number,
            roll_number=roll_number,
            dice=tuple(player.current_round_dice),
            kept=tuple(player.kept_dice),
        )

    @property
    def kept_values(self) -> tuple[int, ...]:
        """Values of the kept dice."""
        return tuple(v for v, k in zip(self.dice, self.kept) if k)

    @property
    def pool(self) -> tuple[int | None, ...]:
        """Dice available to keep; kept slots are ``None``."""
        return tuple(None if k else v for v, k in zip(self.dice, self.kept))

    @property
    def unkept_count(self) -> int:
        return self.kept.count(False)


@dataclass(frozen=True)
class RoundResult:
    """
    Outcome of one completed round.

    Attributes:
        round_number: Round played (1-based)
        player_order: Seat indices in the order they played
        scores: Round score by seat index
        winner: Seat index of the lowest scorer
    """
    round_number: int
    player_order: tuple[int, ...]
    scores: tuple[int, ...]
    winner: int

    @property
    def starter(self) -> int:
        return self.player_order[0]


@dataclass(frozen=True)
class GameResult:
    """
    Outcome of a full game.

    Attributes:
        rounds: Every round result in play order
        totals: Cumulative score by seat index
        winner: Seat index with the lowest cumulative score
        winner_name: Display name of the winner
    """
    rounds: tuple[RoundResult, ...]
    totals: tuple[int, ...]
    winner: int
    winner_name: str

    @property
    def winning_score(self) -> int:
        return self.totals[self.winner]
