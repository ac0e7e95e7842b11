"""
Low Roller - Summary Models

Pydantic models describing a game for rendering and export.
"""

from pydantic import BaseModel, Field


class PlayerSummary(BaseModel):
    """A player's scores so far."""

    index: int = Field(ge=0)
    name: str = Field(min_length=1, max_length=30)
    round_scores: list[int] = Field(default_factory=list)
    total_score: int = Field(default=0, ge=0)


class GameSummary(BaseModel):
    """Scores, round winners and the game winner, if decided."""

    players: list[PlayerSummary]
    round_winners: list[int] = Field(default_factory=list)
    rounds_played: int = Field(default=0, ge=0)
    game_winner: int | None = None

    @property
    def winner(self) -> PlayerSummary | None:
        if self.game_winner is None:
            return None
        return self.players[self.game_winner]
