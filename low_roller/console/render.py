"""Text renderers for the console. Every function returns a string."""

from __future__ import annotations

from typing import Sequence

from low_roller.engine.base import TurnView
from low_roller.engine.events import EventPayload, GameEvent
from low_roller.models import GameSummary

BANNER = (
    "**(>^.^)>**Welcome to the Low Roller Dice Game**<(^.^<)**\n"
    "*********************************************************"
)
SIMULATION_NOTICE = (
    "***********************\n"
    "Game in Simulation Mode\n"
    "***********************"
)


def render_banner(simulated: bool = False) -> str:
    """Welcome banner, with a notice when the game plays itself."""
    if simulated:
        return f"{BANNER}\n{SIMULATION_NOTICE}"
    return BANNER


def render_round_header(round_number: int) -> str:
    return f"\n********Round {round_number}********"


def render_turn_header(player_name: str) -> str:
    return f"\n{player_name}'s turn"


def render_dice_tray(dice: Sequence[int], kept: Sequence[bool]) -> str:
    """Kept dice on one line, the choice pool (``X`` for kept slots) on the next.

    Args:
        dice: Current face values.
        kept: Kept flags, parallel to ``dice``.
    """
    kept_values = [str(v) for v, k in zip(dice, kept) if k]
    pool = ["X" if k else str(v) for v, k in zip(dice, kept)]
    return f"Kept: {' '.join(kept_values)}\nChoice Pool: {' '.join(pool)}"


def render_turn_view(view: TurnView) -> str:
    return render_dice_tray(view.dice, view.kept)


def render_round_score(player_name: str, round_number: int, score: int) -> str:
    return f"{player_name}'s score for round {round_number} was {score}"


def render_round_winner(player_name: str, round_number: int, score: int) -> str:
    return f"\nThe winner for round {round_number}, with a score of {score}, is {player_name}"


def render_game_winner(player_name: str, score: int) -> str:
    return f"\n{player_name} has won the game with a score of {score}!!"


def render_scoreboard(summary: GameSummary) -> str:
    """Per-round score table with totals; the round winner is starred."""
    header = ["Player".ljust(12)]
    header += [f"R{n}".rjust(5) for n in range(1, summary.rounds_played + 1)]
    header.append("Total".rjust(7))
    lines = ["\nScoreboard", "".join(header)]

    for player in summary.players:
        cells = [player.name[:12].ljust(12)]
        for round_index, score in enumerate(player.round_scores):
            won = (
                round_index < len(summary.round_winners)
                and summary.round_winners[round_index] == player.index
            )
            cells.append(f"{score}{'*' if won else ''}".rjust(5))
        cells.append(str(player.total_score).rjust(7))
        lines.append("".join(cells))

    if summary.winner is not None:
        lines.append(f"Winner: {summary.winner.name}")
    return "\n".join(lines)


_KEEP_MESSAGES = {
    "auto": "Marking last die as kept.",
    "all": "Marking remaining dice as kept.",
}


def render_event(payload: EventPayload) -> str | None:
    """Map an engine event to console text, or ``None`` if it is not shown."""
    data = payload.data
    event = payload.event

    if event == GameEvent.ROUND_STARTED:
        return f"{render_round_header(payload.round_number)}\n{data['starter']} starts this round."
    if event == GameEvent.TURN_STARTED:
        return render_turn_header(data["player"])
    if event == GameEvent.DICE_ROLLED:
        return render_dice_tray(data["dice"], data["kept"])
    if event == GameEvent.DICE_KEPT:
        return _KEEP_MESSAGES.get(data["mode"])
    if event == GameEvent.INVALID_CHOICE:
        return f"Invalid choice: {data['reason']}"
    if event == GameEvent.ROUND_SCORED:
        return render_round_score(data["player"], payload.round_number, data["score"])
    if event == GameEvent.ROUND_WON:
        return render_round_winner(data["player"], payload.round_number, data["score"])
    if event == GameEvent.GAME_WON:
        return render_game_winner(data["player"], data["score"])
    return None
