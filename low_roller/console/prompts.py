"""Console input: player names and keep decisions."""

from __future__ import annotations

from typing import Callable

from low_roller.console.render import render_turn_view
from low_roller.engine.base import TurnView
from low_roller.engine.errors import InvalidChoiceError
from low_roller.engine.validators import validate_player_name

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


class ConsoleChooser:
    """Asks the player at the keyboard which dice to keep."""

    def __init__(self, input_fn: InputFn = input, output_fn: OutputFn = print) -> None:
        self.input_fn = input_fn
        self.output_fn = output_fn

    def choose_keep_count(self, view: TurnView, retry: bool) -> str:
        if retry:
            self.output_fn(render_turn_view(view))
        return self.input_fn(
            f"How many dice rolls would you like to keep? "
            f"You have {view.unkept_count} unkept rolls.\n"
        )

    def choose_die_index(self, view: TurnView, retry: bool) -> str:
        if retry:
            return self.input_fn("Please enter a valid index.\n")
        return self.input_fn("Please enter the index of the die roll to keep.\n")


class SimulatedChooser:
    """Plays itself: keeps every remaining die on the first roll."""

    def choose_keep_count(self, view: TurnView, retry: bool) -> int:
        return view.unkept_count

    def choose_die_index(self, view: TurnView, retry: bool) -> int:
        return next(i for i, kept in enumerate(view.kept, start=1) if not kept)


def collect_player_names(
    num_players: int,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> list[str]:
    """Prompt for one unique, non-blank name per seat."""
    names: list[str] = []
    for seat in range(1, num_players + 1):
        prompt = f"Enter name for player {seat}:\n"
        while True:
            try:
                name = validate_player_name(input_fn(prompt))
            except InvalidChoiceError as exc:
                output_fn(str(exc))
                continue
            if name in names:
                output_fn(f"{name} is already playing, pick another name.")
                continue
            break
        names.append(name)
    return names
