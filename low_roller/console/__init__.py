"""
Low Roller Console.

Text rendering and prompting for playing in a terminal.
"""

from low_roller.console.prompts import ConsoleChooser, SimulatedChooser, collect_player_names
from low_roller.console.render import render_event

__all__ = [
    "ConsoleChooser",
    "SimulatedChooser",
    "collect_player_names",
    "render_event",
]
