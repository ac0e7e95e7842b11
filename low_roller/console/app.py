"""Low Roller - console application entry point."""

from __future__ import annotations

import logging

from low_roller.config import Settings, configure_logging, get_settings
from low_roller.console.prompts import (
    ConsoleChooser,
    InputFn,
    OutputFn,
    SimulatedChooser,
    collect_player_names,
)
from low_roller.console.render import render_banner, render_event, render_scoreboard
from low_roller.engine.base import GameConfig
from low_roller.engine.dice import RandomDieSource
from low_roller.engine.errors import ConfigurationError
from low_roller.engine.events import EventPayload, EventSink
from low_roller.engine.game import Game

logger = logging.getLogger(__name__)


def console_sink(output_fn: OutputFn) -> EventSink:
    """Event sink that prints every renderable event."""

    def sink(payload: EventPayload) -> None:
        text = render_event(payload)
        if text is not None:
            output_fn(text)

    return sink


def build_game(
    settings: Settings,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
    config: GameConfig | None = None,
) -> Game:
    """Wire a ``Game`` for console play or simulation according to ``settings``."""
    config = config or GameConfig()
    die_source = RandomDieSource(settings.effective_seed)

    if settings.simulate_play:
        chooser = SimulatedChooser()
        names = settings.simulated_player_names
    else:
        chooser = ConsoleChooser(input_fn, output_fn)
        names = collect_player_names(config.num_players, input_fn, output_fn)

    logger.info("Starting game for %s (seed=%s)", ", ".join(names), die_source.seed)
    return Game(names, die_source, chooser, config=config, emit=console_sink(output_fn))


def main(
    settings: Settings | None = None,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> int:
    """Play one game in the terminal. Returns the process exit code."""
    settings = settings or get_settings()
    configure_logging(settings.effective_log_level)

    output_fn(render_banner(settings.simulate_play))
    try:
        game = build_game(settings, input_fn, output_fn)
        game.play()
    except (KeyboardInterrupt, EOFError):
        output_fn("\nGame abandoned.")
        return 130
    except ConfigurationError as exc:
        logger.error("Cannot start game: %s", exc)
        output_fn(f"Cannot start game: {exc}")
        return 2

    output_fn(render_scoreboard(game.summary()))
    return 0
