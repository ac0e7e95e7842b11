"""
Low Roller - Engine Errors

Exception hierarchy shared by the engine, the console and the config layer.
"""


class LowRollerError(Exception):
    """Base class for all Low Roller errors."""


class ConfigurationError(LowRollerError):
    """A structural precondition was violated (e.g. a game with zero players)."""


class GameStateError(LowRollerError):
    """An operation is illegal in the current game lifecycle state."""


class InvalidChoiceError(LowRollerError, ValueError):
    """
    A player's choice was rejected.

    Always recovered by re-prompting; never propagated out of a turn.
    """
