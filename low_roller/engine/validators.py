"""
Low Roller - Input Validation Utilities

Provides validation functions for player choices and game setup. All
validators either return normalized data or raise a descriptive
``InvalidChoiceError`` (player input) or ``ConfigurationError`` (setup).
"""

from typing import Sequence

from low_roller.engine.errors import ConfigurationError, InvalidChoiceError

MAX_NAME_LENGTH = 30


def parse_choice(raw: str | int) -> int:
    """
    Parse a raw choice into an integer.

    Args:
        raw: Text typed by a player, or an already-parsed integer

    Returns:
        The integer value

    Raises:
        InvalidChoiceError: If the value is not a whole number
    """
    if isinstance(raw, bool):
        raise InvalidChoiceError(f"Expected a number, got {raw!r}.")
    if isinstance(raw, int):
        return raw

    text = str(raw).strip()
    if not text:
        raise InvalidChoiceError("No number entered.")
    try:
        return int(text)
    except ValueError:
        raise InvalidChoiceError(f"{text!r} is not a number.") from None


def validate_keep_count(count: str | int, unkept: int) -> int:
    """
    Validate how many dice a player wants to keep this roll.

    Args:
        count: Raw or parsed keep count
        unkept: Number of dice not yet kept

    Returns:
        Validated keep count in [1, unkept]

    Raises:
        InvalidChoiceError: If the count is not a number or out of range
    """
    value = parse_choice(count)
    if not (1 <= value <= unkept):
        raise InvalidChoiceError(f"Keep count must be between 1 and {unkept}, got {value}.")
    return value


def validate_die_index(index: str | int, kept: Sequence[bool]) -> int:
    """
    Validate a 1-based die index chosen by a player.

    Args:
        index: Raw or parsed 1-based index
        kept: Kept flags for the player's dice

    Returns:
        The 0-based index of the chosen die

    Raises:
        InvalidChoiceError: If out of range or the die is already kept
    """
    value = parse_choice(index)
    if not (1 <= value <= len(kept)):
        raise InvalidChoiceError(f"Die index must be between 1 and {len(kept)}, got {value}.")
    if kept[value - 1]:
        raise InvalidChoiceError(f"Die {value} is already kept.")
    return value - 1


def validate_player_count(count: int) -> int:
    """
    Validate number of players.

    Raises:
        ConfigurationError: If count is not a positive integer
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise ConfigurationError(f"Player count must be an integer, got {type(count).__name__}.")
    if count < 1:
        raise ConfigurationError(f"Player count must be at least 1, got {count}.")
    return count


def validate_player_name(name: str) -> str:
    """
    Validate and normalize a single player name.

    Raises:
        InvalidChoiceError: If blank or too long
    """
    stripped = name.strip()
    if not stripped:
        raise InvalidChoiceError("Player name cannot be blank.")
    if len(stripped) > MAX_NAME_LENGTH:
        raise InvalidChoiceError(f"Player name must be at most {MAX_NAME_LENGTH} characters.")
    return stripped


def validate_player_names(names: Sequence[str], num_players: int) -> tuple[str, ...]:
    """
    Validate the full roster of player names.

    Args:
        names: One name per seat
        num_players: Seats at the table

    Returns:
        Stripped names as a tuple

    Raises:
        ConfigurationError: If the count is wrong or names are invalid/duplicated
    """
    validate_player_count(num_players)
    if len(names) != num_players:
        raise ConfigurationError(f"Expected {num_players} player names, got {len(names)}.")

    try:
        cleaned = tuple(validate_player_name(name) for name in names)
    except InvalidChoiceError as exc:
        raise ConfigurationError(str(exc)) from exc

    if len(set(cleaned)) != len(cleaned):
        raise ConfigurationError("Player names must be unique.")
    return cleaned
