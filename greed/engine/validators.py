"""
Greed - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise a descriptive GreedError subclass.
"""

from typing import Sequence

from greed.engine.base import (
    DiceValues,
    InvalidDiceCountError,
    InvalidDiceFaceError,
    PlayerCountError,
)

MAX_DICE = 5
MIN_FACE = 1
MAX_FACE = 6
MIN_PLAYERS = 2


def validate_dice_values(
    values: Sequence[int],
    max_count: int = MAX_DICE
) -> DiceValues:
    """
    Validate and normalize dice values.

    Args:
        values: Sequence of dice values to validate
        max_count: Maximum number of dice allowed

    Returns:
        Validated values as a tuple

    Raises:
        InvalidDiceCountError: If there are more than max_count values
        InvalidDiceFaceError: If any value is not a face of a D6
    """
    values_tuple = tuple(values)
    count = len(values_tuple)

    if count > max_count:
        raise InvalidDiceCountError(f"At most {max_count} dice allowed, got {count}.")

    for i, value in enumerate(values_tuple):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidDiceFaceError(
                f"Die value at index {i} must be an integer, got {type(value).__name__}."
            )
        if not (MIN_FACE <= value <= MAX_FACE):
            raise InvalidDiceFaceError(
                f"Die value at index {i} is {value}, must be between {MIN_FACE} and {MAX_FACE}."
            )

    return values_tuple


def validate_player_count(count: int) -> int:
    """
    Validate number of players.

    Raises:
        PlayerCountError: If count is not an integer of at least 2
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise PlayerCountError(f"Player count must be an integer, got {type(count).__name__}.")

    if count < MIN_PLAYERS:
        raise PlayerCountError(f"You need at least {MIN_PLAYERS} players to play, got {count}.")

    return count
