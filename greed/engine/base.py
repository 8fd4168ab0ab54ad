"""
Greed - Game Engine Base Classes

This module defines the foundational data structures, enums and errors used
throughout the game engine. Scoring results and roll outcomes are frozen
dataclasses; players are mutable records owned by their game.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Tuple

DiceValues = Tuple[int, ...]


class GreedError(ValueError):
    """Base class for all engine errors."""


class PlayerCountError(GreedError):
    """Raised when a game is requested with too few players."""


class InvalidDiceCountError(GreedError):
    """Raised when more dice are passed to scoring than a roll can hold."""


class InvalidDiceFaceError(GreedError):
    """Raised when a die value is outside the faces of a D6."""


class TurnState(Enum):
    """Lifecycle of a single player's turn."""
    WAITING = auto()
    PLAYING = auto()
    FINISHED = auto()


@dataclass(frozen=True)
class ScoreResult:
    """
    Scoring result for a set of dice.

    Attributes:
        points: Total points scored
        residual: Per-face count of dice left unscored, with an entry
                  (possibly 0) for every face that appeared in the roll
    """
    points: int
    residual: dict[int, int] = field(default_factory=dict)

    @property
    def unscored_dice(self) -> int:
        """Total number of dice that did not contribute to the score."""
        return sum(self.residual.values())

    @property
    def is_bust(self) -> bool:
        return self.points == 0

    def __iter__(self):
        # Allows `points, residual = result`
        return iter((self.points, self.residual))

    def __str__(self) -> str:
        if self.is_bust:
            return "BUST! No scoring dice."
        return f"Total: {self.points} points"


@dataclass(frozen=True)
class RollOutcome:
    """
    What a turn should do after a roll has been scored.

    Attributes:
        keep_rolling: Whether the turn may continue
        dice_count: Dice to roll next (0 when the turn must stop)
    """
    keep_rolling: bool
    dice_count: int = 0

    @classmethod
    def stop(cls) -> "RollOutcome":
        return cls(keep_rolling=False)

    @classmethod
    def roll(cls, dice_count: int) -> "RollOutcome":
        if dice_count <= 0:
            return cls.stop()
        return cls(keep_rolling=True, dice_count=dice_count)


@dataclass
class Player:
    """
    A single player's scores and turn bookkeeping.

    Attributes:
        name: Display name ("Player 1", "Player 2", ...)
        turn_state: Where the player is in their current turn
        turn_score: Points accumulated this turn (not yet banked)
        total_score: Banked points, never decreases
        turns_taken_this_round: Rolls made during the current round
    """
    name: str
    turn_state: TurnState = TurnState.WAITING
    turn_score: int = 0
    total_score: int = 0
    turns_taken_this_round: int = 0

    @property
    def is_playing(self) -> bool:
        return self.turn_state == TurnState.PLAYING

    @property
    def has_entered(self) -> bool:
        """True once the player has banked any points."""
        return self.total_score > 0
