"""
Greed - Scoring Engine

This module implements the scoring rules for Greed. All methods are
stateless class methods that operate on immutable inputs.

Scoring Rules:
    - Three 1s: 1,000 points
    - Three of X (2-6): X × 100 points
    - Single 1 (outside a triple): 100 points
    - Single 5 (outside a triple): 50 points
    - Everything else: 0 points, left in the residual
"""

from collections import Counter
from typing import Sequence

from greed.engine.base import ScoreResult
from greed.engine.validators import MAX_DICE, validate_dice_values


class GreedScorer:
    """
    Stateless scoring engine for Greed.

    All methods are class methods operating on immutable data.
    """

    NUM_DICE = MAX_DICE

    # Scoring values
    TRIPLE_SIZE = 3
    THREE_ONES_POINTS = 1000
    TRIPLE_MULTIPLIER = 100
    SINGLE_ONE_POINTS = 100
    SINGLE_FIVE_POINTS = 50

    @classmethod
    def calculate_score(cls, dice: Sequence[int]) -> ScoreResult:
        """
        Calculate the score for a set of dice.

        Triples are resolved first, then leftover 1s and 5s are scored
        as singles. Order of the input does not matter.

        Args:
            dice: Up to five dice values

        Returns:
            ScoreResult with total points and the per-face residual

        Raises:
            InvalidDiceCountError: If more than five dice are given
            InvalidDiceFaceError: If any value is not 1-6
        """
        values = validate_dice_values(dice)

        # Counter keeps faces in order of first appearance
        remaining = dict(Counter(values))
        points = 0

        for face_value, count in remaining.items():
            if count >= cls.TRIPLE_SIZE:
                points += cls._triple_points(face_value)
                count -= cls.TRIPLE_SIZE

            if face_value == 1:
                points += count * cls.SINGLE_ONE_POINTS
                count = 0
            elif face_value == 5:
                points += count * cls.SINGLE_FIVE_POINTS
                count = 0

            remaining[face_value] = count

        return ScoreResult(points=points, residual=remaining)

    @classmethod
    def _triple_points(cls, face_value: int) -> int:
        if face_value == 1:
            return cls.THREE_ONES_POINTS
        return face_value * cls.TRIPLE_MULTIPLIER

    @classmethod
    def reroll_count(cls, residual: dict[int, int]) -> int:
        """
        Number of dice to roll after a scoring roll.

        When every die scored (hot dice) the player rolls all five again.
        Otherwise the count is the number of distinct faces left unscored,
        not the number of unscored dice: {3: 2, 6: 1} rerolls 2 dice.
        This reproduces the established game behaviour as-is; it is not a
        corrected dice count.
        """
        if cls.is_hot_dice(residual):
            return cls.NUM_DICE
        return sum(1 for count in residual.values() if count > 0)

    @classmethod
    def is_hot_dice(cls, residual: dict[int, int]) -> bool:
        """True when no dice were left unscored."""
        return sum(residual.values()) == 0

    @classmethod
    def is_bust(cls, dice: Sequence[int]) -> bool:
        """True if the dice contain no scoring combination."""
        return cls.calculate_score(dice).is_bust
