"""
Greed - Dice and Decision Sources

The only nondeterministic boundary of the engine. Rolling and the
"roll again?" choice are narrow single-method interfaces so that tests and
replays can substitute deterministic sources. Every default implementation
takes an explicit random.Random instead of using the module-level generator.
"""

from __future__ import annotations

import random
from typing import Protocol

from greed.engine.base import DiceValues
from greed.engine.validators import MAX_FACE, MIN_FACE


class DiceRoller(Protocol):
    """Anything that can roll `count` six-sided dice."""

    def roll(self, count: int) -> DiceValues:
        ...


class ContinuationDecision(Protocol):
    """Decides whether a player keeps rolling outside the final round."""

    def decide(self) -> bool:
        ...


class DiceSet:
    """
    A cup of D6 dice backed by a seedable random source.

    The values of the last roll are kept in `values` and only change
    when the set is rolled again.
    """

    def __init__(self, rng: random.Random | None = None, *, seed: int | None = None) -> None:
        self._rng = rng if rng is not None else random.Random(seed)
        self._values: DiceValues = tuple()

    @property
    def values(self) -> DiceValues:
        return self._values

    def roll(self, count: int) -> DiceValues:
        """
        Roll `count` dice.

        Args:
            count: Number of dice to roll (0 or more)

        Returns:
            Tuple of `count` values in 1..6
        """
        if count < 0:
            raise ValueError(f"Cannot roll a negative number of dice, got {count}.")
        self._values = tuple(self._rng.randint(MIN_FACE, MAX_FACE) for _ in range(count))
        return self._values


class RandomDecision:
    """Coin-flip continuation choice."""

    def __init__(self, rng: random.Random | None = None, *, seed: int | None = None) -> None:
        self._rng = rng if rng is not None else random.Random(seed)

    def decide(self) -> bool:
        return self._rng.choice((True, False))


class AlwaysContinue:
    def decide(self) -> bool:
        return True


class NeverContinue:
    def decide(self) -> bool:
        return False
