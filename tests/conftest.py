"""
Greed - Test Configuration and Fixtures

Common fixtures, deterministic collaborators and test data for all test modules.
"""

from typing import Iterable, Sequence

import pytest

from greed.engine.base import Player
from greed.narration.announcers import RecordingAnnouncer


class ScriptedRoller:
    """Returns pre-set rolls in order and records the dice counts asked for."""

    def __init__(self, rolls: Iterable[Sequence[int]]) -> None:
        self._rolls = list(rolls)
        self.requested: list[int] = []

    def roll(self, count: int) -> tuple[int, ...]:
        self.requested.append(count)
        if not self._rolls:
            raise AssertionError("ScriptedRoller ran out of rolls")
        return tuple(self._rolls.pop(0))


class RepeatingRoller:
    """Always returns the same roll, truncated to the requested count."""

    def __init__(self, values: Sequence[int]) -> None:
        self._values = tuple(values)
        self.calls = 0

    def roll(self, count: int) -> tuple[int, ...]:
        self.calls += 1
        return self._values[:count]


class ScriptedDecision:
    """Returns pre-set decisions in order; False once exhausted."""

    def __init__(self, decisions: Iterable[bool] = ()) -> None:
        self._decisions = list(decisions)
        self.calls = 0

    def decide(self) -> bool:
        self.calls += 1
        if not self._decisions:
            return False
        return self._decisions.pop(0)


# =============================================================================
# SCORING TEST DATA
# =============================================================================

@pytest.fixture
def greed_scoring_rolls() -> dict[str, tuple[tuple[int, ...], int, dict[int, int]]]:
    """
    Regression table of rolls with expected scores.

    Returns:
        Dict mapping name to (dice_values, expected_points, expected_residual)
    """
    return {
        "empty": ((), 0, {}),
        "single_five": ((5,), 50, {5: 0}),
        "single_one": ((1,), 100, {1: 0}),
        "ones_and_fives": ((1, 5, 5, 1), 300, {1: 0, 5: 0}),
        "no_scorers": ((2, 3, 4, 6), 0, {2: 1, 3: 1, 4: 1, 6: 1}),
        "three_ones": ((1, 1, 1), 1000, {1: 0}),
        "three_twos": ((2, 2, 2), 200, {2: 0}),
        "three_threes": ((3, 3, 3), 300, {3: 0}),
        "three_fours": ((4, 4, 4), 400, {4: 0}),
        "three_fives": ((5, 5, 5), 500, {5: 0}),
        "three_sixes": ((6, 6, 6), 600, {6: 0}),
        "triple_plus_five": ((2, 5, 2, 2, 3), 250, {2: 0, 5: 0, 3: 1}),
        "four_fives": ((5, 5, 5, 5), 550, {5: 0}),
        "four_ones": ((1, 1, 1, 1), 1100, {1: 0}),
        "five_ones": ((1, 1, 1, 1, 1), 1200, {1: 0}),
        "four_ones_and_five": ((1, 1, 1, 5, 1), 1150, {1: 0, 5: 0}),
    }


# =============================================================================
# ENGINE FIXTURES
# =============================================================================

@pytest.fixture
def player() -> Player:
    return Player(name="Player 1")


@pytest.fixture
def entered_player() -> Player:
    """A player who has already banked points."""
    return Player(name="Player 1", total_score=600)


@pytest.fixture
def announcer() -> RecordingAnnouncer:
    return RecordingAnnouncer()


@pytest.fixture
def scripted_roller() -> type[ScriptedRoller]:
    """Factory for rollers that replay a fixed list of rolls."""
    return ScriptedRoller


@pytest.fixture
def repeating_roller() -> type[RepeatingRoller]:
    return RepeatingRoller


@pytest.fixture
def scripted_decision() -> type[ScriptedDecision]:
    """Factory for decision sources that replay a fixed list of choices."""
    return ScriptedDecision
