"""
Greed Game Engine.

Pure Python game logic with zero UI dependencies.
Handles dice rolling, scoring, bust and entry rules, hot dice, and rounds.
"""

from greed.engine.base import (
    DiceValues,
    GreedError,
    InvalidDiceCountError,
    InvalidDiceFaceError,
    Player,
    PlayerCountError,
    RollOutcome,
    ScoreResult,
    TurnState,
)
from greed.engine.dice import (
    AlwaysContinue,
    ContinuationDecision,
    DiceRoller,
    DiceSet,
    NeverContinue,
    RandomDecision,
)
from greed.engine.game import Game, GameRoundCoordinator, new_game
from greed.engine.scoring import GreedScorer
from greed.engine.turn import PlayerTurnController

__all__ = [
    # Data Classes
    "DiceValues",
    "Player",
    "RollOutcome",
    "ScoreResult",
    "Game",
    # Enums
    "TurnState",
    # Errors
    "GreedError",
    "InvalidDiceCountError",
    "InvalidDiceFaceError",
    "PlayerCountError",
    # Collaborators
    "AlwaysContinue",
    "ContinuationDecision",
    "DiceRoller",
    "DiceSet",
    "NeverContinue",
    "RandomDecision",
    # Engines
    "GameRoundCoordinator",
    "GreedScorer",
    "PlayerTurnController",
    "new_game",
]
