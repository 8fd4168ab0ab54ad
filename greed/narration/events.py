"""
Greed - Game Event Definitions

Event types and payloads emitted by the engine as a game progresses.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class GameEvent(Enum):
    """Events that can occur during a game."""

    GAME_STARTED = auto()
    ROUND_STARTED = auto()
    TURN_STARTED = auto()
    DICE_ROLLED = auto()
    SCORE_COMPUTED = auto()
    PLAYER_BUST = auto()
    ENTRY_THRESHOLD_MISSED = auto()
    DICE_REMAINING = auto()
    DECISION_MADE = auto()
    TURN_ENDED = auto()
    GAME_OVER = auto()
    ROUND_LIMIT_DRAW = auto()


@dataclass
class EventPayload:
    """Wrapper for event data."""

    event: GameEvent
    player_name: str | None = None
    data: dict[str, Any] = field(default_factory=dict)


def _round_started(payload: EventPayload) -> str:
    if payload.data.get("final"):
        return "*** Final round! ***"
    return f"*** Round {payload.data.get('round_number')}! ***"


def _decision(payload: EventPayload) -> str:
    if payload.data.get("roll_again"):
        return f"{payload.player_name} decides to continue!"
    return f"{payload.player_name} decides to cash out!"


def _dice_remaining(payload: EventPayload) -> str:
    count = payload.data.get("dice_count", 0)
    if payload.data.get("hot_dice"):
        return f"Hot dice! {payload.player_name} rolls all {count} dice again!"
    if count == 0:
        return f"{payload.player_name} has no more dice!"
    return f"{payload.player_name} still has {count} dice to play!"


_TEMPLATES: dict[GameEvent, str] = {
    GameEvent.GAME_STARTED: "******** Starting Greed with {player_count} players! ********",
    GameEvent.TURN_STARTED: "{player_name} has {total_score} points!",
    GameEvent.DICE_ROLLED: "{player_name} gets {values}!",
    GameEvent.SCORE_COMPUTED: "{player_name} scores {points} points!",
    GameEvent.PLAYER_BUST: "Oops! {player_name} gets 0 and loses all points this round!",
    GameEvent.ENTRY_THRESHOLD_MISSED: (
        "Sorry, {player_name}! {points} is not enough points to get on the board..."
    ),
    GameEvent.TURN_ENDED: "{player_name} ends their turn with {total_score} points!",
    GameEvent.GAME_OVER: "Game over! {player_name} won with {total_score} points!",
    GameEvent.ROUND_LIMIT_DRAW: "Round limit reached! The game is a draw!",
}


def describe_event(payload: EventPayload) -> str:
    """Render a human-readable line for an event."""
    if payload.event == GameEvent.ROUND_STARTED:
        return _round_started(payload)
    if payload.event == GameEvent.DECISION_MADE:
        return _decision(payload)
    if payload.event == GameEvent.DICE_REMAINING:
        return _dice_remaining(payload)

    template = _TEMPLATES[payload.event]
    values = dict(payload.data)
    if "values" in values:
        values["values"] = list(values["values"])
    return template.format(player_name=payload.player_name, **values)
