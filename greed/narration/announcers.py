"""
Greed - Announcers

Consumers of engine events. The engine never depends on what an announcer
does with an event; it only hands each payload over as it happens.
"""

from __future__ import annotations

import logging
from typing import Protocol

from greed.narration.events import EventPayload, GameEvent, describe_event

logger = logging.getLogger(__name__)


class Announcer(Protocol):
    """Receives every event the engine emits."""

    def announce(self, payload: EventPayload) -> None:
        ...


class NullAnnouncer:
    """Discards all events."""

    def announce(self, payload: EventPayload) -> None:
        return None


class LoggingAnnouncer:
    """Narrates the game through the logging module.

    Round and game boundaries are logged at INFO, everything inside a
    turn at `turn_level` (INFO by default).
    """

    _HEADLINE_EVENTS = frozenset({
        GameEvent.GAME_STARTED,
        GameEvent.ROUND_STARTED,
        GameEvent.GAME_OVER,
        GameEvent.ROUND_LIMIT_DRAW,
    })

    def __init__(
        self,
        log: logging.Logger | None = None,
        *,
        turn_level: int = logging.INFO,
    ) -> None:
        self._log = log or logger
        self._turn_level = turn_level

    def announce(self, payload: EventPayload) -> None:
        level = logging.INFO if payload.event in self._HEADLINE_EVENTS else self._turn_level
        self._log.log(level, "%s", describe_event(payload))


class RecordingAnnouncer:
    """Keeps every payload in order. Handy for tests and replays."""

    def __init__(self) -> None:
        self.events: list[EventPayload] = []

    def announce(self, payload: EventPayload) -> None:
        self.events.append(payload)

    def of_type(self, event: GameEvent) -> list[EventPayload]:
        """All recorded payloads of one event type."""
        return [p for p in self.events if p.event == event]

    def clear(self) -> None:
        self.events.clear()
