"""
Greed Narration.

Game events and the announcers that consume them.
"""

from greed.narration.announcers import (
    Announcer,
    LoggingAnnouncer,
    NullAnnouncer,
    RecordingAnnouncer,
)
from greed.narration.events import EventPayload, GameEvent, describe_event

__all__ = [
    "Announcer",
    "EventPayload",
    "GameEvent",
    "LoggingAnnouncer",
    "NullAnnouncer",
    "RecordingAnnouncer",
    "describe_event",
]
