"""Tests for greed/narration/announcers.py - event consumers."""

import logging
from unittest.mock import MagicMock

from greed.engine.dice import NeverContinue
from greed.engine.game import GameRoundCoordinator, new_game
from greed.narration.announcers import LoggingAnnouncer, NullAnnouncer, RecordingAnnouncer
from greed.narration.events import EventPayload, GameEvent


class TestNullAnnouncer:
    def test_accepts_any_event(self):
        assert NullAnnouncer().announce(EventPayload(event=GameEvent.GAME_OVER)) is None


class TestRecordingAnnouncer:
    def test_records_in_order(self):
        rec = RecordingAnnouncer()
        first = EventPayload(event=GameEvent.GAME_STARTED)
        second = EventPayload(event=GameEvent.ROUND_STARTED)

        rec.announce(first)
        rec.announce(second)

        assert rec.events == [first, second]

    def test_of_type_filters(self):
        rec = RecordingAnnouncer()
        rec.announce(EventPayload(event=GameEvent.GAME_STARTED))
        rec.announce(EventPayload(event=GameEvent.TURN_ENDED, player_name="a"))
        rec.announce(EventPayload(event=GameEvent.TURN_ENDED, player_name="b"))

        assert [p.player_name for p in rec.of_type(GameEvent.TURN_ENDED)] == ["a", "b"]

    def test_clear(self):
        rec = RecordingAnnouncer()
        rec.announce(EventPayload(event=GameEvent.GAME_STARTED))
        rec.clear()
        assert rec.events == []


class TestLoggingAnnouncer:
    def test_logs_description(self, caplog):
        announcer = LoggingAnnouncer()
        with caplog.at_level(logging.INFO, logger="greed.narration.announcers"):
            announcer.announce(EventPayload(event=GameEvent.ROUND_LIMIT_DRAW))
        assert "Round limit reached! The game is a draw!" in caplog.text

    def test_turn_events_use_turn_level(self):
        log = MagicMock()
        announcer = LoggingAnnouncer(log, turn_level=logging.DEBUG)

        announcer.announce(EventPayload(
            event=GameEvent.SCORE_COMPUTED, player_name="P", data={"points": 50},
        ))

        log.log.assert_called_once_with(logging.DEBUG, "%s", "P scores 50 points!")

    def test_headline_events_stay_at_info(self):
        log = MagicMock()
        announcer = LoggingAnnouncer(log, turn_level=logging.DEBUG)

        announcer.announce(EventPayload(event=GameEvent.ROUND_STARTED, data={"round_number": 1}))

        log.log.assert_called_once_with(logging.INFO, "%s", "*** Round 1! ***")

    def test_narrates_whole_game(self, repeating_roller, caplog):
        game = new_game(2)
        coordinator = GameRoundCoordinator(
            repeating_roller((2, 3, 4, 6, 6)), NeverContinue(), LoggingAnnouncer()
        )
        with caplog.at_level(logging.INFO, logger="greed.narration.announcers"):
            coordinator.play_game(game)

        assert "Starting Greed with 2 players" in caplog.text
        assert "*** Round 50! ***" in caplog.text
        assert "The game is a draw!" in caplog.text
