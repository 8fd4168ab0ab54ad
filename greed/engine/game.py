"""
Greed - Game and Round Coordinator

A Game holds the players and round bookkeeping; the GameRoundCoordinator
sequences every player through each round until the game ends.

Ending Rules:
    - Once any player has banked 3,000 points, every player gets one final
      round of turns and the highest total wins (first in order on a tie)
    - If round 50 is reached first, the game ends at once as a draw, with
      no further turns and no winner
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import ClassVar

from greed.engine.base import Player, PlayerCountError
from greed.engine.dice import ContinuationDecision, DiceRoller
from greed.engine.turn import PlayerTurnController
from greed.engine.validators import MIN_PLAYERS, validate_player_count
from greed.narration.announcers import Announcer, NullAnnouncer
from greed.narration.events import EventPayload, GameEvent

logger = logging.getLogger(__name__)


@dataclass
class Game:
    """
    State of one play session.

    Attributes:
        players: Players in turn order, fixed after construction
        round_number: Rounds started so far (0..ROUND_LIMIT)
        final_round: Whether the game has entered its final round; never reverts
        winner: Winning player once a final round has been played
    """
    ROUND_LIMIT: ClassVar[int] = 50
    FINAL_ROUND_THRESHOLD: ClassVar[int] = 3000

    players: tuple[Player, ...]
    round_number: int = 0
    final_round: bool = False
    winner: Player | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        self.players = tuple(self.players)
        if len(self.players) < MIN_PLAYERS:
            raise PlayerCountError(
                f"You need at least {MIN_PLAYERS} players to play, got {len(self.players)}."
            )

    @classmethod
    def create(cls, player_count: int) -> "Game":
        """Create a game with auto-named players ("Player 1", "Player 2", ...)."""
        validate_player_count(player_count)
        return cls(players=tuple(Player(name=f"Player {n + 1}") for n in range(player_count)))

    def final_round_due(self) -> bool:
        """True once any player has reached the final-round threshold."""
        return any(p.total_score >= self.FINAL_ROUND_THRESHOLD for p in self.players)

    def leading_player(self) -> Player:
        """Player with the highest total; the first one in order on a tie."""
        return max(self.players, key=lambda p: p.total_score)

    @property
    def is_draw(self) -> bool:
        """True when the game ended on the round limit without a winner."""
        return self.final_round and self.winner is None


def new_game(player_count: int) -> Game:
    """Create a new game. Raises PlayerCountError for fewer than 2 players."""
    return Game.create(player_count)


class GameRoundCoordinator:
    """Sequences players through rounds until the game is over."""

    def __init__(
        self,
        roller: DiceRoller,
        decision: ContinuationDecision,
        announcer: Announcer | None = None,
        *,
        turn_controller: PlayerTurnController | None = None,
    ) -> None:
        self._announcer = announcer or NullAnnouncer()
        self._turns = turn_controller or PlayerTurnController(roller, decision, self._announcer)

    def play_game(self, game: Game) -> None:
        """Run rounds until the game reaches its final state."""
        logger.debug("Starting game with %d players", len(game.players))
        self._emit(GameEvent.GAME_STARTED, player_count=len(game.players))

        while not game.final_round:
            self.play_round(game)

        logger.debug("Game finished after %d rounds", game.round_number)

    def play_round(self, game: Game) -> None:
        """
        Play a single round.

        On the round limit the game is ended as a draw without any turns.
        Otherwise the round is numbered (or marked final), every player takes
        a turn in order, and a final round closes with the winner.
        """
        if game.round_number == game.ROUND_LIMIT:
            game.final_round = True
            logger.debug("Round limit %d reached", game.ROUND_LIMIT)
            self._emit(GameEvent.ROUND_LIMIT_DRAW, round_number=game.round_number)
            return

        game.final_round = game.final_round_due()
        if not game.final_round:
            game.round_number += 1

        self._emit(
            GameEvent.ROUND_STARTED,
            round_number=game.round_number,
            final=game.final_round,
        )
        self._start_turns(game)

    def _start_turns(self, game: Game) -> None:
        for player in game.players:
            player.turns_taken_this_round = 0
            self._turns.take_turn(player, final_round=game.final_round)

        self._announce_winner_if_final_round(game)

    def _announce_winner_if_final_round(self, game: Game) -> None:
        if not game.final_round:
            return

        winner = game.leading_player()
        game.winner = winner
        logger.debug("%s wins with %d", winner.name, winner.total_score)
        self._announcer.announce(EventPayload(
            event=GameEvent.GAME_OVER,
            player_name=winner.name,
            data={"total_score": winner.total_score},
        ))

    def _emit(self, event: GameEvent, **data) -> None:
        self._announcer.announce(EventPayload(event=event, data=data))
