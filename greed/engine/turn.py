"""
Greed - Player Turn Controller

Runs one player's turn: roll, score, then either keep rolling or bank.

Turn Rules:
    - A roll scoring 0 is a bust: the turn score is lost and the turn ends
    - A player with nothing banked must score at least 300 on a roll, or the
      turn ends with nothing credited
    - After a scoring roll the player may roll again with the leftover dice
      (all five on hot dice), unless no dice are left
    - In the final round every player keeps rolling until the dice stop them
"""

from __future__ import annotations

import logging

from greed.engine.base import Player, RollOutcome, ScoreResult, TurnState
from greed.engine.dice import ContinuationDecision, DiceRoller
from greed.engine.scoring import GreedScorer
from greed.narration.announcers import Announcer, NullAnnouncer
from greed.narration.events import EventPayload, GameEvent

logger = logging.getLogger(__name__)


class PlayerTurnController:
    """Drives a single player's turn state machine.

    The controller owns no game state of its own; it mutates the Player
    handed to `take_turn` and nothing else.
    """

    ENTRY_THRESHOLD = 300

    def __init__(
        self,
        roller: DiceRoller,
        decision: ContinuationDecision,
        announcer: Announcer | None = None,
    ) -> None:
        self._roller = roller
        self._decision = decision
        self._announcer = announcer or NullAnnouncer()

    def take_turn(self, player: Player, *, final_round: bool = False) -> None:
        """
        Play one full turn for `player`.

        Args:
            player: The player whose turn it is
            final_round: Whether the game is in its final round, which
                forces the player to keep rolling

        Raises:
            InvalidDiceCountError, InvalidDiceFaceError: If the roller
                produces dice that cannot be scored
        """
        self._start_turn(player)
        dice_count = GreedScorer.NUM_DICE

        while player.turn_state == TurnState.PLAYING:
            player.turns_taken_this_round += 1

            values = self._roll_dice(player, dice_count)
            result = GreedScorer.calculate_score(values)
            self._emit(GameEvent.SCORE_COMPUTED, player, points=result.points)

            outcome = self.handle_score(player, result)
            if not outcome.keep_rolling or not self._roll_again(player, final_round):
                self._end_turn(player)
            else:
                dice_count = outcome.dice_count

    def handle_score(self, player: Player, result: ScoreResult) -> RollOutcome:
        """
        Apply one scored roll to the player's turn.

        Returns:
            RollOutcome saying whether the turn may go on and with how many dice
        """
        if result.points == 0:
            player.turn_score = 0
            self._emit(GameEvent.PLAYER_BUST, player)
            return RollOutcome.stop()

        if result.points < self.ENTRY_THRESHOLD and not player.has_entered:
            player.turn_score = 0
            self._emit(GameEvent.ENTRY_THRESHOLD_MISSED, player, points=result.points)
            return RollOutcome.stop()

        player.turn_score += result.points

        hot_dice = GreedScorer.is_hot_dice(result.residual)
        dice_count = GreedScorer.reroll_count(result.residual)
        self._emit(GameEvent.DICE_REMAINING, player, dice_count=dice_count, hot_dice=hot_dice)

        return RollOutcome.roll(dice_count)

    def _start_turn(self, player: Player) -> None:
        player.turn_state = TurnState.PLAYING
        player.turn_score = 0
        logger.debug("%s starts a turn with %d banked", player.name, player.total_score)
        self._emit(GameEvent.TURN_STARTED, player, total_score=player.total_score)

    def _end_turn(self, player: Player) -> None:
        player.turn_state = TurnState.FINISHED
        player.total_score += player.turn_score
        logger.debug(
            "%s banks %d (total %d) after %d rolls",
            player.name, player.turn_score, player.total_score, player.turns_taken_this_round,
        )
        self._emit(GameEvent.TURN_ENDED, player, total_score=player.total_score)

    def _roll_dice(self, player: Player, dice_count: int) -> tuple[int, ...]:
        values = tuple(self._roller.roll(dice_count))
        self._emit(GameEvent.DICE_ROLLED, player, values=values)
        return values

    def _roll_again(self, player: Player, final_round: bool) -> bool:
        decision = True if final_round else self._decision.decide()
        self._emit(GameEvent.DECISION_MADE, player, roll_again=decision, forced=final_round)
        return decision

    def _emit(self, event: GameEvent, player: Player, **data) -> None:
        self._announcer.announce(EventPayload(event=event, player_name=player.name, data=data))
