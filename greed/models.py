"""
Greed - Result Models

Pydantic models giving a serialisable snapshot of a game.
"""

from pydantic import BaseModel, Field

from greed.engine.game import Game


class PlayerStanding(BaseModel):
    """One player's scores at the end of a game."""

    name: str
    total_score: int = Field(ge=0)
    turns_taken_this_round: int = Field(default=0, ge=0)

    model_config = {"from_attributes": True}


class GameSummary(BaseModel):
    """Mirrors a finished (or in-progress) Game."""

    rounds_played: int = Field(ge=0)
    final_round: bool
    is_draw: bool
    winner: str | None = None
    winning_score: int | None = None
    standings: list[PlayerStanding] = Field(default_factory=list)

    @classmethod
    def from_game(cls, game: Game) -> "GameSummary":
        winner = game.winner
        return cls(
            rounds_played=game.round_number,
            final_round=game.final_round,
            is_draw=game.is_draw,
            winner=winner.name if winner else None,
            winning_score=winner.total_score if winner else None,
            standings=[PlayerStanding.model_validate(p) for p in game.players],
        )
