"""Greed - command-line game runner."""

from __future__ import annotations

import argparse
import logging
import random
import sys

from greed.config import get_settings
from greed.engine import DiceSet, GameRoundCoordinator, GreedError, RandomDecision, new_game
from greed.models import GameSummary
from greed.narration import LoggingAnnouncer, NullAnnouncer

logger = logging.getLogger("greed")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(prog="greed", description="Play a game of Greed")
    parser.add_argument("--players", type=int, default=settings.player_count,
                        help="Number of players (at least 2)")
    parser.add_argument("--seed", type=int, default=settings.seed,
                        help="Seed for dice and decisions (reproducible games)")
    parser.add_argument("--log-level", type=str.upper, default=settings.log_level,
                        choices=LOG_LEVELS,
                        help="Logging level for the narration")
    parser.add_argument("--json", action="store_true",
                        help="Print a JSON summary instead of narrating")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    level = "DEBUG" if get_settings().debug else args.log_level
    logging.basicConfig(level=level, format="%(message)s")

    rng = random.Random(args.seed)
    announcer = NullAnnouncer() if args.json else LoggingAnnouncer(logger)
    coordinator = GameRoundCoordinator(DiceSet(rng), RandomDecision(rng), announcer)

    try:
        game = new_game(args.players)
        coordinator.play_game(game)
    except GreedError as e:
        logger.error("Error: %s", e)
        return 1

    if args.json:
        print(GameSummary.from_game(game).model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
