"""CLI entry point: python -m snakeladder plays one offline game."""

from __future__ import annotations

import argparse
import logging
import random
import sys

from snakeladder.config.logging_config import configure_logging
from snakeladder.engine import GameMode, GameRuleError, TurnEngine
from snakeladder.engine.events import describe_turn

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def play(engine: TurnEngine, max_turns: int) -> int:
    """Autoplay until someone wins or *max_turns* turns have been taken.

    Returns:
        Number of turns played
    """
    turns = 0
    while turns < max_turns:
        result = engine.take_turn()
        turns += 1
        player = engine.session.get_player(result.player_id)
        message = describe_turn(result, player.name)
        logger.info("Turn %d: roll %d, %s -> %s (%s)", turns, result.roll,
                    result.from_position, result.to_position, result.outcome.name)
        print(f"{turns:4d}. {message}")
        if result.is_win:
            break
    return turns


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="snakeladder",
        description="Play an offline game of Snake & Ladder with random rolls",
    )
    parser.add_argument(
        "--players", nargs="+", default=["Player 1", "Player 2"],
        help="Player names, 2-4 (default: two players)",
    )
    parser.add_argument("--board-size", type=int, default=10, help="Board side length (default 10)")
    parser.add_argument(
        "--mode", choices=[m.value for m in GameMode], default=GameMode.CLASSIC.value,
        help="Snake/ladder ratio",
    )
    parser.add_argument("--seed", type=int, help="Seed for a reproducible game")
    parser.add_argument("--max-turns", type=int, default=500, help="Give up after this many turns")
    parser.add_argument(
        "--log-level", type=str.upper, choices=LOG_LEVELS, default="WARNING",
        help="Logging level (default WARNING)",
    )

    args = parser.parse_args(argv)
    configure_logging(level=args.log_level)

    rng = random.Random(args.seed)
    try:
        engine = TurnEngine.new_game(
            board_size=args.board_size,
            mode=args.mode,
            rng=rng,
            player_names=args.players,
        )
        engine.start()
    except GameRuleError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    session = engine.session
    print(
        f"{session.board_size}x{session.board_size} {session.mode.value} board: "
        f"{len(session.ladders)} ladders, {len(session.snakes)} snakes"
    )
    turns = play(engine, args.max_turns)

    winner = engine.session.winner
    if winner is None:
        print(f"No winner after {turns} turns.")
        return 1
    print(f"{winner.name} won after {turns} turns.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
