"""
Command-line interface for playing the games in a terminal.
"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

import turn_games.memory as Memory
from turn_games.api import play_session
from turn_games.utils.config import Config, GAMES, SCORES_DB, TURN_GAMES
from turn_games.utils.factory import create_from_config
from turn_games.games.connect_four import COLS, ROWS

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play Connect 4, Tic-Tac-Toe or Rock-Paper-Scissors against the computer"
    )
    parser.add_argument(
        "--game", "-g",
        choices=list(GAMES.keys()),
        default="connect_four",
        help="Game to play (default: connect_four)",
    )
    parser.add_argument(
        "--two-player",
        action="store_true",
        help="Both seats are human (board games only)",
    )
    parser.add_argument(
        "--rows",
        type=int,
        default=ROWS,
        help=f"Connect 4 rows (default: {ROWS})",
    )
    parser.add_argument(
        "--cols",
        type=int,
        default=COLS,
        help=f"Connect 4 columns (default: {COLS})",
    )
    parser.add_argument(
        "--db",
        type=Path,
        default=SCORES_DB,
        help="Score database path",
    )
    parser.add_argument(
        "--reset-scores",
        action="store_true",
        help="Clear stored scores for the game before playing",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print games played per game and exit",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the computer's random choices",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.two_player and args.game not in TURN_GAMES:
        parser.error(f"--two-player is not supported for {args.game}")
    if args.rows < 1 or args.cols < 1:
        parser.error(f"Invalid board size: {args.rows}x{args.cols}")

    return args


def config_from_args(args: argparse.Namespace) -> Config:
    return Config(
        game_name=args.game,
        ai_mode=not args.two_player,
        rows=args.rows,
        cols=args.cols,
        db_path=args.db,
        seed=args.seed,
    )


def stats_lines(store: Memory.ScoreStore) -> List[str]:
    """One line per registered game with the number of finished rounds."""
    played = set(store.games())
    lines = []
    for name in GAMES:
        total = sum(store.load(name).values()) if name in played else 0
        lines.append(f"{name}: Games: {total}" if total else f"{name}: No games played")
    return lines


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    config = config_from_args(args)
    game = create_from_config(config)

    with Memory.ScoreStore(config.db_path) as store:
        if args.reset_scores:
            store.clear(game.game_id())
        if args.stats:
            print("\n".join(stats_lines(store)))
            return
        play_session(game, store)


if __name__ == "__main__":
    main()
