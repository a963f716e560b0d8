"""
Terminal play sessions.

This is the caller side of the engine contract: it feeds human input to an
engine, lets the computer move when due, prints the board, and persists
scores through a ScoreStore after every finished round.

Usage:
    from turn_games import ConnectFour, ScoreStore, play_session

    game = ConnectFour()
    game.set_ai_mode(True)
    with ScoreStore("data/scores.db") as store:
        play_session(game, store)
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, TYPE_CHECKING

from turn_games.core.types import MoveResult, RoundResult
from turn_games.games.game_base import TurnGame
from turn_games.games.rock_paper_scissors import CHOICES, RockPaperScissors

if TYPE_CHECKING:
    from turn_games.games.game_base import ScoredGame
    from turn_games.memory.score_store import ScoreStore

logger = logging.getLogger(__name__)

QUIT_WORDS = {"q", "quit", "exit"}

# Single-letter shortcuts accepted for Rock-Paper-Scissors
_RPS_SHORTCUTS = {choice[0]: choice for choice in CHOICES}


class QuitSession(Exception):
    """Raised by the input helpers when the player asks to stop."""


def _read(prompt: str) -> str:
    raw = input(prompt).strip().lower()
    if raw in QUIT_WORDS:
        raise QuitSession
    return raw


def describe(result: MoveResult) -> str:
    """One-line human description of a move result."""
    if not result.success:
        return f"Rejected: {result.reason.value}"
    if result.winner is not None:
        return f"{result.winner} wins!"
    if result.draw:
        return "Draw!"
    return ""


def _human_turn(game: TurnGame) -> MoveResult:
    """Prompt until the engine accepts a move, return its result."""
    print(f"\nYour turn ({game.current_player()}). Valid: {game.valid_moves()}")
    while True:
        raw = _read("Move: ")
        try:
            move = int(raw)
        except ValueError:
            print(f"Invalid input: {raw!r}")
            continue

        result = game.play(move)
        if result.success:
            return result
        print(describe(result))


def _ai_turn(game: TurnGame) -> MoveResult:
    player = game.current_player()
    result = game.make_ai_move()
    where = result.col if result.col is not None else result.move
    print(f"\nAI ({player}) played: {where}")
    return result


def _play_board_round(game: TurnGame) -> MoveResult:
    if not game.is_game_active():
        game.reset_game()
    print(game.state_string())
    while game.is_game_active():
        if game.is_ai_turn():
            result = _ai_turn(game)
        else:
            result = _human_turn(game)
        print(game.state_string())
    return result


def _play_rps_round(game: RockPaperScissors) -> RoundResult:
    while True:
        raw = _read(f"\nChoose {', '.join(CHOICES)}: ")
        result = game.resolve_round(_RPS_SHORTCUTS.get(raw, raw))
        if result.success:
            return result
        print(f"Rejected: {result.reason.value}")


def _save(game: "ScoredGame", store: Optional["ScoreStore"]) -> None:
    if store is not None:
        store.save(game.game_id(), game.get_scores())


def play_session(
    game: "ScoredGame",
    store: Optional["ScoreStore"] = None,
    max_rounds: Optional[int] = None,
) -> Dict[str, int]:
    """
    Main entry point: play rounds until the player quits.

    Parameters
    ----------
    game : ScoredGame
        Engine to drive (AI mode already configured for board games).
    store : ScoreStore, optional
        Where scores are loaded from and saved to after each round.
    max_rounds : int, optional
        Stop after this many finished rounds without asking.

    Returns
    -------
    Dict[str, int]
        Scores at the end of the session.
    """
    if store is not None:
        game.load_scores(store.load(game.game_id()))

    print(f"Starting {game.game_id()}. Type 'q' to quit.")
    rounds = 0

    try:
        while max_rounds is None or rounds < max_rounds:
            if isinstance(game, TurnGame):
                result = _play_board_round(game)
                print(describe(result))
            else:
                _play_rps_round(game)
                print(game.state_string())

            rounds += 1
            _save(game, store)
            print(f"Scores: {game.get_scores()}")

            if max_rounds is None and _read("Play again? [y/N] ") not in {"y", "yes"}:
                break
            if isinstance(game, TurnGame):
                game.reset_game()

    except (QuitSession, EOFError):
        print("\nBye.")
    except Exception:
        logger.exception("Fatal error in play session")
        raise

    return game.get_scores()


__all__ = [
    "play_session",
    "describe",
    "QuitSession",
]
