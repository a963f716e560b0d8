"""
Turn Games - rule engines with heuristic opponents for small two-player games.

Each engine is a standalone, stateful object: the caller applies moves and
reads back structured results; the engine owns board, turn and score state
and never performs I/O.

Quick Start:
    from turn_games import ConnectFour

    game = ConnectFour()
    game.set_ai_mode(True)
    game.apply_move(3)
    game.make_ai_move()
    game.get_scores()   # {'red': 0, 'yellow': 0, 'draws': 0}

Modules:
    core    - Result types (MoveResult, RoundResult) and ScoreBoard
    games   - ConnectFour, TicTacToe, RockPaperScissors engines
    memory  - ScoreStore, sqlite persistence used by callers
    api     - Terminal play session
"""

from turn_games.core import MoveReason, MoveResult, RoundResult, RoundWinner, ScoreBoard
from turn_games.games import ConnectFour, RockPaperScissors, TicTacToe
from turn_games.memory import ScoreStore
from turn_games.api import play_session

__version__ = "1.0.0"

__all__ = [
    # Engines
    "ConnectFour",
    "TicTacToe",
    "RockPaperScissors",
    # Types
    "MoveReason",
    "MoveResult",
    "RoundResult",
    "RoundWinner",
    "ScoreBoard",
    # Persistence / play
    "ScoreStore",
    "play_session",
]
