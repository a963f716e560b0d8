"""
Games module - turn engine implementations.
"""

from turn_games.games.game_base import ScoredGame, TurnGame
from turn_games.games.game_rules import in_bounds, board_full, run_through, window_indices
from turn_games.games.connect_four import ConnectFour, evaluate_window
from turn_games.games.tic_tac_toe import TicTacToe
from turn_games.games.rock_paper_scissors import RockPaperScissors

__all__ = [
    "ScoredGame",
    "TurnGame",
    "ConnectFour",
    "TicTacToe",
    "RockPaperScissors",
    "evaluate_window",
    "in_bounds",
    "board_full",
    "run_through",
    "window_indices",
]
