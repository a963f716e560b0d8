"""
Connect 4 game implementation.

Uses int8 board, row 0 at the top:
    0 = empty
    1 = red (moves first)
    2 = yellow (the computer seat in AI mode)

The computer opponent is a one-ply greedy heuristic: take a winning drop,
else block the opponent's winning drop, else pick the drop that maximises
the positional score.
"""

from __future__ import annotations

import logging
import random
from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence

import numpy as np

from turn_games.core.types import Cell, MoveReason, MoveResult
from turn_games.games.game_base import TurnGame
from turn_games.games.game_rules import (
    DIRECTIONS,
    EMPTY,
    WINDOW,
    board_full,
    gather_windows,
    in_bounds,
    run_through,
)

logger = logging.getLogger(__name__)

ROWS = 6
COLS = 7

RED = 1
YELLOW = 2
PLAYER_NAMES = {RED: "red", YELLOW: "yellow"}
PLAYER_CODES = {name: code for code, name in PLAYER_NAMES.items()}

# Returned by lowest_empty_row() when a column has no room
COLUMN_FULL = -1

# Heuristic weights
FOUR_SCORE = 100
THREE_SCORE = 5
TWO_SCORE = 2
OPPONENT_THREE_SCORE = -4
CENTER_SCORE = 3

CELL_STRINGS = {EMPTY: " ", RED: "R", YELLOW: "Y"}


def evaluate_window(window: Sequence, player) -> int:
    """
    Score four consecutive cells from `player`'s point of view.

    Works on raw board codes or on tokens: an empty cell is None or 0, any
    other cell that is not `player` belongs to the opponent.

        4 mine                 -> +100
        3 mine, 1 empty        -> +5
        2 mine, 2 empty        -> +2
        3 opponent, 1 empty    -> -4
        anything else          ->  0
    """
    mine = empty = theirs = 0
    for cell in window:
        if cell is None or cell == EMPTY:
            empty += 1
        elif cell == player:
            mine += 1
        else:
            theirs += 1

    if mine == 4:
        return FOUR_SCORE
    if mine == 3 and empty == 1:
        return THREE_SCORE
    if mine == 2 and empty == 2:
        return TWO_SCORE
    if theirs == 3 and empty == 1:
        return OPPONENT_THREE_SCORE
    return 0


def score_windows(windows: np.ndarray, code: int) -> int:
    """Vectorised sum of evaluate_window() over an (N, 4) array of codes."""
    if windows.size == 0:
        return 0
    mine = np.count_nonzero(windows == code, axis=1)
    empty = np.count_nonzero(windows == EMPTY, axis=1)
    theirs = WINDOW - mine - empty

    scores = (
        FOUR_SCORE * (mine == 4)
        + THREE_SCORE * ((mine == 3) & (empty == 1))
        + TWO_SCORE * ((mine == 2) & (empty == 2))
        + OPPONENT_THREE_SCORE * ((theirs == 3) & (empty == 1))
    )
    return int(scores.sum())


class ConnectFour(TurnGame):
    """Connect 4 on a rows x cols grid with an optional heuristic opponent."""

    SCORE_KEYS = ("red", "yellow", "draws")
    AI_PLAYER = "yellow"

    evaluate_window = staticmethod(evaluate_window)

    def __init__(self, rows: int = ROWS, cols: int = COLS, rng: Optional[random.Random] = None):
        if rows < 1 or cols < 1:
            raise ValueError(f"Board must have at least one row and column, got {rows}x{cols}")
        super().__init__(rng)
        self.rows = rows
        self.cols = cols
        self.board = np.zeros((rows, cols), dtype=np.int8)
        self._turn = RED

    def game_id(self) -> str:
        return "connect_four"

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    def reset_game(self) -> None:
        self.board = np.zeros((self.rows, self.cols), dtype=np.int8)
        self._turn = RED
        self.game_active = True

    def current_player(self) -> str:
        return PLAYER_NAMES[self._turn]

    def get_board(self) -> List[List[Optional[str]]]:
        """Deep copy of the board as tokens ('red', 'yellow' or None)."""
        return [[PLAYER_NAMES.get(int(v)) for v in row] for row in self.board]

    def valid_moves(self) -> List[int]:
        """Columns that still have room."""
        return [c for c in range(self.cols) if self.board[0, c] == EMPTY]

    def lowest_empty_row(self, col: int) -> int:
        """Lowest empty row in `col`, or COLUMN_FULL. Raises IndexError off the board."""
        if not 0 <= col < self.cols:
            raise IndexError(f"Column {col} outside 0..{self.cols - 1}")
        for r in range(self.rows - 1, -1, -1):
            if self.board[r, col] == EMPTY:
                return r
        return COLUMN_FULL

    # -------------------------------------------------------------------------
    # Moves
    # -------------------------------------------------------------------------

    def apply_move(self, col: int) -> MoveResult:
        """Drop the current player's piece into `col` (human input)."""
        if not self.game_active:
            return MoveResult.rejected(MoveReason.GAME_INACTIVE)

        if self.ai_mode and self._turn == YELLOW:
            return MoveResult.rejected(MoveReason.AI_TURN)

        if not 0 <= col < self.cols:
            return MoveResult.rejected(MoveReason.OUT_OF_RANGE)

        if self.lowest_empty_row(col) == COLUMN_FULL:
            return MoveResult.rejected(MoveReason.COLUMN_FULL)

        return self._drop(col)

    play = apply_move

    def make_ai_move(self) -> MoveResult:
        """Let the computer play yellow."""
        if not self.game_active or self._turn != YELLOW or not self.ai_mode:
            return MoveResult.rejected(MoveReason.INVALID_AI_STATE)

        col = self.get_ai_move()
        if col is None:
            return MoveResult.rejected(MoveReason.NO_MOVES_AVAILABLE)

        return self._drop(col)

    def _drop(self, col: int) -> MoveResult:
        row = self.lowest_empty_row(col)
        self.board[row, col] = self._turn

        result = self.check_game_state(row, col)
        if not result.game_over:
            self._turn = YELLOW if self._turn == RED else RED

        result.row = row
        result.col = col
        return result

    # -------------------------------------------------------------------------
    # Outcome detection
    # -------------------------------------------------------------------------

    def winning_line(self, row: int, col: int) -> Optional[List[Cell]]:
        """Cells of a 4+ run through (row, col), or None. Raises IndexError off the board."""
        if not in_bounds(self.board, row, col):
            raise IndexError(f"Cell {(row, col)} outside {self.rows}x{self.cols} board")
        if self.board[row, col] == EMPTY:
            return None
        for dr, dc in DIRECTIONS:
            run = run_through(self.board, row, col, dr, dc)
            if len(run) >= WINDOW:
                return run
        return None

    def check_win(self, row: int, col: int) -> bool:
        """Checks for 4-in-a-row through the piece at (row, col)."""
        return self.winning_line(row, col) is not None

    def check_game_state(self, row: int, col: int) -> MoveResult:
        """Resolve win or draw after a piece landed at (row, col)."""
        line = self.winning_line(row, col)
        if line is not None:
            winner = PLAYER_NAMES[int(self.board[row, col])]
            self.game_active = False
            self.scores.increment(winner)
            logger.debug("%s wins with %s", winner, line)
            return MoveResult(success=True, game_over=True, winner=winner, winning_line=line)

        if board_full(self.board):
            self.game_active = False
            self.scores.increment("draws")
            logger.debug("Board full, draw")
            return MoveResult(success=True, game_over=True, draw=True)

        return MoveResult(success=True, game_over=False)

    # -------------------------------------------------------------------------
    # Heuristic opponent
    # -------------------------------------------------------------------------

    def score_position(self, player: str) -> int:
        """
        Positional score of the board for `player`.

        Centre column pieces are worth CENTER_SCORE each; every horizontal,
        vertical and diagonal 4-window adds evaluate_window().
        """
        code = PLAYER_CODES[player]
        center = self.board[:, self.cols // 2]
        score = CENTER_SCORE * int(np.count_nonzero(center == code))
        return score + score_windows(gather_windows(self.board), code)

    @contextmanager
    def _probe(self, col: int, code: int) -> Iterator[int]:
        """Temporarily drop `code` into `col`; the cell is always cleared on exit."""
        row = self.lowest_empty_row(col)
        self.board[row, col] = code
        try:
            yield row
        finally:
            self.board[row, col] = EMPTY

    def get_ai_move(self) -> Optional[int]:
        """
        Choose yellow's column. Returns None when every column is full.

        Priority: win now > block red's win > best score_position().
        """
        valid = self.valid_moves()
        if not valid:
            return None

        for code, label in ((YELLOW, "win"), (RED, "block")):
            for col in valid:
                with self._probe(col, code) as row:
                    if self.check_win(row, col):
                        logger.debug("AI %s at column %d", label, col)
                        return col

        ai = PLAYER_NAMES[YELLOW]
        best_col = self.rng.choice(valid)
        with self._probe(best_col, YELLOW):
            best_score = self.score_position(ai)

        for col in valid:
            with self._probe(col, YELLOW):
                score = self.score_position(ai)
            if score > best_score:
                best_score = score
                best_col = col

        logger.debug("AI picks column %d (score %d)", best_col, best_score)
        return best_col

    # -------------------------------------------------------------------------
    # Display
    # -------------------------------------------------------------------------

    def state_string(self) -> str:
        header = "  " + "   ".join(str(c) for c in range(self.cols))
        border = "├" + "┼".join("───" for _ in range(self.cols)) + "┤"
        lines = [header, "╭" + "┬".join("───" for _ in range(self.cols)) + "╮"]
        for r in range(self.rows):
            row = "│ " + " │ ".join(CELL_STRINGS[self.board[r, c]] for c in range(self.cols)) + " │"
            lines.append(row)
            if r < self.rows - 1:
                lines.append(border)
        lines.append("╰" + "┴".join("───" for _ in range(self.cols)) + "╯")
        return "\n".join(lines)
