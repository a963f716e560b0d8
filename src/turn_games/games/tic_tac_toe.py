"""
TicTacToe game implementation.

Uses int8 board, addressed by flat index 0..8 (row-major):
    0 = empty
    1 = player X (moves first)
    2 = player O (the computer seat in AI mode)
"""

from __future__ import annotations

import logging
import random
from contextlib import contextmanager
from typing import Iterator, List, Optional

import numpy as np

from turn_games.core.types import MoveReason, MoveResult
from turn_games.games.game_base import TurnGame
from turn_games.games.game_rules import EMPTY, board_full

logger = logging.getLogger(__name__)

X = 1
O = 2
PLAYER_NAMES = {X: "X", O: "O"}
PLAYER_CODES = {name: code for code, name in PLAYER_NAMES.items()}

# Cell strings: each cell value maps to its display string
CELL_STRINGS = {EMPTY: " ", X: "X", O: "O"}

CENTER = 4
CORNERS = (0, 2, 6, 8)

# Pre-computed winning lines (indices into flattened 3x3 board)
_WIN_LINES = np.array([
    [0, 1, 2], [3, 4, 5], [6, 7, 8],  # rows
    [0, 3, 6], [1, 4, 7], [2, 5, 8],  # cols
    [0, 4, 8], [2, 4, 6],             # diagonals
], dtype=np.int8)


class TicTacToe(TurnGame):
    """TicTacToe with an optional rule-based opponent playing O."""

    SCORE_KEYS = ("playerX", "playerO", "draws")
    AI_PLAYER = "O"

    def __init__(self, rng: Optional[random.Random] = None):
        super().__init__(rng)
        self.board = np.zeros((3, 3), dtype=np.int8)
        self._turn = X

    def game_id(self) -> str:
        return "tic_tac_toe"

    def reset_game(self) -> None:
        self.board = np.zeros((3, 3), dtype=np.int8)
        self._turn = X
        self.game_active = True

    def current_player(self) -> str:
        return PLAYER_NAMES[self._turn]

    def get_board(self) -> List[str]:
        """Copy of the board as 9 strings: 'X', 'O' or ''."""
        return [PLAYER_NAMES.get(int(v), "") for v in self.board.ravel()]

    def valid_moves(self) -> List[int]:
        return [int(i) for i in np.flatnonzero(self.board == EMPTY)]

    def _cell(self, index: int) -> int:
        return int(self.board[divmod(index, 3)])

    # -------------------------------------------------------------------------
    # Moves
    # -------------------------------------------------------------------------

    def make_move(self, index: int) -> MoveResult:
        """Place the current player's mark at `index` (human input)."""
        if not 0 <= index < 9:
            return MoveResult.rejected(MoveReason.OUT_OF_RANGE)

        if self._cell(index) != EMPTY or not self.game_active:
            return MoveResult.rejected(MoveReason.INVALID_MOVE)

        if self.ai_mode and self._turn == O:
            return MoveResult.rejected(MoveReason.AI_TURN)

        return self._mark(index)

    play = make_move

    def make_ai_move(self) -> MoveResult:
        if not self.game_active or self._turn != O or not self.ai_mode:
            return MoveResult.rejected(MoveReason.INVALID_AI_STATE)

        index = self.get_ai_move()
        if index is None:
            return MoveResult.rejected(MoveReason.NO_MOVES_AVAILABLE)

        return self._mark(index)

    def _mark(self, index: int) -> MoveResult:
        self.board[divmod(index, 3)] = self._turn

        result = self.check_game_state()
        if not result.game_over:
            self._turn = O if self._turn == X else X

        result.move = index
        return result

    # -------------------------------------------------------------------------
    # Outcome detection
    # -------------------------------------------------------------------------

    def check_game_state(self) -> MoveResult:
        flat = self.board.ravel()
        for line in _WIN_LINES:
            v = flat[line[0]]
            if v != EMPTY and flat[line[1]] == v and flat[line[2]] == v:
                winner = PLAYER_NAMES[int(v)]
                self.game_active = False
                self.scores.increment(f"player{winner}")
                logger.debug("%s wins on line %s", winner, line.tolist())
                return MoveResult(
                    success=True,
                    game_over=True,
                    winner=winner,
                    winning_line=[int(i) for i in line],
                )

        if board_full(self.board):
            self.game_active = False
            self.scores.increment("draws")
            return MoveResult(success=True, game_over=True, draw=True)

        return MoveResult(success=True, game_over=False)

    def check_win_for_player(self, player: str) -> bool:
        """True if `player` ('X' or 'O') holds any complete line."""
        code = PLAYER_CODES[player]
        flat = self.board.ravel()
        return any(bool(np.all(flat[line] == code)) for line in _WIN_LINES)

    # -------------------------------------------------------------------------
    # Heuristic opponent
    # -------------------------------------------------------------------------

    @contextmanager
    def _probe(self, index: int, code: int) -> Iterator[None]:
        cell = divmod(index, 3)
        self.board[cell] = code
        try:
            yield
        finally:
            self.board[cell] = EMPTY

    def get_ai_move(self) -> Optional[int]:
        """
        Pick O's cell: win, block, centre, random corner, random cell.
        Returns None on a full board.
        """
        free = self.valid_moves()
        if not free:
            return None

        for player in ("O", "X"):
            for index in free:
                with self._probe(index, PLAYER_CODES[player]):
                    if self.check_win_for_player(player):
                        return index

        if CENTER in free:
            return CENTER

        corners = [i for i in CORNERS if i in free]
        if corners:
            return self.rng.choice(corners)

        return self.rng.choice(free)

    # -------------------------------------------------------------------------
    # Display
    # -------------------------------------------------------------------------

    def state_string(self) -> str:
        board = self.board
        lines = ["╭───┬───┬───╮"]
        for i in range(3):
            row = "│ " + " │ ".join(CELL_STRINGS[board[i, j]] for j in range(3)) + " │"
            lines.append(row)
            if i < 2:
                lines.append("├───┼───┼───┤")
        lines.append("╰───┴───┴───╯")
        return "\n".join(lines)
