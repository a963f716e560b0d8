"""
NumPy utilities for grid board games.

Boards are int8 arrays with 0 meaning empty. Win detection walks outward
from the last placed cell; heuristic scoring works on precomputed tables of
flat indices so every window can be gathered in one fancy-indexing call.
"""

from __future__ import annotations

from functools import lru_cache
from typing import List, Tuple

import numpy as np

EMPTY = 0
WINDOW = 4

# (d_row, d_col): horizontal, vertical, diagonal down-right, diagonal down-left
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0), (1, 1), (1, -1))


def in_bounds(board: np.ndarray, r: int, c: int) -> bool:
    """Return True if (r, c) is inside the board."""
    rows, cols = board.shape
    return 0 <= r < rows and 0 <= c < cols


def board_full(board: np.ndarray) -> bool:
    """Return True if no cell is empty."""
    return not np.any(board == EMPTY)


def _walk(board: np.ndarray, r: int, c: int, dr: int, dc: int, limit: int) -> List[Tuple[int, int]]:
    """Cells matching board[r, c] stepping (dr, dc) away from it, at most `limit`."""
    value = board[r, c]
    cells = []
    for i in range(1, limit + 1):
        nr, nc = r + dr * i, c + dc * i
        if not in_bounds(board, nr, nc) or board[nr, nc] != value:
            break
        cells.append((nr, nc))
    return cells


def run_through(
    board: np.ndarray, r: int, c: int, dr: int, dc: int, length: int = WINDOW
) -> List[Tuple[int, int]]:
    """
    Contiguous same-valued cells through (r, c) along one axis.

    Each side is probed at most length-1 cells, which is enough to decide
    whether a run of `length` exists. Cells are ordered from the negative
    end to the positive end.
    """
    reach = length - 1
    behind = _walk(board, r, c, -dr, -dc, reach)
    ahead = _walk(board, r, c, dr, dc, reach)
    return behind[::-1] + [(r, c)] + ahead


@lru_cache(maxsize=None)
def window_indices(rows: int, cols: int, length: int = WINDOW) -> np.ndarray:
    """
    Flat indices of every `length`-cell window on a rows x cols board.

    Returns shape (N, length), ordered horizontal, vertical, positive-slope
    diagonal (down-right), negative-slope diagonal (up-right). Windows that
    would run off the board are never produced.
    """
    span = length - 1
    steps = np.arange(length)
    windows = []

    for r in range(rows):
        for c in range(cols - span):
            windows.append(r * cols + c + steps)

    for c in range(cols):
        for r in range(rows - span):
            windows.append((r + steps) * cols + c)

    for r in range(rows - span):
        for c in range(cols - span):
            windows.append((r + steps) * cols + c + steps)

    for r in range(span, rows):
        for c in range(cols - span):
            windows.append((r - steps) * cols + c + steps)

    if not windows:
        return np.empty((0, length), dtype=np.intp)
    table = np.array(windows, dtype=np.intp)
    table.flags.writeable = False
    return table


def gather_windows(board: np.ndarray) -> np.ndarray:
    """All 4-windows of the board as an (N, 4) array of cell values."""
    rows, cols = board.shape
    return board.ravel()[window_indices(rows, cols)]
