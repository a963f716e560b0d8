"""
Configuration and game registry.
"""

from pathlib import Path
from typing import Optional

from turn_games.games import ConnectFour, RockPaperScissors, TicTacToe
from turn_games.games.connect_four import COLS, ROWS


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------

PACKAGE_DIR = Path(__file__).parent.parent  # src/turn_games/
DATA_DIR = PACKAGE_DIR / "data"
SCORES_DB = DATA_DIR / "scores.db"


# ---------------------------------------------------------------------------
# Game Registry
# ---------------------------------------------------------------------------

GAMES = {
    "connect_four": ConnectFour,
    "tic_tac_toe": TicTacToe,
    "rock_paper_scissors": RockPaperScissors,
}

# Games with a board and a computer seat that can be switched off
TURN_GAMES = ("connect_four", "tic_tac_toe")


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

class Config:
    """Play session configuration with sensible defaults."""

    def __init__(
        self,
        game_name: str = "connect_four",
        ai_mode: bool = True,
        rows: int = ROWS,
        cols: int = COLS,
        db_path: Path = SCORES_DB,
        seed: Optional[int] = None,
    ):
        if game_name not in GAMES:
            available = ", ".join(GAMES.keys())
            raise ValueError(f"Unknown game: {game_name}. Available: {available}")
        if rows < 1 or cols < 1:
            raise ValueError(f"Board must have at least one row and column, got {rows}x{cols}")

        self.game_name = game_name
        self.ai_mode = ai_mode
        self.rows = rows
        self.cols = cols
        self.db_path = Path(db_path)
        self.seed = seed

    def game_options(self) -> dict:
        """Constructor options for the configured game."""
        if self.game_name == "connect_four":
            return {"rows": self.rows, "cols": self.cols}
        return {}


# Default configuration
DEFAULT_CONFIG = Config()
