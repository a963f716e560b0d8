"""
ScoredGame / TurnGame - abstract contracts shared by all engines.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional

from turn_games.core.scores import ScoreBoard
from turn_games.core.types import MoveResult


class ScoredGame(ABC):
    """
    Base class for anything that keeps cumulative scores.

    IMPORTANT ARCHITECTURE NOTE:
    -----------------------------
    - Engines never do I/O. Persisting scores is the caller's job,
      through get_scores() / load_scores().
    - Randomness comes from the injected `rng`, never the global
      `random` module, so tests can substitute a seeded source.
    """

    SCORE_KEYS: tuple = ()

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()
        self.scores = ScoreBoard(self.SCORE_KEYS)

    @abstractmethod
    def game_id(self) -> str:
        """Return a stable identifier (e.g. 'connect_four')."""
        pass

    @abstractmethod
    def state_string(self) -> str:
        """Pretty string representation of the state."""
        pass

    def get_scores(self) -> Dict[str, int]:
        """Copy of the current scores."""
        return self.scores.snapshot()

    def load_scores(self, scores: Mapping[str, int]) -> None:
        """Seed scores; missing or falsy keys become 0."""
        self.scores.load(scores)

    def reset_scores(self) -> None:
        self.scores.reset()


class TurnGame(ScoredGame):
    """
    Abstract base class for two-player board games with an optional
    heuristic opponent playing the second seat.
    """

    AI_PLAYER: str = ""

    def __init__(self, rng: Optional[random.Random] = None):
        super().__init__(rng)
        self.ai_mode = False
        self.game_active = True

    @abstractmethod
    def reset_game(self) -> None:
        """Start a new round. Scores are kept."""
        pass

    def set_ai_mode(self, enabled: bool) -> None:
        """Toggle the computer opponent. Always starts a new round."""
        self.ai_mode = bool(enabled)
        self.reset_game()

    def is_ai_mode(self) -> bool:
        return self.ai_mode

    def is_game_active(self) -> bool:
        return self.game_active

    @abstractmethod
    def current_player(self) -> str:
        """Return the token of the player to act."""
        pass

    @abstractmethod
    def get_board(self) -> Any:
        """Return a copy of the board that shares nothing with the engine."""
        pass

    @abstractmethod
    def valid_moves(self) -> list:
        """Return all legal move indices from the current state."""
        pass

    @abstractmethod
    def play(self, move: int) -> MoveResult:
        """Apply a human move given as a single index."""
        pass

    @abstractmethod
    def make_ai_move(self) -> MoveResult:
        """Let the heuristic opponent move."""
        pass

    def is_ai_turn(self) -> bool:
        """True when the computer opponent is due to move."""
        return self.ai_mode and self.game_active and self.current_player() == self.AI_PLAYER
