"""
Core module - result types and score counters.

These are the building blocks every engine returns or owns.
"""

from turn_games.core.types import (
    Cell,
    MoveReason,
    MoveResult,
    RoundResult,
    RoundWinner,
)
from turn_games.core.scores import ScoreBoard

__all__ = [
    # Types
    "Cell",
    "MoveReason",
    "MoveResult",
    "RoundResult",
    "RoundWinner",
    # Scores
    "ScoreBoard",
]
