"""
Core types shared by every engine.

This module contains the result types returned to callers:
- MoveReason: closed set of rejection codes
- MoveResult: outcome of a board move (Connect 4, Tic-Tac-Toe)
- RoundResult: outcome of a Rock-Paper-Scissors round
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

# A board coordinate as (row, col)
Cell = Tuple[int, int]


class MoveReason(str, Enum):
    """Why a move was rejected. Rejections are results, not exceptions."""

    GAME_INACTIVE = "game_inactive"
    AI_TURN = "ai_turn"
    COLUMN_FULL = "column_full"
    INVALID_MOVE = "invalid_move"
    INVALID_AI_STATE = "invalid_ai_state"
    NO_MOVES_AVAILABLE = "no_moves_available"
    OUT_OF_RANGE = "out_of_range"


class RoundWinner(str, Enum):
    PLAYER = "player"
    COMPUTER = "computer"
    DRAW = "draw"


def _compact(data: Dict[str, Any]) -> Dict[str, Any]:
    """Drop unset fields and unwrap enums."""
    out = {}
    for key, value in data.items():
        if value is None:
            continue
        out[key] = value.value if isinstance(value, Enum) else value
    return out


@dataclass
class MoveResult:
    """
    Result of applying a move.

    Only the fields relevant to the outcome are set:
        rejected:   success=False, reason
        placed:     success=True, row/col (Connect 4) or move (Tic-Tac-Toe),
                    game_over, and winner/winning_line or draw when terminal
    """
    success: bool
    reason: Optional[MoveReason] = None
    row: Optional[int] = None
    col: Optional[int] = None
    move: Optional[int] = None
    game_over: Optional[bool] = None
    winner: Optional[str] = None
    draw: Optional[bool] = None
    winning_line: Optional[List[Any]] = None

    @classmethod
    def rejected(cls, reason: MoveReason) -> "MoveResult":
        return cls(success=False, reason=reason)

    def to_dict(self) -> Dict[str, Any]:
        return _compact(asdict(self))


@dataclass
class RoundResult:
    """Result of one Rock-Paper-Scissors round."""
    success: bool
    reason: Optional[MoveReason] = None
    player_choice: Optional[str] = None
    computer_choice: Optional[str] = None
    winner: Optional[RoundWinner] = None
    scores: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = _compact(asdict(self))
        data["scores"] = dict(self.scores)
        return data

