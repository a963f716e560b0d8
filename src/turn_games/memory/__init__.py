"""
Score memory - persistence owned by the caller, never by the engines.

Use `for_dir()` or instantiate ScoreStore directly.
"""

from __future__ import annotations

from pathlib import Path

from turn_games.memory.score_store import ScoreStore


def for_dir(base_dir: str | Path = "data") -> ScoreStore:
    """
    Open the score database inside `base_dir`.

    Args:
        base_dir: Directory holding scores.db (created if missing)

    Returns:
        ScoreStore instance
    """
    return ScoreStore(Path(base_dir) / "scores.db")


__all__ = [
    "ScoreStore",
    "for_dir",
]
