"""
ScoreStore - sqlite-backed persistence for per-game scores.

Engines never touch disk; the caller loads a game's mapping before play and
saves it after each finished round:

    with ScoreStore(path) as store:
        game.load_scores(store.load(game.game_id()))
        ...
        store.save(game.game_id(), game.get_scores())
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Dict, Mapping

logger = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS scores (
    game_id TEXT NOT NULL,
    name    TEXT NOT NULL,
    value   INTEGER NOT NULL DEFAULT 0,
    PRIMARY KEY (game_id, name)
);
"""


class ScoreStore:
    """Key -> integer score mappings, one per game id."""

    def __init__(self, db_path: str | Path):
        self.db_path = Path(db_path).resolve()
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._closed = False

        self.conn = sqlite3.connect(str(self.db_path))
        self.conn.execute("PRAGMA journal_mode=WAL")
        self.conn.execute("PRAGMA synchronous=NORMAL")
        self.conn.executescript(_SCHEMA)
        self.conn.commit()

    def load(self, game_id: str) -> Dict[str, int]:
        """Stored scores for `game_id`; empty dict if none were saved."""
        rows = self.conn.execute(
            "SELECT name, value FROM scores WHERE game_id = ?", (game_id,)
        ).fetchall()
        scores = {name: int(value) for name, value in rows}
        logger.debug("Loaded %s scores: %s", game_id, scores)
        return scores

    def save(self, game_id: str, scores: Mapping[str, int]) -> None:
        """Replace the stored mapping for `game_id`."""
        with self.conn:
            self.conn.execute("DELETE FROM scores WHERE game_id = ?", (game_id,))
            self.conn.executemany(
                "INSERT INTO scores (game_id, name, value) VALUES (?, ?, ?)",
                [(game_id, name, int(value)) for name, value in scores.items()],
            )
        logger.debug("Saved %s scores: %s", game_id, dict(scores))

    def clear(self, game_id: str) -> None:
        with self.conn:
            self.conn.execute("DELETE FROM scores WHERE game_id = ?", (game_id,))

    def games(self) -> list:
        """Game ids with stored scores."""
        rows = self.conn.execute("SELECT DISTINCT game_id FROM scores ORDER BY game_id")
        return [r[0] for r in rows]

    def close(self) -> None:
        """Close the database connection."""
        if self._closed:
            return
        self._closed = True
        self.conn.close()

    def __enter__(self):
        return self

    def __exit__(self, *_):
        self.close()
