"""
ScoreBoard - cumulative outcome counters for one game.

Scores outlive individual rounds: resetting the board never touches them.
They are cleared only by reset() and can be seeded from a persisted mapping
with load().
"""

from __future__ import annotations

from typing import Dict, Iterable, Mapping


class ScoreBoard:
    """Fixed set of named, non-negative counters."""

    __slots__ = ('_keys', '_counts')

    def __init__(self, keys: Iterable[str]):
        self._keys = tuple(keys)
        self._counts: Dict[str, int] = {k: 0 for k in self._keys}

    @property
    def keys(self) -> tuple:
        return self._keys

    def increment(self, key: str) -> int:
        """Add one to `key` and return the new count."""
        if key not in self._counts:
            raise KeyError(f"Unknown score key: {key}")
        self._counts[key] += 1
        return self._counts[key]

    def snapshot(self) -> Dict[str, int]:
        """Shallow copy safe to hand to callers."""
        return dict(self._counts)

    def load(self, scores: Mapping[str, int]) -> None:
        """
        Replace every counter from `scores`.

        Missing and falsy values both become 0, so {"draws": 0} and {} load
        the same way. Unknown keys are ignored.
        """
        for key in self._keys:
            self._counts[key] = int(scores.get(key) or 0)

    def reset(self) -> None:
        for key in self._keys:
            self._counts[key] = 0

    def __getitem__(self, key: str) -> int:
        return self._counts[key]

    def __repr__(self) -> str:
        return f"ScoreBoard({self._counts})"
