"""
Shared test fixtures for turn_games tests.

Design principles:
- Deterministic randomness through injected sources
- Clean imports at module level
- Minimal, focused fixtures
"""

import random
import tempfile
from pathlib import Path
from typing import Generator, Iterable, List

import pytest

from turn_games.games.connect_four import ConnectFour
from turn_games.games.rock_paper_scissors import RockPaperScissors
from turn_games.games.tic_tac_toe import TicTacToe
from turn_games.memory.score_store import ScoreStore


class ScriptedRandom:
    """
    Stand-in random source.

    choice() returns the scripted values in order (they must be members of
    the sequence offered); once exhausted it returns the first element.
    """

    def __init__(self, picks: Iterable = ()):
        self.picks: List = list(picks)
        self.calls: List[list] = []

    def choice(self, seq):
        options = list(seq)
        self.calls.append(options)
        if self.picks:
            pick = self.picks.pop(0)
            assert pick in options, f"{pick!r} not offered in {options}"
            return pick
        return options[0]


# =============================================================================
# Random Source Fixtures
# =============================================================================

@pytest.fixture
def scripted_rng() -> ScriptedRandom:
    return ScriptedRandom()


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1234)


# =============================================================================
# Game Fixtures
# =============================================================================

@pytest.fixture
def connect_four(scripted_rng: ScriptedRandom) -> ConnectFour:
    """Fresh 6x7 Connect 4 game, two human players."""
    return ConnectFour(rng=scripted_rng)


@pytest.fixture
def connect_four_ai(scripted_rng: ScriptedRandom) -> ConnectFour:
    """Fresh Connect 4 game with the computer playing yellow."""
    game = ConnectFour(rng=scripted_rng)
    game.set_ai_mode(True)
    return game


@pytest.fixture
def tic_tac_toe(scripted_rng: ScriptedRandom) -> TicTacToe:
    return TicTacToe(rng=scripted_rng)


@pytest.fixture
def tic_tac_toe_ai(scripted_rng: ScriptedRandom) -> TicTacToe:
    game = TicTacToe(rng=scripted_rng)
    game.set_ai_mode(True)
    return game


@pytest.fixture
def rps(scripted_rng: ScriptedRandom) -> RockPaperScissors:
    return RockPaperScissors(rng=scripted_rng)


# =============================================================================
# Persistence Fixtures
# =============================================================================

@pytest.fixture
def temp_db_path() -> Generator[Path, None, None]:
    """Temporary database file with cleanup."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        path = Path(f.name)
    yield path
    for suffix in ["", "-wal", "-shm"]:
        p = Path(str(path) + suffix)
        if p.exists():
            p.unlink()


@pytest.fixture
def store(temp_db_path: Path) -> Generator[ScoreStore, None, None]:
    """ScoreStore instance with temporary database."""
    s = ScoreStore(temp_db_path)
    yield s
    s.close()
