"""
Tests for turn_games.utils.config

Tests configuration and game registry.
"""

from pathlib import Path

import pytest

from turn_games.games.game_base import ScoredGame, TurnGame
from turn_games.utils.config import DATA_DIR, GAMES, SCORES_DB, TURN_GAMES, Config


class TestGameRegistry:
    """GAMES registry tests."""

    def test_contains_all_games(self):
        assert set(GAMES) == {"connect_four", "tic_tac_toe", "rock_paper_scissors"}

    def test_keys_match_game_ids(self):
        for name, game_class in GAMES.items():
            game = game_class()
            assert isinstance(game, ScoredGame)
            assert game.game_id() == name

    def test_turn_games_are_turn_games(self):
        for name in TURN_GAMES:
            assert issubclass(GAMES[name], TurnGame)


class TestPaths:

    def test_scores_db_in_data_dir(self):
        assert SCORES_DB.parent == DATA_DIR


class TestConfig:

    def test_defaults(self):
        config = Config()
        assert config.game_name == "connect_four"
        assert config.ai_mode is True
        assert (config.rows, config.cols) == (6, 7)
        assert config.seed is None

    def test_unknown_game(self):
        with pytest.raises(ValueError, match="Unknown game"):
            Config(game_name="chess")

    def test_bad_board_size(self):
        with pytest.raises(ValueError):
            Config(rows=0)

    def test_db_path_coerced(self):
        assert Config(db_path="x/scores.db").db_path == Path("x/scores.db")

    def test_game_options(self):
        assert Config(rows=5, cols=8).game_options() == {"rows": 5, "cols": 8}
        assert Config(game_name="tic_tac_toe").game_options() == {}
