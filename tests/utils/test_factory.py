"""
Tests for turn_games.utils.factory

Tests factory functions for creating games.
"""

import random

import pytest

from turn_games.games import ConnectFour, RockPaperScissors, TicTacToe
from turn_games.utils.config import GAMES, Config
from turn_games.utils.factory import create_from_config, create_game


class TestCreateGame:
    """create_game function tests."""

    @pytest.mark.parametrize("name", list(GAMES))
    def test_creates_registered_games(self, name):
        game = create_game(name)
        assert isinstance(game, GAMES[name])

    def test_passes_rng(self):
        rng = random.Random(3)
        assert create_game("rock_paper_scissors", rng=rng).rng is rng

    def test_passes_options(self):
        game = create_game("connect_four", rows=4, cols=5)
        assert (game.rows, game.cols) == (4, 5)

    def test_unknown_game(self):
        with pytest.raises(ValueError, match="Available"):
            create_game("checkers")


class TestCreateFromConfig:

    def test_ai_mode_applied(self):
        game = create_from_config(Config(game_name="tic_tac_toe", ai_mode=True))
        assert isinstance(game, TicTacToe)
        assert game.is_ai_mode()

    def test_two_player(self):
        game = create_from_config(Config(ai_mode=False, rows=5, cols=6))
        assert isinstance(game, ConnectFour)
        assert not game.is_ai_mode()
        assert len(game.get_board()) == 5

    def test_rps_has_no_ai_toggle(self):
        game = create_from_config(Config(game_name="rock_paper_scissors"))
        assert isinstance(game, RockPaperScissors)

    def test_seed_is_reproducible(self):
        config = Config(game_name="rock_paper_scissors", seed=11)
        first = create_from_config(config)
        second = create_from_config(config)
        picks_a = [first.get_computer_choice() for _ in range(20)]
        picks_b = [second.get_computer_choice() for _ in range(20)]
        assert picks_a == picks_b
