"""
Tests for turn_games.games.rock_paper_scissors
"""

import random

import pytest

from turn_games.core.types import MoveReason, RoundWinner
from turn_games.games.rock_paper_scissors import CHOICES, RockPaperScissors


class TestComputerChoice:

    def test_always_valid(self):
        game = RockPaperScissors(rng=random.Random(5))
        picks = {game.get_computer_choice() for _ in range(100)}
        assert picks == set(CHOICES)


class TestDetermineWinner:

    @pytest.mark.parametrize("player,computer,expected", [
        ("rock", "scissors", RoundWinner.PLAYER),
        ("paper", "rock", RoundWinner.PLAYER),
        ("scissors", "paper", RoundWinner.PLAYER),
        ("scissors", "rock", RoundWinner.COMPUTER),
        ("rock", "paper", RoundWinner.COMPUTER),
        ("paper", "scissors", RoundWinner.COMPUTER),
        ("rock", "rock", RoundWinner.DRAW),
        ("paper", "paper", RoundWinner.DRAW),
        ("scissors", "scissors", RoundWinner.DRAW),
    ])
    def test_beats_relation(self, player, computer, expected):
        assert RockPaperScissors.determine_winner(player, computer) == expected

    @pytest.mark.parametrize("computer", CHOICES)
    def test_unknown_player_choice_loses(self, computer):
        assert RockPaperScissors.determine_winner("lizard", computer) == RoundWinner.COMPUTER


class TestResolveRound:

    def test_player_wins(self, rps: RockPaperScissors, scripted_rng):
        scripted_rng.picks = ["scissors"]
        result = rps.resolve_round("rock")

        assert result.success
        assert result.player_choice == "rock"
        assert result.computer_choice == "scissors"
        assert result.winner == RoundWinner.PLAYER
        assert result.scores == {"player": 1, "computer": 0, "draw": 0}

    def test_scores_accumulate(self, rps: RockPaperScissors, scripted_rng):
        scripted_rng.picks = ["scissors", "paper", "rock"]
        winners = [rps.resolve_round("rock").winner for _ in range(3)]

        assert winners == [RoundWinner.PLAYER, RoundWinner.COMPUTER, RoundWinner.DRAW]
        assert rps.get_scores() == {"player": 1, "computer": 1, "draw": 1}

    def test_returned_scores_are_a_copy(self, rps: RockPaperScissors):
        result = rps.resolve_round("paper")
        result.scores["player"] = 50
        assert rps.get_scores()["player"] != 50

    def test_unknown_choice_rejected(self, rps: RockPaperScissors, scripted_rng):
        result = rps.resolve_round("lizard")

        assert result.success is False
        assert result.reason == MoveReason.OUT_OF_RANGE
        assert scripted_rng.calls == []
        assert rps.get_scores() == {"player": 0, "computer": 0, "draw": 0}

    def test_to_dict(self, rps: RockPaperScissors, scripted_rng):
        scripted_rng.picks = ["rock"]
        assert rps.resolve_round("paper").to_dict() == {
            "success": True,
            "player_choice": "paper",
            "computer_choice": "rock",
            "winner": "player",
            "scores": {"player": 1, "computer": 0, "draw": 0},
        }


class TestScores:

    def test_load_partial(self, rps: RockPaperScissors):
        rps.load_scores({"computer": 7})
        assert rps.get_scores() == {"player": 0, "computer": 7, "draw": 0}

    def test_reset(self, rps: RockPaperScissors):
        rps.resolve_round("rock")
        rps.reset_scores()
        assert rps.get_scores() == {"player": 0, "computer": 0, "draw": 0}


class TestDisplay:

    @pytest.mark.parametrize("choice", CHOICES)
    def test_known_symbols(self, choice):
        assert RockPaperScissors.get_choice_symbol(choice) != "❓"

    def test_unknown_symbol(self):
        assert RockPaperScissors.get_choice_symbol("lizard") == "❓"

    def test_state_string_after_round(self, rps: RockPaperScissors, scripted_rng):
        scripted_rng.picks = ["paper"]
        rps.resolve_round("scissors")
        text = rps.state_string()
        assert "scissors vs" in text
        assert "You 1" in text
        assert rps.game_id() == "rock_paper_scissors"
