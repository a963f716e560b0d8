"""
Rock-Paper-Scissors against a uniformly random computer.

No board and no turn order: every round is independent except for the
accumulated scores.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from turn_games.core.types import MoveReason, RoundResult, RoundWinner
from turn_games.games.game_base import ScoredGame

logger = logging.getLogger(__name__)

CHOICES = ("rock", "paper", "scissors")

# choice -> the choice it defeats
BEATS = {
    "rock": "scissors",
    "scissors": "paper",
    "paper": "rock",
}

CHOICE_SYMBOLS = {
    "rock": "✊",
    "paper": "✋",
    "scissors": "✌️",
}


class RockPaperScissors(ScoredGame):

    SCORE_KEYS = ("player", "computer", "draw")

    def __init__(self, rng: Optional[random.Random] = None):
        super().__init__(rng)
        self.last_round: Optional[RoundResult] = None

    def game_id(self) -> str:
        return "rock_paper_scissors"

    def get_computer_choice(self) -> str:
        return self.rng.choice(CHOICES)

    @staticmethod
    def determine_winner(player: str, computer: str) -> RoundWinner:
        """Winner from the player's side; an unknown player choice loses."""
        if player == computer:
            return RoundWinner.DRAW
        if BEATS.get(player) == computer:
            return RoundWinner.PLAYER
        return RoundWinner.COMPUTER

    def resolve_round(self, player_choice: str) -> RoundResult:
        """Play one round; unknown choices are rejected without scoring."""
        if player_choice not in BEATS:
            return RoundResult(
                success=False,
                reason=MoveReason.OUT_OF_RANGE,
                player_choice=player_choice,
                scores=self.get_scores(),
            )

        computer_choice = self.get_computer_choice()
        winner = self.determine_winner(player_choice, computer_choice)
        self.scores.increment(winner.value)
        logger.debug("%s vs %s: %s", player_choice, computer_choice, winner.value)

        self.last_round = RoundResult(
            success=True,
            player_choice=player_choice,
            computer_choice=computer_choice,
            winner=winner,
            scores=self.get_scores(),
        )
        return self.last_round

    @staticmethod
    def get_choice_symbol(choice: str) -> str:
        return CHOICE_SYMBOLS.get(choice, "❓")

    def state_string(self) -> str:
        scores = self.get_scores()
        board = f"You {scores['player']}  -  {scores['computer']} Computer  (draws {scores['draw']})"
        if self.last_round is None:
            return board
        r = self.last_round
        played = (
            f"{self.get_choice_symbol(r.player_choice)} {r.player_choice} vs "
            f"{self.get_choice_symbol(r.computer_choice)} {r.computer_choice}"
        )
        return played + "\n" + board
