"""
Factory functions for creating games.
"""

import random
from typing import Optional

from turn_games.games.game_base import ScoredGame, TurnGame
from turn_games.utils.config import GAMES, Config


def create_game(game_name: str, rng: Optional[random.Random] = None, **options) -> ScoredGame:
    """
    Create a game instance.

    Args:
        game_name: Key from GAMES registry (e.g., "connect_four")
        rng: Random source for computer choices (fresh Random if None)
        **options: Constructor options (rows/cols for connect_four)

    Returns:
        Fresh game instance
    """
    if game_name not in GAMES:
        available = ", ".join(GAMES.keys())
        raise ValueError(f"Unknown game: {game_name}. Available: {available}")

    game_class = GAMES[game_name]
    return game_class(rng=rng, **options)


def create_from_config(config: Config) -> ScoredGame:
    """
    Create the configured game, seeded and with AI mode applied.

    Args:
        config: Session configuration

    Returns:
        Configured game instance
    """
    rng = random.Random(config.seed)
    game = create_game(config.game_name, rng=rng, **config.game_options())

    if isinstance(game, TurnGame):
        game.set_ai_mode(config.ai_mode)

    return game
