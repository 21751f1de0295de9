"""
Factory functions for creating game variants.
"""

from typing import Union

from grid_games.core.types import Variant
from grid_games.games.game_base import GameBase
from grid_games.utils.config import GAMES, VARIANTS


def create_game(game: Union[str, Variant]) -> GameBase:
    """
    Create the rules object for a variant.

    Args:
        game: Variant, or key from GAMES registry (e.g., "tic_tac_toe")

    Returns:
        GameBase instance
    """
    if isinstance(game, Variant):
        return VARIANTS[game]()

    if game not in GAMES:
        available = ", ".join(GAMES.keys())
        raise ValueError(f"Unknown game: {game}. Available: {available}")

    return GAMES[game]()
