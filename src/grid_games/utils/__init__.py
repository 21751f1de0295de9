"""
Utilities - game registry, configuration and factories.
"""

from grid_games.utils.config import GAMES, VARIANTS, Config, DEFAULT_CONFIG
from grid_games.utils.factory import create_game

__all__ = [
    "GAMES",
    "VARIANTS",
    "Config",
    "DEFAULT_CONFIG",
    "create_game",
]
