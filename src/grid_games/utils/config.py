"""
Configuration and game registry.
"""

from grid_games.core.types import Variant
from grid_games.games import TicTacToe, ConnectFour


# ---------------------------------------------------------------------------
# Game Registry
# ---------------------------------------------------------------------------

GAMES = {
    "tic_tac_toe": TicTacToe,
    "connect_four": ConnectFour,
}

VARIANTS = {
    Variant.TIC_TAC_TOE: TicTacToe,
    Variant.CONNECT_FOUR: ConnectFour,
}


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

class Config:
    """Session configuration with sensible defaults."""

    def __init__(
        self,
        game_name: str = "tic_tac_toe",
        ascending: bool = True,
    ):
        if game_name not in GAMES:
            available = ", ".join(GAMES.keys())
            raise ValueError(f"Unknown game: {game_name}. Available: {available}")

        self.game_name = game_name
        self.ascending = ascending

    @property
    def variant(self) -> Variant:
        return Variant(self.game_name)


# Default configuration
DEFAULT_CONFIG = Config()
