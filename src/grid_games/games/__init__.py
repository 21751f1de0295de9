"""
Games module - boards, rules and variant implementations.
"""

from grid_games.games.board import Board
from grid_games.games.game_base import GameBase
from grid_games.games.game_rules import apply_move, in_bounds, winning_lines
from grid_games.games.gravity import resolve_column
from grid_games.games.win_detection import WinDetector, LineWinDetector, DirectionalWinDetector
from grid_games.games.tic_tac_toe import TicTacToe
from grid_games.games.connect_four import ConnectFour

__all__ = [
    "Board",
    "GameBase",
    "TicTacToe",
    "ConnectFour",
    "WinDetector",
    "LineWinDetector",
    "DirectionalWinDetector",
    "apply_move",
    "resolve_column",
    "in_bounds",
    "winning_lines",
]
