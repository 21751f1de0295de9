"""
Grid Games - state engine for tic-tac-toe and Connect Four.

Boards are immutable, every move is validated and evaluated once, and the
whole game is kept as a linear history you can travel back through.

Quick Start:
    from grid_games import new_game, make_move, time_travel, status, Variant

    state = new_game(Variant.CONNECT_FOUR)
    make_move(state, 3)          # red drops into column 3
    make_move(state, 3)          # yellow lands on top
    time_travel(state, 1)        # back to after red's move
    make_move(state, 4)          # new timeline: old move 2 is gone

Modules:
    core     - Cell encoding, outcome types, move errors
    games    - Board, rules, gravity, win detectors, variants
    history  - HistoryState timeline and move list
    utils    - Game registry, configuration, factory
"""

from grid_games.api import (
    new_game,
    make_move,
    time_travel,
    board,
    status,
    history_list,
    play_session,
)

from grid_games.core import (
    EMPTY,
    PLAYER_A,
    PLAYER_B,
    Variant,
    WinResult,
    InProgress,
    Won,
    Draw,
    MoveError,
    OutOfBounds,
    CellOccupied,
    GameAlreadyDecided,
    ColumnFullError,
    IndexOutOfRange,
)
from grid_games.games import Board
from grid_games.history import HistoryState

__version__ = "1.0.0"

__all__ = [
    # Main API
    "new_game",
    "make_move",
    "time_travel",
    "board",
    "status",
    "history_list",
    "play_session",
    # Types
    "EMPTY",
    "PLAYER_A",
    "PLAYER_B",
    "Variant",
    "WinResult",
    "InProgress",
    "Won",
    "Draw",
    "Board",
    "HistoryState",
    # Errors
    "MoveError",
    "OutOfBounds",
    "CellOccupied",
    "GameAlreadyDecided",
    "ColumnFullError",
    "IndexOutOfRange",
]
