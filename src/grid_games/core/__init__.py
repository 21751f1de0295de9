"""
Core module - cell encoding, outcome types and move errors.

This module provides the building blocks used by every game variant.
"""

from grid_games.core.types import (
    EMPTY,
    PLAYER_A,
    PLAYER_B,
    PLAYERS,
    NO_WIN,
    Position,
    Variant,
    WinResult,
    InProgress,
    Won,
    Draw,
    Status,
    Move,
    HistoryEntry,
    MoveListItem,
)
from grid_games.core.errors import (
    MoveError,
    OutOfBounds,
    CellOccupied,
    GameAlreadyDecided,
    ColumnFullError,
    IndexOutOfRange,
)

__all__ = [
    # Constants
    "EMPTY",
    "PLAYER_A",
    "PLAYER_B",
    "PLAYERS",
    "NO_WIN",
    # Types
    "Position",
    "Variant",
    "WinResult",
    "InProgress",
    "Won",
    "Draw",
    "Status",
    "Move",
    "HistoryEntry",
    "MoveListItem",
    # Errors
    "MoveError",
    "OutOfBounds",
    "CellOccupied",
    "GameAlreadyDecided",
    "ColumnFullError",
    "IndexOutOfRange",
]
