"""
Move errors.

Every failure here is an expected, recoverable condition caused by bad input
or a stale UI. Raising one never leaves a game in a modified state.
"""

from __future__ import annotations


class MoveError(Exception):
    """Base class for rejected moves and navigation."""


class OutOfBounds(MoveError, ValueError):
    def __init__(self, position, shape):
        self.position = position
        self.shape = shape
        super().__init__(f"Position {position} is outside the {shape[0]}x{shape[1]} board")


class CellOccupied(MoveError, ValueError):
    def __init__(self, position):
        self.position = position
        super().__init__(f"Cell {position} is occupied")


class GameAlreadyDecided(MoveError, ValueError):
    def __init__(self, winner):
        self.winner = winner
        super().__init__(f"Game already won by player {winner}")


class ColumnFullError(MoveError, ValueError):
    def __init__(self, column):
        self.column = column
        super().__init__(f"Column {column} is full")


class IndexOutOfRange(MoveError, IndexError):
    def __init__(self, index, length):
        self.index = index
        self.length = length
        super().__init__(f"History index {index} out of range (0-{length - 1})")
