"""
Board rules shared by every variant.

Move validation, bounds checks and winning-line enumeration. All functions
are pure: they never modify the board they are given.
"""

from __future__ import annotations

import operator
from typing import Tuple, Union

import numpy as np

from grid_games.core.errors import CellOccupied, OutOfBounds
from grid_games.core.types import EMPTY, PLAYERS
from grid_games.games.board import Board

# Line directions (dr, dc) in reporting order: rows, columns, diagonals
LINE_DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))


def in_bounds(board: Board, r: int, c: int) -> bool:
    """Return True if (r, c) is inside the board."""
    rows, cols = board.shape
    return 0 <= r < rows and 0 <= c < cols


def as_int(value, what: str) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"{what} must be an integer, got {value!r}") from None


def resolve_position(board: Board, position: Union[int, Tuple[int, int]]) -> Tuple[int, int]:
    """
    Turn a flat index or a (row, col) pair into in-bounds coordinates.

    Raises:
        OutOfBounds: position lies outside the grid.
    """
    if isinstance(position, tuple):
        r, c = (as_int(v, "Position") for v in position)
        if not in_bounds(board, r, c):
            raise OutOfBounds((r, c), board.shape)
        return r, c

    index = as_int(position, "Position")
    if not 0 <= index < board.size:
        raise OutOfBounds(index, board.shape)
    return board.coords(index)


def apply_move(board: Board, position: Union[int, Tuple[int, int]], player: int) -> Board:
    """
    Place ``player`` on ``position`` and return the resulting board.

    The input board is left untouched; the result differs from it in
    exactly one cell.

    Raises:
        OutOfBounds: position lies outside the grid.
        CellOccupied: the target cell is not empty.
    """
    if player not in PLAYERS:
        raise ValueError(f"Unknown player: {player!r}")

    r, c = resolve_position(board, position)
    if board[r, c] != EMPTY:
        raise CellOccupied(board.index_of(r, c))

    return board.with_cell(r, c, player)


def winning_lines(rows: int, cols: int, length: int) -> np.ndarray:
    """
    Enumerate every straight run of ``length`` cells as flat indices.

    Order is fixed: all rows, then all columns, then down-right diagonals,
    then down-left diagonals. For 3x3 with length 3 this gives the 8 classic
    lines, rows first.

    Returns:
        int array of shape (num_lines, length)
    """
    lines = []
    for dr, dc in LINE_DIRECTIONS:
        for r in range(rows):
            for c in range(cols):
                end_r = r + dr * (length - 1)
                end_c = c + dc * (length - 1)
                if 0 <= end_r < rows and 0 <= end_c < cols:
                    lines.append([(r + dr * i) * cols + (c + dc * i) for i in range(length)])
    return np.array(lines, dtype=np.intp).reshape(-1, length)
