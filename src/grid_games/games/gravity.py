"""
Gravity - resolve a dropped column to the row the piece settles in.
"""

from __future__ import annotations

import numpy as np

from grid_games.core.errors import ColumnFullError, OutOfBounds
from grid_games.core.types import EMPTY
from grid_games.games.board import Board


def resolve_column(board: Board, column: int) -> int:
    """
    Return the lowest empty row in ``column``.

    Rows are scanned bottom-up (highest row index first), so a piece always
    lands on the lowest open cell.

    Raises:
        OutOfBounds: column is not on the board.
        ColumnFullError: column has no empty cell left.
    """
    if not 0 <= column < board.cols:
        raise OutOfBounds(column, board.shape)

    empty_rows = np.flatnonzero(board.cells[:, column] == EMPTY)
    if empty_rows.size == 0:
        raise ColumnFullError(column)
    return int(empty_rows[-1])
