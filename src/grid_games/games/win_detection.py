"""
Win detection strategies.

Two implementations of one interface:
    LineWinDetector        - checks every precomputed line (small boards)
    DirectionalWinDetector - walks the four axes through the last piece
                             (large boards, evaluated once per move)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Optional, Tuple

import numpy as np

from grid_games.core.types import EMPTY, NO_WIN, WinResult
from grid_games.games.board import Board
from grid_games.games.game_rules import LINE_DIRECTIONS, winning_lines


class WinDetector(ABC):
    """Decides whether a board holds a winning run."""

    @abstractmethod
    def evaluate(
        self,
        board: Board,
        last_move: Optional[Tuple[int, int]] = None,
        player: Optional[int] = None,
    ) -> WinResult:
        """
        Return the WinResult for ``board``.

        Args:
            board: Board to inspect.
            last_move: (row, col) of the piece just placed, if known.
            player: Player who placed it.
        """
        pass


class LineWinDetector(WinDetector):
    """
    Exhaustive line matching.

    All winning lines are enumerated up front; the first complete line in
    enumeration order (rows, columns, diagonals) is reported.
    """

    def __init__(self, length: int = 3):
        self.length = length
        self._lines: Dict[Tuple[int, int], np.ndarray] = {}

    def lines_for(self, rows: int, cols: int) -> np.ndarray:
        key = (rows, cols)
        if key not in self._lines:
            self._lines[key] = winning_lines(rows, cols, self.length)
        return self._lines[key]

    def evaluate(self, board, last_move=None, player=None) -> WinResult:
        lines = self.lines_for(*board.shape)
        if len(lines) == 0:
            return NO_WIN

        values = board.cells.ravel()[lines]
        complete = (values[:, 0] != EMPTY) & np.all(values == values[:, :1], axis=1)
        hits = np.flatnonzero(complete)
        if hits.size == 0:
            return NO_WIN

        first = hits[0]
        return WinResult(int(values[first, 0]), tuple(int(i) for i in lines[first]))


class DirectionalWinDetector(WinDetector):
    """
    Incremental directional scan.

    Only lines through the piece just placed can have become winning, so
    each axis is walked outward from ``last_move`` in both directions. The
    whole connected run is reported, which may exceed ``length`` cells.
    """

    def __init__(self, length: int = 4):
        self.length = length

    def evaluate(self, board, last_move=None, player=None) -> WinResult:
        if last_move is None:
            raise ValueError("DirectionalWinDetector needs the last move")
        row, col = last_move
        if player is None:
            player = board[row, col]
        if player == EMPTY:
            return NO_WIN

        for dr, dc in LINE_DIRECTIONS:
            run = [board.index_of(row, col)]
            for sign in (1, -1):
                r, c = row + sign * dr, col + sign * dc
                while board.in_bounds(r, c) and board[r, c] == player:
                    run.append(board.index_of(r, c))
                    r += sign * dr
                    c += sign * dc

            if len(run) >= self.length:
                return WinResult(int(player), tuple(sorted(run)))

        return NO_WIN
