"""
GameBase - abstract base class for all grid game variants.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Iterable, Tuple

from grid_games.core.types import Variant, WinResult
from grid_games.games.board import Board
from grid_games.games.win_detection import LineWinDetector, WinDetector

# Full-board scanners, one per run length
_SCANNERS: Dict[int, LineWinDetector] = {}


class GameBase(ABC):
    """
    Per-variant rules: board dimensions, how raw input maps to a cell, and
    which win detector applies.

    IMPORTANT ARCHITECTURE NOTE:
    -----------------------------
    - Variants hold NO game state. Boards and history live in HistoryState.
    - Variants only translate input into target coordinates; placing the
      piece is always done by game_rules.apply_move.
    """

    ROWS: int
    COLS: int
    WIN_LENGTH: int

    @abstractmethod
    def game_id(self) -> str:
        """Return a stable identifier (e.g. 'tic_tac_toe')."""
        pass

    @abstractmethod
    def variant(self) -> Variant:
        pass

    def new_board(self) -> Board:
        """Return the initial empty board."""
        return Board.empty(self.ROWS, self.COLS)

    @abstractmethod
    def detector(self) -> WinDetector:
        """Return the win detector paired with this variant."""
        pass

    def scan(self, board: Board) -> WinResult:
        """
        Check every line of a board that did not come from a move.

        Used for preset starting positions, where there is no last move to
        scan from.
        """
        if self.WIN_LENGTH not in _SCANNERS:
            _SCANNERS[self.WIN_LENGTH] = LineWinDetector(length=self.WIN_LENGTH)
        return _SCANNERS[self.WIN_LENGTH].evaluate(board)

    @abstractmethod
    def resolve_input(self, board: Board, move_input: int) -> Tuple[int, int]:
        """
        Map raw UI input to the (row, col) the piece will occupy.

        Example (TicTacToe): cell index 4 -> (1, 1)
        Example (ConnectFour): column 3 -> lowest empty row in column 3
        """
        pass

    @abstractmethod
    def get_cell_strings(self) -> dict[int, str]:
        """
        Return a dictionary of [int -> str] where each cell value maps to its display string
            (e.g. {0: " ", 1: "X", 2: "O"} for tic_tac_toe)
        """
        pass

    def player_name(self, player: int) -> str:
        return self.get_cell_strings()[player].strip()

    @abstractmethod
    def state_string(self, board: Board, winning_cells: Iterable[int] = ()) -> str:
        """Pretty string representation of a board."""
        pass
