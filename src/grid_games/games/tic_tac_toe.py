"""
TicTacToe rules.

Uses int8 board:
    0 = empty
    1 = player A (X)
    2 = player B (O)

Input is a flat cell index 0-8.
"""

from __future__ import annotations

from grid_games.core.types import Variant
from grid_games.games.game_base import GameBase
from grid_games.games.game_rules import resolve_position
from grid_games.games.win_detection import LineWinDetector

# Cell strings: each cell value maps to its display string
CELL_STRINGS = {0: " ", 1: "X", 2: "O"}

# Shared across instances; lines are cached per board shape
_DETECTOR = LineWinDetector(length=3)


class TicTacToe(GameBase):
    """3x3 tic-tac-toe with exhaustive line matching."""

    ROWS = 3
    COLS = 3
    WIN_LENGTH = 3

    def game_id(self) -> str:
        return "tic_tac_toe"

    def variant(self) -> Variant:
        return Variant.TIC_TAC_TOE

    def detector(self) -> LineWinDetector:
        return _DETECTOR

    def resolve_input(self, board, move_input):
        return resolve_position(board, move_input)

    def get_cell_strings(self) -> dict[int, str]:
        return CELL_STRINGS

    def state_string(self, board, winning_cells=()) -> str:
        winning = set(winning_cells)

        def cell(i: int) -> str:
            s = CELL_STRINGS[board[i]]
            return f"[{s}]" if i in winning else f" {s} "

        lines = ["╭───┬───┬───╮"]
        for r in range(3):
            row = "│" + "│".join(cell(board.index_of(r, c)) for c in range(3)) + "│"
            lines.append(row)
            if r < 2:
                lines.append("├───┼───┼───┤")
        lines.append("╰───┴───┴───╯")
        return "\n".join(lines)
