"""
Connect Four rules.

Uses int8 board (6 rows x 7 columns, row 0 at the top):
    0 = empty
    1 = player A (red)
    2 = player B (yellow)

Input is a 0-based column index; gravity decides the row.
"""

from __future__ import annotations

from grid_games.core.types import Variant
from grid_games.games.game_base import GameBase
from grid_games.games.gravity import resolve_column
from grid_games.games.game_rules import as_int
from grid_games.games.win_detection import DirectionalWinDetector

CELL_STRINGS = {0: " ", 1: "R", 2: "Y"}
PLAYER_NAMES = {1: "red", 2: "yellow"}

CONNECT_N = 4

_DETECTOR = DirectionalWinDetector(length=CONNECT_N)


class ConnectFour(GameBase):
    """6x7 Connect Four with gravity and incremental win detection."""

    ROWS = 6
    COLS = 7
    WIN_LENGTH = CONNECT_N

    def game_id(self) -> str:
        return "connect_four"

    def variant(self) -> Variant:
        return Variant.CONNECT_FOUR

    def detector(self) -> DirectionalWinDetector:
        return _DETECTOR

    def resolve_input(self, board, move_input):
        column = as_int(move_input, "Column")
        return resolve_column(board, column), column

    def get_cell_strings(self) -> dict[int, str]:
        return CELL_STRINGS

    def player_name(self, player: int) -> str:
        return PLAYER_NAMES[player]

    def state_string(self, board, winning_cells=()) -> str:
        winning = set(winning_cells)
        cols = board.cols

        def cell(i: int) -> str:
            s = CELL_STRINGS[board[i]]
            return f"[{s}]" if i in winning else f" {s} "

        lines = ["  " + "   ".join(str(c + 1) for c in range(cols))]
        lines.append("╭" + "┬".join("───" for _ in range(cols)) + "╮")
        for r in range(board.rows):
            lines.append("│" + "│".join(cell(board.index_of(r, c)) for c in range(cols)) + "│")
        lines.append("╰" + "┴".join("───" for _ in range(cols)) + "╯")
        return "\n".join(lines)
