"""
Core types and constants.

This module contains the value types shared by every game variant:
- Cell encoding (int8 values stored on the board)
- Variant: which game a session is playing
- WinResult / Status kinds: derived outcomes
- Move, HistoryEntry, MoveListItem: what the history keeps and shows
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, NamedTuple, Optional, Tuple, Union

if TYPE_CHECKING:
    from grid_games.games.board import Board


# ─── Cell encoding ────────────────────────────────────────────────────────────
#
# Boards are int8 arrays:
#     0 = empty
#     1 = player A (always moves first)
#     2 = player B

EMPTY = 0
PLAYER_A = 1
PLAYER_B = 2

PLAYERS = (PLAYER_A, PLAYER_B)

# Flat row-major index into a board
Position = int


class Variant(Enum):
    TIC_TAC_TOE = "tic_tac_toe"
    CONNECT_FOUR = "connect_four"


# ─── Outcomes ─────────────────────────────────────────────────────────────────

class WinResult(NamedTuple):
    """Winner (or None) and the cells that make up the winning run."""

    winner: Optional[int] = None
    winning_cells: Tuple[Position, ...] = ()

    @property
    def decided(self) -> bool:
        return self.winner is not None


NO_WIN = WinResult()


class InProgress(NamedTuple):
    next_player: int


class Won(NamedTuple):
    player: int
    winning_cells: Tuple[Position, ...]


class Draw(NamedTuple):
    pass


Status = Union[InProgress, Won, Draw]


# ─── History records ──────────────────────────────────────────────────────────

class Move(NamedTuple):
    """A single applied move. Created once, never mutated."""

    player: int
    position: Position
    board: "Board"


class HistoryEntry(NamedTuple):
    """
    One snapshot in the game timeline.

    ``move`` is None for the initial empty board. ``result`` is evaluated
    once when the entry is committed and stored here.
    """

    board: "Board"
    move: Optional[Move] = None
    result: WinResult = NO_WIN

    @property
    def position(self) -> Optional[Position]:
        return None if self.move is None else self.move.position


class MoveListItem(NamedTuple):
    """Display row for one history entry."""

    index: int
    description: str
    player: Optional[int]
    row: Optional[int]  # 1-based
    col: Optional[int]  # 1-based
    is_current: bool
    label: str = ""
