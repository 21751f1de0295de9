"""
HistoryState - linear game timeline with a movable cursor.

The timeline is a list of HistoryEntry snapshots, index 0 being the empty
board. ``cursor`` selects the snapshot currently shown. Committing a move
after travelling back discards every entry past the cursor: there is one
timeline, rewritten destructively, never a tree.

Invariant: 0 <= cursor < len(entries)
"""

from __future__ import annotations

import operator
from typing import List, Optional, Tuple

from grid_games.core.errors import IndexOutOfRange
from grid_games.core.types import (
    PLAYER_A,
    PLAYER_B,
    HistoryEntry,
    Move,
    Position,
    WinResult,
)
from grid_games.games.board import Board
from grid_games.games.game_base import GameBase


class HistoryState:
    """
    Game session state: the variant being played, its snapshots and cursor.

    Only ``commit_move`` and ``jump_to`` mutate it.
    """
    __slots__ = ('game', '_entries', '_cursor')

    def __init__(self, game: GameBase, initial_board: Optional[Board] = None):
        if initial_board is None:
            start = HistoryEntry(game.new_board())
        else:
            # A preset position may already be decided
            start = HistoryEntry(initial_board, result=game.scan(initial_board))
        self.game = game
        self._entries: List[HistoryEntry] = [start]
        self._cursor = 0

    # ─── Read-only views ─────────────────────────────────────────────────────

    @property
    def entries(self) -> Tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    @property
    def cursor(self) -> int:
        return self._cursor

    def __len__(self) -> int:
        return len(self._entries)

    def current_entry(self) -> HistoryEntry:
        return self._entries[self._cursor]

    def current_board(self) -> Board:
        return self._entries[self._cursor].board

    def current_result(self) -> WinResult:
        return self._entries[self._cursor].result

    def current_player(self) -> int:
        """Player to move: A on even cursor, B on odd (A always opens)."""
        return PLAYER_A if self._cursor % 2 == 0 else PLAYER_B

    def is_draw(self) -> bool:
        entry = self._entries[self._cursor]
        return entry.board.is_full() and not entry.result.decided

    # ─── Mutations ───────────────────────────────────────────────────────────

    def commit_move(
        self,
        new_board: Board,
        position: Position,
        result: Optional[WinResult] = None,
    ) -> HistoryEntry:
        """
        Append a snapshot after the cursor and move the cursor onto it.

        Entries past the cursor are discarded first. When ``result`` is not
        supplied it is evaluated here, once, with the variant's detector.
        """
        player = self.current_player()
        if result is None:
            result = self.game.detector().evaluate(
                new_board, new_board.coords(position), player
            )

        entry = HistoryEntry(new_board, Move(player, position, new_board), result)
        del self._entries[self._cursor + 1:]
        self._entries.append(entry)
        self._cursor = len(self._entries) - 1
        return entry

    def jump_to(self, index: int) -> None:
        """
        Move the cursor to ``index``. Entries are left untouched.

        Raises:
            IndexOutOfRange: index is not in [0, len(entries)).
        """
        index = operator.index(index)
        if not 0 <= index < len(self._entries):
            raise IndexOutOfRange(index, len(self._entries))
        self._cursor = index

    def __repr__(self) -> str:
        return (
            f"HistoryState(game={self.game.game_id()!r}, "
            f"entries={len(self._entries)}, cursor={self._cursor})"
        )


# The timeline manager and the session state are the same object
HistoryManager = HistoryState
