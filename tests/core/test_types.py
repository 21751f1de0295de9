"""
Tests for grid_games.core.types

Tests cell encoding and the outcome/history value types.
"""

import pytest

from grid_games.core.types import (
    EMPTY, PLAYER_A, PLAYER_B, PLAYERS, NO_WIN,
    HistoryEntry, Move, Variant, WinResult, Won,
)
from grid_games.games.board import Board


class TestConstants:
    """Tests for module constants."""

    def test_cell_encoding(self):
        """Empty is zero and players are distinct non-zero values."""
        assert EMPTY == 0
        assert PLAYER_A != PLAYER_B
        assert EMPTY not in PLAYERS

    def test_variant_names(self):
        assert Variant("tic_tac_toe") is Variant.TIC_TAC_TOE
        assert Variant("connect_four") is Variant.CONNECT_FOUR


class TestWinResult:
    """WinResult behaviour."""

    def test_default_is_undecided(self):
        assert NO_WIN.winner is None
        assert NO_WIN.winning_cells == ()
        assert NO_WIN.decided is False

    def test_decided(self):
        r = WinResult(PLAYER_A, (0, 1, 2))
        assert r.decided is True

    def test_immutable(self):
        """WinResult is immutable (NamedTuple)."""
        r = WinResult(PLAYER_A, (0, 1, 2))
        with pytest.raises(AttributeError):
            r.winner = PLAYER_B

    def test_won_equality(self):
        assert Won(PLAYER_A, (0, 1, 2)) == Won(PLAYER_A, (0, 1, 2))
        assert Won(PLAYER_A, (0, 1, 2)) != Won(PLAYER_B, (0, 1, 2))


class TestHistoryEntry:
    """HistoryEntry behaviour."""

    def test_initial_entry_has_no_position(self):
        entry = HistoryEntry(Board.empty(3, 3))
        assert entry.move is None
        assert entry.position is None
        assert entry.result == NO_WIN

    def test_position_comes_from_move(self):
        board = Board.empty(3, 3).with_cell(1, 1, PLAYER_A)
        entry = HistoryEntry(board, Move(PLAYER_A, 4, board))
        assert entry.position == 4
        assert entry.move.board is board
