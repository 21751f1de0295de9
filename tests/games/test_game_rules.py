"""
Tests for grid_games.games.game_rules

Tests move validation and winning-line enumeration.
"""

import random

import numpy as np
import pytest

from grid_games.core.errors import CellOccupied, OutOfBounds
from grid_games.core.types import EMPTY, PLAYER_A, PLAYER_B
from grid_games.games.board import Board
from grid_games.games.game_rules import (
    apply_move, in_bounds, resolve_position, winning_lines,
)


class TestApplyMove:
    """apply_move tests."""

    def test_places_player(self, empty_ttt_board: Board):
        b = apply_move(empty_ttt_board, 4, PLAYER_A)
        assert b[4] == PLAYER_A

    def test_accepts_row_col(self, empty_c4_board: Board):
        b = apply_move(empty_c4_board, (5, 3), PLAYER_B)
        assert b[5, 3] == PLAYER_B

    def test_only_target_changes(self, empty_ttt_board: Board):
        before = apply_move(empty_ttt_board, 0, PLAYER_A)
        after = apply_move(before, 8, PLAYER_B)
        diff = np.argwhere(before.cells != after.cells)
        assert diff.tolist() == [[2, 2]]

    def test_input_board_untouched(self, empty_ttt_board: Board):
        apply_move(empty_ttt_board, 0, PLAYER_A)
        assert empty_ttt_board.occupied_count() == 0

    def test_occupied_raises_and_leaves_board(self, empty_ttt_board: Board):
        """Occupied target raises CellOccupied; board is unchanged."""
        b = apply_move(empty_ttt_board, 0, PLAYER_A)
        snapshot = b.to_list()
        with pytest.raises(CellOccupied) as exc:
            apply_move(b, 0, PLAYER_B)
        assert exc.value.position == 0
        assert b.to_list() == snapshot

    @pytest.mark.parametrize("position", [-1, 9, 100, (3, 0), (0, -1)])
    def test_out_of_bounds(self, empty_ttt_board: Board, position):
        with pytest.raises(OutOfBounds):
            apply_move(empty_ttt_board, position, PLAYER_A)

    def test_non_integer_position(self, empty_ttt_board: Board):
        with pytest.raises(TypeError):
            apply_move(empty_ttt_board, "4", PLAYER_A)

    def test_unknown_player(self, empty_ttt_board: Board):
        with pytest.raises(ValueError):
            apply_move(empty_ttt_board, 0, EMPTY)

    def test_occupied_count_tracks_moves(self, empty_c4_board: Board):
        """Occupied cells equal moves applied for any distinct positions."""
        rng = random.Random(7)
        positions = rng.sample(range(42), 20)
        b = empty_c4_board
        for i, p in enumerate(positions):
            b = apply_move(b, p, PLAYER_A if i % 2 == 0 else PLAYER_B)
            assert b.occupied_count() == i + 1


class TestResolvePosition:
    def test_flat(self, empty_ttt_board: Board):
        assert resolve_position(empty_ttt_board, 7) == (2, 1)

    def test_numpy_int(self, empty_ttt_board: Board):
        assert resolve_position(empty_ttt_board, np.int64(3)) == (1, 0)


class TestHelpers:
    def test_in_bounds(self, empty_ttt_board: Board):
        assert in_bounds(empty_ttt_board, 0, 0)
        assert in_bounds(empty_ttt_board, 2, 2)
        assert not in_bounds(empty_ttt_board, -1, 0)
        assert not in_bounds(empty_ttt_board, 0, 3)


class TestWinningLines:
    """winning_lines enumeration."""

    def test_ttt_lines_in_order(self):
        """3x3 gives rows, columns, then both diagonals."""
        assert winning_lines(3, 3, 3).tolist() == [
            [0, 1, 2], [3, 4, 5], [6, 7, 8],
            [0, 3, 6], [1, 4, 7], [2, 5, 8],
            [0, 4, 8], [2, 4, 6],
        ]

    def test_c4_line_count(self):
        """6x7 connect-4 has 69 lines (24 + 21 + 12 + 12)."""
        assert winning_lines(6, 7, 4).shape == (69, 4)

    def test_too_long(self):
        assert winning_lines(3, 3, 4).shape == (0, 4)
