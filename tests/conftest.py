"""
Shared test fixtures for grid_games tests.

Design principles:
- Variant-agnostic fixtures where possible
- Boards built directly from flat cell lists when a position can't be
  reached by legal alternating play
- Minimal, focused fixtures
"""

from typing import List

import pytest

from grid_games.api import make_move, new_game
from grid_games.core.types import EMPTY, PLAYER_A, PLAYER_B, Variant
from grid_games.games.board import Board
from grid_games.games.connect_four import ConnectFour
from grid_games.games.tic_tac_toe import TicTacToe
from grid_games.history.history import HistoryState

X, O, _ = PLAYER_A, PLAYER_B, EMPTY


# =============================================================================
# Board Fixtures
# =============================================================================

@pytest.fixture
def empty_ttt_board() -> Board:
    return Board.empty(3, 3)


@pytest.fixture
def empty_c4_board() -> Board:
    return Board.empty(6, 7)


@pytest.fixture
def drawn_ttt_board() -> Board:
    """X O X / X X O / O X O - full, no line."""
    return Board.from_flat([X, O, X,
                            X, X, O,
                            O, X, O], 3, 3)


# =============================================================================
# Game Fixtures
# =============================================================================

@pytest.fixture
def ttt() -> TicTacToe:
    return TicTacToe()


@pytest.fixture
def c4() -> ConnectFour:
    return ConnectFour()


@pytest.fixture(params=[Variant.TIC_TAC_TOE, Variant.CONNECT_FOUR])
def any_state(request) -> HistoryState:
    """Fresh session for each variant."""
    return new_game(request.param)


# =============================================================================
# Session Fixtures
# =============================================================================

def play(state: HistoryState, moves: List[int]) -> HistoryState:
    for m in moves:
        make_move(state, m)
    return state


@pytest.fixture
def play_moves():
    """Apply a list of inputs to a session, in order."""
    return play


@pytest.fixture
def ttt_state() -> HistoryState:
    return new_game(Variant.TIC_TAC_TOE)


@pytest.fixture
def c4_state() -> HistoryState:
    return new_game(Variant.CONNECT_FOUR)


@pytest.fixture
def ttt_four_moves(ttt_state: HistoryState) -> HistoryState:
    """X:0, O:4, X:8, O:2 - no winner, cursor at 4."""
    return play(ttt_state, [0, 4, 8, 2])
