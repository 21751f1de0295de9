"""
Public API for playing grid games.

Usage:
    from grid_games import new_game, make_move, status, Variant

    state = new_game(Variant.TIC_TAC_TOE)
    for cell in (0, 3, 1, 4, 2):
        make_move(state, cell)
    status(state)   # Won(player=1, winning_cells=(0, 1, 2))
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Union

from grid_games.core.errors import GameAlreadyDecided, MoveError
from grid_games.core.types import Draw, InProgress, MoveListItem, Status, Variant, Won
from grid_games.games.board import Board
from grid_games.games.game_rules import apply_move
from grid_games.history.history import HistoryState
from grid_games.history.move_list import history_list as _history_list
from grid_games.utils.factory import create_game

logger = logging.getLogger(__name__)


# ─── Engine call surface ─────────────────────────────────────────────────────

def new_game(variant: Union[Variant, str]) -> HistoryState:
    """Start a fresh session. Any previous state is simply dropped."""
    return HistoryState(create_game(variant))


def make_move(state: HistoryState, move_input: int) -> HistoryState:
    """
    Apply one move for the player whose turn it is.

    ``move_input`` is a cell index (tic-tac-toe) or a column index
    (Connect Four). Gravity, validation, win evaluation and the history
    commit happen in that order; any failure leaves ``state`` unchanged.

    Raises:
        GameAlreadyDecided, OutOfBounds, CellOccupied, ColumnFullError
    """
    result = state.current_result()
    if result.decided:
        raise GameAlreadyDecided(result.winner)

    board = state.current_board()
    player = state.current_player()
    target = state.game.resolve_input(board, move_input)

    next_board = apply_move(board, target, player)
    result = state.game.detector().evaluate(next_board, target, player)
    state.commit_move(next_board, next_board.index_of(*target), result)
    return state


def time_travel(state: HistoryState, index: int) -> HistoryState:
    """
    Show the snapshot at ``index``.

    Raises:
        IndexOutOfRange
    """
    state.jump_to(index)
    return state


def board(state: HistoryState) -> Board:
    return state.current_board()


def status(state: HistoryState) -> Status:
    result = state.current_result()
    if result.decided:
        return Won(result.winner, result.winning_cells)
    if state.is_draw():
        return Draw()
    return InProgress(state.current_player())


def history_list(state: HistoryState, ascending: bool = True) -> List[MoveListItem]:
    return _history_list(state, ascending=ascending)


# ─── Terminal session ────────────────────────────────────────────────────────

HELP = (
    "Commands: <number> play a cell (1-9) or column (1-7) | j N jump to move N | "
    "o toggle move order | n new game | q quit"
)


def status_line(state: HistoryState) -> str:
    s = status(state)
    if isinstance(s, Won):
        return f"Winner: {state.game.player_name(s.player)}"
    if isinstance(s, Draw):
        return "Draw!"
    return f"Next player: {state.game.player_name(s.next_player)}"


def render(state: HistoryState, ascending: bool = True) -> str:
    winning = state.current_result().winning_cells
    lines = [state.game.state_string(state.current_board(), winning), status_line(state), ""]
    for item in history_list(state, ascending=ascending):
        marker = ">" if item.is_current else " "
        lines.append(f"{marker} {item.index:2d}. {item.description} {item.label}".rstrip())
    return "\n".join(lines)


def _handle_command(state: HistoryState, raw: str, ascending: bool):
    """Run one command. Returns (state, ascending, quit)."""
    parts = raw.split()
    cmd = parts[0].lower()

    if cmd in ("q", "quit"):
        return state, ascending, True
    if cmd in ("n", "new"):
        logger.info("New %s game", state.game.game_id())
        return new_game(state.game.variant()), ascending, False
    if cmd in ("o", "order"):
        return state, not ascending, False
    if cmd in ("j", "jump"):
        if len(parts) != 2:
            raise ValueError("Usage: j N")
        time_travel(state, int(parts[1]))
        logger.debug("Jumped to move %d", state.cursor)
        return state, ascending, False

    # Board input is 1-based for humans
    make_move(state, int(cmd) - 1)
    logger.debug("Move %d: %s", state.cursor, state.current_entry().move)
    return state, ascending, False


def play_session(
    game_name: Union[Variant, str] = "tic_tac_toe",
    ascending: bool = True,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> HistoryState:
    """
    Interactive loop: read commands, apply them, redraw.

    Rejected input is reported and ignored; the session carries on.
    Returns the final state when the player quits or input runs out.
    """
    state = new_game(game_name)
    logger.info("Starting %s", state.game.game_id())
    output_fn(HELP)
    output_fn(render(state, ascending))
    # Cursor of the last jump, shown until the timeline changes again
    restarted_at: Optional[int] = None

    try:
        while True:
            try:
                raw = input_fn("> ").strip()
            except EOFError:
                break
            if not raw:
                continue

            try:
                state, ascending, done = _handle_command(state, raw, ascending)
            except (MoveError, ValueError) as e:
                logger.info("Rejected input %r: %s", raw, e)
                output_fn(f"Invalid input: {e}")
                continue

            if done:
                break
            cmd = raw.split()[0].lower()
            if cmd in ("j", "jump"):
                restarted_at = state.cursor
            elif cmd not in ("o", "order"):
                restarted_at = None

            text = render(state, ascending)
            if restarted_at is not None:
                text += f"\n(restarted at move #{restarted_at})"
            output_fn(text)

    except KeyboardInterrupt:
        output_fn("\nInterrupted - shutting down...")
    except Exception:
        logger.exception("Fatal error in game loop")
        raise

    return state


__all__ = [
    "new_game",
    "make_move",
    "time_travel",
    "board",
    "status",
    "history_list",
    "status_line",
    "render",
    "play_session",
]
