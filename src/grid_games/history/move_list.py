"""
Move list - display rows for a HistoryState.

Pure presentation: nothing here touches the state.
"""

from __future__ import annotations

from typing import List

from grid_games.core.types import MoveListItem
from grid_games.history.history import HistoryState


def describe(index: int, cursor: int) -> str:
    if index == cursor:
        return "You are at game start" if index == 0 else f"You are at move #{index}"
    return "Go to game start" if index == 0 else f"Go to move #{index}"


def history_list(state: HistoryState, ascending: bool = True) -> List[MoveListItem]:
    """
    Build one MoveListItem per history entry.

    Args:
        state: Session to describe.
        ascending: Oldest first when True, newest first otherwise.
    """
    items = []
    for index, entry in enumerate(state.entries):
        move = entry.move
        if move is None:
            items.append(MoveListItem(index, describe(index, state.cursor), None, None, None,
                                      index == state.cursor))
            continue

        r, c = entry.board.coords(move.position)
        name = state.game.player_name(move.player)
        items.append(MoveListItem(
            index=index,
            description=describe(index, state.cursor),
            player=move.player,
            row=r + 1,
            col=c + 1,
            is_current=index == state.cursor,
            label=f"({name}: Row {r + 1}, Col {c + 1})",
        ))

    if not ascending:
        items.reverse()
    return items
