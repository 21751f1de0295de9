"""
History module - game timeline with time travel.
"""

from grid_games.history.history import HistoryState, HistoryManager
from grid_games.history.move_list import history_list

__all__ = [
    "HistoryState",
    "HistoryManager",
    "history_list",
]
