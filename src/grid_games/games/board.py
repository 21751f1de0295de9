"""
Board - immutable grid of cells.

Backed by a read-only int8 array so a produced board can never be edited in
place; every move yields a new Board.
"""

from __future__ import annotations

from typing import List, Tuple, Union

import numpy as np

from grid_games.core.types import EMPTY, Position


class Board:
    """
    Immutable game board.

    Cells use the int8 encoding from ``grid_games.core.types``:
        0 = empty
        1 = player A
        2 = player B

    Positions are flat row-major indices (``row * cols + col``).
    """
    __slots__ = ('cells',)

    def __init__(self, cells: np.ndarray):
        cells = np.array(cells, dtype=np.int8)
        if cells.ndim != 2:
            raise ValueError(f"Board must be 2-D, got shape {cells.shape}")
        cells.flags.writeable = False
        self.cells = cells

    @classmethod
    def empty(cls, rows: int, cols: int) -> "Board":
        return cls(np.zeros((rows, cols), dtype=np.int8))

    @classmethod
    def from_flat(cls, values, rows: int, cols: int) -> "Board":
        """Build a board from a flat row-major sequence of cell values."""
        return cls(np.asarray(values, dtype=np.int8).reshape(rows, cols))

    # ─── Geometry ────────────────────────────────────────────────────────────

    @property
    def shape(self) -> Tuple[int, int]:
        return self.cells.shape

    @property
    def rows(self) -> int:
        return self.cells.shape[0]

    @property
    def cols(self) -> int:
        return self.cells.shape[1]

    @property
    def size(self) -> int:
        return self.cells.size

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def index_of(self, row: int, col: int) -> Position:
        return row * self.cols + col

    def coords(self, index: Position) -> Tuple[int, int]:
        return divmod(index, self.cols)

    # ─── Contents ────────────────────────────────────────────────────────────

    def __getitem__(self, key: Union[int, Tuple[int, int]]) -> int:
        if isinstance(key, tuple):
            return int(self.cells[key])
        return int(self.cells.flat[key])

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self.cells))

    def is_full(self) -> bool:
        return not np.any(self.cells == EMPTY)

    def with_cell(self, row: int, col: int, value: int) -> "Board":
        """Return a copy of this board with one cell replaced."""
        cells = self.cells.copy()
        cells[row, col] = value
        return Board(cells)

    def to_list(self) -> List[List[int]]:
        return self.cells.tolist()

    # ─── Value semantics ─────────────────────────────────────────────────────

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self.cells, other.cells))

    def __hash__(self) -> int:
        return hash((self.shape, self.cells.tobytes()))

    def __repr__(self) -> str:
        return f"Board({self.to_list()!r})"
