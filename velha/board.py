"""Classification of tic-tac-toe boards.

A board is three rows of three cells. A cell holds ``0`` when empty,
``1`` for an X mark and ``2`` for an O mark.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from enum import IntEnum

EMPTY = 0
X = 1
O = 2

_SIZE = 3

Board = Sequence[Sequence[int]]
_Grid = tuple[tuple[int, ...], ...]


class Outcome(IntEnum):
    """State of a board, as returned by :func:`check_game`."""

    IMPOSSIBLE = -2
    OPEN = -1
    DRAW = 0
    X_WINS = 1
    O_WINS = 2


def _grid(board: Board) -> _Grid:
    """Return the board as a tuple of row tuples, checking its shape."""
    rows = tuple(tuple(row) for row in board)
    if len(rows) != _SIZE or any(len(row) != _SIZE for row in rows):
        raise ValueError("a board must have 3 rows of 3 cells")
    return rows


def _lines(grid: _Grid) -> Iterator[tuple[int, ...]]:
    """Yield every winning line: both diagonals, then rows and columns."""
    yield tuple(grid[i][i] for i in range(_SIZE))
    yield tuple(grid[i][_SIZE - 1 - i] for i in range(_SIZE))
    yield from grid
    yield from zip(*grid)


def _wins(grid: _Grid, mark: int) -> bool:
    return any(all(cell == mark for cell in line) for line in _lines(grid))


def x_wins(board: Board) -> bool:
    """Return True if X holds a full row, column or diagonal."""
    return _wins(_grid(board), X)


def o_wins(board: Board) -> bool:
    """Return True if O holds a full row, column or diagonal."""
    return _wins(_grid(board), O)


def is_open(board: Board) -> bool:
    """Return True if at least one cell is still empty."""
    return any(cell == EMPTY for row in _grid(board) for cell in row)


def is_impossible(board: Board) -> bool:
    """Return True if the board cannot arise from a real game.

    That is the case when both players have a winning line, or when one
    player has made more than one move more than the other.
    """
    grid = _grid(board)
    if _wins(grid, O) and _wins(grid, X):
        return True
    cells = [cell for row in grid for cell in row]
    x_count = cells.count(X)
    o_count = cells.count(O)
    return abs(x_count - o_count) > 1


def check_game(board: Board) -> Outcome:
    """Classify a board as impossible, won by X or O, still open, or drawn."""
    grid = _grid(board)
    if is_impossible(grid):
        return Outcome.IMPOSSIBLE
    if _wins(grid, X):
        return Outcome.X_WINS
    if _wins(grid, O):
        return Outcome.O_WINS
    if is_open(grid):
        return Outcome.OPEN
    return Outcome.DRAW