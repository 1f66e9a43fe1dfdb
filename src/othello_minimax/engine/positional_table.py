"""
Static positional weights for Othello squares.

Each square falls into exactly one tier, checked in this order:

    corner       the four extreme corners                           +10
    near_corner  edge squares orthogonally next to a corner (C)      -5
    second_ring  row or col in {1, n-2}, n >= 6, minus the four
                 diagonal X-squares                                  -3
    edge         remaining border squares                            +5
    center       everything else, including the X-squares            +1

The table is indexed [row, col] for both construction and lookup.
"""

from enum import Enum

import numpy as np

from othello_minimax.config_othello import POSITIONAL_WEIGHTS


class Tier(Enum):
    CORNER = 'corner'
    NEAR_CORNER = 'near_corner'
    SECOND_RING = 'second_ring'
    EDGE = 'edge'
    CENTER = 'center'

    @property
    def weight(self) -> int:
        return POSITIONAL_WEIGHTS[self.value]


def classify_square(row: int, col: int, n: int) -> Tier:
    """
    Tier of square (row, col) on an n x n board.

    Args:
        row: Row index in [0, n)
        col: Column index in [0, n)
        n: Board size

    Returns:
        The single Tier the square belongs to
    """
    last = n - 1
    on_border_row = row in (0, last)
    on_border_col = col in (0, last)

    if on_border_row and on_border_col:
        return Tier.CORNER

    # C-squares: one step from a corner along an edge
    if (on_border_row and col in (1, last - 1)) or (on_border_col and row in (1, last - 1)):
        return Tier.NEAR_CORNER

    if n >= 6:
        in_ring_row = row in (1, last - 1)
        in_ring_col = col in (1, last - 1)
        is_x_square = in_ring_row and in_ring_col
        if (in_ring_row or in_ring_col) and not is_x_square:
            return Tier.SECOND_RING

    if on_border_row or on_border_col:
        return Tier.EDGE

    return Tier.CENTER


class PositionalValueTable:
    """
    Immutable n x n table of per-square weights.

    Safe to share between searches on boards of the same size.
    """

    def __init__(self, board_size: int):
        if board_size < 4:
            raise ValueError(f"Positional table needs a board size >= 4, got {board_size}")
        self.board_size = board_size

        self.tiers = tuple(
            tuple(classify_square(row, col, board_size) for col in range(board_size))
            for row in range(board_size)
        )
        self.weights = np.array(
            [[tier.weight for tier in tier_row] for tier_row in self.tiers],
            dtype=np.int32,
        )
        self.weights.setflags(write=False)

    @classmethod
    def build(cls, board_size: int) -> 'PositionalValueTable':
        return cls(board_size)

    def __repr__(self):
        return f"PositionalValueTable({self.board_size}x{self.board_size})"

    def _check_bounds(self, square):
        row, col = square
        n = self.board_size
        if not (0 <= row < n and 0 <= col < n):
            raise IndexError(f"Square {tuple(square)} is outside the {n}x{n} table")
        return row, col

    def weight(self, square) -> int:
        """Weight of a Square(row, col)."""
        row, col = self._check_bounds(square)
        return int(self.weights[row, col])

    def tier(self, square) -> Tier:
        row, col = self._check_bounds(square)
        return self.tiers[row][col]

    def positional_score(self, board: np.ndarray, player: int, opponent: int) -> int:
        """
        Signed positional sum: +weight for player's tokens, -weight for opponent's.

        Args:
            board: n x n grid matching this table's size
            player: Perspective player
            opponent: The other player

        Returns:
            Integer sum over occupied squares; empty squares contribute nothing
        """
        if board.shape != self.weights.shape:
            raise ValueError(
                f"Board shape {board.shape} does not match positional table {self.weights.shape}"
            )
        mine = self.weights[board == player].sum()
        theirs = self.weights[board == opponent].sum()
        return int(mine - theirs)


_tables = {}


def get_positional_table(board_size: int) -> PositionalValueTable:
    """
    Get or create the shared table for a board size.

    Args:
        board_size: Board dimension n

    Returns:
        PositionalValueTable instance
    """
    table = _tables.get(board_size)
    if table is None:
        table = PositionalValueTable(board_size)
        _tables[board_size] = table
    return table
