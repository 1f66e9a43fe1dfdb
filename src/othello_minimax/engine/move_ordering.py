"""
Move ordering for alpha-beta search.

Good move ordering is critical for alpha-beta pruning efficiency: searching
strong moves first raises alpha (or lowers beta) early, so more siblings get
cut. Othello moves are ordered by the static positional weight of the target
square, corners first and squares next to corners last.

Ties keep the order in which the game enumerated the moves.
"""

from typing import NamedTuple

from othello_minimax.game.game import Square
from othello_minimax.engine.positional_table import PositionalValueTable


class MoveCandidate(NamedTuple):
    square: Square
    weight: int


def score_moves(moves, table: PositionalValueTable) -> list[MoveCandidate]:
    """Pair each move with its positional weight."""
    return [MoveCandidate(move, table.weight(move)) for move in moves]


def order_moves(moves, table: PositionalValueTable) -> list[Square]:
    """
    Order moves by descending positional weight.

    Args:
        moves: Legal squares in enumeration order
        table: Positional table for the board size

    Returns:
        List of squares, highest weight first (stable on ties)
    """
    candidates = score_moves(moves, table)
    # sorted() stays stable with reverse=True
    candidates = sorted(candidates, key=lambda candidate: candidate.weight, reverse=True)
    return [candidate.square for candidate in candidates]
