"""
Alpha-beta search engine for Othello.

This module contains the engine components:
- Positional value table (static per-square weights)
- Move ordering by positional weight
- Minimax search with alpha-beta pruning and leaf evaluation
"""

from othello_minimax.engine.positional_table import (
    PositionalValueTable,
    Tier,
    classify_square,
    get_positional_table,
)
from othello_minimax.engine.move_ordering import MoveCandidate, order_moves
from othello_minimax.engine.alphabeta import AlphaBetaEngine, SearchResult, SCORE_INF

__all__ = [
    'PositionalValueTable',
    'Tier',
    'classify_square',
    'get_positional_table',
    'MoveCandidate',
    'order_moves',
    'AlphaBetaEngine',
    'SearchResult',
    'SCORE_INF',
]
