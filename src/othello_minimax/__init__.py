"""
Othello move selection by minimax search with alpha-beta pruning.

Packages:
- game: Othello rules (legal moves, captures, passes, terminal detection)
- engine: Positional table, move ordering, alpha-beta search
- players: decide_move strategies (minimax, random)
"""

__version__ = "0.1"
