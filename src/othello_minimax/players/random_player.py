"""
Uniform random opponent for Othello.
Baseline for matches against the search engine.
"""
import numpy as np


class RandomPlayer:
    """
    Picks uniformly among the legal moves.
    """

    def __init__(self, game, seed=None):
        self.game = game
        self.rng = np.random.default_rng(seed)

    def __repr__(self):
        return "RandomPlayer()"

    def decide_move(self, state):
        """
        Get a random legal move for the player to move.

        Args:
            state: Current game state

        Returns:
            Square chosen uniformly from game.legal_moves(state)
        """
        legal_moves = self.game.legal_moves(state)

        if len(legal_moves) == 0:
            raise ValueError("No valid moves available")

        return legal_moves[self.rng.integers(len(legal_moves))]
