from abc import ABC, abstractmethod
from typing import NamedTuple


class Square(NamedTuple):
    """A board cell addressed by (row, col)."""
    row: int
    col: int


class Game(ABC):
    """
    Abstract Base Class for a two-player board game consumed by the search engine.
    """

    @abstractmethod
    def get_initial_state(self):
        """
        Returns the initial state of the game.
        """
        pass

    @abstractmethod
    def legal_moves(self, state):
        """
        Returns the ordered list of legal squares for the player to move.
        Empty if that player cannot move.
        """
        pass

    @abstractmethod
    def apply_move(self, state, square):
        """
        Returns a new state with the move played. The input state is not modified.
        """
        pass

    @abstractmethod
    def is_terminal(self, state):
        """
        Returns True when neither player can move.
        """
        pass

    @abstractmethod
    def token_counts(self, state):
        """
        Returns (count_for_player_1, count_for_player_2).
        """
        pass

    @abstractmethod
    def player_to_move(self, state):
        """
        Returns the id of the player whose turn it is.
        """
        pass

    @abstractmethod
    def board(self, state):
        """
        Returns the n x n grid of cell values.
        """
        pass

    @abstractmethod
    def get_opponent(self, player):
        """
        Returns the opponent of the given player.
        """
        pass
