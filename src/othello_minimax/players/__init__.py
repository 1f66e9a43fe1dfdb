# Player strategies

from .player import Player
from .minimax_player import MinimaxPlayer
from .random_player import RandomPlayer

__all__ = ['Player', 'MinimaxPlayer', 'RandomPlayer']
