from othello_minimax.config_othello import SEARCH_CONFIG
from othello_minimax.engine.alphabeta import AlphaBetaEngine


class MinimaxPlayer:
    """
    Plays the alpha-beta engine's choice at a fixed depth.
    """

    def __init__(self, game, depth_limit=SEARCH_CONFIG['depth_limit'], engine=None):
        if depth_limit < 0:
            raise ValueError(f"depth_limit must be >= 0, got {depth_limit}")
        self.game = game
        self.depth_limit = depth_limit
        self.engine = engine if engine is not None else AlphaBetaEngine(game)

    def __repr__(self):
        return f"MinimaxPlayer(depth={self.depth_limit})"

    def decide_move(self, state):
        return self.engine.choose_move(state, self.depth_limit)
