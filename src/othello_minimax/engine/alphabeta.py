"""
Alpha-beta minimax search engine for Othello.

Depth-limited minimax with alpha-beta pruning. The root player is the
maximizer for the whole search; every leaf is scored from the root player's
fixed perspective, regardless of whose turn it is at the leaf.

Key features:
- Explicit max/min levels (not negamax) so leaf scores never change sign
- Alpha-beta pruning (cut branches that can't affect final result)
- Move ordering by static positional weight for earlier cutoffs
- Optional plain minimax mode (same values, no pruning) for comparison

Algorithm overview:

    def max_value(state, depth, alpha, beta):
        if depth == 0 or terminal:
            return evaluate(state, root_player)
        value = -infinity
        for move in ordered_moves:
            value = max(value, min_value(apply(state, move), depth - 1, alpha, beta))
            if value >= beta:
                return value  # Beta cutoff
            alpha = max(alpha, value)
        return value

min_value is the mirror image: running minimum, cutoff once value <= alpha.

Leaf evaluation:

    (mine - theirs) * 10 + sum(+weight for mine, -weight for theirs)

Material dominates; positional weight refines between equal-material leaves.
"""

import logging
import time
from dataclasses import dataclass, field

from othello_minimax.config_othello import SEARCH_CONFIG
from othello_minimax.game.game import Square
from othello_minimax.engine.positional_table import PositionalValueTable, get_positional_table
from othello_minimax.engine.move_ordering import order_moves


logger = logging.getLogger(__name__)


# Larger than any reachable evaluation
SCORE_INF = 1000000


@dataclass
class SearchResult:
    """Result of alpha-beta search."""
    best_move: Square
    score: int
    depth_limit: int
    nodes_searched: int
    time_ms: int
    root_scores: list[tuple[Square, int]] = field(default_factory=list)


class AlphaBetaEngine:
    """
    Minimax search engine with alpha-beta pruning.

    The engine keeps no position state between searches; only the node
    counter of the last search survives for reporting.
    """

    def __init__(
        self,
        game,
        use_alpha_beta: bool = SEARCH_CONFIG['use_alpha_beta'],
        material_weight: int = SEARCH_CONFIG['material_weight'],
    ):
        """
        Initialize search engine.

        Args:
            game: Game instance providing legal_moves / apply_move / is_terminal /
                  token_counts / player_to_move / board
            use_alpha_beta: Enable pruning (False = full minimax, for comparison)
            material_weight: Multiplier on the token difference at leaves
        """
        self.game = game
        self.use_alpha_beta = use_alpha_beta
        self.material_weight = material_weight

        # Search statistics
        self.nodes_searched = 0

    def _table_for(self, state) -> PositionalValueTable:
        board = self.game.board(state)
        rows, cols = board.shape
        if rows != cols:
            raise ValueError(f"Board must be square, got shape {board.shape}")
        return get_positional_table(rows)

    def choose_move(self, state, depth_limit: int) -> Square:
        """
        Best move for the player to move in state.

        Args:
            state: Current game state (must have at least one legal move)
            depth_limit: Plies searched below each root move (>= 0)

        Returns:
            One of game.legal_moves(state)
        """
        return self.search(state, depth_limit).best_move

    def search(self, state, depth_limit: int) -> SearchResult:
        """
        Root node search.

        Root moves are searched in positional order. The first move is taken
        as the initial best; later moves replace it only on strict
        improvement, so the earliest of equally good moves wins. Alpha is
        raised to the running best after each accepted move; beta stays open.

        Args:
            state: Current game state
            depth_limit: Plies searched below each root move

        Returns:
            SearchResult with best move, its value and node statistics
        """
        if depth_limit < 0:
            raise ValueError(f"depth_limit must be >= 0, got {depth_limit}")

        legal_moves = self.game.legal_moves(state)
        if not legal_moves:
            raise ValueError("No valid moves available")

        start_time = time.time()
        self.nodes_searched = 0

        table = self._table_for(state)
        root_player = self.game.player_to_move(state)
        ordered_moves = order_moves(legal_moves, table)

        best_move = None
        best_score = -SCORE_INF
        alpha = -SCORE_INF
        beta = SCORE_INF
        root_scores = []

        for move in ordered_moves:
            next_state = self.game.apply_move(state, move)
            score = self.min_value(next_state, root_player, depth_limit, alpha, beta)
            root_scores.append((move, score))

            if best_move is None or score > best_score:
                best_score = score
                best_move = move
                if self.use_alpha_beta:
                    alpha = max(alpha, best_score)

        elapsed_ms = int((time.time() - start_time) * 1000)
        logger.debug(
            "player %d depth %d: best %s score %d (%d moves, %d nodes, %d ms)",
            root_player, depth_limit, tuple(best_move), best_score,
            len(ordered_moves), self.nodes_searched, elapsed_ms,
        )

        return SearchResult(
            best_move=best_move,
            score=best_score,
            depth_limit=depth_limit,
            nodes_searched=self.nodes_searched,
            time_ms=elapsed_ms,
            root_scores=root_scores,
        )

    def max_value(self, state, root_player: int, depth: int, alpha: int, beta: int) -> int:
        """
        Maximizing level (root player to choose).

        Args:
            state: Game state
            root_player: Player the search is run for
            depth: Remaining depth
            alpha: Best value the maximizer can already guarantee
            beta: Best value the minimizer can already guarantee

        Returns:
            Minimax value of state from root_player's perspective
        """
        self.nodes_searched += 1

        if depth == 0 or self.game.is_terminal(state):
            return self.evaluate(state, root_player)

        value = -SCORE_INF
        for move in order_moves(self.game.legal_moves(state), self._table_for(state)):
            next_state = self.game.apply_move(state, move)
            value = max(value, self.min_value(next_state, root_player, depth - 1, alpha, beta))

            if self.use_alpha_beta:
                if value >= beta:
                    return value  # Beta cutoff
                alpha = max(alpha, value)

        return value

    def min_value(self, state, root_player: int, depth: int, alpha: int, beta: int) -> int:
        """
        Minimizing level (opponent to choose). Mirror image of max_value.
        """
        self.nodes_searched += 1

        if depth == 0 or self.game.is_terminal(state):
            return self.evaluate(state, root_player)

        value = SCORE_INF
        for move in order_moves(self.game.legal_moves(state), self._table_for(state)):
            next_state = self.game.apply_move(state, move)
            value = min(value, self.max_value(next_state, root_player, depth - 1, alpha, beta))

            if self.use_alpha_beta:
                if value <= alpha:
                    return value  # Alpha cutoff
                beta = min(beta, value)

        return value

    def evaluate(self, state, root_player: int) -> int:
        """
        Static evaluation from root_player's perspective.

        Independent of whose turn it is in state.

        Args:
            state: Game state
            root_player: Perspective player

        Returns:
            (mine - theirs) * material_weight + signed positional sum
        """
        opponent = self.game.get_opponent(root_player)
        counts = self.game.token_counts(state)
        mine = counts[root_player - 1]
        theirs = counts[opponent - 1]

        positional = self._table_for(state).positional_score(
            self.game.board(state), root_player, opponent
        )
        return (mine - theirs) * self.material_weight + positional

    def get_stats(self) -> dict:
        """Get search statistics."""
        return {
            'nodes_searched': self.nodes_searched,
        }
