"""
Minimax search for the movement phase.
Depth-limited, with alpha-beta pruning, over slide moves.
"""

from typing import Optional

from .board import Board, Mark, legal_destinations, pieces_of, trial_slide
from .config import EngineConfig
from .evaluator import evaluate
from .win_checker import WinChecker


class MinimaxSearch:
    """
    Minimax with alpha-beta pruning.

    COMPUTER is always the maximizing side and every leaf is scored
    with evaluate(board, COMPUTER), whoever is to move there.

    The board is mutated in place while searching and restored by
    trial_slide before each call returns.
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()
        self.win_checker = WinChecker()

        # Keep track of how many nodes we've visited (for debugging)
        self.nodes_evaluated = 0

    def search(
        self,
        board: Board,
        depth: int,
        maximizing: bool,
        alpha: float = float('-inf'),
        beta: float = float('inf')
    ) -> int:
        """
        Score board by looking depth plies ahead.

        Args:
            board: Position to search. Restored before returning.
            depth: Plies left to search.
            maximizing: True if COMPUTER is to move.
            alpha: Best score the maximizer can already force.
            beta: Best score the minimizer can already force.

        Returns:
            The minimax score from COMPUTER's point of view.
        """
        self.nodes_evaluated += 1

        if (
            depth == 0
            or self.win_checker.is_winning_for(board, Mark.PLAYER)
            or self.win_checker.is_winning_for(board, Mark.COMPUTER)
        ):
            return evaluate(board, Mark.COMPUTER, self.config)

        side = Mark.COMPUTER if maximizing else Mark.PLAYER

        # A blocked side is a leaf, so no infinite sentinel leaks upward
        if not self.win_checker.has_any_legal_move(board, side):
            return evaluate(board, Mark.COMPUTER, self.config)

        if maximizing:
            max_score = float('-inf')
            for source in pieces_of(board, side):
                for destination in legal_destinations(board, source):
                    with trial_slide(board, source, destination):
                        score = self.search(board, depth - 1, False, alpha, beta)
                    max_score = max(max_score, score)
                    alpha = max(alpha, score)
                    if beta <= alpha:
                        break  # Prune
                if beta <= alpha:
                    break
            return max_score
        else:
            min_score = float('inf')
            for source in pieces_of(board, side):
                for destination in legal_destinations(board, source):
                    with trial_slide(board, source, destination):
                        score = self.search(board, depth - 1, True, alpha, beta)
                    min_score = min(min_score, score)
                    beta = min(beta, score)
                    if beta <= alpha:
                        break  # Prune
                if beta <= alpha:
                    break
            return min_score
