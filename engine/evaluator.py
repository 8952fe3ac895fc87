"""
Position evaluator for Sliding TicTacToe.
Scores a board from one mark's point of view.
"""

from functools import lru_cache
from typing import Optional

import numpy as np

from .board import (
    ADJACENCY, POSITION_VALUES, WINNING_LINES, Board, Mark, build_position_values,
)
from .config import EngineConfig

_DEFAULT_CONFIG = EngineConfig()
_DEFAULT_POSITION_WEIGHTS = (
    _DEFAULT_CONFIG.CENTER_VALUE, _DEFAULT_CONFIG.CORNER_VALUE, _DEFAULT_CONFIG.EDGE_VALUE,
)


@lru_cache(maxsize=8)
def _position_table(center: int, corner: int, edge: int) -> np.ndarray:
    if (center, corner, edge) == _DEFAULT_POSITION_WEIGHTS:
        return POSITION_VALUES
    config = EngineConfig(CENTER_VALUE=center, CORNER_VALUE=corner, EDGE_VALUE=edge)
    return build_position_values(config)


def _occupancy(board: Board, mark: Mark) -> np.ndarray:
    return np.fromiter((cell is mark for cell in board), dtype=bool, count=len(board))


def _mobility(pieces: np.ndarray, empty: np.ndarray) -> int:
    # Each row of ADJACENCY[pieces] lists one piece's neighbours
    return int((ADJACENCY[pieces] & empty).sum())


def _line_scores(counts: np.ndarray, empty: np.ndarray, weights) -> int:
    # First matching row wins, same as an if/elif chain per line
    complete, two, one = weights
    scores = np.select(
        [counts == 3, (counts == 2) & (empty == 1), (counts == 1) & (empty == 2)],
        [complete, two, one],
        default=0,
    )
    return int(scores.sum())


def evaluate(board: Board, mark: Mark, config: Optional[EngineConfig] = None) -> int:
    """
    Heuristic score of board for mark. Positive is good for mark.

    The score adds three parts:
    - line threats: own lines with 3/2/1 pieces (and the rest empty) score
      +1000/+100/+10, opponent lines -1000/-150/-5
    - position: cell weight of own pieces minus opponent pieces
    - mobility: 5 x (own empty neighbours - opponent empty neighbours)

    Opponent two-in-a-line weighs more than our own so the engine
    prefers blocking over building.

    Args:
        board: The board to score. Not modified.
        mark: Whose point of view to score from.
        config: Weights to use (defaults to EngineConfig()).

    Returns:
        Integer score, not normalized.
    """
    config = config or _DEFAULT_CONFIG

    own = _occupancy(board, mark)
    opp = _occupancy(board, mark.opposite())
    empty = ~(own | opp)

    own_counts = own[WINNING_LINES].sum(axis=1)
    opp_counts = opp[WINNING_LINES].sum(axis=1)
    empty_counts = empty[WINNING_LINES].sum(axis=1)

    score = _line_scores(
        own_counts, empty_counts,
        (config.WIN_SCORE, config.TWO_IN_LINE, config.ONE_IN_LINE),
    )
    score -= _line_scores(
        opp_counts, empty_counts,
        (config.LOSS_SCORE, config.OPP_TWO_IN_LINE, config.OPP_ONE_IN_LINE),
    )

    values = _position_table(config.CENTER_VALUE, config.CORNER_VALUE, config.EDGE_VALUE)
    score += int(values[own].sum()) - int(values[opp].sum())

    score += (_mobility(own, empty) - _mobility(opp, empty)) * config.MOBILITY_WEIGHT

    return score


def mobility(board: Board, mark: Mark) -> int:
    """Number of (piece, empty neighbour) pairs available to mark."""
    own = _occupancy(board, mark)
    empty = np.fromiter((cell is None for cell in board), dtype=bool, count=len(board))
    return _mobility(own, empty)
