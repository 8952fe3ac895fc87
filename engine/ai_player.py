"""
AI player for Sliding TicTacToe.
Picks the computer's move for each phase and difficulty.

EASY plays at random, MEDIUM follows a short list of rules, and HARD
uses a longer rule list for placement and minimax for movement.
"""

import logging
import random
from enum import Enum
from typing import List, Optional

from .board import (
    CENTER, CORNERS, EDGES, LINES_THROUGH, OPPOSITE_CORNER, WINNING_LINES,
    Board, Mark, Slide,
    check_board, empty_cells, legal_destinations, legal_slides, pieces_of, trial_placement, trial_slide,
)
from .config import EngineConfig
from .minimax import MinimaxSearch
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


class Difficulty(Enum):
    """How hard the computer plays."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value: str) -> "Difficulty":
        """Look up a difficulty by name, ignoring case ("Hard", "EASY", ...)."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown difficulty {value!r} (choose from {choices})") from None


def _two_in_line(board: Board, mark: Mark) -> Optional[int]:
    """Empty cell of the first line holding two of mark and one empty cell."""
    for line in WINNING_LINES:
        cells = [board[i] for i in line]
        if cells.count(mark) == 2 and cells.count(None) == 1:
            return int(line[cells.index(None)])
    return None


def _fork_cell(board: Board, mark: Mark) -> Optional[int]:
    """
    First empty cell that would give mark two open two-in-a-lines.

    A line counts when, with mark on cell, it holds exactly two marks
    and nothing of the opponent.
    """
    opponent = mark.opposite()
    for cell in empty_cells(board):
        with trial_placement(board, cell, mark):
            open_lines = 0
            for line in LINES_THROUGH[cell]:
                cells = [board[i] for i in line]
                if cells.count(mark) == 2 and cells.count(opponent) == 0:
                    open_lines += 1
        if open_lines >= 2:
            return cell
    return None


class AIPlayer:
    """
    The computer opponent.

    The AI never keeps board state between calls: every method gets the
    current board, may try moves on it, and hands it back unchanged.
    """

    def __init__(
        self,
        difficulty: Difficulty = Difficulty.HARD,
        config: Optional[EngineConfig] = None,
        rng=None
    ):
        """
        Initialize the AI player.

        Args:
            difficulty: Which policy to play with.
            config: Engine settings (search depth, weights).
            rng: Source of randomness with choice(); defaults to the random module.
        """
        self.difficulty = difficulty
        self.config = config or EngineConfig()
        self.rng = rng if rng is not None else random
        self.win_checker = WinChecker()
        self.searcher = MinimaxSearch(self.config)

    # ==================== PLACEMENT PHASE ====================

    def select_placement_move(
        self,
        board: Board,
        last_player_move: Optional[int] = None
    ) -> Optional[int]:
        """
        Choose an empty cell to place the computer's next piece on.

        Args:
            board: Current board.
            last_player_move: Cell of the player's last placement, if any.

        Returns:
            Cell index, or None if the board is full.

        Raises:
            ValueError: if board is not a 9-cell board.
        """
        check_board(board)
        empty = empty_cells(board)
        if not empty:
            return None

        if self.difficulty == Difficulty.EASY:
            return self.rng.choice(empty)

        if self.difficulty == Difficulty.MEDIUM:
            return self._medium_placement(board, empty)

        return self._hard_placement(board, empty, last_player_move)

    def _medium_placement(self, board: Board, empty: List[int]) -> int:
        block = _two_in_line(board, Mark.PLAYER)
        if block is not None:
            logger.debug("Medium placement: block at %d", block)
            return block

        if CENTER in empty:
            return CENTER

        return self.rng.choice(empty)

    def _hard_placement(
        self,
        board: Board,
        empty: List[int],
        last_player_move: Optional[int]
    ) -> int:
        # 1. Win
        win = _two_in_line(board, Mark.COMPUTER)
        if win is not None:
            logger.debug("Hard placement: win at %d", win)
            return win

        # 2. Block
        block = _two_in_line(board, Mark.PLAYER)
        if block is not None:
            logger.debug("Hard placement: block at %d", block)
            return block

        # 3. Fork
        fork = _fork_cell(board, Mark.COMPUTER)
        if fork is not None:
            logger.debug("Hard placement: fork at %d", fork)
            return fork

        # 4. Take the cell the player would fork from
        counter = _fork_cell(board, Mark.PLAYER)
        if counter is not None:
            logger.debug("Hard placement: counter-fork at %d", counter)
            return counter

        free_corners = [c for c in CORNERS if c in empty]

        # 5. React to the player's last placement
        if last_player_move == CENTER and free_corners:
            return self.rng.choice(free_corners)

        if last_player_move in CORNERS:
            if CENTER in empty:
                return CENTER
            opposite = OPPOSITE_CORNER[last_player_move]
            if opposite in empty:
                return opposite

        # 6. Center, then corners, then edges
        if CENTER in empty:
            return CENTER

        if free_corners:
            return self.rng.choice(free_corners)

        free_edges = [e for e in EDGES if e in empty]
        if free_edges:
            return self.rng.choice(free_edges)

        return self.rng.choice(empty)

    # ==================== MOVEMENT PHASE ====================

    def select_movement_move(self, board: Board) -> Optional[Slide]:
        """
        Choose one of the computer's pieces and where to slide it.

        Args:
            board: Current board. Restored exactly before returning.

        Returns:
            The chosen Slide, or None if no computer piece can move.

        Raises:
            ValueError: if board is not a 9-cell board.
        """
        check_board(board)
        if self.difficulty == Difficulty.EASY:
            move = self._first_piece_random_slide(board)
        elif self.difficulty == Difficulty.MEDIUM:
            move = self._medium_movement(board)
        else:
            move = self._hard_movement(board)

        if move is None:
            move = self._first_piece_random_slide(board)

        if move is None:
            logger.info("Computer has no legal slide")
        return move

    def _first_piece_random_slide(self, board: Board) -> Optional[Slide]:
        """Random destination for the first computer piece that can move."""
        for source in pieces_of(board, Mark.COMPUTER):
            destinations = legal_destinations(board, source)
            if destinations:
                return Slide(source, self.rng.choice(destinations))
        return None

    def _medium_movement(self, board: Board) -> Optional[Slide]:
        slides = legal_slides(board, Mark.COMPUTER)

        # 1. Win right now
        for move in slides:
            with trial_slide(board, move.source, move.destination):
                wins = self.win_checker.is_winning_for(board, Mark.COMPUTER)
            if wins:
                logger.debug("Medium movement: winning slide %s", move)
                return move

        # 2. Block a cell the player could win through next turn
        threats = []
        for reply in legal_slides(board, Mark.PLAYER):
            with trial_slide(board, reply.source, reply.destination):
                if self.win_checker.is_winning_for(board, Mark.PLAYER):
                    threats.append(reply.destination)

        if threats:
            threat = threats[0]
            for move in slides:
                if move.destination == threat:
                    logger.debug("Medium movement: blocking %d", threat)
                    return move

        # 3. Build a two-in-a-line through the destination
        for move in slides:
            with trial_slide(board, move.source, move.destination):
                builds = any(
                    [board[i] for i in line].count(Mark.COMPUTER) == 2
                    for line in LINES_THROUGH[move.destination]
                )
            if builds:
                return move

        # 4. Head for the center
        for move in slides:
            if move.destination == CENTER:
                return move

        # 5. Anything
        return self._first_piece_random_slide(board)

    def _hard_movement(self, board: Board) -> Optional[Slide]:
        best_move = None
        best_score = float('-inf')
        self.searcher.nodes_evaluated = 0

        for move in legal_slides(board, Mark.COMPUTER):
            with trial_slide(board, move.source, move.destination):
                score = self.searcher.search(
                    board, self.config.SEARCH_DEPTH, maximizing=False
                )

            if score > best_score:
                best_score = score
                best_move = move

        if best_move is not None:
            logger.info(
                "AI evaluated %d positions. Best move: %d -> %d (score: %s)",
                self.searcher.nodes_evaluated,
                best_move.source, best_move.destination, best_score,
            )
        return best_move


def select_placement_move(
    board: Board,
    difficulty: Difficulty,
    last_player_move: Optional[int] = None,
    rng=None
) -> Optional[int]:
    """Pick the computer's placement with a one-off AIPlayer."""
    return AIPlayer(difficulty, rng=rng).select_placement_move(board, last_player_move)


def select_movement_move(board: Board, difficulty: Difficulty, rng=None) -> Optional[Slide]:
    """Pick the computer's slide with a one-off AIPlayer."""
    return AIPlayer(difficulty, rng=rng).select_movement_move(board)
