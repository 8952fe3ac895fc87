"""
Win checker for Sliding TicTacToe.
Checks if a mark has completed a line, or if a side is stuck.
"""

from typing import Optional, Tuple

from .board import Board, Mark, WINNING_LINES, pieces_of
from .evaluator import mobility


class WinChecker:
    """
    Checks for terminal conditions.

    Win condition: 3 pieces of the same mark in a row
    (horizontally, vertically, or diagonally).
    Stalemate: the side to move owns pieces but none of them can slide.
    """

    def is_winning_for(self, board: Board, mark: Mark) -> bool:
        """
        Check if mark occupies a complete winning line.

        Args:
            board: The game board.
            mark: The mark to test.

        Returns:
            True if any of the 8 lines is all mark.
        """
        for a, b, c in WINNING_LINES:
            if board[a] is mark and board[b] is mark and board[c] is mark:
                return True
        return False

    def check_winner(self, board: Board) -> Optional[Mark]:
        """
        Check if there's a winner.

        Returns:
            The winning Mark, or None if no line is complete.
        """
        line = self.get_winning_line(board)
        if line is None:
            return None
        return board[line[0]]

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """
        Get the first complete line if there is one.

        Returns:
            The winning line as a tuple of cell indices, or None.
        """
        for a, b, c in WINNING_LINES:
            if board[a] is not None and board[a] is board[b] is board[c]:
                return int(a), int(b), int(c)
        return None

    def has_any_legal_move(self, board: Board, mark: Mark) -> bool:
        """True if at least one of mark's pieces has an empty neighbour."""
        return mobility(board, mark) > 0

    def is_stalemate(self, board: Board, mark: Mark) -> bool:
        """
        Check if mark is blocked in the movement phase.

        A side with no pieces at all is not stalemated, it simply
        has not placed anything yet.
        """
        if not pieces_of(board, mark):
            return False
        return not self.has_any_legal_move(board, mark)
