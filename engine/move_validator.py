"""
Move validator for Sliding TicTacToe.
Validates that moves follow the rules.
"""

from dataclasses import dataclass
from typing import List, Optional, Union

from .board import (
    BOARD_CELLS, Phase, Placement, Slide,
    empty_cells, is_legal_slide, legal_slides,
)


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


def _in_range(cell) -> bool:
    return isinstance(cell, int) and 0 <= cell < BOARD_CELLS


class MoveValidator:
    """
    Validates Sliding TicTacToe moves.

    Rules:
    1. Placement phase: place on an empty cell until you have used your quota
    2. Movement phase: slide your own piece to an adjacent empty cell
    3. Game must not be over
    """

    def validate_placement(self, game_state, cell: int) -> ValidationResult:
        """
        Validate placing a piece for the current player.

        Args:
            game_state: Current GameState.
            cell: Cell to place the piece on (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(False, "Game is already over!")

        if game_state.phase != Phase.PLACEMENT:
            return ValidationResult(False, "Placement phase is over, slide a piece instead")

        if not _in_range(cell):
            return ValidationResult(False, f"Invalid cell {cell!r}. Must be 0-8.")

        occupant = game_state.board[cell]
        if occupant is not None:
            return ValidationResult(False, f"Cell {cell} is already occupied by {occupant.value}")

        mover = game_state.current_player
        if game_state.pieces_placed(mover) >= game_state.max_pieces:
            return ValidationResult(False, f"{mover.value} has no more pieces!")

        return ValidationResult(is_valid=True)

    def validate_slide(self, game_state, source: int, destination: int) -> ValidationResult:
        """
        Validate sliding one of the current player's pieces.

        Args:
            game_state: Current GameState.
            source: Cell the piece is on.
            destination: Cell to slide it to.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(False, "Game is already over!")

        if game_state.phase != Phase.MOVEMENT:
            return ValidationResult(False, "Still in the placement phase")

        if not (_in_range(source) and _in_range(destination)):
            return ValidationResult(
                False, f"Invalid slide {source!r} -> {destination!r}. Cells must be 0-8."
            )

        mover = game_state.current_player
        if game_state.board[source] != mover:
            return ValidationResult(False, f"Cell {source} does not hold a {mover.value} piece")

        if game_state.board[destination] is not None:
            return ValidationResult(False, f"Cell {destination} is already occupied")

        if not is_legal_slide(game_state.board, source, destination, mover):
            return ValidationResult(False, f"Cell {destination} is not reachable from {source}")

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state) -> List[Union[Placement, Slide]]:
        """
        Get all valid moves for the current player.

        Returns:
            Placements in the placement phase, Slides in the movement phase.
        """
        if game_state.is_game_over:
            return []

        if game_state.phase == Phase.PLACEMENT:
            if game_state.pieces_placed(game_state.current_player) >= game_state.max_pieces:
                return []
            return [Placement(cell) for cell in empty_cells(game_state.board)]

        return legal_slides(game_state.board, game_state.current_player)
