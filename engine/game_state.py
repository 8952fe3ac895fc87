"""
Game state management for Sliding TicTacToe.
Tracks the board, whose turn it is, the phase, and the outcome.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .board import Board, Mark, Phase, Placement, Slide, format_board, new_board
from .config import EngineConfig
from .move_validator import MoveValidator
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


@dataclass
class MoveRecord:
    """
    A move in the game.
    """
    player: Mark                # Who made the move
    source: Optional[int]       # None for placements
    destination: int            # Cell the piece ended on
    phase: Phase                # Phase the move was made in


@dataclass
class GameState:
    """
    The complete state of a Sliding TicTacToe game.

    Tracks:
    - The 9-cell board
    - Current player and phase
    - How many pieces each side has placed
    - The player's last placement (the HARD AI reacts to it)
    - Move history
    - Game status (ongoing, won, draw)
    """

    board: Board = field(default_factory=new_board)

    current_player: Mark = Mark.PLAYER
    phase: Phase = Phase.PLACEMENT

    player_pieces: int = 0
    computer_pieces: int = 0
    max_pieces: int = EngineConfig.MAX_PIECES

    last_player_move: Optional[int] = None

    moves: List[MoveRecord] = field(default_factory=list)

    winner: Optional[Mark] = None
    is_draw: bool = False
    is_game_over: bool = False

    def pieces_placed(self, mark: Mark) -> int:
        """How many pieces mark has put on the board."""
        return self.player_pieces if mark == Mark.PLAYER else self.computer_pieces

    def place(self, cell: int) -> bool:
        """
        Place a piece for the current player.

        Args:
            cell: Cell index (0-8).

        Returns:
            True if the move was made, False if it was rejected.
        """
        result = MoveValidator().validate_placement(self, cell)
        if not result.is_valid:
            logger.warning("Rejected placement at %s: %s", cell, result.error_message)
            return False

        mover = self.current_player
        self.board[cell] = mover
        if mover == Mark.PLAYER:
            self.player_pieces += 1
            self.last_player_move = cell
        else:
            self.computer_pieces += 1

        self.moves.append(MoveRecord(mover, None, cell, Phase.PLACEMENT))

        if (self.player_pieces >= self.max_pieces
                and self.computer_pieces >= self.max_pieces):
            self.phase = Phase.MOVEMENT
            logger.info("Both sides placed %d pieces, movement phase begins", self.max_pieces)

        self._finish_turn(mover)
        return True

    def slide(self, source: int, destination: int) -> bool:
        """
        Slide one of the current player's pieces to an adjacent empty cell.

        Returns:
            True if the move was made, False if it was rejected.
        """
        result = MoveValidator().validate_slide(self, source, destination)
        if not result.is_valid:
            logger.warning(
                "Rejected slide %s -> %s: %s", source, destination, result.error_message
            )
            return False

        mover = self.current_player
        self.board[destination] = mover
        self.board[source] = None

        self.moves.append(MoveRecord(mover, source, destination, Phase.MOVEMENT))

        self._finish_turn(mover)
        return True

    def make_move(self, move) -> bool:
        """Apply a Placement or a Slide for the current player."""
        if isinstance(move, Placement):
            return self.place(move.destination)
        if isinstance(move, Slide):
            return self.slide(move.source, move.destination)
        raise TypeError(f"Expected Placement or Slide, got {type(move).__name__}")

    def apply_computer_move(self, ai) -> bool:
        """
        Ask the AI for a move and play it.

        A computer that cannot slide ends the game as a draw.

        Args:
            ai: An AIPlayer.

        Returns:
            True if a move was made.
        """
        if self.is_game_over or self.current_player != Mark.COMPUTER:
            logger.warning("It's not the computer's turn")
            return False

        if self.phase == Phase.PLACEMENT:
            cell = ai.select_placement_move(self.board, self.last_player_move)
            if cell is None:
                self._declare_draw("board is full")
                return False
            return self.place(cell)

        move = ai.select_movement_move(self.board)
        if move is None:
            self._declare_draw("computer has no legal slide")
            return False
        return self.slide(move.source, move.destination)

    def _finish_turn(self, mover: Mark):
        checker = WinChecker()
        if checker.is_winning_for(self.board, mover):
            self.winner = mover
            self.is_game_over = True
            logger.info("%s wins", mover.name)
            return

        self.current_player = mover.opposite()

        if (self.phase == Phase.MOVEMENT
                and checker.is_stalemate(self.board, self.current_player)):
            self._declare_draw(f"{self.current_player.name} has no legal slide")

    def _declare_draw(self, reason: str):
        self.is_draw = True
        self.is_game_over = True
        logger.info("Draw: %s", reason)

    def reset(self):
        """Start a new game with an empty board."""
        self.board = new_board()
        self.current_player = Mark.PLAYER
        self.phase = Phase.PLACEMENT
        self.player_pieces = 0
        self.computer_pieces = 0
        self.last_player_move = None
        self.moves = []
        self.winner = None
        self.is_draw = False
        self.is_game_over = False

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=list(self.board),
            current_player=self.current_player,
            phase=self.phase,
            player_pieces=self.player_pieces,
            computer_pieces=self.computer_pieces,
            max_pieces=self.max_pieces,
            last_player_move=self.last_player_move,
            moves=list(self.moves),
            winner=self.winner,
            is_draw=self.is_draw,
            is_game_over=self.is_game_over
        )

    def print_board(self):
        """Print the board to console."""
        cells = format_board(self.board).replace(".", " ")
        print("\n  0 | 1 | 2       " + " | ".join(cells[0:3]))
        print(" ---+---+---     ---+---+---")
        print("  3 | 4 | 5       " + " | ".join(cells[3:6]))
        print(" ---+---+---     ---+---+---")
        print("  6 | 7 | 8       " + " | ".join(cells[6:9]))

        # Print game info
        if self.is_game_over:
            if self.winner:
                print(f"\n{self.winner.value} WINS!")
            else:
                print("\nIt's a DRAW!")
        else:
            print(f"\nPhase: {self.phase.value}  Turn: {self.current_player.value}")
