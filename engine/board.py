"""
Board model for Sliding TicTacToe.
Fixed 9-cell board, movement graph, winning lines, and move types.

Cells are numbered row-major:

     0 | 1 | 2
    ---+---+---
     3 | 4 | 5
    ---+---+---
     6 | 7 | 8
"""

from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple, Union

import numpy as np

from .config import EngineConfig


class Mark(Enum):
    """The two sides. The human plays X, the computer plays O."""
    PLAYER = "X"
    COMPUTER = "O"

    def opposite(self) -> "Mark":
        """Get the opposite mark."""
        return Mark.COMPUTER if self == Mark.PLAYER else Mark.PLAYER


class Phase(Enum):
    """The two stages of a game."""
    PLACEMENT = "placement"
    MOVEMENT = "movement"


# A board is a list of 9 cells, None means empty
Board = List[Optional[Mark]]

BOARD_CELLS = 9

CENTER = 4
CORNERS = (0, 2, 6, 8)
EDGES = (1, 3, 5, 7)
OPPOSITE_CORNER = {0: 8, 2: 6, 6: 2, 8: 0}

# Where a piece on each cell can slide to.
# Order matters: selection policies take the first match.
MOVEMENT_RULES: Tuple[Tuple[int, ...], ...] = (
    (3, 4, 1),                  # Top-left
    (0, 2, 4),                  # Top-middle
    (1, 4, 5),                  # Top-right
    (0, 4, 6),                  # Middle-left
    (0, 1, 2, 3, 5, 6, 7, 8),   # Center reaches everything
    (2, 4, 8),                  # Middle-right
    (3, 4, 7),                  # Bottom-left
    (6, 4, 8),                  # Bottom-middle
    (5, 4, 7),                  # Bottom-right
)

WINNING_LINES = np.array([
    # Rows
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    # Columns
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    # Diagonals
    (0, 4, 8), (2, 4, 6),
], dtype=np.intp)
WINNING_LINES.setflags(write=False)


# LINES_THROUGH[cell] holds the winning lines containing cell
LINES_THROUGH: Tuple[Tuple[Tuple[int, int, int], ...], ...] = tuple(
    tuple(tuple(int(i) for i in line) for line in WINNING_LINES if cell in line)
    for cell in range(9)
)


def _build_adjacency() -> np.ndarray:
    adjacency = np.zeros((BOARD_CELLS, BOARD_CELLS), dtype=bool)
    for source, targets in enumerate(MOVEMENT_RULES):
        adjacency[source, list(targets)] = True
    if not np.array_equal(adjacency, adjacency.T):
        raise ValueError("MOVEMENT_RULES must be symmetric")
    return adjacency


def build_position_values(config: EngineConfig) -> np.ndarray:
    """Per-cell strategic weight (center > corners > edges)."""
    values = np.full(BOARD_CELLS, config.EDGE_VALUE, dtype=np.int64)
    values[list(CORNERS)] = config.CORNER_VALUE
    values[CENTER] = config.CENTER_VALUE
    return values


# ADJACENCY[a, b] is True when a piece on a can slide to b
ADJACENCY = _build_adjacency()
ADJACENCY.setflags(write=False)

POSITION_VALUES = build_position_values(EngineConfig())
POSITION_VALUES.setflags(write=False)


@dataclass(frozen=True)
class Placement:
    """Drop a new piece on an empty cell (placement phase)."""
    destination: int


@dataclass(frozen=True)
class Slide:
    """Move a piece to an adjacent empty cell (movement phase)."""
    source: int
    destination: int


Move = Union[Placement, Slide]


_CHAR_TO_CELL = {
    "X": Mark.PLAYER,
    "O": Mark.COMPUTER,
    ".": None,
    "-": None,
    " ": None,
    "_": None,
}


def new_board() -> Board:
    """Create an empty board."""
    return [None] * BOARD_CELLS


def parse_board(text: str) -> Board:
    """
    Build a board from a 9-character string such as "XX..O....".

    Raises:
        ValueError: if the string has the wrong length or an unknown character.
    """
    cells = text.replace("\n", "").replace("|", "")
    if len(cells) != BOARD_CELLS:
        raise ValueError(f"Board needs {BOARD_CELLS} cells, got {len(cells)}: {text!r}")
    board = []
    for ch in cells:
        try:
            board.append(_CHAR_TO_CELL[ch.upper()])
        except KeyError:
            raise ValueError(f"Unknown board character {ch!r} in {text!r}") from None
    return board


def format_board(board: Board) -> str:
    """Inverse of parse_board: one character per cell, '.' for empty."""
    return "".join("." if cell is None else cell.value for cell in board)


def check_board(board: Board) -> None:
    """
    Make sure board is a 9-cell list of Mark or None.

    Raises:
        ValueError: if the length or any cell is wrong.
    """
    if len(board) != BOARD_CELLS:
        raise ValueError(f"Board needs {BOARD_CELLS} cells, got {len(board)}")
    for idx, cell in enumerate(board):
        if cell is not None and not isinstance(cell, Mark):
            raise ValueError(f"Cell {idx} holds {cell!r}, expected a Mark or None")


def empty_cells(board: Board) -> List[int]:
    """All empty cell indices, ascending."""
    return [idx for idx, cell in enumerate(board) if cell is None]


def pieces_of(board: Board, mark: Mark) -> List[int]:
    """Cells occupied by mark, ascending."""
    return [idx for idx, cell in enumerate(board) if cell is mark]


def legal_destinations(board: Board, source: int) -> List[int]:
    """Empty cells the piece on source can slide to, in MOVEMENT_RULES order."""
    return [to for to in MOVEMENT_RULES[source] if board[to] is None]


def legal_slides(board: Board, mark: Mark) -> List[Slide]:
    """Every legal slide for mark: pieces in index order, then neighbour order."""
    return [
        Slide(source, destination)
        for source in pieces_of(board, mark)
        for destination in legal_destinations(board, source)
    ]


def is_legal_slide(board: Board, source: int, destination: int, mark: Mark) -> bool:
    """True if mark owns source and destination is an empty neighbour."""
    return (
        board[source] is mark
        and board[destination] is None
        and bool(ADJACENCY[source, destination])
    )


@contextmanager
def trial_slide(board: Board, source: int, destination: int) -> Iterator[Board]:
    """
    Slide a piece in place for the duration of a with-block.

    Both cells are restored to their previous values when the block exits,
    whether it finishes, breaks out of a loop, returns, or raises.
    """
    saved_source, saved_destination = board[source], board[destination]
    board[destination] = saved_source
    board[source] = None
    try:
        yield board
    finally:
        board[source] = saved_source
        board[destination] = saved_destination


@contextmanager
def trial_placement(board: Board, cell: int, mark: Mark) -> Iterator[Board]:
    """Place mark on cell for the duration of a with-block, then restore it."""
    saved = board[cell]
    board[cell] = mark
    try:
        yield board
    finally:
        board[cell] = saved
