"""
Sliding TicTacToe engine.
Board model, evaluation, search, and the computer opponent.

Each side places 3 pieces, then pieces slide along a fixed graph.
"""

__version__ = "1.0.0"

from .config import EngineConfig
from .board import Mark, Phase, Placement, Slide, new_board, parse_board, format_board
from .win_checker import WinChecker
from .evaluator import evaluate
from .minimax import MinimaxSearch
from .ai_player import AIPlayer, Difficulty, select_placement_move, select_movement_move
from .move_validator import MoveValidator, ValidationResult
from .game_state import GameState, MoveRecord
