"""
Console game for Sliding TicTacToe.

This script ties together:
- GameState (board, phase, turns, outcome)
- MoveValidator (rejects illegal input)
- AIPlayer (the computer opponent)

Run this script to play against the computer in a terminal!
"""

import argparse
import logging
import random
from typing import Optional

from engine import AIPlayer, Difficulty, GameState, Mark, MoveValidator, Phase
from engine.config import EngineConfig
from engine.logging_setup import setup_logging

logger = logging.getLogger(__name__)


class ConsoleGame:
    """
    Main controller for a console game.

    Game flow:
    1. Human (X) and computer (O) take turns placing 3 pieces each
    2. Then each turn slides one piece to an adjacent empty cell
    3. First to line up three wins; a side that cannot slide draws the game
    """

    def __init__(
        self,
        difficulty: Difficulty = Difficulty.HARD,
        computer_first: bool = False,
        self_play: bool = False,
        max_turns: int = 100,
        seed: Optional[int] = None
    ):
        """
        Initialize the game.

        Args:
            difficulty: Computer difficulty.
            computer_first: Let the computer move first.
            self_play: Replace the human with random legal moves.
            max_turns: Turn limit for self-play before calling a draw.
            seed: Seed for the random choices of both sides.
        """
        self.rng = random.Random(seed)
        self.config = EngineConfig()
        self.ai = AIPlayer(difficulty, self.config, rng=self.rng)
        self.validator = MoveValidator()
        self.self_play = self_play
        self.max_turns = max_turns

        self.game_state = GameState(max_pieces=self.config.MAX_PIECES)
        if computer_first:
            self.game_state.current_player = Mark.COMPUTER

        logger.info("Computer plays %s on %s", Mark.COMPUTER.value, difficulty.value)

    def start(self):
        """Play until someone wins or the game is drawn."""
        turns = 0
        self.game_state.print_board()

        while not self.game_state.is_game_over:
            if self.self_play and turns >= self.max_turns:
                print(f"\nTurn limit of {self.max_turns} reached.")
                break

            if self.game_state.current_player == Mark.COMPUTER:
                print("\n>>> Computer is thinking...")
                self.game_state.apply_computer_move(self.ai)
            elif self.self_play:
                self._random_human_move()
            else:
                self._human_move()

            turns += 1
            self.game_state.print_board()

        self._show_game_result()

    def _random_human_move(self):
        move = self.rng.choice(self.validator.get_valid_moves(self.game_state))
        print(f"\n>>> X plays {move}")
        self.game_state.make_move(move)

    def _human_move(self):
        """Read moves from stdin until a legal one is entered."""
        while True:
            if self.game_state.phase == Phase.PLACEMENT:
                text = input("Place your piece (0-8): ")
            else:
                text = input("Move your piece (from to, e.g. '3 0'): ")

            try:
                numbers = [int(part) for part in text.split()]
            except ValueError:
                print("Please enter cell numbers.")
                continue

            if self.game_state.phase == Phase.PLACEMENT and len(numbers) == 1:
                result = self.validator.validate_placement(self.game_state, numbers[0])
                if result.is_valid:
                    self.game_state.place(numbers[0])
                    return
            elif self.game_state.phase == Phase.MOVEMENT and len(numbers) == 2:
                result = self.validator.validate_slide(self.game_state, *numbers)
                if result.is_valid:
                    self.game_state.slide(*numbers)
                    return
            else:
                print("Wrong number of cells.")
                continue

            print(result.error_message)

    def _show_game_result(self):
        """Show the final game result."""
        print("\n" + "=" * 40)
        print("   GAME OVER!")
        print("=" * 40)

        if self.game_state.winner == Mark.PLAYER:
            print("\nYou win!")
        elif self.game_state.winner == Mark.COMPUTER:
            print("\nYou lose!")
        else:
            print("\nIt's a draw!")


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Sliding TicTacToe")
    parser.add_argument(
        "--difficulty",
        type=Difficulty.parse,
        default=Difficulty.HARD,
        help="Computer difficulty: easy, medium or hard (default: hard)"
    )
    parser.add_argument(
        "--computer-first",
        action="store_true",
        help="Let the computer move first"
    )
    parser.add_argument(
        "--self-play",
        action="store_true",
        help="Play X with random legal moves instead of reading input"
    )
    parser.add_argument(
        "--max-turns",
        type=int,
        default=100,
        help="Turn limit for --self-play"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: $LOG_LEVEL or INFO)"
    )

    args = parser.parse_args()
    setup_logging(args.log_level)

    game = ConsoleGame(
        difficulty=args.difficulty,
        computer_first=args.computer_first,
        self_play=args.self_play,
        max_turns=args.max_turns,
        seed=args.seed
    )

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
