"""
Console front end for the tic-tac-toe engine.

Two players share the keyboard and take turns typing moves as
"row-column" (e.g. "1-1" for the centre). The board is printed
before every turn and once more when the game ends.

Run this script to play:
    python main.py
"""

import argparse
import logging
import sys
from typing import Callable, Optional, Tuple

from engine import GameConfig, GameEngine, MoveError

logger = logging.getLogger(__name__)


def parse_move(text: str, delimiter: str = GameConfig.MOVE_DELIMITER) -> Optional[Tuple[int, int]]:
    """
    Parse "<row><delimiter><column>" into a pair of ints.

    Args:
        text: The raw input line.
        delimiter: Separator between row and column.

    Returns:
        (row, column), or None if the text is not two non-negative numbers.
        Range checking is left to the engine.
    """
    parts = [part.strip() for part in text.strip().split(delimiter)]
    if len(parts) != 2:
        return None
    if not all(part.isascii() and part.isdigit() for part in parts):
        return None
    return int(parts[0]), int(parts[1])


class TicTacToeConsole:
    """
    Interaction loop over a GameEngine.

    Game flow:
    1. Print the board and status line
    2. Stop if the game is over
    3. Read moves until one is accepted; bad input and rejected
       moves are reported and the same player is asked again
    4. Repeat
    """

    def __init__(
        self,
        engine: Optional[GameEngine] = None,
        delimiter: str = GameConfig.MOVE_DELIMITER,
        input_func: Optional[Callable[[str], str]] = None,
        print_func: Optional[Callable[..., None]] = None,
    ):
        """
        Initialize the console.

        Args:
            engine: Game to drive (a new one by default).
            delimiter: Separator between row and column in typed moves.
            input_func: Reads one line after showing a prompt (default: input).
            print_func: Writes output (default: print).
        """
        self.engine = engine or GameEngine()
        self.delimiter = delimiter
        self.input_func = input_func or input
        self.print_func = print_func or print

    def run(self) -> None:
        """Play until the game is over."""
        while True:
            # render() already ends with a newline
            self.print_func(self.engine.render(), end="")
            if self.engine.is_game_over():
                break
            self._play_turn()

        logger.info("Game finished, winner: %s", self.engine.winner().glyph)

    def _play_turn(self) -> None:
        """Prompt until the current player makes an accepted move."""
        while True:
            line = self.input_func(GameConfig.MOVE_PROMPT)
            move = parse_move(line, self.delimiter)
            if move is None:
                self.print_func(GameConfig.INVALID_INPUT_MESSAGE)
                continue

            row, column = move
            try:
                self.engine.make_move(row, column)
            except MoveError as e:
                self.print_func(str(e))
                continue
            return


def main(argv=None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Two-player tic-tac-toe")
    parser.add_argument(
        "--delimiter",
        default=GameConfig.MOVE_DELIMITER,
        help="Separator between row and column when typing a move (default: %(default)s)"
    )
    parser.add_argument(
        "--log-level",
        default=GameConfig.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: %(default)s)"
    )

    args = parser.parse_args(argv)
    if not args.delimiter.strip() or any(ch.isdigit() for ch in args.delimiter):
        parser.error("--delimiter must be a non-blank separator without digits")

    logging.basicConfig(level=args.log_level, format=GameConfig.LOG_FORMAT)

    console = TicTacToeConsole(delimiter=args.delimiter)

    try:
        console.run()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
