"""
Move validator for the tic-tac-toe engine.
Validates that moves follow the rules.
"""

from typing import Optional
from dataclasses import dataclass

from .config import GameConfig
from .errors import ErrorKind
from .game_state import GameState, Mark


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[ErrorKind] = None

    @property
    def error_message(self) -> Optional[str]:
        return self.error.message if self.error else None


VALID = ValidationResult(is_valid=True)


class MoveValidator:
    """
    Validates tic-tac-toe moves.

    Rules, checked in this order (first failure wins):
    1. Row and column must be on the board
    2. Game must not be over (winner decided or board full)
    3. Target cell must be empty
    """

    def validate_position(self, row: int, col: int) -> ValidationResult:
        """
        Check that (row, col) lies on the board.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            ValidationResult with POSITION_OUT_OF_BOUNDS on failure.
        """
        size = GameConfig.BOARD_SIZE
        if not (0 <= row < size and 0 <= col < size):
            return ValidationResult(
                is_valid=False,
                error=ErrorKind.POSITION_OUT_OF_BOUNDS
            )
        return VALID

    def validate_move(
        self,
        game_state: GameState,
        row: int,
        col: int
    ) -> ValidationResult:
        """
        Validate a move for the current player.

        Args:
            game_state: Current game state.
            row: Row to place the mark (0-2).
            col: Column to place the mark (0-2).

        Returns:
            ValidationResult with is_valid and error.
        """
        position = self.validate_position(row, col)
        if not position.is_valid:
            return position

        if game_state.is_game_over():
            return ValidationResult(is_valid=False, error=ErrorKind.GAME_OVER)

        if game_state.board[row][col] != Mark.EMPTY:
            return ValidationResult(is_valid=False, error=ErrorKind.CELL_OCCUPIED)

        return VALID
