"""
Game engine for tic-tac-toe.
Owns the state of one game and enforces the rules on every move.
"""

import logging

from .errors import MoveError
from .game_state import GameState, Mark
from .move_validator import MoveValidator
from .win_checker import WinChecker
from .display import render_state

logger = logging.getLogger(__name__)


class GameEngine:
    """
    A single game of tic-tac-toe.

    Game flow:
    1. X moves first, then players alternate
    2. A move is rejected with a MoveError if it is off the board,
       the game is over, or the cell is taken
    3. The game ends when a player completes a line (won) or the
       board fills up without one (drawn)
    4. reset() starts a fresh game at any time
    """

    def __init__(self):
        self.state = GameState()
        self.validator = MoveValidator()
        self.win_checker = WinChecker()

    def make_move(self, row: int, column: int) -> None:
        """
        Place the current player's mark at (row, column).

        Args:
            row: Row index (0-2).
            column: Column index (0-2).

        Raises:
            PositionOutOfBounds: row or column is not in 0-2.
            GameOver: the game was already won or drawn.
            CellOccupied: the cell already holds a mark.
        """
        result = self.validator.validate_move(self.state, row, column)
        if not result.is_valid:
            logger.debug("Rejected move (%s, %s): %s", row, column, result.error.name)
            raise MoveError.from_kind(result.error)

        mover = self.state.current_player
        self.state.board[row][column] = mover
        logger.debug("%s plays (%d, %d)", mover.glyph, row, column)

        if self.win_checker.is_winning_move(self.state.board, row, column, mover):
            self.state.winner = mover
            logger.debug("%s wins", mover.glyph)
        elif self.state.is_full():
            logger.debug("Board full, game drawn")

        # Toggle even on the final move
        self.state.current_player = mover.opposite()

    def current_player(self) -> Mark:
        """The mark whose turn is next."""
        return self.state.current_player

    def winner(self) -> Mark:
        """The winning mark, or Mark.EMPTY if nobody has won."""
        return self.state.winner

    def get_cell(self, row: int, column: int) -> Mark:
        """
        Get the mark at (row, column).

        Raises:
            PositionOutOfBounds: row or column is not in 0-2.
        """
        result = self.validator.validate_position(row, column)
        if not result.is_valid:
            raise MoveError.from_kind(result.error)
        return self.state.board[row][column]

    def board_is_full(self) -> bool:
        return self.state.is_full()

    def is_game_over(self) -> bool:
        """True once the game is won or drawn."""
        return self.state.is_game_over()

    def reset(self) -> None:
        """Start over as if freshly constructed."""
        self.state = GameState()
        logger.debug("Game reset")

    def render(self) -> str:
        """Board rows followed by a status line, newline-terminated."""
        return render_state(self.state)

    def copy(self) -> "GameEngine":
        """Create an independent engine with a copy of this game's state."""
        clone = GameEngine()
        clone.state = self.state.copy()
        return clone

    def __str__(self) -> str:
        return self.render()
