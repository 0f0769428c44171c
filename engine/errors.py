"""
Errors a move or a board lookup can produce.
All of them are recoverable: the caller reports them and asks again.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Why a move or lookup was rejected."""
    POSITION_OUT_OF_BOUNDS = "Specified position is outside of the board"
    CELL_OCCUPIED = "The cell is not empty"
    GAME_OVER = "The game is over"

    @property
    def message(self) -> str:
        return self.value


class MoveError(Exception):
    """
    Base class for rejected moves.

    Attributes:
        kind: The ErrorKind describing the failure.
    """

    kind: ErrorKind

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.kind.message)

    @staticmethod
    def from_kind(kind: ErrorKind) -> "MoveError":
        """Build the MoveError subclass matching an ErrorKind."""
        return _ERROR_CLASSES[kind]()


class PositionOutOfBounds(MoveError):
    """Row or column outside 0-2."""
    kind = ErrorKind.POSITION_OUT_OF_BOUNDS


class CellOccupied(MoveError):
    """Target cell already holds a mark."""
    kind = ErrorKind.CELL_OCCUPIED


class GameOver(MoveError):
    """Move attempted after a win or a draw."""
    kind = ErrorKind.GAME_OVER


_ERROR_CLASSES = {
    ErrorKind.POSITION_OUT_OF_BOUNDS: PositionOutOfBounds,
    ErrorKind.CELL_OCCUPIED: CellOccupied,
    ErrorKind.GAME_OVER: GameOver,
}
