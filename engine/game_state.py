"""
Game state for the tic-tac-toe engine.
Tracks the board, whose turn it is, and the winner.
"""

from enum import Enum
from typing import List, Tuple
from dataclasses import dataclass, field

from .config import GameConfig


class Mark(Enum):
    """
    What can sit in a board cell.

    X and O double as player identities. EMPTY is never a current
    player; as a winner it means "no winner yet".
    The value of each member is its display glyph.
    """
    EMPTY = "*"
    X = "X"
    O = "O"

    @property
    def glyph(self) -> str:
        return self.value

    def opposite(self) -> "Mark":
        """Get the other player's mark."""
        if self == Mark.EMPTY:
            raise ValueError("EMPTY has no opposite mark")
        return Mark.O if self == Mark.X else Mark.X


Board = List[List[Mark]]


def new_board() -> Board:
    """Create an empty 3x3 board."""
    return [[Mark.EMPTY for _ in range(GameConfig.BOARD_SIZE)]
            for _ in range(GameConfig.BOARD_SIZE)]


@dataclass
class GameState:
    """
    The complete state of one game.

    Tracks:
    - The 3x3 board, row-major
    - Current player (X moves first)
    - The winner, fixed once decided
    """

    board: Board = field(default_factory=new_board)

    current_player: Mark = Mark.X

    # EMPTY until someone completes a line
    winner: Mark = Mark.EMPTY

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples in row-major order.
        """
        empty = []
        for row in range(GameConfig.BOARD_SIZE):
            for col in range(GameConfig.BOARD_SIZE):
                if self.board[row][col] == Mark.EMPTY:
                    empty.append((row, col))
        return empty

    def is_full(self) -> bool:
        """True if no cell is EMPTY."""
        return all(cell != Mark.EMPTY for row in self.board for cell in row)

    def is_game_over(self) -> bool:
        return self.winner != Mark.EMPTY or self.is_full()

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=[list(row) for row in self.board],
            current_player=self.current_player,
            winner=self.winner,
        )
