"""
Win checker for the tic-tac-toe engine.
Decides whether the move just played completed a line.
"""

from typing import List, Tuple

from .config import GameConfig
from .game_state import Board, Mark


class WinChecker:
    """
    Checks for win conditions after a move.

    Only lines through the played cell can have changed, so only those
    are checked: its row, its column, and each diagonal it lies on.
    """

    def lines_through(self, row: int, col: int) -> List[List[Tuple[int, int]]]:
        """
        Get every line passing through a cell.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            Lines as lists of (row, col) positions.
        """
        n = GameConfig.BOARD_SIZE
        lines = [
            [(row, c) for c in range(n)],
            [(r, col) for r in range(n)],
        ]
        if row == col:
            lines.append([(i, i) for i in range(n)])
        if row + col == n - 1:
            lines.append([(i, n - 1 - i) for i in range(n)])
        return lines

    def is_winning_move(self, board: Board, row: int, col: int, mark: Mark) -> bool:
        """
        Check if placing `mark` at (row, col) completed a line.

        Args:
            board: The board, with the mark already placed.
            row: Row of the move.
            col: Column of the move.
            mark: The mover's mark.

        Returns:
            True if any line through the cell is entirely `mark`.
        """
        if mark == Mark.EMPTY:
            return False
        return any(
            all(board[r][c] == mark for r, c in line)
            for line in self.lines_through(row, col)
        )
