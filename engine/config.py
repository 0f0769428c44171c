"""
Configuration for the tic-tac-toe engine and its console.
"""


class GameConfig:
    """
    Configuration constants.
    The board size is fixed; the rest only affects the console.
    """

    # ==================== BOARD SETTINGS ====================
    # Tic-tac-toe is a 3x3 grid
    BOARD_SIZE = 3

    # ==================== CONSOLE SETTINGS ====================
    # Moves are typed as "<row><delimiter><column>", e.g. "1-1"
    MOVE_DELIMITER = "-"
    MOVE_PROMPT = "Make your move (row-column) [e.g. 0-0]:"
    INVALID_INPUT_MESSAGE = "Invalid input"

    # ==================== LOGGING SETTINGS ====================
    LOG_LEVEL = "WARNING"
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
