"""
Tic-tac-toe engine.
Handles game state, rules, win detection and text rendering.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .errors import ErrorKind, MoveError, PositionOutOfBounds, CellOccupied, GameOver
from .game_state import GameState, Mark
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
from .display import render_state
from .game_engine import GameEngine
