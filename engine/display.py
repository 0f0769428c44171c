"""
Text rendering of a game state.
"""

from .game_state import GameState, Mark


def render_state(state: GameState) -> str:
    """
    Render the board and a status line.

    One line per row with the three glyphs separated by spaces, then
    "Winner: <glyph>", "Draw" or "Current player: <glyph>".
    Every line ends with a newline.
    """
    lines = [" ".join(cell.glyph for cell in row) for row in state.board]

    if state.winner != Mark.EMPTY:
        lines.append(f"Winner: {state.winner.glyph}")
    elif state.is_full():
        lines.append("Draw")
    else:
        lines.append(f"Current player: {state.current_player.glyph}")

    return "".join(line + "\n" for line in lines)
