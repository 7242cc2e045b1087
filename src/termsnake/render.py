# render.py
import numpy as np  # type: ignore

from .config import Glyphs
from .game import GameState


def render(state: GameState, glyphs: Glyphs = Glyphs()) -> str:
    """
    Full frame for the current state: bordered grid plus a score line.
    Priority inside the border is snake, then food, then empty.
    """
    board = np.full((state.height, state.width), glyphs.wall, dtype="<U1")
    board[1:-1, 1:-1] = glyphs.empty

    # food first so a segment on the same cell wins
    fx, fy = state.food
    board[fy, fx] = glyphs.food
    for x, y in state.snake:
        board[y, x] = glyphs.snake

    # the border is always wall, whatever sits on it
    board[0, :] = board[-1, :] = glyphs.wall
    board[:, 0] = board[:, -1] = glyphs.wall

    rows = ["".join(row) for row in board]
    rows.append(f"Score: {state.score}")
    return "\n".join(rows) + "\n"
