# src/termsnake/__init__.py
"""Terminal Snake: game state, input decoding, rendering and the game loop."""

from .config import Config, Glyphs
from .game import Direction, GameState, GameStatus, FoodSpawnError, init_game, spawn_food, tick
from .keys import Command, decode_key, read_input
from .render import render

__all__ = [
    "Config",
    "Glyphs",
    "Direction",
    "GameState",
    "GameStatus",
    "FoodSpawnError",
    "init_game",
    "spawn_food",
    "tick",
    "Command",
    "decode_key",
    "read_input",
    "render",
]
