# config.py
from dataclasses import dataclass, field
from typing import Optional

# ----- Grid -----
WIDTH, HEIGHT = 40, 20
MIN_SIZE = 5

# ----- Glyphs -----
WALL_CHAR = "X"
SNAKE_CHAR = "#"
FOOD_CHAR = "@"
EMPTY_CHAR = " "

# ----- Timing (seconds) -----
TICK_SECONDS = 0.15      # lower value = faster game
ESCAPE_TIMEOUT = 0.001   # wait for the rest of an arrow-key sequence
GAME_OVER_PAUSE = 2.0


@dataclass(frozen=True)
class Glyphs:
    wall: str = WALL_CHAR
    snake: str = SNAKE_CHAR
    food: str = FOOD_CHAR
    empty: str = EMPTY_CHAR

    def __post_init__(self):
        for name in ("wall", "snake", "food", "empty"):
            value = getattr(self, name)
            if len(value) != 1:
                raise ValueError(f"glyph '{name}' must be a single character, got {value!r}")


# ----- Tunables -----
@dataclass
class Config:
    width: int = WIDTH
    height: int = HEIGHT
    tick_seconds: float = TICK_SECONDS
    escape_timeout: float = ESCAPE_TIMEOUT
    game_over_pause: float = GAME_OVER_PAUSE
    glyphs: Glyphs = field(default_factory=Glyphs)
    seed: Optional[int] = None  # None -> fresh randomness every game

    def __post_init__(self):
        """Reject grids without a usable interior and non-positive timings."""
        if self.width < MIN_SIZE or self.height < MIN_SIZE:
            raise ValueError(
                f"grid must be at least {MIN_SIZE}x{MIN_SIZE}, got {self.width}x{self.height}"
            )
        if self.tick_seconds <= 0:
            raise ValueError(f"tick_seconds must be positive, got {self.tick_seconds}")
        if self.escape_timeout < 0 or self.game_over_pause < 0:
            raise ValueError("escape_timeout and game_over_pause must not be negative")


CFG = Config()
