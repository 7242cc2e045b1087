# game.py
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Deque, Iterable, Optional, Tuple
import logging
import random

from .config import WIDTH, HEIGHT

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]  # (x, y)

MAX_SPAWN_ATTEMPTS = 100_000


class FoodSpawnError(RuntimeError):
    """No free interior cell could be found for the food."""


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))


class GameStatus(Enum):
    RUNNING = "running"
    OVER = "over"


# ---------- Helpers ----------
def is_opposite(a: Direction, b: Direction) -> bool:
    return a.opposite is b


def step(cell: Cell, direction: Direction) -> Cell:
    dx, dy = direction.value
    return (cell[0] + dx, cell[1] + dy)


def spawn_food(snake: Iterable[Cell], width: int = WIDTH, height: int = HEIGHT,
               rng: Optional[random.Random] = None) -> Cell:
    """Pick a uniformly random interior cell that no snake segment occupies.

    Raises FoodSpawnError if the interior is full or the attempts run out;
    the wall rules make that unreachable in a real game.
    """
    rng = rng or random.Random()
    occupied = set(snake)
    if len(occupied) >= (width - 2) * (height - 2):
        raise FoodSpawnError(f"interior of {width}x{height} grid is fully occupied")

    for _ in range(MAX_SPAWN_ATTEMPTS):
        # interior only: x in [1, width-2], y in [1, height-2]
        fx = rng.randint(1, width - 2)
        fy = rng.randint(1, height - 2)
        if (fx, fy) not in occupied:
            return (fx, fy)
    raise FoodSpawnError(f"no free cell found after {MAX_SPAWN_ATTEMPTS} attempts")


# ---------- State ----------
@dataclass
class GameState:
    snake: Deque[Cell]             # head at index 0
    direction: Direction
    food: Cell
    score: int = 0
    status: GameStatus = GameStatus.RUNNING
    width: int = WIDTH
    height: int = HEIGHT
    end_reason: Optional[str] = None   # "wall", "self" or "quit" once over
    rng: random.Random = field(default_factory=random.Random, repr=False)

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def running(self) -> bool:
        return self.status is GameStatus.RUNNING

    def end(self, reason: str) -> None:
        """Mark the game over. Over is terminal; a second call keeps the first reason."""
        if self.status is GameStatus.OVER:
            return
        self.status = GameStatus.OVER
        self.end_reason = reason
        logger.info("Game over (%s) with score %d", reason, self.score)


def init_game(width: int = WIDTH, height: int = HEIGHT, seed: Optional[int] = None) -> GameState:
    """Three segments in the middle of the grid, heading right."""
    cx, cy = width // 2, height // 2
    snake = deque([(cx, cy), (cx - 1, cy), (cx - 2, cy)])
    rng = random.Random(seed)
    food = spawn_food(snake, width, height, rng)
    logger.info("New game on %dx%d grid (seed=%s), food at %s", width, height, seed, food)
    return GameState(
        snake=snake,
        direction=Direction.RIGHT,
        food=food,
        width=width,
        height=height,
        rng=rng,
    )


# ---------- Update ----------
def tick(state: GameState) -> GameState:
    """
    Advance the game by one cell in state.direction.
    Collisions are checked against the pre-move body, tail included, so the
    head may not enter the cell the tail is about to leave.
    """
    if not state.running:
        return state

    nx, ny = step(state.head, state.direction)

    # Wall collision
    if nx in (0, state.width - 1) or ny in (0, state.height - 1):
        state.end("wall")
        return state

    new_head = (nx, ny)

    # Self collision
    if new_head in state.snake:
        state.end("self")
        return state

    # Move / grow
    if new_head == state.food:
        state.score += 1
        state.food = spawn_food([new_head, *state.snake], state.width, state.height, state.rng)
        logger.debug("Ate food at %s, score=%d, next food at %s", new_head, state.score, state.food)
    else:
        state.snake.pop()

    state.snake.appendleft(new_head)
    return state
