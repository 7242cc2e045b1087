# keys.py
"""
Keyboard input for the game loop.

A keystroke arrives as one byte (w/a/s/d, q) or as a three byte ANSI arrow
sequence (ESC '[' A/B/C/D) that the terminal may deliver in pieces.
`decode_key` is a pure state machine over the bytes collected so far;
`read_input` drives it with a byte source that waits at most `timeout`
for the first byte and `escape_timeout` for each of the two follow-ups.
"""
from enum import Enum
from typing import Callable, Optional, Union
import logging

from .config import TICK_SECONDS, ESCAPE_TIMEOUT
from .game import Direction, is_opposite

logger = logging.getLogger(__name__)

ESC = b"\x1b"
CSI = ESC + b"["


class Command(Enum):
    QUIT = "quit"
    PENDING = "pending"  # incomplete escape sequence; only decode_key returns it


KeyResult = Union[Direction, Command, None]

# waits up to `timeout` seconds, returns one byte or None
ByteSource = Callable[[float], Optional[bytes]]

LETTER_KEYS = {
    b"w": Direction.UP,
    b"s": Direction.DOWN,
    b"d": Direction.RIGHT,
    b"a": Direction.LEFT,
}

ARROW_KEYS = {
    b"A": Direction.UP,
    b"B": Direction.DOWN,
    b"C": Direction.RIGHT,
    b"D": Direction.LEFT,
}


def decode_key(buffer: bytes) -> KeyResult:
    """Map the bytes read so far to a Direction, QUIT, PENDING or None."""
    if buffer in (ESC, CSI):
        return Command.PENDING
    if len(buffer) == 1:
        key = buffer.lower()
        if key == b"q":
            return Command.QUIT
        return LETTER_KEYS.get(key)
    if len(buffer) == 3 and buffer.startswith(CSI):
        return ARROW_KEYS.get(buffer[2:])
    return None


def read_input(read_byte: ByteSource, current_direction: Direction,
               timeout: float = TICK_SECONDS,
               escape_timeout: float = ESCAPE_TIMEOUT) -> Union[Direction, Command, None]:
    """
    Read one logical keystroke.

    Returns a new Direction, Command.QUIT, or None when nothing usable
    arrived in time. A direction that reverses `current_direction` is
    dropped, as is an escape sequence that does not complete within the
    two short follow-up waits.
    """
    buffer = read_byte(timeout)
    if not buffer:
        return None

    result = decode_key(buffer)
    for _ in range(2):
        if result is not Command.PENDING:
            break
        more = read_byte(escape_timeout)
        if not more:
            logger.debug("Discarding partial escape sequence %r", buffer)
            return None
        buffer += more
        result = decode_key(buffer)

    if isinstance(result, Direction) and is_opposite(result, current_direction):
        return None
    return result
