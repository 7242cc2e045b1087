from collections import deque

import pytest

from termsnake.game import Direction, GameState


class FakeKeyboard:
    """Byte source that replays scripted bytes and records every wait."""

    def __init__(self, *chunks):
        self.chunks = list(chunks)
        self.waits = []

    def __call__(self, timeout):
        self.waits.append(timeout)
        if not self.chunks:
            return None
        return self.chunks.pop(0)


@pytest.fixture
def keyboard():
    return FakeKeyboard


@pytest.fixture
def make_state():
    def _make(snake, direction=Direction.RIGHT, food=(1, 1), width=10, height=10, score=0):
        return GameState(
            snake=deque(snake),
            direction=direction,
            food=food,
            score=score,
            width=width,
            height=height,
        )
    return _make
