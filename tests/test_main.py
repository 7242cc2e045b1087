"""
Tests for main.py - the game loop and the command line entry point.
"""

import pytest

import termsnake.main as main_module
from termsnake.config import Config
from termsnake.game import Direction, GameStatus
from termsnake.main import build_parser, run_game

CONFIG = Config(width=10, height=10, tick_seconds=0.15)


class TestRunGame:
    def test_quit_skips_tick_and_render(self, make_state, keyboard):
        """Quit ends the loop before the snake moves or a frame is drawn."""
        state = make_state([(4, 4), (3, 4), (2, 4)])
        frames = []
        run_game(state, keyboard(b"q"), frames.append, CONFIG)
        assert state.status is GameStatus.OVER
        assert state.end_reason == "quit"
        assert list(state.snake) == [(4, 4), (3, 4), (2, 4)]
        assert frames == []

    def test_fatal_tick_is_rendered(self, make_state, keyboard):
        """The frame of the colliding tick is still drawn, then the loop stops."""
        state = make_state([(8, 5), (7, 5), (6, 5)])
        frames = []
        kb = keyboard()
        run_game(state, kb, frames.append, CONFIG)
        assert state.end_reason == "wall"
        assert len(frames) == 1
        assert frames[0].endswith("Score: 0\n")
        assert kb.waits == [0.15]

    def test_turn_applies_before_tick(self, make_state, keyboard):
        """A key read this tick steers this tick's move."""
        state = make_state([(4, 4), (3, 4), (2, 4)], food=(1, 1))
        frames = []
        run_game(state, keyboard(b"s"), frames.append, CONFIG)
        # down from (4,4): four moves to (4,8), the fifth hits the bottom wall
        assert state.direction is Direction.DOWN
        assert state.head == (4, 8)
        assert state.end_reason == "wall"
        assert len(frames) == 5

    def test_reverse_key_is_ignored(self, make_state, keyboard):
        """Pressing the opposite way keeps the snake going."""
        state = make_state([(4, 4), (3, 4), (2, 4)], food=(1, 1))
        run_game(state, keyboard(b"a"), lambda frame: None, CONFIG)
        assert state.direction is Direction.RIGHT
        assert state.end_reason == "wall"
        assert state.head == (8, 4)

    def test_score_reaches_frame(self, make_state, keyboard):
        """Eating updates the score line of the same tick's frame."""
        state = make_state([(4, 4), (3, 4), (2, 4)], food=(5, 4))
        frames = []
        run_game(state, keyboard(None, b"q"), frames.append, CONFIG)
        assert state.score == 1
        assert len(frames) == 1
        assert frames[0].endswith("Score: 1\n")


class FakeTerminal:
    instances = []

    def __init__(self):
        self.drawn = []
        self.game_over = None
        self.restored = False
        FakeTerminal.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.restored = True

    def read_byte(self, timeout):
        return b"q"

    def draw(self, frame):
        self.drawn.append(frame)

    def show_game_over(self, score, width, height, pause):
        self.game_over = (score, width, height, pause)


class TestMain:
    def test_parser_defaults(self):
        """Defaults match the built-in configuration."""
        args = build_parser().parse_args([])
        assert (args.width, args.height, args.tick) == (40, 20, 0.15)
        assert args.seed is None
        assert args.log_file is None
        assert args.verbose is False

    def test_invalid_grid_is_rejected(self, monkeypatch):
        """Too small a grid is a usage error and never touches the terminal."""
        FakeTerminal.instances = []
        monkeypatch.setattr(main_module, "Terminal", FakeTerminal)
        with pytest.raises(SystemExit) as excinfo:
            main_module.main(["--width", "3"])
        assert excinfo.value.code == 2
        assert FakeTerminal.instances == []

    def test_quit_exits_zero(self, monkeypatch):
        """A quit game shows the final screen, restores the terminal and exits 0."""
        FakeTerminal.instances = []
        monkeypatch.setattr(main_module, "Terminal", FakeTerminal)
        assert main_module.main(["--width", "12", "--height", "8", "--seed", "1"]) == 0
        term = FakeTerminal.instances[0]
        assert term.drawn == []
        assert term.game_over == (0, 12, 8, 2.0)
        assert term.restored

    def test_log_file(self, monkeypatch, tmp_path):
        """--log-file sends records to that file."""
        configured = {}
        monkeypatch.setattr(main_module, "Terminal", FakeTerminal)
        monkeypatch.setattr(
            main_module.logging, "basicConfig", lambda **kwargs: configured.update(kwargs)
        )
        log_file = str(tmp_path / "snake.log")
        main_module.main(["--log-file", log_file, "--verbose"])
        assert configured["filename"] == log_file
        assert configured["level"] == main_module.logging.DEBUG
