# terminal.py
"""
Terminal mode manager.

Puts stdin into raw, non-echoing mode with the cursor hidden for the length
of a game, and guarantees the original mode comes back on every exit path:
normal return, exception, SIGTERM/SIGHUP, or interpreter shutdown (atexit).
"""
from __future__ import annotations

import atexit
import logging
import os
import select
import signal
import sys
import termios
import time
import tty
from typing import Callable, List, Optional, TextIO

logger = logging.getLogger(__name__)

# ----- ANSI sequences -----
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
CLEAR_SCREEN = "\x1b[2J"
CURSOR_HOME = "\x1b[H"
RESET_ATTRS = "\x1b[0m"

EXIT_SIGNALS = (signal.SIGTERM, signal.SIGHUP)


def move_to(row: int, col: int) -> str:
    """Cursor position escape for 0-based (row, col)."""
    return f"\x1b[{row + 1};{max(col, 0) + 1}H"


def _exit_on_signal(signum, frame):
    # SystemExit unwinds the loop so finally blocks and atexit handlers run
    raise SystemExit(128 + signum)


class Terminal:
    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.fd = self.stdin.fileno()
        self._saved_attrs = None
        self._saved_handlers = {}
        self._active = False

    # ---------- Mode ----------
    def setup(self) -> None:
        """Raw mode, no echo, hidden cursor, clear screen."""
        atexit.register(self.restore)
        self._active = True
        for signum in EXIT_SIGNALS:
            self._saved_handlers[signum] = signal.signal(signum, _exit_on_signal)

        self._saved_attrs = termios.tcgetattr(self.fd)
        tty.setraw(self.fd)
        self._write(CLEAR_SCREEN + CURSOR_HOME + HIDE_CURSOR)
        logger.debug("Terminal set to raw mode (fd=%d)", self.fd)

    def restore(self) -> None:
        """
        Undo setup(). Safe to call more than once; only the first call does
        anything. Every step is attempted even if an earlier one fails.
        """
        if not self._active:
            return
        self._active = False

        steps: List[Callable[[], None]] = [
            self._restore_attrs,
            lambda: self._write(SHOW_CURSOR + RESET_ATTRS + "\r\n"),
            self._restore_signals,
        ]
        for restore_step in steps:
            try:
                restore_step()
            except (OSError, termios.error, ValueError) as exc:
                logger.error("Terminal restore step failed: %s", exc)
        atexit.unregister(self.restore)
        logger.debug("Terminal restored")

    def _restore_attrs(self) -> None:
        if self._saved_attrs is not None:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self._saved_attrs)
            self._saved_attrs = None

    def _restore_signals(self) -> None:
        while self._saved_handlers:
            signum, handler = self._saved_handlers.popitem()
            signal.signal(signum, handler)

    def __enter__(self) -> "Terminal":
        try:
            self.setup()
        except BaseException:
            self.restore()
            raise
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.restore()

    # ---------- Input ----------
    def read_byte(self, timeout: float) -> Optional[bytes]:
        """One byte from the keyboard, or None if nothing arrives within timeout."""
        try:
            readable, _, _ = select.select([self.fd], [], [], timeout)
        except InterruptedError:
            return None
        if not readable:
            return None
        data = os.read(self.fd, 1)
        if not data:
            # EOF: keep the tick cadence instead of spinning
            time.sleep(timeout)
            return None
        return data

    # ---------- Output ----------
    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def draw(self, frame: str) -> None:
        """Repaint from the origin. Raw mode needs explicit CR before each LF."""
        self._write(CURSOR_HOME + frame.replace("\n", "\r\n"))

    def show_game_over(self, score: int, width: int, height: int, pause: float) -> None:
        self._write(
            move_to(height // 2, width // 2 - 5) + "GAME OVER!"
            + move_to(height // 2 + 1, width // 2 - 7) + f"Final Score: {score}"
            + move_to(height + 2, 0)
        )
        time.sleep(pause)
