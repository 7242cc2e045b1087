# main.py
import argparse
import logging
from typing import Callable, List, Optional

from .config import CFG, Config, WIDTH, HEIGHT, TICK_SECONDS
from .game import Direction, GameState, init_game, tick
from .keys import ByteSource, Command, read_input
from .render import render
from .terminal import Terminal

logger = logging.getLogger(__name__)


def run_game(state: GameState, read_byte: ByteSource, draw: Callable[[str], None],
             config: Config = CFG) -> GameState:
    """
    Drive input -> tick -> render until the game is over.
    Quit ends the loop at once; a fatal tick still gets its frame drawn.
    """
    while state.running:
        # 1) input
        intent = read_input(read_byte, state.direction,
                            config.tick_seconds, config.escape_timeout)
        if intent is Command.QUIT:
            state.end("quit")
            break
        if isinstance(intent, Direction):
            state.direction = intent

        # 2) update
        tick(state)

        # 3) render
        draw(render(state, config.glyphs))

    return state


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termsnake",
        description="Snake in the terminal. Steer with WASD or the arrow keys, q quits.",
    )
    parser.add_argument("--width", type=int, default=WIDTH, help="grid width including walls")
    parser.add_argument("--height", type=int, default=HEIGHT, help="grid height including walls")
    parser.add_argument(
        "--tick",
        type=float,
        default=TICK_SECONDS,
        help="seconds per tick (lower value = faster game)",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement")
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="write logs here; the screen belongs to the game so nothing is logged otherwise",
    )
    parser.add_argument("--verbose", action="store_true", help="debug level logging")
    return parser


def configure_logging(log_file: Optional[str], verbose: bool) -> None:
    if log_file is None:
        logging.getLogger().addHandler(logging.NullHandler())
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = Config(width=args.width, height=args.height, tick_seconds=args.tick,
                        seed=args.seed)
    except ValueError as exc:
        parser.error(str(exc))

    configure_logging(args.log_file, args.verbose)

    state = init_game(config.width, config.height, config.seed)
    with Terminal() as term:
        run_game(state, term.read_byte, term.draw, config)
        term.show_game_over(state.score, config.width, config.height, config.game_over_pause)

    logger.info("Exiting with final score %d", state.score)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
