"""Console Tetris.

Run with: `python -m console_tetris`

Frames are printed to standard output.  Keyboard input is read through a
small pygame window (D/A rotate, arrow keys move); pass ``--input none`` to
watch pieces fall without controls.
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from .config import SPAWN_X, SPAWN_Y, TICK_MS, GameConfig, InputPolicy
from .board import HEIGHT, WIDTH
from .controls import InputSource, NullInput
from .render import ConsoleRenderer
from .runner import GameRunner


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="console_tetris", description="Play Tetris in the console.")
    parser.add_argument("--width", type=int, default=WIDTH, help="Board width in cells.")
    parser.add_argument("--height", type=int, default=HEIGHT, help="Board height in cells.")
    parser.add_argument("--tick-ms", type=int, default=TICK_MS, help="Milliseconds between ticks.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the piece randomizer.")
    parser.add_argument(
        "--input",
        choices=("keyboard", "none"),
        default="keyboard",
        help="Where move/rotate signals come from.",
    )
    parser.add_argument(
        "--one-input-per-class",
        action="store_true",
        help="Apply at most one rotation and one shift per tick.",
    )
    parser.add_argument(
        "--max-ticks",
        type=int,
        default=None,
        help="Stop after this many ticks even if the game is not over.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> GameConfig:
    policy = InputPolicy.ONE_PER_CLASS if args.one_input_per_class else InputPolicy.ALL
    return GameConfig(
        width=args.width,
        height=args.height,
        spawn_x=SPAWN_X,
        spawn_y=SPAWN_Y,
        tick_ms=args.tick_ms,
        seed=args.seed,
        input_policy=policy,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING), format="%(message)s")

    runner = GameRunner(build_config(args), ConsoleRenderer(), max_ticks=args.max_ticks)
    input_source: InputSource = NullInput()
    if args.input == "keyboard":
        from .pygame_input import PygameKeyboard

        input_source = PygameKeyboard(on_quit=runner.stop)
    runner.input_source = input_source
    runner.run()


if __name__ == "__main__":
    main()
