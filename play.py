from __future__ import annotations

import argparse
import logging
import time

from snaketerm.clock import TickClock
from snaketerm.config import PRESETS, GameConfig
from snaketerm.controls import Command, apply_command


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Snake locally")
    parser.add_argument("--frontend", type=str, default="pygame", choices=["pygame", "terminal"])
    parser.add_argument("--preset", type=str, default="classic", choices=sorted(PRESETS))
    parser.add_argument("--width", type=int, default=None, help="Board width in cells")
    parser.add_argument("--height", type=int, default=None, help="Board height in cells")
    parser.add_argument("--tick-ms", type=float, default=None, help="Clock interval in milliseconds")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--cell-size", type=int, default=20, help="Pixels per cell (pygame only)")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Write logs to a file; the terminal frontend defaults to snake.log",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> GameConfig:
    tick_interval = args.tick_ms / 1000.0 if args.tick_ms else None
    return PRESETS[args.preset].with_overrides(
        board_width=args.width,
        board_height=args.height,
        tick_interval=tick_interval,
        seed=args.seed,
    )


def setup_logging(args: argparse.Namespace) -> None:
    log_file = args.log_file
    if log_file is None and args.frontend == "terminal":
        log_file = "snake.log"
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        filename=log_file,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run_pygame(config: GameConfig, cell_size: int) -> int:
    from snaketerm.render import PygameRenderer

    session = config.new_session()
    renderer = PygameRenderer(session.width, session.height, cell_size=cell_size)
    clock = TickClock(config.tick_interval)
    clock.reset(time.monotonic())

    running = True
    try:
        while running:
            for command in renderer.poll_commands():
                running = apply_command(session, command)
                if not running:
                    break
                if command is Command.RESTART:
                    clock.reset(time.monotonic())

            for _ in range(clock.due(time.monotonic())):
                session.on_tick()

            renderer.draw(session.snapshot())
    finally:
        renderer.close()
    return session.score


def main(argv=None) -> None:
    args = parse_args(argv)
    setup_logging(args)
    config = build_config(args)

    if args.frontend == "terminal":
        from snaketerm.terminal import run_terminal

        score = run_terminal(config)
    else:
        score = run_pygame(config, args.cell_size)

    print(f"Final score: {score}")


if __name__ == "__main__":
    main()
