#!/usr/bin/env python3
"""
main.py - Entry point for the ConsoleUI demo.

Builds the demo scene stack and drives it, either inside curses (the
default) or by printing frames to stdout with --plain.

Usage:
    python main.py [--tick SECONDS] [--plain] [--steps N]
                   [--log-level LEVEL] [--log-file PATH]
"""

import argparse
import curses
import logging
import sys

from scenes import SceneRunner
from scenes.demo import TitleScene
from ui import CursesConsole, StreamConsole


logger = logging.getLogger(__name__)

# Plain mode reads no keys, so frames after the first never change.
PLAIN_STEPS = 1

_log_handler = None


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="ConsoleUI scene stack demo")
    parser.add_argument(
        "--tick",
        type=float,
        default=SceneRunner.TICK_SECONDS,
        help="seconds between main loop passes (default: %(default)s)",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help=(
            "print frames to stdout instead of using curses; no keys are read, "
            f"so the run stops after --steps passes (default: {PLAIN_STEPS})"
        ),
    )
    parser.add_argument(
        "--steps",
        type=int,
        default=None,
        help="stop after this many passes",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: %(default)s)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="write log records to this file",
    )
    return parser.parse_args(argv)


def configure_logging(level="WARNING", path=None):
    """Configure the root logger.

    Records go to a file when a path is given and are dropped otherwise,
    so log lines never land on the curses screen.
    """
    global _log_handler

    root = logging.getLogger()
    if _log_handler is not None:
        root.removeHandler(_log_handler)
        _log_handler.close()
    if path:
        handler = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    else:
        handler = logging.NullHandler()
    root.addHandler(handler)
    _log_handler = handler
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))


def build_runner(console, tick):
    """Create a runner with the title scene as the base of the stack."""
    runner = SceneRunner(console, tick=tick)
    runner.set_root(TitleScene(runner))
    return runner


def run_curses(stdscr, args):
    """Run the demo inside curses. Called from within curses.wrapper().

    Args:
        stdscr: The curses standard screen window.
        args: Parsed command line arguments.
    """
    curses.curs_set(0)  # Hide cursor
    # Key reads wait at most one tick, so they set the loop cadence.
    console = CursesConsole(stdscr, timeout_ms=int(args.tick * 1000))
    runner = build_runner(console, tick=0)
    return runner.run(max_steps=args.steps)


def main(argv=None):
    """Launch the ConsoleUI demo."""
    args = parse_args(argv)
    configure_logging(args.log_level, args.log_file)

    try:
        if args.plain:
            runner = build_runner(StreamConsole(sys.stdout), tick=args.tick)
            steps = PLAIN_STEPS if args.steps is None else args.steps
            passes = runner.run(max_steps=steps)
        else:
            passes = curses.wrapper(run_curses, args)
    except KeyboardInterrupt:
        return 0  # Clean exit on Ctrl+C
    except curses.error as e:
        print(f"Terminal error: {e}", file=sys.stderr)
        return 1

    logger.info("demo finished after %d passes", passes)
    return 0


if __name__ == "__main__":
    sys.exit(main())
