from __future__ import annotations

import argparse
import logging
import random

import colorama

from game.ruleset import DEFAULT_RULES
from ui.cli import gameloop


def setup_logging(level: str = "WARNING") -> None:
    """Console logging; the game itself only logs, the ui prints."""
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s | %(levelname)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level.upper())


def parse_args(argv=None):
    ap = argparse.ArgumentParser(
        description="CipherMind: crack the hidden color code."
    )
    ap.add_argument(
        "--seed", type=int, default=None, help="Seed for reproducible games."
    )
    ap.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
    )
    ap.add_argument(
        "--no-color", action="store_true", help="Disable colored output."
    )
    return ap.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.log_level)
    colorama.just_fix_windows_console()

    rng = random.Random(args.seed) if args.seed is not None else None
    gameloop(rules=DEFAULT_RULES, rng=rng, use_color=not args.no_color)


if __name__ == "__main__":
    main()
