#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py [gui] [--width W] [--height H] [--mines N] [--seed S]
    python main.py console [--width W] [--height H] [--mines N] [--seed S]
"""
import argparse
import logging
import sys
from pathlib import Path

# Add src to path when running from a checkout
sys.path.insert(0, str(Path(__file__).parent / "src"))

from game import BoardConfig, InvalidConfiguration
from ui import ConsoleGame


def validate_args(args: argparse.Namespace) -> None:
    """Check a fully given board size before any window opens."""
    if args.width is not None and args.height is not None:
        BoardConfig(args.width, args.height, args.mines)


def play_console(args: argparse.Namespace) -> None:
    """Play in the terminal."""
    game = ConsoleGame(seed=args.seed)
    game.run(args.width, args.height, args.mines)


def play_gui(args: argparse.Namespace) -> None:
    """Play in a tkinter window."""
    from ui.gui import MinesweeperGUI

    size = None
    if args.width is not None and args.height is not None:
        size = (args.width, args.height)
    MinesweeperGUI(size=size, num_mines=args.mines, seed=args.seed).run()


def add_board_options(parser: argparse.ArgumentParser) -> None:
    """Options shared by every front end."""
    parser.add_argument("--width", type=int, help="Board width (4-100)")
    parser.add_argument("--height", type=int, help="Board height (4-100)")
    parser.add_argument(
        "--mines", type=int, help="Number of mines (default: a fifth of the cells)"
    )
    parser.add_argument("--seed", type=int, help="Seed for mine placement")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )


def main() -> None:
    """Parse arguments and run the chosen front end."""
    parser = argparse.ArgumentParser(description="Minesweeper")
    parser.add_argument(
        "mode",
        nargs="?",
        choices=["gui", "console"],
        default="gui",
        help="Front end to use (default: gui)",
    )
    add_board_options(parser)

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        validate_args(args)
    except InvalidConfiguration as error:
        parser.error(str(error))

    if args.mode == "console":
        play_console(args)
    else:
        play_gui(args)


if __name__ == "__main__":
    main()
