"""
Presentation layer for the Minesweeper game.

The console front end is always available; the tkinter window is
imported lazily by the entry point so headless systems can still play.
"""
from .prompts import parse_dimension, prompt_dimension
from .text import ConsoleGame, ConsoleListener, render_board

__all__ = [
    "parse_dimension",
    "prompt_dimension",
    "ConsoleGame",
    "ConsoleListener",
    "render_board",
]
