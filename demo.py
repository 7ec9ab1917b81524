#!/usr/bin/env python3
"""Watch a scripted player win one Minesweeper game and lose another."""
import os
import sys
import time
from pathlib import Path
from typing import Optional

sys.path.insert(0, str(Path(__file__).parent / "src"))

from game import GameSession
from ui import ConsoleListener, render_board


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def show(session: GameSession, listener: ConsoleListener, title: str, delay: float):
    clear_screen()
    print(f"=== {title} ===")
    print(f"Flags remaining: {session.flags_remaining}\n")
    print(render_board(session.board))
    for message in listener.drain():
        print(f"\n*** {message} ***")
    time.sleep(delay)


def demo(delay: float = 0.3, size: int = 9, mines: Optional[int] = None, seed: Optional[int] = None):
    """Play a flag-every-mine game, then a game that steps on a mine."""
    listener = ConsoleListener()
    session = GameSession(listener, seed=seed)
    center = (size // 2) * size + size // 2

    session.start_new_game(size, size, mines)
    session.reveal_cell(center)
    show(session, listener, "Game 1 | First reveal", delay)
    mine_cells = [cell.index for cell in session.board.cells if cell.is_mine]
    for step, index in enumerate(mine_cells, start=1):
        session.toggle_flag(index)
        row, col = session.board.position(index)
        show(session, listener, f"Game 1 | Flag {step} at ({row}, {col})", delay)

    time.sleep(1.0)  # Pause between games

    session.start_new_game(size, size, mines)
    session.reveal_cell(center)
    show(session, listener, "Game 2 | First reveal", delay)
    mine = next(cell.index for cell in session.board.cells if cell.is_mine)
    session.reveal_cell(mine)
    show(session, listener, "Game 2 | Stepped on a mine", delay)


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between moves")
    parser.add_argument("--size", type=int, default=9, help="Board size (NxN)")
    parser.add_argument("--mines", type=int, default=None, help="Number of mines (default: 20%% of cells)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for mine placement")
    args = parser.parse_args()

    demo(delay=args.delay, size=args.size, mines=args.mines, seed=args.seed)
