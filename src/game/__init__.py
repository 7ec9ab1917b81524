"""
Minesweeper game module.

Provides core game logic including board management, mine placement,
the reveal engine and the game session.
"""
from .cell import Cell, CellState
from .board import (
    Board,
    BoardConfig,
    GameState,
    MAX_SIZE,
    MIN_SIZE,
    default_mine_count,
)
from .engine import GameListener, RevealEngine, VisualState
from .errors import (
    InvalidConfiguration,
    MinesweeperError,
    PreconditionViolation,
    RejectionReason,
)
from .placement import (
    count_adjacent_mines,
    place_mines,
    prepare_board,
    protect_neighborhood,
)
from .session import GameSession

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "GameState",
    "MAX_SIZE",
    "MIN_SIZE",
    "default_mine_count",
    "GameListener",
    "RevealEngine",
    "VisualState",
    "InvalidConfiguration",
    "MinesweeperError",
    "PreconditionViolation",
    "RejectionReason",
    "count_adjacent_mines",
    "place_mines",
    "prepare_board",
    "protect_neighborhood",
    "GameSession",
]
