"""
Pytest configuration and shared fixtures.
"""
import random
import pytest
import sys
from pathlib import Path
from typing import Iterable, List, Tuple

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from game import (
    Board,
    BoardConfig,
    Cell,
    GameListener,
    RejectionReason,
    RevealEngine,
    VisualState,
    count_adjacent_mines,
)


# ============================================================================
# Helpers
# ============================================================================

class RecordingListener(GameListener):
    """Listener that remembers every event it receives."""

    def __init__(self) -> None:
        self.won = 0
        self.lost = 0
        self.changes: List[Tuple[int, VisualState, int]] = []
        self.rejections: List[RejectionReason] = []

    def on_game_won(self) -> None:
        self.won += 1

    def on_game_lost(self) -> None:
        self.lost += 1

    def on_cell_state_changed(
        self, index: int, state: VisualState, adjacent_mines: int
    ) -> None:
        self.changes.append((index, state, adjacent_mines))

    def on_rejected_action(self, reason: RejectionReason) -> None:
        self.rejections.append(reason)

    def states_of(self, index: int) -> List[VisualState]:
        return [state for changed, state, _ in self.changes if changed == index]


def build_mined_board(width: int, height: int, mines: Iterable[int]) -> Board:
    """Create a board with mines at fixed indices, as if after the first move."""
    mines = list(mines)
    board = Board(BoardConfig(width, height, len(mines)))
    for index in mines:
        board.get_cell(index).is_mine = True
    count_adjacent_mines(board)
    board.mark_first_move_done()
    return board


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with a fifth of its cells mined."""
    return Board()


@pytest.fixture
def small_board() -> Board:
    """Create a small 4x4 board with 3 mines."""
    return Board(BoardConfig(4, 4, 3))


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(BoardConfig(5, 5, 0))


@pytest.fixture
def corner_mines_board() -> Board:
    """
    5x5 board with mines in three corners.

        * 1 . 1 *
        1 1 . 1 1
        . . . . .
        1 1 . . .
        * 1 . . .
    """
    return build_mined_board(5, 5, [0, 4, 20])


# ============================================================================
# Engine Fixtures
# ============================================================================

@pytest.fixture
def listener() -> RecordingListener:
    return RecordingListener()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def small_engine(small_board, listener, rng) -> RevealEngine:
    """Engine over a fresh 4x4 board with 3 mines."""
    return RevealEngine(small_board, listener, rng)


@pytest.fixture
def corner_engine(corner_mines_board, listener) -> RevealEngine:
    """Engine over the corner-mines board, mines already placed."""
    return RevealEngine(corner_mines_board, listener)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
