"""
Board module for Minesweeper game.

Holds the row-major sequence of cells together with the mine budget,
flag count and first-move flag. Mine placement and revealing live in
their own modules and mutate the board through this interface.
"""
import logging
from dataclasses import InitVar, dataclass, field
from enum import Enum, auto
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .cell import Cell
from .errors import InvalidConfiguration, PreconditionViolation

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

MIN_SIZE = 4
MAX_SIZE = 100
MINE_DENSITY_DIVISOR = 5


class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


def default_mine_count(width: int, height: int) -> int:
    """Mine count used when a game is started from its size alone."""
    return width * height // MINE_DENSITY_DIVISOR


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns (4-100).
        height: Number of rows (4-100).
        num_mines: Total mines to place; defaults to a fifth of the cells.
    """

    width: int = 9
    height: int = 9
    num_mines: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate_dimensions()
        if self.num_mines is None:
            self.num_mines = default_mine_count(self.width, self.height)
        self._validate_mines()

    def _validate_dimensions(self) -> None:
        """Ensure width and height are integers inside the allowed range."""
        for name, value in (("width", self.width), ("height", self.height)):
            if not _is_int(value):
                raise InvalidConfiguration(f"Board {name} must be an integer")
            if not MIN_SIZE <= value <= MAX_SIZE:
                raise InvalidConfiguration(
                    f"Board {name} must be between {MIN_SIZE} and {MAX_SIZE}"
                )

    def _validate_mines(self) -> None:
        """Ensure the mine count leaves at least one safe cell."""
        if not _is_int(self.num_mines):
            raise InvalidConfiguration("Number of mines must be an integer")
        if self.num_mines < 0:
            raise InvalidConfiguration("Number of mines cannot be negative")
        max_mines = self.width * self.height - 1
        if self.num_mines > max_mines:
            raise InvalidConfiguration(f"Too many mines (max {max_mines})")

    @property
    def num_cells(self) -> int:
        """Total number of cells on the board."""
        return self.width * self.height


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Cells are stored in row-major order and addressed by their flat
    index. A board built with ``populate=False`` starts empty and must
    be filled with exactly ``width * height`` cells through
    :meth:`add_cell`.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    populate: InitVar[bool] = True
    _cells: List[Cell] = field(default_factory=list, repr=False)
    _mine_count: int = 0
    _flag_count: int = 0
    _first_move_done: bool = False

    def __post_init__(self, populate: bool) -> None:
        """Create the cells and take the mine budget from the config."""
        self._mine_count = self.config.num_mines
        if populate:
            self._init_cells()

    # ========================================================================
    # Cell Storage (Low-level)
    # ========================================================================

    def _init_cells(self) -> None:
        """Fill the board with hidden cells in row-major order."""
        for index in range(self.num_cells):
            self.add_cell(Cell.at(index, self.width, self.height))

    def add_cell(self, cell: Cell) -> None:
        """
        Append a cell to the row-major sequence.

        Raises:
            PreconditionViolation: If the board is full or the cell's index
                does not match the next free position.
        """
        if len(self._cells) >= self.num_cells:
            raise PreconditionViolation(
                f"Board already holds all {self.num_cells} cells"
            )
        if cell.index != len(self._cells):
            raise PreconditionViolation(
                f"Expected cell index {len(self._cells)}, got {cell.index}"
            )
        self._cells.append(cell)

    def get_cell(self, index: int) -> Cell:
        """
        Get the cell at a flat index.

        Raises:
            PreconditionViolation: If index is outside the board.
        """
        if not _is_int(index) or not 0 <= index < len(self._cells):
            raise PreconditionViolation(f"Cell index {index!r} is out of range")
        return self._cells[index]

    def neighbors(self, index: int) -> List[int]:
        """Get indices of the existing neighbors of a cell."""
        return list(self.get_cell(index).neighbors(self.width))

    def index(self, row: int, col: int) -> int:
        """Convert a (row, col) position to a flat index."""
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise PreconditionViolation(f"Position ({row}, {col}) is off the board")
        return row * self.width + col

    def position(self, index: int) -> Tuple[int, int]:
        """Convert a flat index to its (row, col) position."""
        return divmod(self.get_cell(index).index, self.width)

    # ========================================================================
    # Mines and Flags (Mid-level)
    # ========================================================================

    def set_mine_count(self, count: int) -> None:
        """
        Set how many mines will be placed on the first reveal.

        Raises:
            PreconditionViolation: If mines are already placed or the count
                would not leave a safe cell.
        """
        if self._first_move_done:
            raise PreconditionViolation("Mine count is fixed after the first move")
        if not _is_int(count) or not 0 <= count < self.num_cells:
            raise PreconditionViolation(
                f"Mine count must be between 0 and {self.num_cells - 1}"
            )
        self._mine_count = count
        logger.debug("Mine count set to %d", count)

    def add_flag(self) -> bool:
        """
        Count one more placed flag.

        Returns:
            True if the flag budget is now used up and every mine is
            flagged, i.e. the game is won.
        """
        if self._flag_count >= self._mine_count:
            raise PreconditionViolation("No flags remaining")
        self._flag_count += 1
        if self._flag_count == self._mine_count:
            return self.check_win()
        return False

    def remove_flag(self) -> None:
        """Count one flag fewer."""
        if self._flag_count == 0:
            raise PreconditionViolation("No flags to remove")
        self._flag_count -= 1

    def check_win(self) -> bool:
        """Check whether every mine cell is flagged."""
        return all(cell.is_flagged for cell in self._cells if cell.is_mine)

    def mark_first_move_done(self) -> None:
        """Record that mines have been placed."""
        self._first_move_done = True

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def num_cells(self) -> int:
        return self.config.num_cells

    @property
    def cells(self) -> Sequence[Cell]:
        """Read-only view of the cells in row-major order."""
        return tuple(self._cells)

    @property
    def is_complete(self) -> bool:
        """Check whether every cell has been added."""
        return len(self._cells) == self.num_cells

    @property
    def mine_count(self) -> int:
        return self._mine_count

    @property
    def flag_count(self) -> int:
        return self._flag_count

    @property
    def flags_remaining(self) -> int:
        return self._mine_count - self._flag_count

    @property
    def first_move_done(self) -> bool:
        return self._first_move_done

    def hidden_indices(self) -> List[int]:
        """Get indices of cells that are neither revealed nor flagged."""
        return [cell.index for cell in self._cells if cell.is_hidden]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.full(self.num_cells, -1, dtype=np.int8)
        for cell in self._cells:
            obs[cell.index] = cell.to_observation()
        return obs.reshape(self.height, self.width)
