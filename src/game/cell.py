"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their state
(hidden/revealed/flagged), content (mine/number) and their position
relative to the board edges.
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Iterator


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        index: Row-major position of the cell on its board.
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        state: Current state (hidden, revealed, or flagged).
        protected: Whether mine placement must skip this cell.
        is_left_edge: Cell sits in the first column.
        is_right_edge: Cell sits in the last column.
        is_top_edge: Cell sits in the first row.
        is_bottom_edge: Cell sits in the last row.
    """

    index: int = 0
    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN
    protected: bool = False
    is_left_edge: bool = False
    is_right_edge: bool = False
    is_top_edge: bool = False
    is_bottom_edge: bool = False

    @classmethod
    def at(cls, index: int, width: int, height: int) -> "Cell":
        """
        Create a hidden cell for a position on a width x height board.

        Args:
            index: Row-major position of the cell.
            width: Number of columns on the board.
            height: Number of rows on the board.

        Returns:
            Cell with its edge flags set.
        """
        col = index % width
        return cls(
            index=index,
            is_left_edge=col == 0,
            is_right_edge=col == width - 1,
            is_top_edge=index < width,
            is_bottom_edge=index >= width * (height - 1),
        )

    def neighbors(self, width: int) -> Iterator[int]:
        """Yield indices of the up-to-8 neighbors that exist on the board."""
        for delta_row in (-1, 0, 1):
            if delta_row == -1 and self.is_top_edge:
                continue
            if delta_row == 1 and self.is_bottom_edge:
                continue
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                if delta_col == -1 and self.is_left_edge:
                    continue
                if delta_col == 1 and self.is_right_edge:
                    continue
                yield self.index + delta_row * width + delta_col

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was successfully revealed, False if already
            revealed or flagged.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    def protect(self) -> None:
        """Exclude this cell from mine placement."""
        self.protected = True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Convert cell to its snapshot value.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return self.adjacent_mines
