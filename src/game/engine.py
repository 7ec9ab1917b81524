"""
Reveal engine for Minesweeper.

Turns reveal/flag/hover requests into board mutations, owns the
PLAYING -> WON | LOST state of one game and reports every visible
change to a listener supplied by the presentation layer.
"""
import logging
import random
from enum import Enum, auto
from typing import List, Optional

from .board import Board, GameState
from .cell import Cell
from .errors import RejectionReason
from .placement import prepare_board

logger = logging.getLogger(__name__)


# ============================================================================
# Presentation Interface
# ============================================================================

class VisualState(Enum):
    """How a cell should currently be drawn."""

    HIDDEN = auto()
    HOVER_LIGHT = auto()
    HOVER_DARK = auto()
    FLAGGED = auto()
    REVEALED = auto()
    MINE = auto()
    EXPLODED = auto()


class GameListener:
    """
    Receives game events from the engine.

    Every method is a no-op here; presentations override the ones
    they care about.
    """

    def on_game_won(self) -> None:
        """Called once when every mine has been flagged."""

    def on_game_lost(self) -> None:
        """Called once when a mine is revealed."""

    def on_cell_state_changed(
        self, index: int, state: VisualState, adjacent_mines: int
    ) -> None:
        """
        Called whenever a cell needs redrawing.

        Args:
            index: Flat index of the cell.
            state: New visual state.
            adjacent_mines: Neighbor mine count; meaningful for REVEALED.
        """

    def on_rejected_action(self, reason: RejectionReason) -> None:
        """Called when a flag request is refused."""


# ============================================================================
# Reveal Engine
# ============================================================================

class RevealEngine:
    """
    Game rules applied to one board.

    Mines are placed lazily on the first reveal, protecting the clicked
    cell and its neighbors. Zero-count regions are opened with an
    explicit stack, so the size of the board does not bound the
    recursion depth.
    """

    def __init__(
        self,
        board: Board,
        listener: Optional[GameListener] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Initialize the engine.

        Args:
            board: Board with all of its cells added.
            listener: Receiver of game events.
            rng: Random source used for mine placement.
        """
        self.board = board
        self.listener = listener or GameListener()
        self.rng = rng or random.Random()
        self._state = GameState.PLAYING

    @property
    def state(self) -> GameState:
        """Get current game state."""
        return self._state

    @property
    def is_playing(self) -> bool:
        return self._state == GameState.PLAYING

    # ========================================================================
    # Actions
    # ========================================================================

    def reveal(self, index: int) -> bool:
        """
        Reveal the cell at ``index``.

        The first reveal places the mines. Revealing a mine loses the
        game; revealing a zero-count cell opens its whole zero region.

        Returns:
            True if any cell was revealed, False for a no-op (flagged or
            already revealed cell, or finished game).
        """
        cell = self.board.get_cell(index)
        if not self.is_playing or not cell.is_hidden:
            return False

        if not self.board.first_move_done:
            prepare_board(self.board, index, self.rng)
            logger.info(
                "Mines placed: %d on a %dx%d board, first reveal at %d",
                self.board.mine_count, self.board.width,
                self.board.height, index,
            )

        if cell.is_mine:
            cell.reveal()
            self._lose(cell)
            return True

        opened = self._flood_reveal(index)
        logger.debug("Reveal at %d opened %d cells", index, opened)
        return True

    def toggle_flag(self, index: int) -> bool:
        """
        Flag a hidden cell or unflag a flagged one.

        Flags are refused before the first reveal and once the flag
        budget (the mine count) is spent.

        Returns:
            True if the cell's flag changed.
        """
        cell = self.board.get_cell(index)
        if not self.is_playing:
            return False
        if not self.board.first_move_done:
            self._reject(RejectionReason.GAME_NOT_STARTED)
            return False
        if cell.is_revealed:
            return False

        if cell.is_flagged:
            cell.toggle_flag()
            self.board.remove_flag()
            self._notify(cell, VisualState.HIDDEN)
            return True

        if self.board.flag_count >= self.board.mine_count:
            self._reject(RejectionReason.NO_FLAGS_REMAINING)
            return False

        cell.toggle_flag()
        self._notify(cell, VisualState.FLAGGED)
        if self.board.add_flag():
            self._win()
        return True

    def hover(self, index: int, entered: bool) -> bool:
        """
        Shade a hidden cell while the pointer is over it.

        Returns:
            True if a hover state was emitted.
        """
        cell = self.board.get_cell(index)
        if not self.is_playing or not cell.is_hidden:
            return False
        state = VisualState.HOVER_DARK if entered else VisualState.HOVER_LIGHT
        self._notify(cell, state)
        return True

    # ========================================================================
    # Internals
    # ========================================================================

    def _flood_reveal(self, index: int) -> int:
        """Reveal a safe cell and, through zero-count cells, its region."""
        opened = 0
        pending: List[int] = [index]
        while pending:
            cell = self.board.get_cell(pending.pop())
            if not cell.reveal():
                continue
            opened += 1
            self._notify(cell, VisualState.REVEALED)
            if cell.adjacent_mines > 0:
                continue
            for neighbor in cell.neighbors(self.board.width):
                if self.board.get_cell(neighbor).is_hidden:
                    pending.append(neighbor)
        return opened

    def _lose(self, exploded: Cell) -> None:
        """End the game and highlight every other mine, flagged or not."""
        self._state = GameState.LOST
        self._notify(exploded, VisualState.EXPLODED)
        for cell in self.board.cells:
            if cell.is_mine and cell is not exploded:
                cell.reveal()
                self._notify(cell, VisualState.MINE)
        logger.info("Game lost: mine revealed at %d", exploded.index)
        self.listener.on_game_lost()

    def _win(self) -> None:
        self._state = GameState.WON
        logger.info("Game won: all %d mines flagged", self.board.mine_count)
        self.listener.on_game_won()

    def _reject(self, reason: RejectionReason) -> None:
        logger.debug("Rejected action: %s", reason.name)
        self.listener.on_rejected_action(reason)

    def _notify(self, cell: Cell, state: VisualState) -> None:
        self.listener.on_cell_state_changed(
            cell.index, state, cell.adjacent_mines
        )
