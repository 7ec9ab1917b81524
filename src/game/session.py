"""
Game session: the one board a player is currently playing.

Holds the board and game state the presentation layer acts on, so
no module-level state is shared between games.
"""
import logging
import random
from typing import Optional

from .board import Board, BoardConfig, GameState
from .engine import GameListener, RevealEngine

logger = logging.getLogger(__name__)


class GameSession:
    """
    Owns the current board, its engine and the random source.

    Starting a new game discards the previous board and engine
    wholesale.
    """

    def __init__(
        self,
        listener: Optional[GameListener] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the session without a board.

        Args:
            listener: Receiver of game events for every board.
            seed: Seed for mine placement, for reproducible games.
        """
        self.listener = listener or GameListener()
        self.rng = random.Random(seed)
        self._engine: Optional[RevealEngine] = None

    def create_board(
        self, width: int, height: int, num_mines: Optional[int] = None
    ) -> Board:
        """
        Create and install a fresh board.

        Raises:
            InvalidConfiguration: If the size or mine count is out of range.
        """
        config = BoardConfig(width, height, num_mines)
        board = Board(config)
        self._engine = RevealEngine(board, self.listener, self.rng)
        logger.info(
            "New game: %dx%d with %d mines",
            config.width, config.height, config.num_mines,
        )
        return board

    def start_new_game(
        self, width: int, height: int, num_mines: Optional[int] = None
    ) -> Board:
        """Replace the current game with a new one of the given size."""
        return self.create_board(width, height, num_mines)

    @property
    def engine(self) -> RevealEngine:
        if self._engine is None:
            raise RuntimeError("No game in progress; call start_new_game first")
        return self._engine

    @property
    def board(self) -> Board:
        return self.engine.board

    @property
    def state(self) -> GameState:
        return self.engine.state

    @property
    def has_game(self) -> bool:
        return self._engine is not None

    @property
    def flags_remaining(self) -> int:
        return self.board.flags_remaining

    def reveal_cell(self, index: int) -> bool:
        """Reveal a cell of the current board."""
        return self.engine.reveal(index)

    def toggle_flag(self, index: int) -> bool:
        """Flag or unflag a cell of the current board."""
        return self.engine.toggle_flag(index)

    def hover_cell(self, index: int, entered: bool) -> bool:
        """Report the pointer entering or leaving a cell."""
        return self.engine.hover(index, entered)
