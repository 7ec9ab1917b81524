"""
Mine placement and neighbor counting.

Runs once per board, on the first reveal: protect the clicked cell and
its neighbors, scatter the mines over the remaining cells, then store
each safe cell's adjacent mine count.
"""
import logging
import random
from typing import List, Optional

from .board import Board
from .errors import PreconditionViolation

logger = logging.getLogger(__name__)


def protect_neighborhood(board: Board, index: int) -> List[int]:
    """
    Mark a cell and its existing neighbors as protected.

    Args:
        board: Board being prepared.
        index: Flat index of the first revealed cell.

    Returns:
        Indices that were protected.
    """
    protected = [index] + board.neighbors(index)
    for position in protected:
        board.get_cell(position).protect()
    return protected


def place_mines(board: Board, rng: Optional[random.Random] = None) -> List[int]:
    """
    Place ``board.mine_count`` mines on unprotected cells.

    Samples without replacement from the cells that are neither
    protected nor already mined, so every valid layout is equally
    likely and placement always terminates.

    Args:
        board: Board whose cells receive the mines.
        rng: Random source; the module-level generator when omitted.

    Returns:
        Indices of the placed mines.

    Raises:
        PreconditionViolation: If there are fewer candidate cells than mines.
    """
    rng = rng or random.Random()
    candidates = [
        cell.index for cell in board.cells
        if not cell.protected and not cell.is_mine
    ]
    if board.mine_count > len(candidates):
        raise PreconditionViolation(
            f"Cannot place {board.mine_count} mines in "
            f"{len(candidates)} unprotected cells"
        )
    mine_positions = rng.sample(candidates, board.mine_count)
    for position in mine_positions:
        board.get_cell(position).is_mine = True
    logger.debug(
        "Placed %d mines among %d candidate cells",
        len(mine_positions), len(candidates),
    )
    return mine_positions


def count_adjacent_mines(board: Board) -> None:
    """Store the number of neighboring mines on every safe cell."""
    for cell in board.cells:
        if cell.is_mine:
            continue
        cell.adjacent_mines = sum(
            1 for neighbor in cell.neighbors(board.width)
            if board.get_cell(neighbor).is_mine
        )


def prepare_board(
    board: Board, first_index: int, rng: Optional[random.Random] = None
) -> None:
    """
    Run protection, placement and counting seeded at the first reveal.

    Args:
        board: Board with all cells added and no mines yet.
        first_index: Flat index of the first revealed cell.
        rng: Random source for placement.

    Raises:
        PreconditionViolation: If the board is incomplete or the mines do
            not fit outside the protected zone; no cell is changed then.
    """
    if not board.is_complete:
        raise PreconditionViolation(
            f"Board holds {len(board.cells)} of {board.num_cells} cells"
        )
    zone = set([first_index] + board.neighbors(first_index))
    available = sum(
        1 for cell in board.cells
        if cell.index not in zone and not cell.protected and not cell.is_mine
    )
    if board.mine_count > available:
        raise PreconditionViolation(
            f"Cannot place {board.mine_count} mines in "
            f"{available} unprotected cells"
        )
    protect_neighborhood(board, first_index)
    place_mines(board, rng)
    count_adjacent_mines(board)
    board.mark_first_move_done()
