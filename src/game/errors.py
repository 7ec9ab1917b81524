"""
Error types for the Minesweeper core.

Hard failures raise; expected user-facing refusals are reported as a
RejectionReason through the game listener instead.
"""
from enum import Enum


class MinesweeperError(Exception):
    """Base class for all Minesweeper errors."""


class InvalidConfiguration(MinesweeperError, ValueError):
    """Board size or mine count is outside the accepted range."""


class PreconditionViolation(MinesweeperError, ValueError):
    """A core operation was called in a way the board cannot honor."""


class RejectionReason(Enum):
    """Why a user action was refused without changing the game."""

    GAME_NOT_STARTED = "game_not_started"
    NO_FLAGS_REMAINING = "no_flags_remaining"

    @property
    def message(self) -> str:
        """Text suitable for showing to the player."""
        if self is RejectionReason.GAME_NOT_STARTED:
            return "You can't place a flag until you've started the game."
        return "All flags have been used!"
