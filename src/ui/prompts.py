"""
Board size prompts shared by the console and the window.
"""
from typing import Callable, Optional

from game import MAX_SIZE, MIN_SIZE, InvalidConfiguration


def parse_dimension(text: Optional[str]) -> int:
    """
    Parse a board width or height typed by the player.

    Raises:
        InvalidConfiguration: If the text is not a whole number between
            MIN_SIZE and MAX_SIZE.
    """
    try:
        value = int((text or "").strip())
    except ValueError:
        raise InvalidConfiguration(f"Not a number: {text!r}") from None
    if not MIN_SIZE <= value <= MAX_SIZE:
        raise InvalidConfiguration(
            f"Size must be between {MIN_SIZE} and {MAX_SIZE}, got {value}"
        )
    return value


def prompt_dimension(
    label: str, ask: Callable[[str], Optional[str]]
) -> Optional[int]:
    """
    Ask for a board dimension until a valid one is given.

    Args:
        label: "width" or "height".
        ask: Shows a prompt and returns the reply, or None if the player
            cancelled.

    Returns:
        The dimension, or None when the player cancelled.
    """
    reply = ask(
        f"Enter preferred board {label} "
        f"(must be between {MIN_SIZE} and {MAX_SIZE}):"
    )
    while reply is not None:
        try:
            return parse_dimension(reply)
        except InvalidConfiguration:
            reply = ask(f"Please enter a valid {label}:")
    return None
