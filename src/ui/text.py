"""
Text front end: renders the board as ASCII and plays from a line prompt.
"""
from typing import Callable, List, Optional

from game import (
    Board,
    GameListener,
    GameSession,
    GameState,
    InvalidConfiguration,
    PreconditionViolation,
    RejectionReason,
)

from .prompts import prompt_dimension

HELP = "Commands: r <row> <col> reveal, f <row> <col> flag, n new game, q quit"


def render_board(board: Board) -> str:
    """
    Render the board as rows of symbols.

    Symbols: "." hidden, "F" flag, "*" mine, " " empty, 1-8 counts.
    """
    lines = []
    obs = board.get_observation()
    header = "    " + " ".join(f"{col % 10}" for col in range(board.width))
    lines.append(header)

    for row in range(board.height):
        row_str = f"{row:>3} "
        for col in range(board.width):
            val = obs[row, col]
            if val == -1:
                row_str += "."
            elif val == -2:
                row_str += "F"
            elif val == 9:
                row_str += "*"
            elif val == 0:
                row_str += " "
            else:
                row_str += str(val)
            row_str += " "
        lines.append(row_str.rstrip())

    return "\n".join(lines)


class ConsoleListener(GameListener):
    """Collects game messages until the console prints them."""

    def __init__(self) -> None:
        self.messages: List[str] = []

    def on_game_won(self) -> None:
        self.messages.append("You win! Good job")

    def on_game_lost(self) -> None:
        self.messages.append("You lost! Sorry")

    def on_rejected_action(self, reason: RejectionReason) -> None:
        self.messages.append(reason.message)

    def drain(self) -> List[str]:
        """Return pending messages and forget them."""
        messages, self.messages = self.messages, []
        return messages


class ConsoleGame:
    """Line-oriented game loop over a GameSession."""

    def __init__(
        self,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
        seed: Optional[int] = None,
    ) -> None:
        self.read = read
        self.write = write
        self.listener = ConsoleListener()
        self.session = GameSession(self.listener, seed=seed)

    def new_game(
        self,
        width: Optional[int] = None,
        height: Optional[int] = None,
        num_mines: Optional[int] = None,
    ) -> bool:
        """Start a game, prompting for any missing dimension."""
        if width is None:
            width = prompt_dimension("width", self.read)
        if width is not None and height is None:
            height = prompt_dimension("height", self.read)
        if width is None or height is None:
            return False
        try:
            self.session.start_new_game(width, height, num_mines)
        except InvalidConfiguration as error:
            self.write(str(error))
            return False
        self.write(
            f"{width}x{height} board, {self.session.board.mine_count} mines"
        )
        return True

    def handle(self, line: str) -> bool:
        """
        Execute one command line.

        Returns:
            False when the player asked to quit.
        """
        parts = line.split()
        if not parts:
            return True
        command = parts[0].lower()

        if command == "q":
            return False
        if command == "n":
            self.new_game()
        elif command in ("r", "f") and len(parts) == 3:
            self._act(command, parts[1], parts[2])
        else:
            self.write(HELP)
            return True

        self._show()
        return True

    def run(
        self,
        width: Optional[int] = None,
        height: Optional[int] = None,
        num_mines: Optional[int] = None,
    ) -> None:
        """Play until the player quits or input ends."""
        try:
            if not self.new_game(width, height, num_mines):
                return
            self.write(HELP)
            self._show()
            while self.handle(self.read("> ")):
                pass
        except EOFError:
            self.write("")

    def _act(self, command: str, row_text: str, col_text: str) -> None:
        board = self.session.board
        try:
            index = board.index(int(row_text), int(col_text))
        except (ValueError, PreconditionViolation):
            self.write(f"No cell at ({row_text}, {col_text})")
            return
        if command == "r":
            try:
                self.session.reveal_cell(index)
            except PreconditionViolation as error:
                self.write(str(error))
        else:
            self.session.toggle_flag(index)

    def _show(self) -> None:
        self.write(render_board(self.session.board))
        for message in self.listener.drain():
            self.write(message)
        if self.session.state != GameState.PLAYING:
            self.write("Type n for a new game or q to quit")
        else:
            self.write(f"Flags remaining: {self.session.flags_remaining}")
