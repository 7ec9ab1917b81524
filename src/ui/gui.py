"""
Minesweeper GUI implemented with tkinter.

Left click reveals, right click flags, hovering shades hidden cells.
"""
import tkinter as tk
from tkinter import messagebox, simpledialog
from typing import Dict, List, Optional, Tuple

from game import (
    GameListener,
    GameSession,
    InvalidConfiguration,
    PreconditionViolation,
    RejectionReason,
    VisualState,
)

from .prompts import prompt_dimension

BACKGROUND = {
    VisualState.HIDDEN: "darkgrey",
    VisualState.HOVER_LIGHT: "darkgrey",
    VisualState.HOVER_DARK: "grey",
    VisualState.FLAGGED: "orange",
    VisualState.REVEALED: "grey",
    VisualState.MINE: "red",
    VisualState.EXPLODED: "red",
}

NUMBER_COLORS = {
    1: "blue", 2: "green", 3: "red", 4: "navy",
    5: "maroon", 6: "teal", 7: "black", 8: "dimgray",
}


def cell_style(state: VisualState, adjacent_mines: int) -> Dict[str, str]:
    """Label options that draw a cell in the given state."""
    text = ""
    if state == VisualState.REVEALED and adjacent_mines > 0:
        text = str(adjacent_mines)
    elif state in (VisualState.MINE, VisualState.EXPLODED):
        text = "*"
    return {
        "bg": BACKGROUND[state],
        "text": text,
        "fg": NUMBER_COLORS.get(adjacent_mines, "black"),
    }


class MinesweeperGUI(GameListener):
    """Main window: a size-prompting New Game button above the grid."""

    def __init__(
        self,
        size: Optional[Tuple[int, int]] = None,
        num_mines: Optional[int] = None,
        seed: Optional[int] = None,
    ) -> None:
        self.root = tk.Tk()
        self.root.title("Minesweeper")
        self.session = GameSession(self, seed=seed)
        self.num_mines = num_mines
        self.labels: List[tk.Label] = []

        toolbar = tk.Frame(self.root)
        toolbar.pack(side="top", fill="x", padx=5, pady=5)
        tk.Button(toolbar, text="New Game", command=self.new_game).pack(side="left")
        self.flags_label = tk.Label(toolbar, text="")
        self.flags_label.pack(side="right")

        self.grid_frame = tk.Frame(self.root, bg="black")
        self.grid_frame.pack(side="top", padx=5, pady=5)

        if size is not None:
            self._build(*size)
        else:
            self.root.after_idle(self.new_game)

    # ========================================================================
    # Game Setup
    # ========================================================================

    def new_game(self) -> None:
        """Ask for a board size and replace the current game."""
        width = prompt_dimension("width", self._ask)
        if width is None:
            return
        height = prompt_dimension("height", self._ask)
        if height is None:
            return
        self._build(width, height)

    def _ask(self, prompt: str) -> Optional[str]:
        return simpledialog.askstring("New Game", prompt, parent=self.root)

    def _build(self, width: int, height: int) -> None:
        try:
            self.session.start_new_game(width, height, self.num_mines)
        except InvalidConfiguration as error:
            messagebox.showerror("Minesweeper", str(error), parent=self.root)
            return

        for label in self.labels:
            label.destroy()
        self.labels = []

        for index in range(width * height):
            row, col = divmod(index, width)
            label = tk.Label(
                self.grid_frame,
                width=2,
                font=("Helvetica", 10, "bold"),
                **cell_style(VisualState.HIDDEN, 0),
            )
            label.grid(row=row, column=col, padx=1, pady=1, ipadx=2, ipady=2)
            self._bind(label, index)
            self.labels.append(label)
        self._update_flags()

    def _bind(self, label: tk.Label, index: int) -> None:
        label.bind("<Button-1>", lambda event: self._reveal(index))
        label.bind("<Button-2>", lambda event: self._flag(index))
        label.bind("<Button-3>", lambda event: self._flag(index))
        label.bind("<Enter>", lambda event: self.session.hover_cell(index, True))
        label.bind("<Leave>", lambda event: self.session.hover_cell(index, False))

    # ========================================================================
    # Input Handlers
    # ========================================================================

    def _reveal(self, index: int) -> None:
        try:
            self.session.reveal_cell(index)
        except PreconditionViolation as error:
            messagebox.showerror("Minesweeper", str(error), parent=self.root)

    def _flag(self, index: int) -> None:
        self.session.toggle_flag(index)
        self._update_flags()

    def _update_flags(self) -> None:
        self.flags_label.config(text=f"Flags: {self.session.flags_remaining}")

    # ========================================================================
    # GameListener
    # ========================================================================

    def on_cell_state_changed(
        self, index: int, state: VisualState, adjacent_mines: int
    ) -> None:
        self.labels[index].config(**cell_style(state, adjacent_mines))

    def on_game_won(self) -> None:
        messagebox.showinfo("Minesweeper", "You win! Good job", parent=self.root)

    def on_game_lost(self) -> None:
        messagebox.showinfo("Minesweeper", "You lost! Sorry", parent=self.root)

    def on_rejected_action(self, reason: RejectionReason) -> None:
        messagebox.showwarning("Minesweeper", reason.message, parent=self.root)

    def run(self) -> None:
        """Start the tkinter main loop."""
        self.root.mainloop()
