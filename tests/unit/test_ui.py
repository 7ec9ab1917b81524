"""
Unit tests for the presentation layer.

The window itself needs a display, so only its pure helpers are
exercised here; the console front end is driven with scripted input.
"""
from typing import Iterator, List

import pytest
from game import GameState, InvalidConfiguration, VisualState
from ui import ConsoleGame, parse_dimension, prompt_dimension, render_board

from conftest import build_mined_board


def scripted(replies: List[str]):
    """Build an input function that replays the given replies."""
    iterator: Iterator[str] = iter(replies)
    prompts: List[str] = []

    def ask(prompt: str) -> str:
        prompts.append(prompt)
        try:
            return next(iterator)
        except StopIteration:
            raise EOFError from None

    ask.prompts = prompts
    return ask


# ============================================================================
# Prompt Tests
# ============================================================================

class TestPrompts:
    """Test the board size prompts."""

    @pytest.mark.parametrize("text,value", [("4", 4), (" 100 ", 100), ("17", 17)])
    def test_parse_valid_dimension(self, text: str, value: int) -> None:
        assert parse_dimension(text) == value

    @pytest.mark.parametrize("text", ["3", "101", "abc", "", None, "4.5"])
    def test_parse_invalid_dimension(self, text) -> None:
        with pytest.raises(InvalidConfiguration):
            parse_dimension(text)

    def test_prompt_repeats_until_valid(self) -> None:
        ask = scripted(["2", "wide", "12"])
        assert prompt_dimension("width", ask) == 12
        assert ask.prompts == [
            "Enter preferred board width (must be between 4 and 100):",
            "Please enter a valid width:",
            "Please enter a valid width:",
        ]

    def test_prompt_cancel_returns_none(self) -> None:
        assert prompt_dimension("height", lambda prompt: None) is None


# ============================================================================
# Rendering Tests
# ============================================================================

class TestRenderBoard:
    """Test ASCII rendering."""

    def test_hidden_board(self) -> None:
        board = build_mined_board(4, 4, [0])
        lines = render_board(board).splitlines()
        assert lines[0] == "    0 1 2 3"
        assert lines[1] == "  0 . . . ."
        assert len(lines) == 5

    def test_symbols(self) -> None:
        board = build_mined_board(4, 4, [0, 3])
        board.get_cell(0).reveal()
        board.get_cell(3).toggle_flag()
        board.get_cell(1).reveal()
        board.get_cell(15).reveal()
        lines = render_board(board).splitlines()
        assert lines[1] == "  0 * 1 . F"
        assert lines[4] == "  3 . . ."


# ============================================================================
# Console Game Tests
# ============================================================================

class TestConsoleGame:
    """Test the line-oriented game loop."""

    def test_prompts_for_size_then_quits(self) -> None:
        output: List[str] = []
        game = ConsoleGame(read=scripted(["1", "5", "6", "q"]), write=output.append)
        game.run()
        assert game.session.board.width == 5
        assert game.session.board.height == 6
        assert "5x6 board, 6 mines" in output

    def test_flag_before_reveal_is_reported(self) -> None:
        output: List[str] = []
        game = ConsoleGame(read=scripted(["f 0 0", "q"]), write=output.append)
        game.run(4, 4)
        assert "You can't place a flag until you've started the game." in output

    def test_reveal_then_win_by_flags(self) -> None:
        output: List[str] = []
        game = ConsoleGame(read=scripted([]), write=output.append, seed=5)
        game.new_game(4, 4, 3)
        game.handle("r 0 0")
        for cell in game.session.board.cells:
            if cell.is_mine:
                row, col = game.session.board.position(cell.index)
                game.handle(f"f {row} {col}")
        assert game.session.state == GameState.WON
        assert "You win! Good job" in output

    def test_bad_coordinates_are_reported(self) -> None:
        output: List[str] = []
        game = ConsoleGame(read=scripted([]), write=output.append)
        game.new_game(4, 4)
        game.handle("r 9 9")
        assert "No cell at (9, 9)" in output

    def test_unknown_command_shows_help(self) -> None:
        output: List[str] = []
        game = ConsoleGame(read=scripted([]), write=output.append)
        game.new_game(4, 4)
        assert game.handle("hello") is True
        assert output[-1].startswith("Commands:")

    def test_too_many_mines_is_reported(self) -> None:
        output: List[str] = []
        game = ConsoleGame(read=scripted([]), write=output.append)
        assert game.new_game(4, 4, 16) is False
        assert any("Too many mines" in line for line in output)

    def test_mines_not_fitting_first_reveal_are_reported(self) -> None:
        output: List[str] = []
        game = ConsoleGame(read=scripted([]), write=output.append)
        assert game.new_game(4, 4, 8) is True
        assert game.handle("r 1 1") is True
        assert any("Cannot place 8 mines" in line for line in output)
        assert game.session.board.first_move_done is False
        assert game.handle("r 0 0") is True
        assert game.session.board.first_move_done is True

    def test_end_of_input_stops(self) -> None:
        game = ConsoleGame(read=scripted(["4", "4"]), write=lambda line: None)
        game.run()
        assert game.session.has_game is True


# ============================================================================
# Window Helper Tests
# ============================================================================

class TestCellStyle:
    """Test colors chosen for each visual state."""

    @pytest.fixture(autouse=True)
    def gui(self):
        pytest.importorskip("tkinter")
        from ui import gui
        return gui

    def test_revealed_count_is_shown(self, gui) -> None:
        style = gui.cell_style(VisualState.REVEALED, 3)
        assert style["text"] == "3"
        assert style["bg"] == "grey"

    def test_revealed_zero_is_blank(self, gui) -> None:
        assert gui.cell_style(VisualState.REVEALED, 0)["text"] == ""

    def test_flag_and_mines(self, gui) -> None:
        assert gui.cell_style(VisualState.FLAGGED, 0)["bg"] == "orange"
        assert gui.cell_style(VisualState.EXPLODED, 0)["bg"] == "red"
        assert gui.cell_style(VisualState.MINE, 0)["text"] == "*"

    def test_hover_shades(self, gui) -> None:
        assert gui.cell_style(VisualState.HOVER_DARK, 0)["bg"] == "grey"
        assert gui.cell_style(VisualState.HOVER_LIGHT, 0)["bg"] == "darkgrey"
