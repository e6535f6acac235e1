"""
Unit tests for ThemeRenderer line accounting.
"""

import pytest
from conftest import FakeTerminal

from termdialog.theme import DefaultTheme, SelectionStyle, ThemeRenderer


def _make_renderer():
    terminal = FakeTerminal()
    return terminal, ThemeRenderer(terminal, DefaultTheme())


class TestHeight:
    """Test line counting of draws."""

    def test_starts_at_zero(self):
        _, render = _make_renderer()
        assert render.height == 0
        assert render.prompt_height == 0

    def test_inline_prompt_not_counted_until_line_added(self):
        terminal, render = _make_renderer()

        render.input_prompt("Name", None)
        assert render.height == 0
        assert terminal.last_write == "Name: "

        render.add_line()
        assert render.height == 1

    def test_lines_counted(self):
        _, render = _make_renderer()

        render.error("bad")
        render.selection("a", SelectionStyle.MENU_UNSELECTED)
        assert render.height == 2


class TestClear:
    """Test clear()."""

    def test_nothing_drawn_erases_nothing(self):
        terminal, render = _make_renderer()

        render.clear()
        assert terminal.cleared == []

    def test_erases_drawn_lines(self):
        terminal, render = _make_renderer()

        render.input_prompt("Name", None)
        render.add_line()
        render.clear()

        assert terminal.cleared == [1]
        assert render.height == 0

    def test_prompt_records_height(self):
        """A prompt line moves everything drawn so far into prompt_height."""
        terminal, render = _make_renderer()

        render.error("bad")
        render.single_prompt_selection("Name", "bob")
        assert render.prompt_height == 2
        assert render.height == 0

        render.clear()
        assert terminal.cleared == [2]
        assert render.prompt_height == 0

    def test_fixed_prompt_height(self):
        """With prompt resets disabled, the fixed prompt height is erased too."""
        terminal, render = _make_renderer()
        render.set_prompts_reset_height(False)
        render.set_prompt_height(1)

        render.prompt("Pick")
        render.selection(".", SelectionStyle.MENU_SELECTED)
        render.selection("..", SelectionStyle.MENU_UNSELECTED)
        assert render.height == 2

        render.clear()
        assert terminal.cleared == [3]
        assert render.prompt_height == 1

        render.prompt("Pick")
        render.selection(".", SelectionStyle.MENU_SELECTED)
        render.clear()
        assert terminal.cleared == [3, 2]

    def test_second_clear_without_draw_is_noop(self):
        terminal, render = _make_renderer()

        render.error("bad")
        render.clear()
        render.clear()
        assert terminal.cleared == [1]


class TestWrites:
    """Test that draws go through the theme."""

    def test_password_selection_hides_value(self):
        terminal, render = _make_renderer()

        render.password_prompt_selection("Password")
        assert terminal.last_write == "Password: [hidden]\n"

    def test_confirmation_prompt(self):
        terminal, render = _make_renderer()

        render.confirmation_prompt("Continue?", True)
        assert terminal.last_write == "Continue? [Y/n] "
        assert render.height == 0


class _FailingTerminal(FakeTerminal):
    def write_formatted(self, text, style=None):
        raise OSError("terminal gone")


class TestFailedWrites:
    """Test line accounting when the terminal fails."""

    def test_failed_write_not_counted(self):
        render = ThemeRenderer(_FailingTerminal(), DefaultTheme())

        with pytest.raises(OSError):
            render.error("bad")

        assert render.height == 0

    def test_failed_write_not_cleared(self):
        terminal = _FailingTerminal()
        render = ThemeRenderer(terminal, DefaultTheme())

        with pytest.raises(OSError):
            render.selection("a", SelectionStyle.MENU_SELECTED)
        render.clear()

        assert terminal.cleared == []


class TestClearTo:
    """Test clear_to()."""

    def test_erases_lines_after_mark(self):
        terminal, render = _make_renderer()

        render.error("first")
        mark = render.height
        render.error("second")
        render.error("third")
        render.clear_to(mark)

        assert terminal.cleared == [2]
        assert render.height == 1

    def test_nothing_after_mark(self):
        terminal, render = _make_renderer()

        render.error("first")
        render.clear_to(render.height)

        assert terminal.cleared == []
        assert render.height == 1
