"""
Unit tests for the built-in themes.
"""

from prompt_toolkit.formatted_text import fragment_list_to_text
from prompt_toolkit.styles import BaseStyle
import pytest

from termdialog.theme import (
    ColorfulTheme,
    CustomPromptCharacterTheme,
    DefaultTheme,
    SelectionStyle,
)
from termdialog.theme.styles import TokyoNightDark, get_color_scheme


def _text(formatted):
    return fragment_list_to_text(formatted)


class TestDefaultTheme:
    """Test DefaultTheme output."""

    theme = DefaultTheme()

    @pytest.mark.parametrize(
        "default, expected",
        [
            (True, "Continue? [Y/n] "),
            (False, "Continue? [y/N] "),
            (None, "Continue? [y/n] "),
        ],
    )
    def test_confirmation_prompt(self, default, expected):
        assert _text(self.theme.format_confirmation_prompt("Continue?", default)) == (
            expected
        )

    def test_confirmation_prompt_without_text(self):
        assert _text(self.theme.format_confirmation_prompt("", True)) == "[Y/n] "

    def test_confirmation_selection(self):
        assert (
            _text(self.theme.format_confirmation_prompt_selection("Continue?", False))
            == "Continue? no"
        )

    def test_singleline_prompt(self):
        assert _text(self.theme.format_singleline_prompt("Name", "bob")) == (
            "Name [bob]: "
        )
        assert _text(self.theme.format_singleline_prompt("Name", None)) == "Name: "

    def test_selection_marker(self):
        assert (
            _text(self.theme.format_selection("a", SelectionStyle.MENU_SELECTED))
            == "> a"
        )
        assert (
            _text(self.theme.format_selection("a", SelectionStyle.MENU_UNSELECTED))
            == "  a"
        )

    def test_error(self):
        assert _text(self.theme.format_error("nope")) == "error: nope"

    def test_no_style(self):
        assert self.theme.style is None


class TestCustomPromptCharacterTheme:
    """Test CustomPromptCharacterTheme output."""

    def test_prompt_character(self):
        theme = CustomPromptCharacterTheme("$")

        assert _text(theme.format_singleline_prompt("Name", None)) == "Name $ "
        assert _text(theme.format_singleline_prompt("Name", "x")) == "Name [x] $ "
        assert _text(theme.format_single_prompt_selection("Name", "bob")) == (
            "Name $ bob"
        )

    def test_password_selection(self):
        theme = CustomPromptCharacterTheme()
        assert _text(theme.format_password_prompt_selection("Pass")) == (
            "Pass > [hidden]"
        )


class TestColorfulTheme:
    """Test ColorfulTheme output."""

    def test_has_style(self):
        assert isinstance(ColorfulTheme().style, BaseStyle)

    def test_fragments_use_classes(self):
        fragments = ColorfulTheme().format_single_prompt_selection("Name", "bob")

        assert ("class:value", "bob") in list(fragments)
        assert _text(fragments) == "Name: bob"

    def test_selection_marker(self):
        theme = ColorfulTheme("monokai")
        assert _text(theme.format_selection("a", SelectionStyle.MENU_SELECTED)) == (
            "❯ a"
        )


class TestColorSchemes:
    """Test color scheme lookup."""

    def test_builtin_scheme(self):
        assert get_color_scheme("tokyo-night-dark") is TokyoNightDark

    def test_unknown_scheme_falls_back(self):
        assert get_color_scheme("does-not-exist") is get_color_scheme("dracula")
