"""
module termdialog.theme.themes.defaulttheme

Contains the definition of the DefaultTheme class, a plain-text theme that works
on any terminal
"""

from prompt_toolkit.formatted_text import FormattedText

from ..abstract import Theme
from ..enums import SelectionStyle


def confirmation_choices(default: bool | None) -> str:
    match default:
        case True:
            return "[Y/n]"
        case False:
            return "[y/N]"
        case _:
            return "[y/n]"


class DefaultTheme(Theme):
    """
    class DefaultTheme

    A plain-text theme that works on any terminal. Defaults are shown in brackets
    and the highlighted menu entry is marked with '>'
    """

    def format_confirmation_prompt(
        self: "DefaultTheme", prompt: str, default: bool | None
    ) -> FormattedText:
        choices: str = confirmation_choices(default)
        return FormattedText(
            [("", f"{prompt} {choices} " if len(prompt) > 0 else f"{choices} ")]
        )

    def format_confirmation_prompt_selection(
        self: "DefaultTheme", prompt: str, selection: bool
    ) -> FormattedText:
        answer: str = "yes" if selection else "no"
        return FormattedText(
            [("", f"{prompt} {answer}" if len(prompt) > 0 else answer)]
        )

    def format_error(self: "DefaultTheme", error: str) -> FormattedText:
        return FormattedText([("", f"error: {error}")])

    def format_prompt(self: "DefaultTheme", prompt: str) -> FormattedText:
        return FormattedText([("", f"{prompt}:")])

    def format_selection(
        self: "DefaultTheme", text: str, style: SelectionStyle
    ) -> FormattedText:
        marker: str = "> " if style == SelectionStyle.MENU_SELECTED else "  "
        return FormattedText([("", f"{marker}{text}")])

    def format_single_prompt_selection(
        self: "DefaultTheme", prompt: str, selection: str
    ) -> FormattedText:
        return FormattedText([("", f"{prompt}: {selection}")])

    def format_singleline_prompt(
        self: "DefaultTheme", prompt: str, default: str | None
    ) -> FormattedText:
        if default is not None:
            return FormattedText([("", f"{prompt} [{default}]: ")])

        return FormattedText([("", f"{prompt}: ")])
