"""
module termdialog.theme.themes.custompromptcharactertheme

Contains the definition of the CustomPromptCharacterTheme class, a variation of the
default theme that ends line input prompts with a custom character instead of ':'
"""

from prompt_toolkit.formatted_text import FormattedText

from ... import constants
from .defaulttheme import DefaultTheme


class CustomPromptCharacterTheme(DefaultTheme):
    """
    class CustomPromptCharacterTheme

    A variation of the default theme that ends line input prompts with a custom
    character (i.e., 'Your name >') instead of ':'
    """

    prompt_character: str

    def __init__(
        self: "CustomPromptCharacterTheme",
        prompt_character: str = constants.PROMPT_CHARACTER_DEFAULT,
    ) -> None:
        self.prompt_character = prompt_character

    def format_single_prompt_selection(
        self: "CustomPromptCharacterTheme", prompt: str, selection: str
    ) -> FormattedText:
        return FormattedText([("", f"{prompt} {self.prompt_character} {selection}")])

    def format_singleline_prompt(
        self: "CustomPromptCharacterTheme", prompt: str, default: str | None
    ) -> FormattedText:
        if default is not None:
            return FormattedText(
                [("", f"{prompt} [{default}] {self.prompt_character} ")]
            )

        return FormattedText([("", f"{prompt} {self.prompt_character} ")])
