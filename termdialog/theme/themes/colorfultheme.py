"""
module termdialog.theme.themes.colorfultheme

Contains the definition of the ColorfulTheme class, a theme that colors prompts,
defaults, errors and menu highlights using a Pygments color scheme
"""

from typing import Any, Dict, Type

from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.styles import BaseStyle, Style
from pygments.style import Style as PygmentsStyle
from pygments.token import Token

from ... import constants
from ..abstract import Theme
from ..enums import SelectionStyle
from ..styles import get_color_scheme
from .defaulttheme import confirmation_choices

_class_tokens: Dict[str, Any] = {
    "default": Token.Literal.String.Symbol,
    "error": Token.Error,
    "hint": Token.Comment,
    "prompt": Token.Keyword,
    "selection": Token.Text,
    "selection.selected": Token.Name.Builtin,
    "value": Token.Name.Label,
}


def _style_from_color_scheme(color_scheme: Type[PygmentsStyle]) -> BaseStyle:
    colors: Dict[str, str] = {
        class_name: color_scheme.style_for_token(token)["color"] or "ffffff"
        for class_name, token in _class_tokens.items()
    }

    return Style.from_dict(
        {
            "default": f"fg:#{colors['default']}",
            "error": f"fg:#{colors['error']} bold",
            "hint": f"fg:#{colors['hint']}",
            "no": "fg:ansired bold",
            "prompt": f"fg:#{colors['prompt']} bold",
            "selection": f"fg:#{colors['selection']}",
            "selection.selected": f"fg:#{colors['selection.selected']} bold",
            "value": f"fg:#{colors['value']}",
            "yes": "fg:ansigreen bold",
        }
    )


class ColorfulTheme(Theme):
    """
    class ColorfulTheme

    A theme that colors prompts, defaults, errors and menu highlights using the
    colors of a Pygments color scheme
    """

    __style: BaseStyle
    color_scheme: str

    def __init__(
        self: "ColorfulTheme", color_scheme: str = constants.COLOR_SCHEME_DEFAULT
    ) -> None:
        self.color_scheme = color_scheme
        self.__style = _style_from_color_scheme(get_color_scheme(color_scheme))

    @property
    def style(self: "ColorfulTheme") -> BaseStyle:
        return self.__style

    def format_confirmation_prompt(
        self: "ColorfulTheme", prompt: str, default: bool | None
    ) -> FormattedText:
        choices: str = confirmation_choices(default)
        fragments = [("class:prompt", prompt), ("", " ")] if len(prompt) > 0 else []
        return FormattedText(fragments + [("class:hint", choices), ("", " ")])

    def format_confirmation_prompt_selection(
        self: "ColorfulTheme", prompt: str, selection: bool
    ) -> FormattedText:
        fragments = [("class:prompt", prompt), ("", " ")] if len(prompt) > 0 else []
        return FormattedText(
            fragments + [("class:yes", "yes") if selection else ("class:no", "no")]
        )

    def format_error(self: "ColorfulTheme", error: str) -> FormattedText:
        return FormattedText([("class:error", f"✘ {error}")])

    def format_prompt(self: "ColorfulTheme", prompt: str) -> FormattedText:
        return FormattedText([("class:prompt", prompt), ("", ":")])

    def format_selection(
        self: "ColorfulTheme", text: str, style: SelectionStyle
    ) -> FormattedText:
        if style == SelectionStyle.MENU_SELECTED:
            return FormattedText([("class:selection.selected", f"❯ {text}")])

        return FormattedText([("class:selection", f"  {text}")])

    def format_single_prompt_selection(
        self: "ColorfulTheme", prompt: str, selection: str
    ) -> FormattedText:
        return FormattedText(
            [("class:prompt", prompt), ("", ": "), ("class:value", selection)]
        )

    def format_singleline_prompt(
        self: "ColorfulTheme", prompt: str, default: str | None
    ) -> FormattedText:
        if default is not None:
            return FormattedText(
                [
                    ("class:prompt", prompt),
                    ("", " "),
                    ("class:default", f"[{default}]"),
                    ("", ": "),
                ]
            )

        return FormattedText([("class:prompt", prompt), ("", ": ")])
