"""
module termdialog.theme.styles

Contains the definitions of all custom built-in Pygments color schemes made
available to the colorful theme
"""

from typing import Dict, Type

from pygments.style import Style
from pygments.styles import get_all_styles, get_style_by_name

from ... import constants
from .tokyonightdark import TokyoNightDark

termdialog_styles: Dict[str, Type[Style]] = {"tokyo-night-dark": TokyoNightDark}


def get_color_scheme(name: str) -> Type[Style]:
    """
    Looks up a Pygments color scheme by name, preferring the built-in termdialog
    schemes and falling back to a stock Pygments scheme for unknown names

    Args:
        name (str): The name of the color scheme

    Returns:
        Type[Style]: The Pygments style class for the color scheme

    Raises:
        Nothing
    """

    if name in termdialog_styles:
        return termdialog_styles[name]

    return (
        get_style_by_name(name)
        if name in get_all_styles()
        else get_style_by_name(constants.COLOR_SCHEME_FALLBACK)
    )
