"""
module termdialog.theme

Contains the Theme abstraction, the built-in themes and the ThemeRenderer that
prompts draw through
"""

from .abstract import Theme
from .enums import SelectionStyle
from .themerenderer import ThemeRenderer
from .themes import ColorfulTheme, CustomPromptCharacterTheme, DefaultTheme


def get_default_theme() -> Theme:
    """
    Returns the theme used by prompts that were not given one explicitly

    Args:
        None

    Returns:
        Theme: A new DefaultTheme instance

    Raises:
        Nothing
    """

    return DefaultTheme()
