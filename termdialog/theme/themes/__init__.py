"""
module termdialog.theme.themes

Contains the definitions of all built-in themes
"""

from .colorfultheme import ColorfulTheme
from .custompromptcharactertheme import CustomPromptCharacterTheme
from .defaulttheme import DefaultTheme
