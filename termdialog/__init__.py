"""
module termdialog.__init__

Contains the imports of all prompt classes that make up the public interface of
termdialog. Also contains definitions that indicate the current version of termdialog.
"""

__version_info__: tuple[int, ...] = (0, 3, 0)
__version__: str = ".".join(map(str, __version_info__))

# pylint: disable=wrong-import-position
from .paths import Completion, CompletionSuffix, PathCompleter, complete_path
from .paths import escape_path, wrap_sep_string
from .prompts import Confirmation, Editor, FileBrowser, LineInput, PasswordInput
from .termdialogexception import TermDialogException
from .terminal.abstract import Terminal
from .terminal.exceptions import UserAbort
from .theme import (
    ColorfulTheme,
    CustomPromptCharacterTheme,
    DefaultTheme,
    SelectionStyle,
    Theme,
    ThemeRenderer,
)
from .validation import FunctionValidator, Validator, ValidatorChain
