import os
from typing import FrozenSet

from termdialog import __version__


def _get_fallback_editor() -> str:
    if os.name == "posix":
        return "vi"
    elif os.name == "nt":
        return "notepad"

    raise NotImplementedError(f"OS {os.name!r} support not available")


APPLICATION_NAME: str = __name__[: __name__.index(".")]
APPLICATION_VERSION: str = __version__

CONFIG_VERSION: str = "0.1"

COLOR_SCHEME_DEFAULT: str = "tokyo-night-dark"
COLOR_SCHEME_FALLBACK: str = "dracula"

DIRECTORY_ENTRY_CURRENT: str = "."
DIRECTORY_ENTRY_PARENT: str = ".."

EDITOR_FALLBACK: str = _get_fallback_editor()

# seconds to wait after a lone escape byte before treating it as the escape key
ESCAPE_FLUSH_TIMEOUT: float = 0.05

HIDDEN_PASSWORD_TEXT: str = "[hidden]"

PATH_ESCAPE_CHARACTERS: FrozenSet[str] = frozenset("!()<>,?][{} \\'\"`*^#|$&;")

PROMPT_CHARACTER_DEFAULT: str = ">"

SUBSEP_CHARACTERS: FrozenSet[str] = frozenset('`"')
