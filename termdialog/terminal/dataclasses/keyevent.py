"""
module termdialog.terminal.dataclasses.keyevent

Contains the definition of the KeyEvent dataclass, a single key press read from
a terminal in raw mode
"""

from dataclasses import dataclass
from typing import Type

from ..enums import Key


@dataclass(frozen=True)
class KeyEvent:
    """
    class KeyEvent

    A single key press read from a terminal in raw mode. For Key.CHAR events, char
    is the literal character that was typed. For all other keys, char is the
    character the key sends (i.e., '\\n' for enter or '\\x1b' for escape)
    """

    key: Key
    char: str = ""

    @classmethod
    def from_char(cls: Type["KeyEvent"], char: str) -> "KeyEvent":
        """
        Constructs a KeyEvent from a single typed character, mapping control
        characters to their named keys

        Args:
            char (str): The character that was typed

        Returns:
            KeyEvent: The key event for the character

        Raises:
            Nothing
        """

        match char:
            case "\n" | "\r":
                return cls(Key.ENTER, char)
            case "\t":
                return cls(Key.TAB, char)
            case "\x1b":
                return cls(Key.ESCAPE, char)
            case "\x7f" | "\x08":
                return cls(Key.BACKSPACE, char)
            case _:
                return cls(Key.CHAR, char)
