"""
module termdialog.terminal.abstract.terminal

Contains the definition of the Terminal class, an abstract base class that is
extended by all termdialog terminal integrations (i.e., prompt_toolkit)
"""

from abc import ABCMeta, abstractmethod
from typing import Callable, List

from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.styles import BaseStyle

from ..dataclasses import KeyEvent
from ...paths import Completion


class Terminal(metaclass=ABCMeta):
    """
    class Terminal

    Abstract base class that is extended by all termdialog terminal integrations
    (i.e., prompt_toolkit). A terminal is owned by exactly one prompt for the
    duration of its interaction
    """

    @abstractmethod
    def clear_last_lines(self: "Terminal", count: int) -> None:
        """
        Moves the cursor up the specified number of lines and erases everything
        from there to the end of the screen

        Args:
            count (int): The number of lines above the cursor to erase

        Returns:
            Nothing

        Raises:
            OSError: If the terminal could not be written to
        """

    @abstractmethod
    def clear_line(self: "Terminal") -> None:
        """
        Erases the line the cursor is currently on and moves the cursor to
        its first column

        Args:
            None

        Returns:
            Nothing

        Raises:
            OSError: If the terminal could not be written to
        """

    def read_char(self: "Terminal") -> str:
        """
        Reads a single character from the terminal without waiting for a newline

        Args:
            None

        Returns:
            str: The character that was typed. Enter is returned as '\\n'

        Raises:
            UserAbort: If the user interrupted the read
        """

        return self.read_key().char

    @abstractmethod
    def read_key(self: "Terminal") -> KeyEvent:
        """
        Reads a single key press from the terminal in raw mode

        Args:
            None

        Returns:
            KeyEvent: The key that was pressed

        Raises:
            UserAbort: If the user interrupted the read
        """

    @abstractmethod
    def read_line(
        self: "Terminal",
        completer: Callable[[str], List[Completion]] | None = None,
    ) -> str:
        """
        Reads a full line of input from the terminal with echo enabled. The
        trailing newline is not included

        Args:
            completer (Callable[[str], List[Completion]] | None): An optional function
                that suggests completions for the text typed so far

        Returns:
            str: The line that was entered

        Raises:
            UserAbort: If the user interrupted the read
        """

    @abstractmethod
    def read_secure_line(self: "Terminal") -> str:
        """
        Reads a full line of input from the terminal without echoing it

        Args:
            None

        Returns:
            str: The line that was entered

        Raises:
            UserAbort: If the user interrupted the read
        """

    @abstractmethod
    def write_formatted(
        self: "Terminal", text: FormattedText, style: BaseStyle | None = None
    ) -> None:
        """
        Writes styled text at the current cursor position. Newlines in the text
        move the cursor to the start of the next line

        Args:
            text (FormattedText): The text fragments to write
            style (BaseStyle | None): The style used to resolve fragment classes

        Returns:
            Nothing

        Raises:
            OSError: If the terminal could not be written to
        """
