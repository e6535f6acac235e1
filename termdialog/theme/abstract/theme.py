"""
module termdialog.theme.abstract.theme

Contains the definition of the Theme class, an abstract base class that is extended
by all termdialog themes. A theme supplies the literal text and styling for every
semantic element a prompt draws
"""

from abc import ABCMeta, abstractmethod

from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.styles import BaseStyle

from ... import constants
from ..enums import SelectionStyle


class Theme(metaclass=ABCMeta):
    """
    class Theme

    Abstract base class that is extended by all termdialog themes. Every method
    returns the formatted text for one semantic element without a trailing newline;
    the renderer decides how the element is placed on the terminal
    """

    @property
    def style(self: "Theme") -> BaseStyle | None:
        """
        Returns the prompt_toolkit style used to resolve the classes of the
        fragments this theme produces

        Args:
            None

        Returns:
            BaseStyle | None: The style for this theme or None if the theme
                produces unstyled text

        Raises:
            Nothing
        """

        return None

    @abstractmethod
    def format_confirmation_prompt(
        self: "Theme", prompt: str, default: bool | None
    ) -> FormattedText:
        """
        Formats a yes/no question that is waiting for an answer

        Args:
            prompt (str): The question being asked
            default (bool | None): The answer chosen by pressing enter or None if
                the default should not be shown

        Returns:
            FormattedText: The formatted question

        Raises:
            Nothing
        """

    @abstractmethod
    def format_confirmation_prompt_selection(
        self: "Theme", prompt: str, selection: bool
    ) -> FormattedText:
        """
        Formats a yes/no question after it has been answered

        Args:
            prompt (str): The question that was asked
            selection (bool): The answer that was given

        Returns:
            FormattedText: The formatted question and answer

        Raises:
            Nothing
        """

    @abstractmethod
    def format_error(self: "Theme", error: str) -> FormattedText:
        """
        Formats the reason an input was rejected

        Args:
            error (str): The human-readable rejection reason

        Returns:
            FormattedText: The formatted error

        Raises:
            Nothing
        """

    def format_password_prompt(self: "Theme", prompt: str) -> FormattedText:
        return self.format_singleline_prompt(prompt, None)

    def format_password_prompt_selection(self: "Theme", prompt: str) -> FormattedText:
        return self.format_single_prompt_selection(
            prompt, constants.HIDDEN_PASSWORD_TEXT
        )

    @abstractmethod
    def format_prompt(self: "Theme", prompt: str) -> FormattedText:
        """
        Formats a standalone prompt line (i.e., the header of a menu)

        Args:
            prompt (str): The prompt text

        Returns:
            FormattedText: The formatted prompt

        Raises:
            Nothing
        """

    @abstractmethod
    def format_selection(
        self: "Theme", text: str, style: SelectionStyle
    ) -> FormattedText:
        """
        Formats a single entry of a menu

        Args:
            text (str): The text of the entry
            style (SelectionStyle): Whether or not the entry is highlighted

        Returns:
            FormattedText: The formatted entry

        Raises:
            Nothing
        """

    @abstractmethod
    def format_single_prompt_selection(
        self: "Theme", prompt: str, selection: str
    ) -> FormattedText:
        """
        Formats a line input prompt after it has been answered

        Args:
            prompt (str): The prompt that was shown
            selection (str): The value that was accepted

        Returns:
            FormattedText: The formatted prompt and value

        Raises:
            Nothing
        """

    @abstractmethod
    def format_singleline_prompt(
        self: "Theme", prompt: str, default: str | None
    ) -> FormattedText:
        """
        Formats a line input prompt that is waiting for input

        Args:
            prompt (str): The prompt text
            default (str | None): The default value to show or None if no default
                should be shown

        Returns:
            FormattedText: The formatted prompt

        Raises:
            Nothing
        """
