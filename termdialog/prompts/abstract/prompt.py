"""
module termdialog.prompts.abstract.prompt

Contains the definition of the Prompt class, an abstract base class that is
extended by all interactive prompt variants
"""

from abc import ABCMeta, abstractmethod
from typing import Generic, TypeVar

from ...terminal.abstract import Terminal
from ...terminal.backends.prompt_toolkit import PromptToolkitTerminal
from ...theme import get_default_theme, Theme

T = TypeVar("T")


class Prompt(Generic[T], metaclass=ABCMeta):
    """
    class Prompt

    Abstract base class that is extended by all interactive prompt variants. A
    prompt is configured through its builder methods and then run with interact()
    """

    theme: Theme

    def __init__(self: "Prompt", theme: Theme | None = None) -> None:
        self.theme = theme if theme is not None else get_default_theme()

    def interact(self: "Prompt") -> T:
        """
        Runs the prompt on standard error and blocks until the user answers it

        Args:
            None

        Returns:
            T: The value the user chose

        Raises:
            UserAbort: If the user interrupted the prompt
            OSError: If the terminal could not be read from or written to
        """

        return self.interact_on(PromptToolkitTerminal.stderr())

    @abstractmethod
    def interact_on(self: "Prompt", terminal: Terminal) -> T:
        """
        Runs the prompt on the provided terminal and blocks until the user
        answers it. The prompt owns the terminal until it returns

        Args:
            terminal (Terminal): The terminal to draw on and read input from

        Returns:
            T: The value the user chose

        Raises:
            UserAbort: If the user interrupted the prompt
            OSError: If the terminal could not be read from or written to
        """

    def with_theme(self: "Prompt", theme: Theme) -> "Prompt":
        self.theme = theme
        return self
