"""
module termdialog.prompts.confirmation

Contains the definition of the Confirmation class, a prompt that asks the user a
yes/no question answered with a single key press
"""

import logging

from .abstract import Prompt
from ..terminal.abstract import Terminal
from ..theme import Theme, ThemeRenderer

logger = logging.getLogger(__name__)


class Confirmation(Prompt[bool]):
    """
    class Confirmation

    A prompt that asks the user a yes/no question answered with a single key press.
    'y' and 'n' answer the question in either case and enter accepts the default.
    Any other key is ignored

    Example:
        if Confirmation().with_text("Do you want to continue?").interact():
            print("Looks like you want to continue")
    """

    __default: bool
    __show_default: bool
    __text: str

    def __init__(self: "Confirmation", theme: Theme | None = None) -> None:
        super().__init__(theme)

        self.__default = True
        self.__show_default = True
        self.__text = ""

    def default(self: "Confirmation", value: bool) -> "Confirmation":
        self.__default = value
        return self

    def interact_on(self: "Confirmation", terminal: Terminal) -> bool:
        render: ThemeRenderer = ThemeRenderer(terminal, self.theme)
        render.confirmation_prompt(
            self.__text, self.__default if self.__show_default else None
        )

        selection: bool
        while True:
            match terminal.read_char():
                case "y" | "Y":
                    selection = True
                case "n" | "N":
                    selection = False
                case "\n" | "\r":
                    selection = self.__default
                case ignored_char:
                    logger.debug("Ignoring confirmation input %r", ignored_char)
                    continue

            terminal.clear_line()
            render.confirmation_prompt_selection(self.__text, selection)
            return selection

    def show_default(self: "Confirmation", value: bool) -> "Confirmation":
        """
        Enables or disables the display of the default answer. When enabled, the
        choices shown after the question capitalize the default (i.e., '[Y/n]')

        Args:
            value (bool): Whether or not the default should be shown

        Returns:
            Confirmation: This prompt

        Raises:
            Nothing
        """

        self.__show_default = value
        return self

    def with_text(self: "Confirmation", text: str) -> "Confirmation":
        self.__text = text
        return self
