"""
module termdialog.prompts.lineinput

Contains the definition of the LineInput class, a prompt that reads a line of text
from the user, validates it and converts it to a typed value
"""

import logging
from typing import Callable, List, TypeVar

from .abstract import Prompt
from ..paths import Completion
from ..terminal.abstract import Terminal
from ..theme import Theme, ThemeRenderer
from ..validation import Validator, ValidatorChain

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LineInput(Prompt[T]):
    """
    class LineInput

    A prompt that reads a line of text from the user, runs it through a chain of
    validators and converts it with value_type. Rejected or unparseable input is
    reported below the prompt and the user is asked again

    Example:
        port = LineInput(value_type=int).with_prompt("Port").default(8080).interact()
    """

    __completer: Callable[[str], List[Completion]] | None
    __default: T | None
    __permit_empty: bool
    __prompt: str
    __show_default: bool
    __validators: ValidatorChain
    value_type: Callable[[str], T]

    def __init__(
        self: "LineInput",
        theme: Theme | None = None,
        value_type: Callable[[str], T] = str,
    ) -> None:
        super().__init__(theme)

        self.__completer = None
        self.__default = None
        self.__permit_empty = False
        self.__prompt = ""
        self.__show_default = True
        self.__validators = ValidatorChain()
        self.value_type = value_type

    def allow_empty(self: "LineInput", value: bool) -> "LineInput":
        """
        Enables or disables empty input. By default, if there is no default value
        set for the input, the user must enter a non-empty line

        Args:
            value (bool): Whether or not an empty line may be submitted

        Returns:
            LineInput: This prompt

        Raises:
            Nothing
        """

        self.__permit_empty = value
        return self

    def completer(
        self: "LineInput", completer: Callable[[str], List[Completion]]
    ) -> "LineInput":
        self.__completer = completer
        return self

    def default(self: "LineInput", value: T) -> "LineInput":
        """
        Sets a default value. If a default is set, submitting an empty line accepts
        the default without running any validators

        Args:
            value (T): The default value

        Returns:
            LineInput: This prompt

        Raises:
            Nothing
        """

        self.__default = value
        return self

    def interact_on(self: "LineInput", terminal: Terminal) -> T:
        render: ThemeRenderer = ThemeRenderer(terminal, self.theme)

        while True:
            render.input_prompt(
                self.__prompt,
                (
                    str(self.__default)
                    if self.__show_default and self.__default is not None
                    else None
                ),
            )
            user_input: str = terminal.read_line(completer=self.__completer)
            render.add_line()

            if len(user_input) == 0:
                render.clear()
                if self.__default is not None:
                    render.single_prompt_selection(self.__prompt, str(self.__default))
                    return self.__default
                elif not self.__permit_empty:
                    continue

            render.clear()
            if (error_message := self.__validators.validate(user_input)) is not None:
                logger.debug("Input rejected by validator: %s", error_message)
                render.error(error_message)
                continue

            value: T
            try:
                value = self.value_type(user_input)
            except (TypeError, ValueError) as exc:
                render.error(str(exc))
                continue

            render.single_prompt_selection(self.__prompt, user_input)
            return value

    def show_default(self: "LineInput", value: bool) -> "LineInput":
        self.__show_default = value
        return self

    def validate_with(
        self: "LineInput", validator: Validator | Callable[[str], str | None]
    ) -> "LineInput":
        """
        Registers a validator. Validators run in the order they were registered
        and the first rejection is shown to the user

        Args:
            validator (Validator | Callable[[str], str | None]): A Validator or a
                function returning None for accepted input and a rejection reason
                otherwise

        Returns:
            LineInput: This prompt

        Raises:
            TypeError: If the validator is neither a Validator nor callable
        """

        self.__validators.add(validator)
        return self

    def with_prompt(self: "LineInput", prompt: str) -> "LineInput":
        self.__prompt = prompt
        return self
