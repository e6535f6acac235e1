"""
module termdialog.prompts.passwordinput

Contains the definition of the PasswordInput class, a prompt that reads a secret
from the user without echoing it, optionally asking for it twice
"""

import logging
from typing import Tuple

from .abstract import Prompt
from ..terminal.abstract import Terminal
from ..theme import Theme, ThemeRenderer

logger = logging.getLogger(__name__)


class PasswordInput(Prompt[str]):
    """
    class PasswordInput

    A prompt that reads a secret from the user without echoing it. If a
    confirmation prompt is configured, the secret must be entered twice and a
    mismatch restarts from the first prompt

    Example:
        password = (
            PasswordInput()
            .with_prompt("New Password")
            .with_confirmation("Confirm password", "Passwords mismatching")
            .interact()
        )
    """

    __allow_empty_password: bool
    __confirmation_prompt: Tuple[str, str] | None
    __prompt: str

    def __init__(self: "PasswordInput", theme: Theme | None = None) -> None:
        super().__init__(theme)

        self.__allow_empty_password = False
        self.__confirmation_prompt = None
        self.__prompt = ""

    def allow_empty_password(self: "PasswordInput", value: bool) -> "PasswordInput":
        self.__allow_empty_password = value
        return self

    def interact_on(self: "PasswordInput", terminal: Terminal) -> str:
        render: ThemeRenderer = ThemeRenderer(terminal, self.theme)
        render.set_prompts_reset_height(False)

        while True:
            password: str = self._prompt_password(render, self.__prompt)

            if self.__confirmation_prompt is not None:
                confirmation_prompt, mismatch_error = self.__confirmation_prompt
                if password != self._prompt_password(render, confirmation_prompt):
                    logger.debug("Password confirmation did not match")
                    render.clear()
                    render.error(mismatch_error)
                    continue

            render.clear()
            render.password_prompt_selection(self.__prompt)
            return password

    def _prompt_password(
        self: "PasswordInput", render: ThemeRenderer, prompt: str
    ) -> str:
        start_height: int = render.height

        while True:
            render.password_prompt(prompt)
            user_input: str = render.terminal.read_secure_line()
            render.add_line()

            if len(user_input) > 0 or self.__allow_empty_password:
                return user_input

            render.clear_to(start_height)

    def with_confirmation(
        self: "PasswordInput", prompt: str, mismatch_error: str
    ) -> "PasswordInput":
        """
        Enables confirmation prompting. The user must enter the same secret a second
        time under the confirmation prompt

        Args:
            prompt (str): The prompt shown when asking for the secret again
            mismatch_error (str): The error shown when the two entries differ

        Returns:
            PasswordInput: This prompt

        Raises:
            Nothing
        """

        self.__confirmation_prompt = (prompt, mismatch_error)
        return self

    def with_prompt(self: "PasswordInput", prompt: str) -> "PasswordInput":
        self.__prompt = prompt
        return self
