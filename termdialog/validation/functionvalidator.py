"""
module termdialog.validation.functionvalidator

Contains the definition of the FunctionValidator class, a Validator that wraps a
plain validation function
"""

from typing import Callable

from .validator import Validator


class FunctionValidator(Validator):
    """
    class FunctionValidator

    A Validator that wraps a plain function returning None for accepted input or
    a rejection reason otherwise
    """

    # pylint: disable=too-few-public-methods

    __validate_func: Callable[[str], str | None]

    def __init__(
        self: "FunctionValidator", validate_func: Callable[[str], str | None]
    ) -> None:
        self.__validate_func = validate_func

    def validate(self: "FunctionValidator", text: str) -> str | None:
        return self.__validate_func(text)
