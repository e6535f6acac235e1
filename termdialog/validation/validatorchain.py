"""
module termdialog.validation.validatorchain

Contains the definition of the ValidatorChain class, an ordered collection of
validators that are applied to user input one after another
"""

from typing import Callable, Iterator, List

from .functionvalidator import FunctionValidator
from .validator import Validator


class ValidatorChain:
    """
    class ValidatorChain

    An ordered collection of validators. Input is accepted only if every validator
    accepts it; validators run in registration order and the first rejection stops
    the chain
    """

    __validators: List[Validator]

    def __init__(self: "ValidatorChain") -> None:
        self.__validators = []

    def __iter__(self: "ValidatorChain") -> Iterator[Validator]:
        return iter(self.__validators)

    def __len__(self: "ValidatorChain") -> int:
        return len(self.__validators)

    def add(
        self: "ValidatorChain", validator: Validator | Callable[[str], str | None]
    ) -> None:
        """
        Appends a validator to the end of the chain. Plain functions are wrapped
        in a FunctionValidator

        Args:
            validator (Validator | Callable[[str], str | None]): The validator
                to append

        Returns:
            Nothing

        Raises:
            TypeError: If the validator is neither a Validator nor callable
        """

        if isinstance(validator, Validator):
            self.__validators.append(validator)
        elif callable(validator):
            self.__validators.append(FunctionValidator(validator))
        else:
            raise TypeError(
                f"Expected a Validator or a callable, got {type(validator).__name__}"
            )

    def validate(self: "ValidatorChain", text: str) -> str | None:
        for validator in self.__validators:
            if (error_message := validator.validate(text)) is not None:
                return error_message

        return None
