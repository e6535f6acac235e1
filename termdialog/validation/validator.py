"""
module termdialog.validation.validator

Contains the definition of the Validator class, an abstract base class that is
extended by all input validators
"""

from abc import ABCMeta, abstractmethod


class Validator(metaclass=ABCMeta):
    """
    class Validator

    Abstract base class that is extended by all input validators
    """

    # pylint: disable=too-few-public-methods

    @abstractmethod
    def validate(self: "Validator", text: str) -> str | None:
        """
        Checks whether the text a user entered is acceptable

        Args:
            text (str): The text the user entered

        Returns:
            str | None: None if the text was accepted, otherwise a human-readable
                reason why it was rejected

        Raises:
            Nothing
        """
