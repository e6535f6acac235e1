"""
module termdialog.validation

Contains the validator types used by prompts to accept or reject user input
"""

from .functionvalidator import FunctionValidator
from .validator import Validator
from .validatorchain import ValidatorChain
