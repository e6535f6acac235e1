"""
module termdialog.prompts.abstract

Contains the definition of the Prompt abstract base class that is extended by all
interactive prompt variants
"""

from .prompt import Prompt
