"""
module termdialog.theme.abstract

Contains the definition of the Theme abstract base class that is implemented by
all termdialog themes
"""

from .theme import Theme
