"""
module termdialog.terminal.abstract

Contains the definition of the Terminal abstract base class that is implemented
by individual terminal integrations (i.e., prompt_toolkit)
"""

from .terminal import Terminal
