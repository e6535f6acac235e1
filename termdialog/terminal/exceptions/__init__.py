"""
module termdialog.terminal.exceptions

Contains all definitions of exceptions thrown by terminal backends
"""

from .userabort import UserAbort
