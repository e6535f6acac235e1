"""
module termdialog.terminal.exceptions.userabort

Contains the definition of the UserAbort exception class, an exception thrown
whenever the user interrupts a prompt (i.e., by pressing Ctrl-C or Ctrl-D)
"""

from ...termdialogexception import TermDialogException


class UserAbort(TermDialogException):
    """
    class UserAbort

    An exception thrown whenever the user interrupts a prompt (i.e., by pressing
    Ctrl-C or Ctrl-D) instead of answering it
    """
