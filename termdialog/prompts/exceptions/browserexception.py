"""
module termdialog.prompts.exceptions.browserexception

Contains the definition of the BrowserException class, an exception thrown when the
file browser is unable to list or resolve a filesystem entry
"""

from ...termdialogexception import TermDialogException


class BrowserException(TermDialogException):
    """
    class BrowserException

    An exception thrown when the file browser is unable to list or resolve a
    filesystem entry (i.e., permission was denied or the entry was removed)
    """

    path: str

    def __init__(self: "BrowserException", message: str, path: str) -> None:
        super().__init__(message)

        self.path = path
