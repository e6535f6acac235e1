"""
module termdialog.prompts.exceptions.editorexception

Contains the definition of the EditorException class, an exception thrown when an
external editor could not be launched
"""

from ...termdialogexception import TermDialogException


class EditorException(TermDialogException):
    """
    class EditorException

    An exception thrown when an external editor could not be launched
    """
