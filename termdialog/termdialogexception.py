"""
module termdialog.termdialogexception

Contains the definition of the TermDialogException class, the parent of all
exceptions directly thrown by termdialog prompts and terminal backends
"""


class TermDialogException(RuntimeError):
    """
    class TermDialogException

    The parent class of all exceptions directly thrown by termdialog prompts
    and terminal backends
    """
