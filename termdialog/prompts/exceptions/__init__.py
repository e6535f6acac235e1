"""
module termdialog.prompts.exceptions

Contains all definitions of exceptions specifically thrown by prompts
"""

from .browserexception import BrowserException
from .editorexception import EditorException
