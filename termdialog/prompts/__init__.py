"""
module termdialog.prompts

Contains the definitions of all interactive prompt variants
"""

from .abstract import Prompt
from .confirmation import Confirmation
from .editor import Editor
from .exceptions import BrowserException, EditorException
from .filebrowser import FileBrowser
from .lineinput import LineInput
from .passwordinput import PasswordInput
