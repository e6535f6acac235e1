"""
module termdialog.terminal

Contains the Terminal abstraction that prompts read input from and draw output to,
along with the key and exception types shared by all terminal backends
"""

from .abstract import Terminal
from .dataclasses import KeyEvent
from .enums import Key
from .exceptions import UserAbort
