"""
module termdialog.terminal.dataclasses

Contains all dataclass definitions related to reading input from a terminal
"""

from .keyevent import KeyEvent
