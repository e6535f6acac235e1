"""
module termdialog.prompts.dataclasses

Contains all dataclass definitions used by the prompt state machines
"""

from .browserstate import BrowserState
