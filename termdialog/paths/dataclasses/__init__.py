"""
module termdialog.paths.dataclasses

Contains all dataclass definitions related to path completion
"""

from .completion import Completion
