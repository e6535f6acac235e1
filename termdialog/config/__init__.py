"""
module termdialog.config

Contains the dataclass and enum definitions that make up the termdialog
configuration file
"""

from .dialogconfig import DialogConfig
from .streamtarget import StreamTarget
from .themetype import ThemeType
