"""
module termdialog.terminal.enums

Contains the definitions of all enum classes that are shared by all available
terminal backends
"""

from .key import Key
