"""
module termdialog.theme.enums

Contains the definitions of all enum classes that are shared by all themes
"""

from .selectionstyle import SelectionStyle
