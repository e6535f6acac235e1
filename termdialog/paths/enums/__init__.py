"""
module termdialog.paths.enums

Contains the definitions of all enum classes related to path completion
"""

from .completionsuffix import CompletionSuffix
