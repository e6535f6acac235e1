"""
module termdialog.terminal.backends.prompt_toolkit

Contains the Terminal implementation backed by prompt_toolkit
"""

from .completionadapter import CompletionAdapter
from .prompttoolkitterminal import PromptToolkitTerminal
