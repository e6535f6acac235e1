"""
module termdialog.paths

Contains the path escaping and path completion logic shared by the file browser
and line input prompts
"""

from .dataclasses import Completion
from .enums import CompletionSuffix
from .pathcompleter import complete_path, is_text_name, PathCompleter, split_path
from .pathescaper import escape_path, unescape_path, wrap_sep_string
