"""
module termdialog.paths.pathcompleter

Contains the functions used to complete partially typed filesystem paths as well as
the PathCompleter class, a callable wrapper that can be handed to a LineInput prompt
"""

import logging
import os
from typing import List, Tuple

from .dataclasses import Completion
from .enums import CompletionSuffix
from .pathescaper import escape_path, unescape_path, wrap_sep_string

logger = logging.getLogger(__name__)

_path_separators: Tuple[str, ...] = tuple(
    separator for separator in (os.sep, os.altsep) if separator is not None
)


def is_text_name(name: str) -> bool:
    """
    Checks whether a directory entry name returned by the filesystem is valid text.
    Names that were not valid UTF-8 on disk come back from os.scandir() containing
    surrogate escapes and cannot be displayed or typed

    Args:
        name (str): The entry name to check

    Returns:
        bool: Whether or not the name is representable as text

    Raises:
        Nothing
    """

    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False

    return True


def split_path(path: str) -> Tuple[str | None, str]:
    """
    Splits a path at its last separator into the directory prefix (including the
    separator) and the trailing name fragment

    Args:
        path (str): The path to split

    Returns:
        Tuple[str | None, str]: The directory prefix, or None if the path contained no
            separator, and the name fragment after it

    Raises:
        Nothing
    """

    separator_index: int = max(path.rfind(separator) for separator in _path_separators)
    if separator_index < 0:
        return None, path

    return path[: separator_index + 1], path[separator_index + 1 :]


def _make_completion(
    entry_name: str, directory_prefix: str | None, is_directory: bool, separator: str
) -> Completion:
    completion_text: str = entry_name
    if directory_prefix is not None:
        completion_text = f"{directory_prefix}{os.sep}{entry_name}".replace(
            os.sep * 2, os.sep
        )

    if len(separator) == 0:
        completion_text = escape_path(completion_text)
    else:
        completion_text = wrap_sep_string(separator, completion_text)

        # leave the quote open for directories so the user can keep typing into them
        if is_directory:
            completion_text = completion_text[: -len(separator)]

    return Completion(
        completion=completion_text,
        display=entry_name if directory_prefix is not None else None,
        suffix=CompletionSuffix.DIRECTORY if is_directory else CompletionSuffix.DEFAULT,
    )


def complete_path(
    fragment: str, directories_only: bool = False, separator: str = ""
) -> List[Completion]:
    """
    Lists the entries of the directory named by a partially typed path whose names
    start with the fragment after its last separator

    Args:
        fragment (str): The partially typed path
        directories_only (bool): Whether or not only directories should be suggested
        separator (str): A quote character to wrap completions in. If empty,
            completions are backslash-escaped instead

    Returns:
        List[Completion]: The matching completions sorted by entry name

    Raises:
        Nothing
    """

    directory_prefix, name_prefix = split_path(unescape_path(fragment, separator))
    lookup_directory: str = (
        directory_prefix if directory_prefix is not None else os.curdir
    )

    completions: List[Completion] = []
    try:
        with os.scandir(lookup_directory) as directory_entries:
            for entry in sorted(directory_entries, key=lambda entry: entry.name):
                if not is_text_name(entry.name) or not entry.name.startswith(
                    name_prefix
                ):
                    continue

                is_directory: bool = entry.is_dir()
                if directories_only and not is_directory:
                    continue

                completions.append(
                    _make_completion(
                        entry.name, directory_prefix, is_directory, separator
                    )
                )
    except OSError as exc:
        # completion is only a suggestion so an unreadable directory yields nothing
        logger.debug("Unable to list '%s' for completion: %s", lookup_directory, exc)
        return []

    return completions


class PathCompleter:
    """
    class PathCompleter

    Callable wrapper around complete_path() that can be registered as the completer
    of a LineInput prompt
    """

    directories_only: bool
    separator: str

    def __init__(
        self: "PathCompleter", directories_only: bool = False, separator: str = ""
    ) -> None:
        self.directories_only = directories_only
        self.separator = separator

    def __call__(self: "PathCompleter", fragment: str) -> List[Completion]:
        return complete_path(
            fragment, directories_only=self.directories_only, separator=self.separator
        )
