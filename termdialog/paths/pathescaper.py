"""
module termdialog.paths.pathescaper

Contains functions that turn raw filesystem paths into literals that can be pasted
into a shell command line
"""

from typing import List

from .. import constants


def escape_path(path: str) -> str:
    """
    Backslash-escapes every character in a path that a shell would otherwise
    interpret (whitespace, quotes, globbing and control characters)

    Args:
        path (str): The raw path to escape

    Returns:
        str: The shell-safe version of the path

    Raises:
        Nothing
    """

    return "".join(
        "\\" + char if char in constants.PATH_ESCAPE_CHARACTERS else char
        for char in path
    )


def wrap_sep_string(sep: str, text: str) -> str:
    """
    Wraps text in the provided quote character, escaping any occurrences of the
    quote character inside of it. If no quote character is provided, spaces are
    escaped instead except when they appear inside of a nested backtick or
    double-quoted segment (i.e., DIR=`brew --prefix` or foo="hello world")

    Args:
        sep (str): The quote character to wrap the text in. May be empty
        text (str): The text to wrap

    Returns:
        str: The wrapped text

    Raises:
        Nothing
    """

    token: List[str] = []
    subsep: str | None = None

    for char in text:
        if len(sep) == 0 and char in constants.SUBSEP_CHARACTERS:
            if subsep is None:
                subsep = char
            elif char == subsep:
                subsep = None

        if char == sep:
            token.append("\\")
        if char == " " and len(sep) == 0 and subsep is None:
            token.append("\\")

        token.append(char)

    return f"{sep}{''.join(token)}{sep}"


def unescape_path(text: str, sep: str = "") -> str:
    """
    Reverses escape_path() and an unterminated wrap_sep_string() so that a literal
    previously inserted by the completer can be looked up on disk again. Only
    backslashes in front of characters escape_path() escapes are removed, which
    leaves Windows separators intact

    Args:
        text (str): The typed literal
        sep (str): The quote character completions are wrapped in. May be empty

    Returns:
        str: The raw path the literal stands for

    Raises:
        Nothing
    """

    if len(sep) > 0 and text.startswith(sep):
        text = text[len(sep) :]
        if text.endswith(sep) and not text.endswith("\\" + sep):
            text = text[: -len(sep)]

    token: List[str] = []
    index: int = 0
    while index < len(text):
        char: str = text[index]
        if (
            char == "\\"
            and index + 1 < len(text)
            and text[index + 1] in constants.PATH_ESCAPE_CHARACTERS
        ):
            char = text[index + 1]
            index += 1

        token.append(char)
        index += 1

    return "".join(token)
