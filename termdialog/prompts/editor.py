"""
module termdialog.prompts.editor

Contains the definition of the Editor class, a prompt that hands a text buffer to
the user's external editor and returns what they saved
"""

import logging
import os
import shlex
import subprocess
import tempfile
from typing import List

from .. import constants
from .exceptions import EditorException

logger = logging.getLogger(__name__)


class Editor:
    """
    class Editor

    A prompt that hands a text buffer to the user's external editor ($VISUAL, then
    $EDITOR, then a platform fallback) and returns the saved text. The editor takes
    over the terminal itself so no renderer is involved

    Example:
        message = Editor().edit("Enter a commit message")
        if message is None:
            print("Abort!")
    """

    __executable: str | None
    __extension: str
    __require_save: bool
    __trim_newlines: bool

    def __init__(self: "Editor") -> None:
        self.__executable = None
        self.__extension = ".txt"
        self.__require_save = True
        self.__trim_newlines = True

    def edit(self: "Editor", text: str = "") -> str | None:
        """
        Opens the editor on a temporary file containing the provided text and
        blocks until the editor exits

        Args:
            text (str): The initial contents of the buffer

        Returns:
            str | None: The edited text, or None if the editor exited with a failure
                status or the file was not saved and saving is required

        Raises:
            EditorException: If the editor could not be launched
        """

        with tempfile.NamedTemporaryFile(
            "w", suffix=self.__extension, delete=False, encoding="utf-8"
        ) as buffer_file:
            buffer_file.write(text)
            buffer_path: str = buffer_file.name

        try:
            modified_before: int = os.stat(buffer_path).st_mtime_ns

            command: List[str] = [*shlex.split(self.executable), buffer_path]
            logger.debug("Launching editor %r", command)
            try:
                completed = subprocess.run(command, check=False)
            except OSError as exc:
                raise EditorException(
                    f"Unable to launch editor '{self.executable}': {exc}"
                ) from exc

            if completed.returncode != 0:
                logger.debug("Editor exited with status %d", completed.returncode)
                return None

            if (
                self.__require_save
                and os.stat(buffer_path).st_mtime_ns == modified_before
            ):
                return None

            with open(buffer_path, "r", encoding="utf-8") as edited_file:
                edited_text: str = edited_file.read()
        finally:
            os.unlink(buffer_path)

        return edited_text.rstrip("\r\n") if self.__trim_newlines else edited_text

    @property
    def executable(self: "Editor") -> str:
        if self.__executable is not None:
            return self.__executable

        return (
            os.environ.get("VISUAL")
            or os.environ.get("EDITOR")
            or constants.EDITOR_FALLBACK
        )

    def extension(self: "Editor", extension: str) -> "Editor":
        self.__extension = extension
        return self

    def require_save(self: "Editor", value: bool) -> "Editor":
        self.__require_save = value
        return self

    def trim_newlines(self: "Editor", value: bool) -> "Editor":
        self.__trim_newlines = value
        return self

    def with_executable(self: "Editor", executable: str) -> "Editor":
        self.__executable = executable
        return self
