"""
module termdialog.config.dialogconfig

Contains the definition of the DialogConfig class, a dataclass that represents
a set of termdialog configurations
"""

from dataclasses import dataclass
import json
import logging
import os
import sys
from typing import Type

from dataclasses_json import dataclass_json
import platformdirs

from .. import constants
from .streamtarget import StreamTarget
from .themetype import ThemeType
from ..terminal.abstract import Terminal
from ..terminal.backends.prompt_toolkit import PromptToolkitTerminal
from ..theme import ColorfulTheme, CustomPromptCharacterTheme, DefaultTheme, Theme

logger = logging.getLogger(__name__)


@dataclass_json
@dataclass
class DialogConfig:
    """
    class DialogConfig

    Dataclass that represents a set of termdialog configurations
    """

    version: str
    theme: ThemeType
    color_scheme: str
    prompt_character: str
    stream: StreamTarget
    show_hidden: bool

    @staticmethod
    def default_path() -> str:
        """
        Returns the default path that the current user's configuration should be
        read from

        Args:
            None

        Returns:
            str: The path where the current user's configuration file should be

        Raises:
            Nothing
        """

        return os.path.join(
            platformdirs.user_data_dir(
                appname=constants.APPLICATION_NAME,
                version=constants.APPLICATION_VERSION,
            ),
            "config.json",
        )

    @staticmethod
    def _ensure_file(file_path: str) -> None:
        # first, ensure the directory exists
        dir_path: str = os.path.dirname(file_path)
        if len(dir_path) > 0 and not os.path.isdir(dir_path):
            os.makedirs(dir_path)

        # then, create the file if needed
        if not os.path.isfile(file_path):
            DialogConfig.make_default().to_file(file_path)

    @classmethod
    def from_file(cls: Type["DialogConfig"], path: str) -> "DialogConfig | None":
        """
        Constructs a DialogConfig instance from the provided JSON file. A default
        configuration file is written first if none exists

        Args:
            path (str): The file to read JSON config data from

        Returns:
            DialogConfig | None: A DialogConfig instance containing the data from the
                provided file or None if the file could not be read

        Raises:
            Nothing
        """

        # pylint: disable=broad-exception-caught
        try:
            # check if the config file exists and create it if not
            DialogConfig._ensure_file(path)

            with open(path, "r", encoding="utf-8") as config_file:
                # pylint: disable=no-member
                return DialogConfig.from_dict(json.loads(config_file.read()))
        except Exception as exc:
            logger.warning("Unable to read config from target path '%s': %s", path, exc)
            return None

    @staticmethod
    def make_default() -> "DialogConfig":
        """
        Constructs a DialogConfig instance containing the default configuration

        Args:
            None

        Returns:
            DialogConfig: Instance containing default settings

        Raises:
            Nothing
        """

        return DialogConfig(
            version=constants.CONFIG_VERSION,
            theme=ThemeType.COLORFUL,
            color_scheme=constants.COLOR_SCHEME_DEFAULT,
            prompt_character=constants.PROMPT_CHARACTER_DEFAULT,
            stream=StreamTarget.STDERR,
            show_hidden=True,
        )

    def make_terminal(self: "DialogConfig") -> Terminal:
        return PromptToolkitTerminal(
            sys.stdout if self.stream == StreamTarget.STDOUT else sys.stderr
        )

    def make_theme(self: "DialogConfig") -> Theme:
        match self.theme:
            case ThemeType.COLORFUL:
                return ColorfulTheme(self.color_scheme)
            case ThemeType.PROMPT_CHARACTER:
                return CustomPromptCharacterTheme(self.prompt_character)
            case _:
                return DefaultTheme()

    def to_file(self: "DialogConfig", output_path: str) -> None:
        """
        Writes this DialogConfig instance to the file with the specified path as
        JSON data.

        Args:
            output_path (str): The path of the file to write the config to

        Returns:
            Nothing

        Raises:
            Exception: If the file was unable to be written to
        """

        with open(output_path, "w", encoding="utf-8") as output_file:
            # pylint: disable=no-member
            print(self.to_json(indent=2), file=output_file)
