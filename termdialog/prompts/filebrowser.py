"""
module termdialog.prompts.filebrowser

Contains the definition of the FileBrowser class, a prompt that lets the user pick
a file or directory by navigating the filesystem with the keyboard
"""

import logging
import os
from pathlib import Path
from typing import Callable, List, Tuple

from .. import constants
from .abstract import Prompt
from .dataclasses import BrowserState
from .exceptions import BrowserException
from ..paths import is_text_name
from ..terminal.abstract import Terminal
from ..terminal.enums import Key
from ..theme import SelectionStyle, Theme, ThemeRenderer
from ..validation import Validator, ValidatorChain

logger = logging.getLogger(__name__)


def bump_index(selected: int | None, entry_count: int, forwards: bool) -> int:
    """
    Computes the index one entry forwards or backwards from the current selection,
    wrapping around at either end of the entry list

    Args:
        selected (int | None): The currently selected index, if any
        entry_count (int): The number of entries in the freshly listed directory
        forwards (bool): Whether to move forwards (down) or backwards (up)

    Returns:
        int: The new index. 0 if nothing was selected

    Raises:
        Nothing
    """

    if selected is None:
        return 0

    index: int = selected + (1 if forwards else -1)
    if index < 0:
        return entry_count - 1
    elif index > entry_count - 1:
        return 0

    return index


class FileBrowser(Prompt[Path]):
    """
    class FileBrowser

    A prompt that lets the user pick a file or directory by navigating the
    filesystem. Up/Escape and Down/Tab move the highlight, Enter descends into the
    highlighted directory or picks the highlighted file, Enter on '.' picks the
    current directory and any other key accepts the current directory.

    The directory is listed again on every key press so the menu always reflects
    what is on disk

    Example:
        picked = FileBrowser().with_prompt("Choose file").default(Path.cwd()).interact()
    """

    __default: Path | None
    __directories_only: bool
    __prompt: str
    __show_hidden: bool
    __validators: ValidatorChain

    def __init__(self: "FileBrowser", theme: Theme | None = None) -> None:
        super().__init__(theme)

        self.__default = None
        self.__directories_only = False
        self.__prompt = ""
        self.__show_hidden = True
        self.__validators = ValidatorChain()

    def default(self: "FileBrowser", path: Path | str) -> "FileBrowser":
        """
        Sets the directory the browser starts in. Without a default, the browser
        starts in the current working directory

        Args:
            path (Path | str): The starting directory

        Returns:
            FileBrowser: This prompt

        Raises:
            Nothing
        """

        self.__default = Path(path)
        return self

    def directories_only(self: "FileBrowser", value: bool) -> "FileBrowser":
        self.__directories_only = value
        return self

    def interact_on(self: "FileBrowser", terminal: Terminal) -> Path:
        render: ThemeRenderer = ThemeRenderer(terminal, self.theme)
        render.set_prompts_reset_height(False)
        render.set_prompt_height(1)

        start_path: Path = self.__default if self.__default is not None else Path.cwd()
        state: BrowserState = BrowserState(
            path=start_path, entries=self.list_entries(start_path), selected=0
        )
        error_message: str | None = None

        while True:
            self._render(render, state)
            if error_message is not None:
                render.error(error_message)
                error_message = None

            result: Path | None = None
            match terminal.read_key().key:
                case Key.ENTER:
                    selected_entry: str | None = state.selected_entry
                    if (
                        selected_entry is None
                        or selected_entry == constants.DIRECTORY_ENTRY_CURRENT
                    ):
                        result = state.path
                    else:
                        target: Path = self._resolve(state.path / selected_entry)
                        if target.is_dir():
                            logger.debug("Descending into '%s'", target)
                            state = BrowserState(
                                path=target,
                                entries=self.list_entries(target),
                                selected=0,
                            )
                        else:
                            result = target
                case Key.ARROW_UP | Key.ESCAPE:
                    state = self._move_selection(state, forwards=False)
                case Key.ARROW_DOWN | Key.TAB:
                    state = self._move_selection(state, forwards=True)
                case _:
                    result = state.path

            if result is None:
                continue

            if (error_message := self.__validators.validate(str(result))) is not None:
                logger.debug(
                    "Path %r rejected by validator: %s", str(result), error_message
                )
                continue

            render.clear()
            render.single_prompt_selection(self.__prompt, str(result))
            return result

    def list_entries(self: "FileBrowser", path: Path) -> Tuple[str, ...]:
        """
        Lists the entries of a directory as they are shown in the browser: the
        current and parent directory entries followed by the sorted entry names

        Args:
            path (Path): The directory to list

        Returns:
            Tuple[str, ...]: The entry names in display order

        Raises:
            BrowserException: If the directory could not be listed
        """

        names: List[str] = []
        try:
            with os.scandir(path) as directory_entries:
                for entry in directory_entries:
                    if not is_text_name(entry.name):
                        continue
                    if not self.__show_hidden and entry.name.startswith("."):
                        continue
                    if self.__directories_only and not entry.is_dir():
                        continue

                    names.append(entry.name)
        except OSError as exc:
            raise BrowserException(
                f"Unable to list directory '{path}': {exc}", str(path)
            ) from exc

        names.sort()
        return (
            constants.DIRECTORY_ENTRY_CURRENT,
            constants.DIRECTORY_ENTRY_PARENT,
            *names,
        )

    def _move_selection(
        self: "FileBrowser", state: BrowserState, forwards: bool
    ) -> BrowserState:
        entries: Tuple[str, ...] = self.list_entries(state.path)
        return BrowserState(
            path=state.path,
            entries=entries,
            selected=bump_index(state.selected, len(entries), forwards),
        )

    def _render(
        self: "FileBrowser", render: ThemeRenderer, state: BrowserState
    ) -> None:
        render.clear()
        render.prompt(f"{self.__prompt} {state.path}")

        for index, entry_name in enumerate(state.entries):
            render.selection(
                entry_name,
                (
                    SelectionStyle.MENU_SELECTED
                    if index == state.selected
                    else SelectionStyle.MENU_UNSELECTED
                ),
            )

    @staticmethod
    def _resolve(path: Path) -> Path:
        try:
            return path.resolve(strict=True)
        except (OSError, RuntimeError) as exc:
            raise BrowserException(
                f"Unable to resolve path '{path}': {exc}", str(path)
            ) from exc

    def show_hidden(self: "FileBrowser", value: bool) -> "FileBrowser":
        self.__show_hidden = value
        return self

    def validate_with(
        self: "FileBrowser", validator: Validator | Callable[[str], str | None]
    ) -> "FileBrowser":
        """
        Registers a validator for the picked path. A rejected path is reported below
        the menu and the user keeps browsing

        Args:
            validator (Validator | Callable[[str], str | None]): A Validator or a
                function returning None for an accepted path and a rejection
                reason otherwise

        Returns:
            FileBrowser: This prompt

        Raises:
            TypeError: If the validator is neither a Validator nor callable
        """

        self.__validators.add(validator)
        return self

    def with_prompt(self: "FileBrowser", prompt: str) -> "FileBrowser":
        self.__prompt = prompt
        return self
