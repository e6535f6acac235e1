"""
module termdialog.terminal.backends.prompt_toolkit.prompttoolkitterminal

Contains the definition of the PromptToolkitTerminal class, the Terminal
implementation that drives a real terminal device through prompt_toolkit
"""

import asyncio
from collections import deque
import logging
import sys
from typing import Callable, Deque, Dict, FrozenSet, List, TextIO, Type

from prompt_toolkit import print_formatted_text, PromptSession
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.input import create_input, Input
from prompt_toolkit.key_binding.key_processor import KeyPress
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout.processors import PasswordProcessor
from prompt_toolkit.output import create_output, Output
from prompt_toolkit.styles import BaseStyle

from .... import constants
from ...abstract import Terminal
from ...dataclasses import KeyEvent
from ...enums import Key
from ...exceptions import UserAbort
from ....paths import Completion
from .completionadapter import CompletionAdapter

logger = logging.getLogger(__name__)

_keys_to_key: Dict[Keys, Key] = {
    Keys.ControlH: Key.BACKSPACE,
    Keys.ControlI: Key.TAB,
    Keys.ControlJ: Key.ENTER,
    Keys.ControlM: Key.ENTER,
    Keys.Down: Key.ARROW_DOWN,
    Keys.Escape: Key.ESCAPE,
    Keys.Left: Key.ARROW_LEFT,
    Keys.Right: Key.ARROW_RIGHT,
    Keys.Up: Key.ARROW_UP,
}

_key_chars: Dict[Key, str] = {
    Key.BACKSPACE: "\x7f",
    Key.ENTER: "\n",
    Key.ESCAPE: "\x1b",
    Key.TAB: "\t",
}

_ignored_keys: FrozenSet[Keys] = frozenset(
    {Keys.CPRResponse, Keys.Ignore, Keys.Vt100MouseEvent}
)


class PromptToolkitTerminal(Terminal):
    """
    class PromptToolkitTerminal

    The Terminal implementation that drives a real terminal device through
    prompt_toolkit. Key reads put the input into raw mode for their duration while
    line reads are delegated to a short-lived prompt_toolkit PromptSession
    """

    __input: Input
    __output: Output
    __pending_keys: Deque[KeyPress]

    def __init__(self: "PromptToolkitTerminal", stream: TextIO) -> None:
        self.__input = create_input()
        self.__output = create_output(stdout=stream)
        self.__pending_keys = deque()

    @classmethod
    def stderr(cls: Type["PromptToolkitTerminal"]) -> "PromptToolkitTerminal":
        """
        Constructs a terminal that renders on standard error so that prompts do not
        pollute piped standard output

        Args:
            None

        Returns:
            PromptToolkitTerminal: A terminal rendering on sys.stderr

        Raises:
            Nothing
        """

        return cls(sys.stderr)

    @classmethod
    def stdout(cls: Type["PromptToolkitTerminal"]) -> "PromptToolkitTerminal":
        return cls(sys.stdout)

    def clear_last_lines(self: "PromptToolkitTerminal", count: int) -> None:
        if count <= 0:
            return

        self.__output.write_raw("\r")
        self.__output.cursor_up(count)
        self.__output.erase_down()
        self.__output.flush()

    def clear_line(self: "PromptToolkitTerminal") -> None:
        self.__output.write_raw("\r")
        self.__output.erase_end_of_line()
        self.__output.flush()

    def _make_session(self: "PromptToolkitTerminal", **kwargs) -> PromptSession:
        return PromptSession(
            message="",
            input=self.__input,
            output=self.__output,
            reserve_space_for_menu=0,
            **kwargs,
        )

    def _prompt(self: "PromptToolkitTerminal", session: PromptSession) -> str:
        try:
            return session.prompt()
        except EOFError as eof:
            raise UserAbort("EOFError while reading a line of input") from eof
        except KeyboardInterrupt as interrupt:
            raise UserAbort(
                "KeyboardInterrupt while reading a line of input"
            ) from interrupt

    def read_key(self: "PromptToolkitTerminal") -> KeyEvent:
        while True:
            if len(self.__pending_keys) == 0:
                self.__pending_keys.extend(self._read_key_presses())

            key_press: KeyPress = self.__pending_keys.popleft()
            if key_press.key in _ignored_keys:
                continue

            if key_press.key in (Keys.ControlC, Keys.ControlD):
                self.__pending_keys.clear()
                raise UserAbort(f"{key_press.key.value} while reading a key")

            return self._to_key_event(key_press)

    def _read_key_presses(self: "PromptToolkitTerminal") -> List[KeyPress]:
        async def wait_for_key_presses() -> List[KeyPress]:
            loop = asyncio.get_running_loop()
            received: asyncio.Future = loop.create_future()
            flush_handle: asyncio.TimerHandle | None = None

            def deliver(key_presses: List[KeyPress]) -> None:
                if len(key_presses) > 0 and not received.done():
                    received.set_result(key_presses)

            def flush() -> None:
                deliver(self.__input.flush_keys())

            def keys_ready() -> None:
                nonlocal flush_handle

                if flush_handle is not None:
                    flush_handle.cancel()

                deliver(self.__input.read_keys())
                if self.__input.closed and not received.done():
                    received.set_exception(EOFError("Terminal input was closed"))
                    return

                # a lone escape byte stays in the parser until it is flushed since
                # it may be the start of an escape sequence
                flush_handle = loop.call_later(constants.ESCAPE_FLUSH_TIMEOUT, flush)

            with self.__input.attach(keys_ready):
                return await received

        with self.__input.raw_mode():
            try:
                return asyncio.run(wait_for_key_presses())
            except EOFError as eof:
                raise UserAbort("EOFError while reading a key") from eof

    def read_line(
        self: "PromptToolkitTerminal",
        completer: Callable[[str], List[Completion]] | None = None,
    ) -> str:
        return self._prompt(
            self._make_session(
                completer=(
                    CompletionAdapter(completer) if completer is not None else None
                ),
                complete_while_typing=False,
            )
        )

    def read_secure_line(self: "PromptToolkitTerminal") -> str:
        # an empty replacement character suppresses the echo entirely
        return self._prompt(
            self._make_session(input_processors=[PasswordProcessor(char="")])
        )

    @staticmethod
    def _to_key_event(key_press: KeyPress) -> KeyEvent:
        if not isinstance(key_press.key, Keys):
            return KeyEvent.from_char(key_press.key)

        if key_press.key in _keys_to_key:
            key: Key = _keys_to_key[key_press.key]
            return KeyEvent(key, _key_chars.get(key, key_press.data))

        logger.debug("Unmapped key press %r", key_press)
        return KeyEvent(Key.UNKNOWN, key_press.data)

    def write_formatted(
        self: "PromptToolkitTerminal",
        text: FormattedText,
        style: BaseStyle | None = None,
    ) -> None:
        print_formatted_text(text, style=style, output=self.__output, end="")
