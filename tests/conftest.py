"""
Pytest configuration and shared fixtures for the test suite.
"""

from collections import deque
from pathlib import Path
from typing import Callable, Deque, Iterable, List

from prompt_toolkit.formatted_text import FormattedText, fragment_list_to_text
from prompt_toolkit.styles import BaseStyle
import pytest

from termdialog.paths import Completion
from termdialog.terminal import Key, KeyEvent, Terminal, UserAbort


class FakeTerminal(Terminal):
    """
    Scripted terminal. Serves queued keys and lines and records everything
    written to it as plain text. Running out of scripted input raises UserAbort
    so a prompt stuck in a loop fails the test instead of hanging it.
    """

    def __init__(
        self,
        keys: Iterable[KeyEvent | str] = (),
        lines: Iterable[str] = (),
        secure_lines: Iterable[str] = (),
    ) -> None:
        self.keys: Deque[KeyEvent | str] = deque(keys)
        self.lines: Deque[str] = deque(lines)
        self.secure_lines: Deque[str] = deque(secure_lines)
        self.writes: List[str] = []
        self.cleared: List[int] = []
        self.line_clears: int = 0
        self.completers: List[Callable[[str], List[Completion]] | None] = []

    @property
    def text(self) -> str:
        return "".join(self.writes)

    @property
    def last_write(self) -> str:
        return self.writes[-1]

    def clear_last_lines(self, count: int) -> None:
        self.cleared.append(count)

    def clear_line(self) -> None:
        self.line_clears += 1

    def read_key(self) -> KeyEvent:
        if len(self.keys) == 0:
            raise UserAbort("Scripted keys exhausted")

        key = self.keys.popleft()
        return key if isinstance(key, KeyEvent) else KeyEvent.from_char(key)

    def read_line(self, completer=None) -> str:
        self.completers.append(completer)
        if len(self.lines) == 0:
            raise UserAbort("Scripted lines exhausted")

        return self.lines.popleft()

    def read_secure_line(self) -> str:
        if len(self.secure_lines) == 0:
            raise UserAbort("Scripted secure lines exhausted")

        return self.secure_lines.popleft()

    def write_formatted(
        self, text: FormattedText, style: BaseStyle | None = None
    ) -> None:
        self.writes.append(fragment_list_to_text(text))


UP = KeyEvent(Key.ARROW_UP, "")
DOWN = KeyEvent(Key.ARROW_DOWN, "")
ENTER = KeyEvent(Key.ENTER, "\n")
ESCAPE = KeyEvent(Key.ESCAPE, "\x1b")
TAB = KeyEvent(Key.TAB, "\t")


@pytest.fixture
def terminal_factory():
    """Build a FakeTerminal with scripted input."""
    return FakeTerminal


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Create a directory containing:
        - a.txt (file)
        - abc (file)
        - b/ (directory) containing inner.txt
    """
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / "abc").write_text("abc")
    (tmp_path / "b").mkdir()
    (tmp_path / "b" / "inner.txt").write_text("inner")
    return tmp_path


@pytest.fixture
def browse_dir(tmp_path: Path) -> Path:
    """Create a directory containing the files x and y."""
    root = tmp_path / "browse"
    root.mkdir()
    (root / "x").write_text("x")
    (root / "y").write_text("y")
    return root
