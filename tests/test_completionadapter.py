"""
Unit tests for the prompt_toolkit completion adapter.
"""

import os

from prompt_toolkit.completion import CompleteEvent
from prompt_toolkit.document import Document

from termdialog.paths import Completion, CompletionSuffix
from termdialog.terminal.backends.prompt_toolkit import CompletionAdapter


def _complete(completer_func, text):
    adapter = CompletionAdapter(completer_func)
    return list(adapter.get_completions(Document(text), CompleteEvent()))


class TestCompletionAdapter:
    """Test CompletionAdapter.get_completions()."""

    def test_ranked_by_edit_distance(self):
        candidates = [
            Completion("abcdef"),
            Completion("abc"),
            Completion("abcd"),
        ]

        completions = _complete(lambda fragment: list(candidates), "abc")
        assert [completion.text for completion in completions] == [
            "abc",
            "abcd",
            "abcdef",
        ]

    def test_replaces_whole_fragment(self):
        completions = _complete(lambda fragment: [Completion("abc")], "ab")
        assert completions[0].start_position == -2

    def test_directory_suffix(self):
        completions = _complete(
            lambda fragment: [Completion("sub", suffix=CompletionSuffix.DIRECTORY)],
            "s",
        )

        assert completions[0].text == f"sub{os.sep}"
        assert completions[0].display_meta_text == "dir"

    def test_display_label(self):
        completions = _complete(
            lambda fragment: [Completion(f"dir{os.sep}file", display="file")],
            f"dir{os.sep}f",
        )

        assert completions[0].display_text == "file"

    def test_receives_text_before_cursor(self):
        seen = []

        def completer_func(fragment):
            seen.append(fragment)
            return []

        assert _complete(completer_func, "some/path") == []
        assert seen == ["some/path"]
