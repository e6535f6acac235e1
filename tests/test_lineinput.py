"""
Unit tests for the LineInput prompt.
"""

import pytest
from conftest import FakeTerminal

from termdialog import (
    CustomPromptCharacterTheme,
    LineInput,
    PathCompleter,
    UserAbort,
    Validator,
)


class _RecordingValidator(Validator):
    def __init__(self):
        self.seen = []

    def validate(self, text):
        self.seen.append(text)
        return None


def _too_long(text):
    return "too long" if len(text) > 3 else None


class TestLineInput:
    """Test LineInput.interact_on()."""

    def test_returns_typed_line(self):
        terminal = FakeTerminal(lines=["bob"])
        assert LineInput().with_prompt("Name").interact_on(terminal) == "bob"
        assert terminal.last_write == "Name: bob\n"

    def test_empty_input_returns_default_without_validation(self):
        validator = _RecordingValidator()
        terminal = FakeTerminal(lines=[""])

        result = (
            LineInput()
            .with_prompt("Branch")
            .default("main")
            .validate_with(validator)
            .interact_on(terminal)
        )

        assert result == "main"
        assert validator.seen == []
        assert terminal.writes[0] == "Branch [main]: "
        assert terminal.last_write == "Branch: main\n"

    def test_hidden_default(self):
        terminal = FakeTerminal(lines=[""])
        LineInput().with_prompt("Branch").default("main").show_default(
            False
        ).interact_on(terminal)

        assert terminal.writes[0] == "Branch: "

    def test_rejected_input_reprompts(self):
        terminal = FakeTerminal(lines=["hello", "hi"])

        result = LineInput().with_prompt("Code").validate_with(_too_long).interact_on(
            terminal
        )

        assert result == "hi"
        assert "error: too long\n" in terminal.writes
        assert terminal.cleared == [1, 2]

    def test_rejected_input_never_returns(self):
        terminal = FakeTerminal(lines=["hello", "world"])

        with pytest.raises(UserAbort):
            LineInput().validate_with(_too_long).interact_on(terminal)

    def test_validators_run_in_order(self):
        calls = []

        def first(text):
            calls.append("first")
            return "first failed"

        def second(text):
            calls.append("second")
            return None

        terminal = FakeTerminal(lines=["a"])
        with pytest.raises(UserAbort):
            LineInput().validate_with(first).validate_with(second).interact_on(
                terminal
            )

        assert calls == ["first"]
        assert "error: first failed\n" in terminal.writes

    def test_empty_input_reprompts(self):
        terminal = FakeTerminal(lines=["", "", "x"])
        assert LineInput().interact_on(terminal) == "x"
        assert terminal.writes.count(": ") == 3

    def test_allow_empty(self):
        terminal = FakeTerminal(lines=[""])
        assert LineInput().allow_empty(True).interact_on(terminal) == ""

    def test_value_type(self):
        terminal = FakeTerminal(lines=["abc", "42"])

        result = LineInput(value_type=int).with_prompt("Port").interact_on(terminal)

        assert result == 42
        assert any("invalid literal" in write for write in terminal.writes)

    def test_typed_default(self):
        terminal = FakeTerminal(lines=[""])
        prompt = LineInput(value_type=int).with_prompt("Port").default(8080)

        assert prompt.interact_on(terminal) == 8080
        assert terminal.writes[0] == "Port [8080]: "

    def test_completer_passed_to_terminal(self):
        completer = PathCompleter()
        terminal = FakeTerminal(lines=["x"])

        LineInput().completer(completer).interact_on(terminal)

        assert terminal.completers == [completer]

    def test_invalid_validator(self):
        with pytest.raises(TypeError):
            LineInput().validate_with(42)

    def test_with_theme(self):
        terminal = FakeTerminal(lines=["bob"])
        prompt = LineInput().with_theme(CustomPromptCharacterTheme("$"))

        assert prompt.with_prompt("Name").interact_on(terminal) == "bob"
        assert terminal.writes[0] == "Name $ "
        assert terminal.last_write == "Name $ bob\n"
