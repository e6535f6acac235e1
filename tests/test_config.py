"""
Unit tests for DialogConfig.
"""

import json
import sys

import pytest

import termdialog.config.dialogconfig as dialogconfig_module
from termdialog.config import DialogConfig, StreamTarget, ThemeType
from termdialog.theme import ColorfulTheme, CustomPromptCharacterTheme, DefaultTheme


class TestDialogConfigFile:
    """Test reading and writing config files."""

    def test_missing_file_created_with_defaults(self, tmp_path):
        config_path = tmp_path / "nested" / "config.json"

        config = DialogConfig.from_file(str(config_path))

        assert config == DialogConfig.make_default()
        assert config_path.is_file()

    def test_written_file_is_read_back(self, tmp_path):
        config_path = tmp_path / "config.json"
        config = DialogConfig.make_default()
        config.theme = ThemeType.PROMPT_CHARACTER
        config.prompt_character = "$"
        config.stream = StreamTarget.STDOUT
        config.to_file(str(config_path))

        assert json.loads(config_path.read_text())["theme"] == "prompt_character"
        assert DialogConfig.from_file(str(config_path)) == config

    def test_invalid_file(self, tmp_path, caplog):
        config_path = tmp_path / "config.json"
        config_path.write_text("not json")

        assert DialogConfig.from_file(str(config_path)) is None
        assert "Unable to read config" in caplog.text

    def test_unknown_theme(self, tmp_path):
        config_path = tmp_path / "config.json"
        config_data = DialogConfig.make_default().to_dict()
        config_data["theme"] = "sparkly"
        config_path.write_text(json.dumps(config_data))

        assert DialogConfig.from_file(str(config_path)) is None

    def test_default_path(self):
        assert DialogConfig.default_path().endswith("config.json")
        assert "termdialog" in DialogConfig.default_path()


class TestDialogConfigFactories:
    """Test the theme and terminal factories."""

    @pytest.mark.parametrize(
        "theme_type, theme_class",
        [
            (ThemeType.COLORFUL, ColorfulTheme),
            (ThemeType.DEFAULT, DefaultTheme),
            (ThemeType.PROMPT_CHARACTER, CustomPromptCharacterTheme),
        ],
    )
    def test_make_theme(self, theme_type, theme_class):
        config = DialogConfig.make_default()
        config.theme = theme_type

        assert type(config.make_theme()) is theme_class

    def test_prompt_character_passed_to_theme(self):
        config = DialogConfig.make_default()
        config.theme = ThemeType.PROMPT_CHARACTER
        config.prompt_character = "$"

        assert config.make_theme().prompt_character == "$"

    @pytest.mark.parametrize(
        "stream_target, stream_name",
        [(StreamTarget.STDERR, "stderr"), (StreamTarget.STDOUT, "stdout")],
    )
    def test_make_terminal(self, monkeypatch, stream_target, stream_name):
        monkeypatch.setattr(
            dialogconfig_module, "PromptToolkitTerminal", lambda stream: stream
        )
        config = DialogConfig.make_default()
        config.stream = stream_target

        assert config.make_terminal() is getattr(sys, stream_name)
