from enum import StrEnum


class ThemeType(StrEnum):
    COLORFUL = "colorful"
    DEFAULT = "default"
    PROMPT_CHARACTER = "prompt_character"
