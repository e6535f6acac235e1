from enum import auto, Enum


class CompletionSuffix(Enum):
    DEFAULT = auto()
    DIRECTORY = auto()
