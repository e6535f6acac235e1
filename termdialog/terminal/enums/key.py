from enum import auto, Enum


class Key(Enum):
    ARROW_DOWN = auto()
    ARROW_LEFT = auto()
    ARROW_RIGHT = auto()
    ARROW_UP = auto()
    BACKSPACE = auto()
    CHAR = auto()
    ENTER = auto()
    ESCAPE = auto()
    TAB = auto()
    UNKNOWN = auto()
