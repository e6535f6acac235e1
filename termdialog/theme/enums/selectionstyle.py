from enum import auto, Enum


class SelectionStyle(Enum):
    MENU_SELECTED = auto()
    MENU_UNSELECTED = auto()
