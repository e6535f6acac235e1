"""
module termdialog.prompts.dataclasses.browserstate

Contains the definition of the BrowserState dataclass, a snapshot of the file
browser at one point in its navigation
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple


@dataclass(frozen=True)
class BrowserState:
    """
    class BrowserState

    A snapshot of the file browser at one point in its navigation. States are never
    modified; every transition produces a new state
    """

    path: Path
    entries: Tuple[str, ...]
    selected: int | None = 0

    def __post_init__(self: "BrowserState") -> None:
        if self.selected is not None and not 0 <= self.selected < len(self.entries):
            raise ValueError(
                f"Selected index {self.selected} is out of range for "
                f"{len(self.entries)} entries"
            )

    @property
    def selected_entry(self: "BrowserState") -> str | None:
        return self.entries[self.selected] if self.selected is not None else None
