"""
module termdialog.paths.dataclasses.completion

Contains the definition of the Completion dataclass, a suggested continuation of a
partially typed path
"""

from dataclasses import dataclass

from ..enums import CompletionSuffix


@dataclass(frozen=True)
class Completion:
    """
    class Completion

    A suggested continuation of a partially typed path. The completion text is what
    should be inserted, while display is an optional shorter label for the user
    (i.e., the bare entry name when completion also carries its directory)
    """

    completion: str
    display: str | None = None
    suffix: CompletionSuffix = CompletionSuffix.DEFAULT

    @property
    def label(self: "Completion") -> str:
        return self.display if self.display is not None else self.completion
