"""
module termdialog.terminal.backends.prompt_toolkit.completionadapter

Contains the definition of the CompletionAdapter class, a prompt_toolkit Completer
that exposes a termdialog completion function to a prompt_toolkit line read
"""

import os
from typing import Callable, Iterable, List

from Levenshtein import distance
from prompt_toolkit.completion import CompleteEvent, Completer
from prompt_toolkit.completion import Completion as ToolkitCompletion
from prompt_toolkit.document import Document

from ....paths import Completion, CompletionSuffix, split_path


class CompletionAdapter(Completer):
    """
    class CompletionAdapter

    A prompt_toolkit Completer that exposes a termdialog completion function to a
    prompt_toolkit line read. Suggestions are ranked by their edit distance from the
    fragment being completed
    """

    __completer_func: Callable[[str], List[Completion]]

    def __init__(
        self: "CompletionAdapter", completer_func: Callable[[str], List[Completion]]
    ) -> None:
        super().__init__()

        self.__completer_func = completer_func

    def get_completions(
        self: "CompletionAdapter", document: Document, complete_event: CompleteEvent
    ) -> Iterable[ToolkitCompletion]:
        fragment: str = document.text_before_cursor
        _, name_fragment = split_path(fragment)

        completions: List[Completion] = self.__completer_func(fragment)
        completions.sort(
            key=lambda completion: distance(completion.label, name_fragment)
        )

        return [
            ToolkitCompletion(
                completion.completion
                + (os.sep if completion.suffix == CompletionSuffix.DIRECTORY else ""),
                start_position=-len(fragment),
                display=completion.label,
                display_meta=(
                    "dir" if completion.suffix == CompletionSuffix.DIRECTORY else ""
                ),
            )
            for completion in completions
        ]
