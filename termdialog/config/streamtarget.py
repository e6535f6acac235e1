from enum import StrEnum


class StreamTarget(StrEnum):
    STDERR = "stderr"
    STDOUT = "stdout"
