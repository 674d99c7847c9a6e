from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class EntryKind(str, Enum):
    """Kind of filesystem object an Entry stands for.

    Attributes:
        FILE: Regular file
        DIRECTORY: Directory, either scanned or synthesized from a path prefix
        UNKNOWN: Anything that could not be classified
    """

    FILE = "FILE"
    DIRECTORY = "DIRECTORY"
    UNKNOWN = "UNKNOWN"

    def __str__(self) -> str:
        return self.value
