"""Entry value type for one file or directory of a reconstructed hierarchy."""

import os
from pathlib import PurePath
from typing import Any, Optional, Sequence, Tuple

from fstree.formatting import DisplayConfig, format_timestamp, info_line, title_block
from fstree.types import EntryKind, PathType

CURRENT_DIR_PREFIX = os.curdir + os.sep


def _is_current_dir_relative(text: str) -> bool:
    return text == os.curdir or text.startswith(CURRENT_DIR_PREFIX)


def normalize_path(path: PathType) -> str:
    """Return the canonical string form of a path.

    Duplicate and trailing separators and inner ``.`` segments are collapsed. A
    leading ``.`` component is kept, so ``./a.txt`` still lives in ``.``. The empty
    string is returned unchanged.

    Example:
        >>> normalize_path("/data//logs/")
        '/data/logs'
        >>> normalize_path("./src/./main.py")
        './src/main.py'
        >>> normalize_path("")
        ''
    """
    text = os.fspath(path)
    if not text:
        return text
    normalized = str(PurePath(text))
    if _is_current_dir_relative(text) and normalized != os.curdir:
        normalized = CURRENT_DIR_PREFIX + normalized
    return normalized


def path_components(path: str) -> Tuple[str, ...]:
    """Split a canonical path into its components, keeping a leading ``.``.

    Example:
        >>> path_components("/data/logs")
        ('/', 'data', 'logs')
        >>> path_components("./b/c.txt")
        ('.', 'b', 'c.txt')
    """
    parts = PurePath(path).parts if path else ()
    if path and _is_current_dir_relative(path):
        return (os.curdir,) + parts
    return parts


def join_components(components: Sequence[str]) -> str:
    """Join components produced by path_components back into a canonical path."""
    return normalize_path(os.path.join(*components))


def split_path(path: str) -> Tuple[Optional[str], str]:
    """Split a canonical path into its parent path and its name.

    The name is what follows the last separator and the parent is what precedes
    it. A path without a separator has no parent and is its own name, as is the
    filesystem root.

    Example:
        >>> split_path("/data/logs/app.log")
        ('/data/logs', 'app.log')
        >>> split_path("/data")
        ('/', 'data')
        >>> split_path("/")
        (None, '/')
        >>> split_path("./a.txt")
        ('.', 'a.txt')
        >>> split_path("notes.txt")
        (None, 'notes.txt')
    """
    index = path.rfind(os.sep)
    if index < 0 or index == len(path) - 1:
        return None, path
    return path[:index] or os.sep, path[index + 1 :]  # noqa: E203


class Entry:
    """One file or directory in a reconstructed hierarchy.

    An Entry is identified by its path alone: two entries with the same path are
    equal and hash alike whatever their metadata, so a set or dict of entries holds
    at most one entry per path.

    Attributes:
        path (str): Canonical path, the identity of the entry.
        name (str): Final path component.
        parent (Optional[str]): Path of the containing directory, or None.
        length (int): Size in bytes; 0 for directories.
        kind (EntryKind): FILE, DIRECTORY or UNKNOWN.
        tag (Optional[str]): Content fingerprint, set only for scanned files.
        modified_at (Optional[int]): Modification time in milliseconds since the epoch.
        accessed_at (Optional[int]): Access time in milliseconds since the epoch.

    Example:
        >>> entry = Entry("/data/logs/app.log", length=120)
        >>> entry.name, entry.parent
        ('app.log', '/data/logs')
        >>> entry == Entry("/data/logs/app.log", length=0, kind=EntryKind.DIRECTORY)
        True
    """

    def __init__(
        self,
        path: PathType,
        length: int = 0,
        kind: EntryKind = EntryKind.FILE,
        tag: Optional[str] = None,
        modified_at: Optional[int] = None,
        accessed_at: Optional[int] = None,
    ) -> None:
        self.path = normalize_path(path)
        self.parent, self.name = split_path(self.path)
        self.length = length
        self.kind = kind
        self.tag = tag
        self.modified_at = modified_at
        self.accessed_at = accessed_at

    @classmethod
    def root(cls, path: PathType) -> "Entry":
        """Create the directory entry that anchors a hierarchy; it never has a parent."""
        entry = cls(path, length=0, kind=EntryKind.DIRECTORY)
        entry.parent = None
        return entry

    @property
    def is_dir(self) -> bool:
        return self.kind == EntryKind.DIRECTORY

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Entry):
            return NotImplemented
        return self.path == other.path

    def __hash__(self) -> int:
        return hash(self.path)

    def __repr__(self) -> str:
        return f"Entry(path={self.path!r}, length={self.length}, kind={self.kind.value})"

    def describe(self, config: Optional[DisplayConfig] = None) -> str:
        """Render the entry as a titled block of aligned ``label value`` lines.

        Timestamps are only listed when they are known, which is the case for
        entries read from a real filesystem scan.
        """
        config = config or DisplayConfig()
        width = config.label_width
        lines = [
            title_block("File Content", config),
            info_line("Path:", self.path, width),
            info_line("Type:", str(self.kind), width),
            info_line("Name:", self.name, width),
            info_line("Parent:", self.parent or "", width),
            info_line("Length:", str(self.length), width),
            info_line("eTag:", self.tag or "", width),
        ]
        if self.modified_at is not None:
            lines.append(info_line("Modification time:", format_timestamp(self.modified_at), width))
        if self.accessed_at is not None:
            lines.append(info_line("Access time:", format_timestamp(self.accessed_at), width))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.describe()
