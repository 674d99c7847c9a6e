"""Entry collection and reconstruction of the directory hierarchy behind it.

This module provides the FileSystem class, a set of Entry objects keyed by path
with an optional designated root. Adding an entry also adds every ancestor
directory that is not yet present, so the collection never refers to a parent it
does not contain.
"""

import logging
import time
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Set, Union

from fstree.entry import Entry, normalize_path
from fstree.file_system.common_root import resolve_common_root
from fstree.types import EntryKind, PathType

logger = logging.getLogger(__name__)


class FileSystem:
    """A deduplicated collection of file and directory entries with an optional root.

    Entries are keyed by path. Adding a path that is already present keeps the entry
    that was added first, including its metadata. Every added entry has its missing
    ancestor directories synthesized as zero-length DIRECTORY entries, up to the root
    or to the top of the path.

    Attributes:
        root (Optional[str]): Path of the designated root entry, if one was set.

    Example:
        >>> fs = FileSystem.from_path_list(["/a/b/c.txt", "/a/b/d.txt", "/a/e.txt"], root="/a")
        >>> len(fs)
        5
        >>> fs.get("/a/b").kind
        <EntryKind.DIRECTORY: 'DIRECTORY'>
    """

    def __init__(self) -> None:
        self.root: Optional[str] = None
        self._entries: Dict[str, Entry] = {}

    @classmethod
    def from_path_list(cls, paths: Sequence[PathType], root: Optional[PathType] = None) -> "FileSystem":
        """Build a collection from literal path strings; see load_paths."""
        file_system = cls()
        file_system.load_paths(paths, root)
        return file_system

    @classmethod
    def from_entries(cls, entries: Iterable[Entry], root: Optional[PathType] = None) -> "FileSystem":
        """Build a collection from entries that carry metadata; see load_entries."""
        file_system = cls()
        file_system.load_entries(entries, root)
        return file_system

    def set_root(self, path: PathType) -> None:
        """Designate the root of the hierarchy.

        The root is stored as a DIRECTORY entry without a parent, replacing any entry
        previously added under the same path.
        """
        root_entry = Entry.root(path)
        self.root = root_entry.path
        self._entries[root_entry.path] = root_entry

    def add(self, path: PathType, length: int = 0, kind: EntryKind = EntryKind.FILE) -> bool:
        """Add a path and any missing ancestor directories.

        Args:
            path: Path of the file or directory.
            length: Size in bytes.
            kind: Kind of the entry.

        Returns:
            False if the path is the designated root and nothing was added, True otherwise.
        """
        return self.add_entry(Entry(path, length=length, kind=kind))

    def add_entry(self, entry: Entry) -> bool:
        """Add an entry and any missing ancestor directories.

        Returns:
            False if the entry is the designated root and nothing was added, True otherwise.
        """
        if self.root is not None and entry.path == self.root:
            return False
        self._entries.setdefault(entry.path, entry)
        self._add_ancestors(entry.parent)
        return True

    def _add_ancestors(self, parent: Optional[str]) -> None:
        # An ancestor that is already present has its own chain in place.
        visited: Set[str] = set()
        while parent is not None and parent != self.root and parent not in visited:
            visited.add(parent)
            if parent in self._entries:
                return
            directory = Entry(parent, length=0, kind=EntryKind.DIRECTORY)
            self._entries[parent] = directory
            parent = directory.parent

    def load_paths(self, paths: Sequence[PathType], root: Optional[PathType] = None) -> None:
        """Add literal paths as zero-length files, anchored on a root.

        The root is the explicit one if given, otherwise the common root of the
        paths. When the paths have no common root the entries are still added but
        the collection has no root.

        Raises:
            InvalidInputError: If no root is given and paths is empty.
        """
        logger.debug("Build file system from %d paths", len(paths))
        start_time = time.perf_counter()
        self._anchor(resolve_common_root(paths, root))
        for path in paths:
            self.add(path, 0, EntryKind.FILE)
        logger.debug("Elapsed %.3fs for %d entries", time.perf_counter() - start_time, len(self))

    def load_entries(self, entries: Iterable[Entry], root: Optional[PathType] = None) -> None:
        """Add entries carrying metadata, anchored on a root.

        With an explicit root the entries are consumed one at a time, so a scanner
        generator can feed the collection directly. Without one they are gathered
        first to infer the common root of their paths.

        Raises:
            InvalidInputError: If no root is given and entries is empty.
        """
        start_time = time.perf_counter()
        items: Union[Iterable[Entry], List[Entry]] = entries
        if root is None:
            items = list(entries)
            self._anchor(resolve_common_root([entry.path for entry in items]))
        else:
            self._anchor(normalize_path(root))
        for entry in items:
            self.add_entry(entry)
        logger.debug("Elapsed %.3fs for %d entries", time.perf_counter() - start_time, len(self))

    def _anchor(self, root: Optional[str]) -> None:
        if root is None:
            logger.debug("No root")
            self.root = None
            return
        self.set_root(root)
        logger.debug("Root path: %s", root)

    @property
    def root_entry(self) -> Optional[Entry]:
        return self._entries.get(self.root) if self.root is not None else None

    def get(self, path: PathType) -> Optional[Entry]:
        return self._entries.get(normalize_path(path))

    @property
    def total_size(self) -> int:
        return sum(entry.length for entry in self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries.values())

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Entry):
            return item.path in self._entries
        if isinstance(item, str):
            return normalize_path(item) in self._entries
        return False
