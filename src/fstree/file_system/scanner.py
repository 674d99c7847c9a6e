"""Recursive listing of the regular files below a directory.

Symbolic links are neither followed nor listed. Read failures are collected as
ScanError values and the scan carries on with the rest of the tree: a directory
that cannot be listed loses its subtree, and an entry that cannot be examined is
skipped on its own.
"""

import logging
import os
from pathlib import Path
from typing import Callable, Iterator, List, Optional

from fstree.entry import Entry
from fstree.exceptions import ScanError
from fstree.fingerprint import compute_tag
from fstree.types import EntryKind, PathType

logger = logging.getLogger(__name__)

ErrorCallback = Callable[[ScanError], None]


class DirectoryScanner:
    """Scanner for the regular files below a root directory.

    The scan is lazy and can be run any number of times; each run starts with an
    empty error list. Directory contents are visited in name order.

    Attributes:
        root (str): Absolute path of the directory being scanned.
        on_error (Optional[Callable[[ScanError], None]]): Called with each error as it occurs.
        compute_tags (bool): Whether scanned entries get a content fingerprint.
        errors (List[ScanError]): Errors met during the latest scan.

    Example:
        >>> scanner = DirectoryScanner("src")  # doctest: +SKIP
        >>> for path in scanner.iter_paths():  # doctest: +SKIP
        ...     print(path)
        /home/user/project/src/main.py
        /home/user/project/src/utils/helpers.py
    """

    def __init__(
        self,
        root: PathType,
        on_error: Optional[ErrorCallback] = None,
        compute_tags: bool = False,
    ) -> None:
        self.root = os.path.abspath(os.fspath(root))
        self.on_error = on_error
        self.compute_tags = compute_tags
        self.errors: List[ScanError] = []

    def iter_paths(self) -> Iterator[str]:
        """Yield the path of every regular file below the root.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
        """
        for dir_entry in self._scan():
            yield dir_entry.path

    def iter_entries(self) -> Iterator[Entry]:
        """Yield a FILE entry with size and timestamps for every regular file below the root.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
        """
        for dir_entry in self._scan():
            try:
                stat_info = dir_entry.stat(follow_symlinks=False)
            except OSError as e:
                self._report(dir_entry.path, e)
                continue
            entry = Entry(
                dir_entry.path,
                length=stat_info.st_size,
                kind=EntryKind.FILE,
                modified_at=stat_info.st_mtime_ns // 1_000_000,
                accessed_at=stat_info.st_atime_ns // 1_000_000,
            )
            if self.compute_tags:
                try:
                    entry.tag = compute_tag(dir_entry.path)
                except OSError as e:
                    self._report(dir_entry.path, e)
            yield entry

    def _scan(self) -> Iterator[os.DirEntry]:
        root_path = Path(self.root)
        if not root_path.exists():
            raise FileNotFoundError(f"Root path does not exist: {self.root}")
        if not root_path.is_dir():
            raise NotADirectoryError(f"Root path is not a directory: {self.root}")

        self.errors = []
        yield from self._walk(self.root)

    def _walk(self, directory: str) -> Iterator[os.DirEntry]:
        """Recursively yield the regular files of a directory and its subdirectories."""
        try:
            with os.scandir(directory) as iterator:
                dir_entries = sorted(iterator, key=lambda dir_entry: dir_entry.name)
        except OSError as e:
            self._report(directory, e)
            return

        for dir_entry in dir_entries:
            try:
                is_file = dir_entry.is_file(follow_symlinks=False)
                is_dir = dir_entry.is_dir(follow_symlinks=False)
            except OSError as e:
                self._report(dir_entry.path, e)
                continue
            if is_file:
                yield dir_entry
            elif is_dir:
                yield from self._walk(dir_entry.path)

    def _report(self, path: str, cause: OSError) -> None:
        error = ScanError(path, cause)
        self.errors.append(error)
        logger.debug("%s", error)
        if self.on_error is not None:
            self.on_error(error)

    @property
    def root_unreadable(self) -> bool:
        """True if the latest scan could not list the root directory itself."""
        return any(error.path == self.root for error in self.errors)


def list_regular_files(root: PathType, on_error: Optional[ErrorCallback] = None) -> List[str]:
    """List every regular file below root, reporting read failures to on_error.

    Example:
        >>> list_regular_files("docs")  # doctest: +SKIP
        ['/home/user/project/docs/index.md']
    """
    return list(DirectoryScanner(root, on_error=on_error).iter_paths())
