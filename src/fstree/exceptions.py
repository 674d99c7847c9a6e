from typing import Optional


class FsTreeError(Exception):
    """Base class for all errors raised by fstree."""

    pass


class InvalidInputError(FsTreeError, ValueError):
    """
    Exception raised when an operation receives input it cannot work with.

    The main case is resolving a common root over an empty list of paths: there is
    no first path to start from, so the call fails immediately.

    Example:
        >>> error = InvalidInputError("Cannot resolve a common root of an empty path list")
        >>> isinstance(error, ValueError)
        True
    """

    pass


class NoCommonRootError(FsTreeError):
    """
    Exception raised when the listed paths share no ancestor to anchor a tree on.

    Example:
        >>> str(NoCommonRootError())
        'No root for printing as tree!'
    """

    def __init__(self, message: str = "No root for printing as tree!") -> None:
        super().__init__(message)


class RootNodeMissingError(FsTreeError):
    """
    Exception raised when the designated root path has no node in the built graph.

    Attributes:
        root (str): The root path that was looked up.

    Example:
        >>> error = RootNodeMissingError("/data")
        >>> str(error)
        'Root node not found!: /data'
    """

    def __init__(self, root: str) -> None:
        self.root = root
        super().__init__(f"Root node not found!: {root}")


class EdgeError(FsTreeError):
    """
    Exception raised when a parent/child edge cannot be added to the graph.

    Attributes:
        parent_key (str): Key of the intended parent node.
        child_key (str): Key of the intended child node.
        reason (str): Why the edge was rejected.

    Example:
        >>> error = EdgeError("/a", "/a/b", "unknown parent node")
        >>> str(error)
        'Cannot add edge /a -> /a/b: unknown parent node'
    """

    def __init__(self, parent_key: str, child_key: str, reason: str) -> None:
        self.parent_key = parent_key
        self.child_key = child_key
        self.reason = reason
        super().__init__(f"Cannot add edge {parent_key} -> {child_key}: {reason}")


class ScanError(FsTreeError):
    """
    Exception describing one failure met while scanning a directory tree.

    Scan errors are collected rather than raised: the scanner records them, reports
    them to its error callback and carries on with the rest of the tree.

    Attributes:
        path (str): The directory or file that could not be read.
        cause (Optional[OSError]): The underlying operating system error.

    Example:
        >>> error = ScanError("/data/private", PermissionError(13, "Permission denied"))
        >>> str(error)
        'Error reading /data/private (Permission denied)'
    """

    def __init__(self, path: str, cause: Optional[OSError] = None) -> None:
        self.path = path
        self.cause = cause
        detail = (cause.strerror or str(cause)) if cause is not None else "unknown error"
        super().__init__(f"Error reading {path} ({detail})")
