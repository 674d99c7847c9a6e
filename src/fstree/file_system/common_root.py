"""Resolution of the single root path a list of paths is anchored on."""

import logging
from typing import Optional, Sequence

from fstree.entry import join_components, normalize_path, path_components
from fstree.exceptions import InvalidInputError
from fstree.types import PathType

logger = logging.getLogger(__name__)


def resolve_common_root(paths: Sequence[PathType], root: Optional[PathType] = None) -> Optional[str]:
    """Determine the root path shared by all the given paths.

    An explicit root is returned as given (canonicalized) without checking it against
    the paths. Otherwise the result is the longest run of leading path components
    that every path has in common. The first path is the starting candidate and each
    further path cuts it down to the components both agree on, position by position.
    Once nothing is left the search stops.

    Args:
        paths: Paths to find the common root of. Must not be empty unless an explicit
            root is given.
        root: Explicit root to use instead of inferring one.

    Returns:
        The root path, or None if the paths have no leading component in common.

    Raises:
        InvalidInputError: If no explicit root is given and paths is empty.

    Example:
        >>> resolve_common_root(["/srv/app/main.py", "/srv/app/lib/util.py", "/srv/app/README"])
        '/srv/app'
        >>> resolve_common_root(["/x/y.txt"])
        '/x/y.txt'
        >>> resolve_common_root(["./a.txt", "./b/c.txt"])
        '.'
        >>> resolve_common_root(["src/main.py", "docs/index.md"]) is None
        True
    """
    if root is not None:
        return normalize_path(root)
    if not paths:
        raise InvalidInputError("Cannot resolve a common root of an empty path list")

    common = path_components(normalize_path(paths[0]))
    for path in paths[1:]:
        parts = path_components(normalize_path(path))
        shared = []
        for ours, theirs in zip(common, parts):
            if ours != theirs:
                break
            shared.append(ours)
        common = tuple(shared)
        if not common:
            break

    if not common:
        logger.debug("No common root for %d paths", len(paths))
        return None
    return join_components(common)
