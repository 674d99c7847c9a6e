"""Assembly of an entry collection into a rendered text tree.

The functions here translate a FileSystem into an EntryGraph (one node per entry,
one edge per parent link), render the graph from the designated root and append a
summary of the collection.
"""

import logging
import time
from typing import Optional, Sequence

from fstree.exceptions import EdgeError, NoCommonRootError, RootNodeMissingError
from fstree.file_system.file_system import FileSystem
from fstree.formatting import DisplayConfig, format_data_volume
from fstree.tree.entry_graph import EntryGraph
from fstree.types import PathType

logger = logging.getLogger(__name__)


def build_graph(file_system: FileSystem) -> EntryGraph:
    """Build the graph of a file system: a node per entry and an edge per parent link.

    An edge that cannot be added is logged as a warning and recorded on the graph's
    edge_errors, and assembly continues with the remaining edges.
    """
    logger.debug("Build graph")
    start_time = time.perf_counter()

    graph = EntryGraph()
    for entry in file_system:
        graph.add_node(entry.path, entry.name, entry)
    for entry in file_system:
        if entry.parent is None:
            continue
        try:
            graph.add_edge(entry.parent, entry.path)
        except EdgeError as e:
            logger.warning("%s", e)
            graph.edge_errors.append(e)

    logger.debug("Elapsed %.3fs for %d nodes", time.perf_counter() - start_time, len(graph))
    return graph


def format_summary(file_system: FileSystem, config: Optional[DisplayConfig] = None) -> str:
    """Format the summary block printed below a tree.

    Example:
        >>> fs = FileSystem.from_path_list(["/a/b.txt", "/a/c.txt"])
        >>> print(format_summary(fs, DisplayConfig(rule_width=10)))
        ══════════
        #files: 3  size: 0 Byte
        ══════════
    """
    config = config or DisplayConfig()
    counts = f"#files: {len(file_system)}  size: {format_data_volume(file_system.total_size)}"
    return f"{config.rule()}\n{counts}\n{config.rule()}"


def render_tree(
    file_system: FileSystem,
    max_level: Optional[int] = None,
    config: Optional[DisplayConfig] = None,
) -> str:
    """Render a file system as a text tree followed by its summary.

    The root node is labelled with the full root path.

    Args:
        file_system: The collection to render.
        max_level: Number of levels below the root to show, or None for all.
        config: Display settings. Defaults to DisplayConfig().

    Returns:
        The rendered tree and the summary block.

    Raises:
        NoCommonRootError: If the file system has no root.
        RootNodeMissingError: If no node exists for the root path.
    """
    if file_system.root is None:
        raise NoCommonRootError()
    config = config or DisplayConfig()

    graph = build_graph(file_system)
    root_node = graph.lookup(file_system.root)
    if root_node is None:
        raise RootNodeMissingError(file_system.root)
    root_node.name = file_system.root
    if max_level is not None:
        graph.set_max_display_level(max_level)

    start_time = time.perf_counter()
    tree = graph.render(root_node, config)
    logger.debug("Elapsed %.3fs for rendering", time.perf_counter() - start_time)
    return f"{tree}\n{format_summary(file_system, config)}"


def print_file_list(
    paths: Sequence[PathType],
    max_level: Optional[int] = None,
    root: Optional[PathType] = None,
    config: Optional[DisplayConfig] = None,
) -> str:
    """Render a list of path strings as a tree, reporting failures as text.

    The hierarchy is rebuilt from the paths and anchored on root, or on the common
    root of the paths when root is not given.

    Returns:
        The rendered tree with its summary, or a message such as
        ``No root for printing as tree!`` when no tree can be drawn.

    Raises:
        InvalidInputError: If paths is empty and no root is given.

    Example:
        >>> print(print_file_list(["/a/b/c.txt", "/a/e.txt"], config=DisplayConfig(rule_width=5)))
        /a
        ├── b/
        │   └── c.txt
        └── e.txt
        ═════
        #files: 4  size: 0 Byte
        ═════
    """
    file_system = FileSystem.from_path_list(paths, root)
    try:
        return render_tree(file_system, max_level, config)
    except NoCommonRootError as e:
        return str(e)
    except RootNodeMissingError:
        return "Root node not found!"
