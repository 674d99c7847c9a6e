"""Keyed tree of entry nodes with text rendering."""

import logging
from typing import Dict, Iterator, List, Optional

from anytree import RenderTree, TreeError

from fstree.entry import Entry
from fstree.exceptions import EdgeError
from fstree.formatting import DisplayConfig
from fstree.tree.entry_node import EntryNode

logger = logging.getLogger(__name__)


def _sort_children(children: tuple) -> List[EntryNode]:
    # Directories first, then files, both alphabetically
    return sorted(children, key=lambda node: (not node.is_dir, node.name.lower()))


class EntryGraph:
    """A set of entry nodes addressed by key and linked by parent/child edges.

    Nodes are registered first and linked afterwards, so edges can be added in any
    order. Rendering starts from a chosen node and shows the subtree below it.

    Attributes:
        max_display_level (Optional[int]): Number of levels below the rendered root
            to show, or None for no limit.
        edge_errors (List[EdgeError]): Edges rejected while the graph was assembled
            from an entry collection.

    Example:
        >>> graph = EntryGraph()
        >>> root = graph.add_node("/a", "/a", Entry.root("/a"))
        >>> _ = graph.add_node("/a/b.txt", "b.txt", Entry("/a/b.txt"))
        >>> graph.add_edge("/a", "/a/b.txt")
        >>> print(graph.render(root))
        /a
        └── b.txt
    """

    def __init__(self) -> None:
        self._nodes: Dict[str, EntryNode] = {}
        self.max_display_level: Optional[int] = None
        self.edge_errors: List[EdgeError] = []

    def add_node(self, key: str, label: str, payload: Entry) -> EntryNode:
        """Register a node under key. A key that is already registered keeps its node."""
        node = self._nodes.get(key)
        if node is None:
            node = EntryNode(label, payload)
            self._nodes[key] = node
        return node

    def add_edge(self, parent_key: str, child_key: str) -> None:
        """Attach the child node below the parent node.

        Raises:
            EdgeError: If either key is not registered or the edge would create a loop.
        """
        parent = self._nodes.get(parent_key)
        if parent is None:
            raise EdgeError(parent_key, child_key, "unknown parent node")
        child = self._nodes.get(child_key)
        if child is None:
            raise EdgeError(parent_key, child_key, "unknown child node")
        try:
            child.parent = parent
        except TreeError as e:
            raise EdgeError(parent_key, child_key, str(e)) from e

    def lookup(self, key: str) -> Optional[EntryNode]:
        return self._nodes.get(key)

    def set_max_display_level(self, level: int) -> None:
        """Limit rendering to the given number of levels below the rendered root.

        Level 0 shows only the root, level 1 the root and its children. Deeper nodes
        stay in the tree and are only left out of the rendered text.
        """
        if level < 0:
            raise ValueError(f"max display level must not be negative, got {level}")
        self.max_display_level = level

    def render(self, root: EntryNode, config: Optional[DisplayConfig] = None) -> str:
        """Render the subtree below root as text, one node per line."""
        return "\n".join(self.stream_render(root, config))

    def stream_render(self, root: EntryNode, config: Optional[DisplayConfig] = None) -> Iterator[str]:
        """Generate the rendered subtree below root one line at a time."""
        config = config or DisplayConfig()
        # anytree counts the root as level 1
        maxlevel = None if self.max_display_level is None else self.max_display_level + 1
        for prefix, _, node in RenderTree(root, style=config.style, childiter=_sort_children, maxlevel=maxlevel):
            yield f"{prefix}{node.display_name}"

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[EntryNode]:
        return iter(self._nodes.values())
