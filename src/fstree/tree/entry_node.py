"""Node representation for entries in the rendered tree."""

from typing import Any, Optional

from anytree import Node

from fstree.entry import Entry


class EntryNode(Node):  # type: ignore
    """Node class carrying an Entry as payload in the entry tree.

    Extends anytree.Node so the tree can be traversed and rendered with anytree.
    The node name is the label shown when rendering, which is the entry name for
    every node but the root.

    Attributes:
        name (str): The display label of the node.
        entry (Entry): The file or directory this node stands for.
        parent (Optional[EntryNode]): The parent node in the tree.
        children (tuple[EntryNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> root = EntryNode("/data", Entry.root("/data"))
        >>> child = EntryNode("app.log", Entry("/data/app.log"), parent=root)
        >>> child.key
        '/data/app.log'
        >>> [node.name for node in root.children]
        ['app.log']
    """

    def __init__(self, name: str, entry: Entry, parent: Optional["EntryNode"] = None, **kwargs: Any) -> None:
        super().__init__(name, parent, **kwargs)
        self.entry = entry

    @property
    def key(self) -> str:
        return self.entry.path

    @property
    def is_dir(self) -> bool:
        return self.entry.is_dir

    @property
    def display_name(self) -> str:
        """Label as rendered: directories below the top of the tree get a trailing slash."""
        if self.is_dir and not self.is_root:
            return f"{self.name}/"
        return self.name
