"""Node representation for elements of a renderable tree."""

from typing import Any, Iterable, Optional, Sequence

from anytree import Node as AnyNode

from oxydendrum.tree.renderer import render


class Node(AnyNode):  # type: ignore
    """A labeled tree element with an ordered sequence of children.

    Extends anytree.Node, which keeps each node attached to at most one parent
    and rejects cycles, so every tree built from these nodes is a finite,
    strictly owned hierarchy. Children keep the order in which they were given
    or appended; nothing here sorts them.

    Attributes:
        name (str): The display label. Must not contain newlines.
        children (tuple[Node]): The child nodes, in display order (inherited from anytree.Node).
        parent (Optional[Node]): The owning node, or None for a root (inherited from anytree.Node).

    Example:
        >>> tree = Node("node", children=[Node("node1"), Node("node2")])
        >>> print(tree)
        node
        +-- node1
        `-- node2
    """

    def __init__(
        self,
        name: str,
        children: Optional[Iterable["Node"]] = None,
        parent: Optional["Node"] = None,
        **kwargs: Any,
    ) -> None:
        """Initialize a Node.

        Args:
            name: The display label of the node.
            children: Pre-built child nodes, in display order. Defaults to no children.
            parent: Node to append this node to. Defaults to None.
            **kwargs: Additional arguments passed to anytree.Node.
        """
        super().__init__(name, parent=parent, children=children, **kwargs)

    @classmethod
    def singleton(cls, name: str) -> "Node":
        """Create a leaf node.

        Example:
            >>> Node.singleton("name").render()
            'name'
        """
        return cls(name)

    @classmethod
    def flat(cls, name: str, child_names: Sequence[str]) -> "Node":
        """Create a node whose children are leaves named by child_names.

        An empty child_names gives the same node as singleton(name).

        Example:
            >>> print(Node.flat("node", ["node1", "node2"]))
            node
            +-- node1
            `-- node2
        """
        if not child_names:
            return cls.singleton(name)
        return cls(name, children=[cls.singleton(child_name) for child_name in child_names])

    def append(self, child: "Node") -> "Node":
        """Append child as the new last child of this node and return it."""
        child.parent = self
        return child

    def render(self) -> str:
        """Render this node and its descendants as an ASCII tree."""
        return render(self)

    def __str__(self) -> str:
        return render(self)
