"""ASCII rendering of Node trees.

Each line is drawn from a prefix stack holding one Indent token per level
between the root and the line's node. The last token is the connector that
points at the node; the ones before it are continuation tokens telling
whether each ancestor's branch is still open. For example::

    parent
    +-- child 1
    |   +-- grandkid 1 1
    |   `-- grandkid 1 2
    `-- child 2
        `-- grandkid 2 1
"""

from typing import TYPE_CHECKING, Iterator, List, Sequence

from oxydendrum.tree.indent import Indent

if TYPE_CHECKING:
    from oxydendrum.tree.node import Node


def format_prefix(prefix: Sequence[Indent]) -> str:
    """Draw a prefix stack, each token followed by a single space.

    Example:
        >>> format_prefix([Indent.UPLINK, Indent.LAST])
        '|   `-- '
    """
    return "".join(f"{indent.value} " for indent in prefix)


def _render_lines(node: "Node", prefix: List[Indent], is_last: bool) -> Iterator[str]:
    yield format_prefix(prefix) + node.name

    children = node.children
    for i, child in enumerate(children):
        # The connector that drew this node becomes the column below it
        child_prefix = list(prefix)
        if child_prefix:
            child_prefix[-1] = Indent.continuation(is_last)

        is_last_child = i == len(children) - 1
        child_prefix.append(Indent.connector(is_last_child))

        yield from _render_lines(child, child_prefix, is_last_child)


def stream_render(root: "Node") -> Iterator[str]:
    """Generate the rendering of a tree one line at a time.

    Lines carry no trailing newline. The tree is not modified.

    Args:
        root: The node to render. Its line has an empty prefix.

    Yields:
        One line per node, in depth-first order following each node's child order.
    """
    yield from _render_lines(root, [], True)


def render(root: "Node") -> str:
    """Render a tree as a single newline-separated string.

    A leaf renders as exactly its name; there is no trailing newline.

    Args:
        root: The node to render.

    Returns:
        The complete rendering.

    Example:
        >>> from oxydendrum.tree.node import Node
        >>> print(render(Node.flat("node", ["node1"])))
        node
        `-- node1
    """
    return "\n".join(stream_render(root))
