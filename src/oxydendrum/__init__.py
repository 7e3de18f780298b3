"""Directory tree rendering utilities.

This package renders filesystem directories, or any hand-built hierarchy,
as plain ASCII trees in the style of the classic ``tree`` utility.
"""

from importlib.metadata import PackageNotFoundError, version

from oxydendrum.tree import Indent, Node, from_path, render, stream_render

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("oxydendrum")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = ["Indent", "Node", "from_path", "render", "stream_render", "__version__"]
