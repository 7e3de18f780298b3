"""Tree model and ASCII rendering.

This module provides the Node type, the indent tokens used to draw branch
connectors, the renderer, and a helper that builds a tree from a directory
on disk.
"""

from .indent import Indent
from .node import Node
from .renderer import render, stream_render
from .traversal import from_path

__all__ = ["Indent", "Node", "from_path", "render", "stream_render"]
