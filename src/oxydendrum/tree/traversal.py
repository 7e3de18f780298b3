"""Building Node trees from directories on disk."""

import os
from pathlib import Path
from typing import Optional

from oxydendrum.exclusion_rules.base_rules import BaseExclusionRules
from oxydendrum.tree.node import Node
from oxydendrum.types import PathType


def from_path(path: PathType, exclusion_rules: Optional[BaseExclusionRules] = None) -> Node:
    """Build a tree mirroring the directory at path.

    The root is named by the path exactly as given. Each directory entry becomes
    a child named by its base name, in the order the operating system lists
    them; entries are not sorted. Symbolic links to directories are followed.
    Anything that is not a directory, including a dangling symbolic link, is a
    leaf. Names that are not valid UTF-8 are shown with U+FFFD replacement
    characters.

    Args:
        path: The directory (or file) to represent. Can be any path-like object.
        exclusion_rules: Rules for leaving entries out of the tree. Paths passed to
            exclude() are relative to path and use forward slashes. Defaults to None.

    Returns:
        The root node of the tree.

    Raises:
        FileNotFoundError: If nothing exists at path, not even a dangling symbolic link.
        OSError: If any directory in the tree can't be listed. No partial tree is returned.

    Example:
        >>> tree = from_path("src")  # doctest: +SKIP
        >>> print(tree)  # doctest: +SKIP
        src
        `-- oxydendrum
            +-- __init__.py
            `-- types.py
    """
    if not os.path.lexists(path):
        raise FileNotFoundError(f"Path does not exist: {path}")

    root_path = Path(path)
    root = Node.singleton(display_name(os.fspath(path)))
    if root_path.is_dir():
        _add_children(root, root_path, "", exclusion_rules)
    return root


def display_name(name: str) -> str:
    """Return name with undecodable bytes replaced by U+FFFD.

    On POSIX, names that are not valid UTF-8 come back from the OS as str with
    lone surrogates, which can't be written as UTF-8 text.

    Example:
        >>> display_name(os.fsdecode(b"bad\\xff.txt"))  # doctest: +SKIP
        'bad\\ufffd.txt'
    """
    return os.fsencode(name).decode("utf-8", "replace")


def _is_excluded(relative_path: str, is_dir: bool, exclusion_rules: Optional[BaseExclusionRules]) -> bool:
    if exclusion_rules is None:
        return False
    if exclusion_rules.exclude(relative_path):
        return True
    # Directory-only patterns like "build/" only match with the trailing slash
    return is_dir and exclusion_rules.exclude(relative_path + "/")


def _add_children(
    node: Node,
    path: Path,
    relative_path: str,
    exclusion_rules: Optional[BaseExclusionRules],
) -> None:
    """Recursively append a node for every entry of the directory at path."""
    for entry in os.listdir(path):
        child_path = path / entry
        name = display_name(entry)
        child_relative_path = f"{relative_path}/{name}" if relative_path else name
        is_dir = child_path.is_dir()

        if _is_excluded(child_relative_path, is_dir, exclusion_rules):
            continue

        child = node.append(Node.singleton(name))
        if is_dir:
            _add_children(child, child_path, child_relative_path, exclusion_rules)
