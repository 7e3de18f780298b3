"""Exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from oxydendrum.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Exclusion rules matched the way Git matches .gitignore patterns.

    Patterns are compiled with the pathspec library and support globs, directory
    patterns ending in "/", negation with "!", "**" and comment lines. Patterns
    from files and patterns added one at a time are kept in a single list, so the
    order in which they were supplied decides which one wins.

    Attributes:
        spec (PathSpec): Compiled pattern matcher, rebuilt whenever patterns are added.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("__pycache__/")
        >>> rules.add_rule("*.pyc")
        >>> rules.exclude("src/__pycache__/")
        True
        >>> rules.exclude("src/main.pyc")
        True
        >>> rules.exclude("src/main.py")
        False

    Note:
        Paths passed to exclude() must use forward slashes, even on Windows.
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize the rules, optionally loading patterns from files.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._lines: List[str] = []
        self.spec = PathSpec.from_lines(GitWildMatchPattern, self._lines)

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        """Check a path against the patterns loaded so far.

        Args:
            path: Relative path of the entry, using forward slashes.

        Returns:
            bool: True if the last pattern matching path is not a negation.
        """
        return bool(self.spec.match_file(path))

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append the patterns of one or more .gitignore-style files.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                self._extend(f.read().splitlines())

    def add_rule(self, rule: str) -> None:
        """Append a single .gitignore pattern, such as "*.pyc", "build/" or "!keep.log"."""
        self._extend([rule])

    def _extend(self, lines: Sequence[str]) -> None:
        self._lines.extend(lines)
        self.spec = PathSpec.from_lines(GitWildMatchPattern, self._lines)
