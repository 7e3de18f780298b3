from abc import ABC, abstractmethod
from typing import Sequence, Union

from oxydendrum.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class for deciding which directory entries to leave out of a tree.

    The traversal collaborator calls exclude() with each entry's path relative to
    the directory being walked. Concrete rule types must implement exclude();
    loading rules from files and adding single rules are optional capabilities.

    Example:
        >>> class SuffixExclusionRules(BaseExclusionRules):
        ...     def __init__(self, suffix: str):
        ...         self.suffix = suffix
        ...     def exclude(self, path: str) -> bool:
        ...         return path.endswith(self.suffix)
        >>> rules = SuffixExclusionRules(".tmp")
        >>> rules.exclude("build/cache.tmp")
        True
        >>> rules.exclude("main.py")
        False
        >>> rules.add_rule("*.log")
        Traceback (most recent call last):
            ...
        NotImplementedError: SuffixExclusionRules doesn't support adding individual rules.
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be left out of the tree.

        Args:
            path (str): Path of the entry relative to the traversal root, using forward
                slashes. Directories may also be checked with a trailing slash.

        Returns:
            bool: True if the entry should be excluded, False if it should be included.
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load exclusion rules from one or more files.

        Args:
            rules_files: Path to a file or sequence of paths containing exclusion rules.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
            FileNotFoundError: If any rules file does not exist (for file-supporting rule types).
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule.

        Args:
            rule (str): The rule to add, in the format of the concrete rule type.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
