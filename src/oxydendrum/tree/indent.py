"""Indent tokens used to draw the prefix of each rendered line."""

from enum import Enum


class Indent(str, Enum):
    """One column of a rendered line's prefix.

    Every token is three characters wide. When drawn, each token is followed by
    a single space, so each level of depth adds four characters to a line.

    Values:
        BLANK: The ancestor at this level was the last of its siblings; its branch is closed
        UPLINK: The ancestor at this level has more siblings below; its branch continues
        SPLIT: Connector for a child that has a later sibling
        LAST: Connector for the last child of its parent
    """

    BLANK = "   "
    UPLINK = "|  "
    SPLIT = "+--"
    LAST = "`--"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def connector(cls, is_last: bool) -> "Indent":
        """Return the connector drawn directly before a node's name."""
        return cls.LAST if is_last else cls.SPLIT

    @classmethod
    def continuation(cls, is_last: bool) -> "Indent":
        """Return the token drawn below a node on its descendants' lines."""
        return cls.BLANK if is_last else cls.UPLINK
