"""Signal-aware output writing for the oxydendrum CLI."""

import errno
import os
import types
from pathlib import Path
from typing import Optional, Type, Union

from oxydendrum.cli.signal_handler import signal_handler
from oxydendrum.tree.node import Node
from oxydendrum.tree.renderer import stream_render


class SafeWriter:
    """Writes rendered trees to a file descriptor or a file, stopping on interruption.

    write_tree() streams a whole tree and write() writes raw text. Text is
    encoded as UTF-8 and written with os.write, so nothing is held back in a
    Python-level buffer when the process is interrupted. A file opened by the
    writer is closed by close() or on leaving the context manager; a file
    descriptor passed in is left open.

    Attributes:
        file: The file descriptor or path given at construction.
        fd: The file descriptor being written to.

    Example:
        >>> import sys
        >>> with SafeWriter(sys.stdout.fileno()) as writer:  # doctest: +SKIP
        ...     writer.write_tree(Node.flat("tree", ["leaf"]))
        tree
        `-- leaf
        2
    """

    def __init__(self, file: Union[int, str, Path]):
        """Initialize the writer.

        Args:
            file: A file descriptor, or a path to create or truncate.

        Raises:
            TypeError: If file is neither an int nor path-like.
            OSError: If the file can't be opened.
        """
        self.file = file
        self._closed = False

        if isinstance(file, int):
            self.fd = file
            self._file_obj = None
        elif isinstance(file, (str, os.PathLike)):
            self._file_obj = Path(file).open("w", encoding="utf-8")
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: str) -> None:
        """Write data as UTF-8.

        Raises:
            BrokenPipeError: If SIGPIPE or SIGINT was received, or the reader closed the pipe.
            OSError: If any other I/O error occurs.
            ValueError: If the writer is closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted:
            raise BrokenPipeError()

        encoded = data.encode("utf-8")
        try:
            while encoded:
                written = os.write(self.fd, encoded)
                encoded = encoded[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def write_tree(self, root: Node) -> int:
        """Write the rendering of a tree, one line at a time, each ending in a newline.

        Lines are rendered as they are written, so an interruption stops the
        rendering as well as the output.

        Args:
            root: The tree to write.

        Returns:
            The number of lines written.

        Raises:
            BrokenPipeError: If interrupted or the reader closed the pipe, as for write().
        """
        count = 0
        for line in stream_render(root):
            self.write(line + "\n")
            count += 1
        return count

    def close(self) -> None:
        """Close the file if this writer opened it. Safe to call more than once."""
        if self._closed:
            return

        if self._file_obj is not None:
            try:
                self._file_obj.close()
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise

        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        try:
            self.close()
        except OSError:
            # An exception from the with block takes priority over one from close()
            if exc_type is None:
                raise
