"""Unit tests for the SafeWriter class in the oxydendrum CLI."""

import errno
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from oxydendrum.cli.safe_writer import SafeWriter
from oxydendrum.tree.node import Node


@pytest.fixture
def mock_signals():
    """Patch the signal handler seen by SafeWriter; no signal received by default."""
    with patch("oxydendrum.cli.safe_writer.signal_handler") as mock:
        mock.interrupted = False
        yield mock


@pytest.fixture
def output_file(tmp_path):
    return tmp_path / "tree.txt"


def test_safe_writer_init_with_fd():
    writer = SafeWriter(3)
    assert writer.file == 3
    assert writer.fd == 3
    assert writer._file_obj is None
    assert not writer._closed


@pytest.mark.parametrize("make_path", [str, Path])
def test_safe_writer_init_with_path(make_path):
    with patch("pathlib.Path.open") as mock_open_func:
        mock_file = MagicMock()
        mock_file.fileno.return_value = 5
        mock_open_func.return_value = mock_file

        writer = SafeWriter(make_path("/path/to/tree.txt"))

        assert Path(writer.file) == Path("/path/to/tree.txt")
        assert writer.fd == 5
        assert writer._file_obj is mock_file
        mock_open_func.assert_called_once_with("w", encoding="utf-8")


def test_safe_writer_init_with_invalid_type():
    with pytest.raises(TypeError, match="Expected int, str, or PathLike"):
        SafeWriter(4.5)


def test_safe_writer_write(mock_signals):
    with patch("os.write", side_effect=lambda fd, data: len(data)) as mock_write:
        SafeWriter(3).write("+-- node1\n")
        mock_write.assert_called_once_with(3, b"+-- node1\n")


def test_safe_writer_write_retries_partial_writes(mock_signals):
    with patch("os.write", side_effect=[4, 6]) as mock_write:
        SafeWriter(3).write("`-- node2\n")
    assert mock_write.call_args_list[0].args == (3, b"`-- node2\n")
    assert mock_write.call_args_list[1].args == (3, b"node2\n")


def test_safe_writer_write_after_close():
    writer = SafeWriter(3)
    writer.close()
    with pytest.raises(ValueError, match="Cannot write to closed SafeWriter"):
        writer.write("node")


def test_safe_writer_write_after_signal(mock_signals):
    mock_signals.interrupted = True
    with patch("os.write") as mock_write:
        with pytest.raises(BrokenPipeError):
            SafeWriter(3).write("node")
        mock_write.assert_not_called()


def test_safe_writer_write_with_epipe(mock_signals):
    with patch("os.write", side_effect=OSError(errno.EPIPE, "Broken pipe")):
        with pytest.raises(BrokenPipeError):
            SafeWriter(3).write("node")


def test_safe_writer_write_with_os_error(mock_signals):
    with patch("os.write", side_effect=OSError(errno.EIO, "Input/output error")):
        with pytest.raises(OSError) as excinfo:
            SafeWriter(3).write("node")
    assert excinfo.value.errno == errno.EIO


def test_safe_writer_close_twice():
    mock_file = MagicMock()
    writer = SafeWriter(3)
    writer._file_obj = mock_file
    writer.close()
    writer.close()
    mock_file.close.assert_called_once()
    assert writer._closed


def test_safe_writer_close_with_broken_pipe():
    mock_file = MagicMock()
    mock_file.close.side_effect = OSError(errno.EPIPE, "Broken pipe")
    writer = SafeWriter(3)
    writer._file_obj = mock_file
    writer.close()
    assert writer._closed


def test_safe_writer_close_with_error():
    mock_file = MagicMock()
    mock_file.close.side_effect = OSError(errno.EIO, "I/O error")
    writer = SafeWriter(3)
    writer._file_obj = mock_file
    with pytest.raises(OSError) as excinfo:
        writer.close()
    assert excinfo.value.errno == errno.EIO


def test_safe_writer_writes_file_as_utf8(mock_signals, output_file):
    text = "racine\n`-- café ünïcødé 世界\n"
    with SafeWriter(output_file) as writer:
        writer.write(text)
    assert output_file.read_text(encoding="utf-8") == text


def test_safe_writer_context_manager_closes_on_exception():
    with pytest.raises(RuntimeError):
        with SafeWriter(3) as writer:
            raise RuntimeError("boom")
    assert writer._closed


def test_safe_writer_exit_prefers_body_exception():
    mock_file = MagicMock()
    mock_file.close.side_effect = OSError(errno.EIO, "I/O error")
    with pytest.raises(RuntimeError):
        with SafeWriter(3) as writer:
            writer._file_obj = mock_file
            raise RuntimeError("boom")


def test_safe_writer_write_tree(mock_signals, output_file):
    tree = Node("parent", children=[Node.flat("child 1", ["grandkid 1 1"]), Node("child 2")])
    with SafeWriter(output_file) as writer:
        count = writer.write_tree(tree)
    assert count == 4
    assert output_file.read_text(encoding="utf-8") == (
        "parent\n+-- child 1\n|   `-- grandkid 1 1\n`-- child 2\n"
    )


def test_safe_writer_write_tree_stops_when_interrupted(mock_signals):
    written = []

    def fake_write(fd, data):
        written.append(data)
        mock_signals.interrupted = True
        return len(data)

    with patch("os.write", side_effect=fake_write):
        with pytest.raises(BrokenPipeError):
            SafeWriter(3).write_tree(Node.flat("root", ["a", "b", "c"]))
    assert written == [b"root\n"]
