"""Output destinations for exported records."""

import os
import sys
import tempfile
from typing import List, Optional, TextIO

from .errors import OutputError
from .logging_config import get_logger

logger = get_logger(__name__)


def default_file_mode() -> int:
    """Get the mode a newly created file gets under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


class OutputSink:
    """Base class for output destinations."""

    def __init__(self) -> None:
        self.lines_written = 0

    def emit(self, line: str) -> None:
        """Emit one line of output.

        Args:
            line: Text without trailing newline
        """
        raise NotImplementedError

    def finalize(self) -> None:
        """Flush any pending output."""


class StreamSink(OutputSink):
    """Writes each line to a stream as soon as it is emitted."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        super().__init__()
        self.stream = stream if stream is not None else sys.stdout

    def emit(self, line: str) -> None:
        self.stream.write(line + "\n")
        self.stream.flush()
        self.lines_written += 1


class FileSink(OutputSink):
    """Buffers lines and writes them to a file in a single operation."""

    def __init__(self, path: str) -> None:
        super().__init__()
        self.path = path
        self.buffer: List[str] = []
        self._finalized = False

    def emit(self, line: str) -> None:
        self.buffer.append(line)

    def finalize(self) -> None:
        """Write the buffered lines to the output file.

        The content goes to a temporary file next to the destination, which
        is then renamed over it.

        Raises:
            OutputError: If the file cannot be created or written
        """
        if self._finalized:
            return

        directory = os.path.dirname(os.path.abspath(self.path))
        content = "".join(line + "\n" for line in self.buffer)
        tmp_path = None
        try:
            os.makedirs(directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".playlistexport-")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            # mkstemp creates the file as 0600
            os.chmod(tmp_path, default_file_mode())
            os.replace(tmp_path, self.path)
        except BaseException as e:
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            if isinstance(e, (OSError, UnicodeError)):
                raise OutputError(self.path, str(e)) from e
            raise

        self._finalized = True
        self.lines_written = len(self.buffer)
        logger.debug("Wrote %d lines to %s", len(self.buffer), self.path)


def create_sink(path: Optional[str] = None) -> OutputSink:
    """Create the sink for a run.

    Args:
        path: Output file path, or None to write to stdout

    Returns:
        FileSink if a path was given, StreamSink otherwise
    """
    if path is None:
        return StreamSink()
    return FileSink(path)
