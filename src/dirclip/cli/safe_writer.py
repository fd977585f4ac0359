"""Safe output writing utilities for the dirclip CLI.

This module provides a line writer that stops as soon as the process has been
interrupted or its output pipe has been closed.
"""

import errno
import sys
import types
from typing import Optional, TextIO, Type

from dirclip.cli.signal_handler import signal_handler


class SafeWriter:
    """Signal-aware line writer for a text stream.

    Every write first checks whether SIGPIPE or SIGINT has been received and, if so,
    raises BrokenPipeError instead of writing. EPIPE failures from the stream are
    reported the same way, so callers only need to handle one exception to stop
    producing output.

    Attributes:
        stream: The text stream written to. Defaults to sys.stdout at construction time.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self._closed = False

    def write_line(self, line: str) -> None:
        """Write one line followed by a newline.

        Raises:
            BrokenPipeError: If SIGPIPE or SIGINT was received or the pipe is broken.
            ValueError: If the writer is closed.
        """
        self.write(line + "\n")

    def write(self, data: str) -> None:
        """Safely write data with signal checking.

        Raises:
            BrokenPipeError: If SIGPIPE or SIGINT was received or the pipe is broken.
            OSError: If another I/O error occurs during writing.
            ValueError: If the writer is closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.sigpipe_received.is_set() or signal_handler.sigint_received.is_set():
            raise BrokenPipeError()

        try:
            self.stream.write(data)
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError() from e
            raise

    def close(self) -> None:
        """Flush the stream and mark the writer closed. The stream itself stays open.

        A broken pipe while flushing is not an error: the reader has gone away.
        """
        if self._closed:
            return

        try:
            self.stream.flush()
        except OSError as e:
            if e.errno != errno.EPIPE:
                raise
        finally:
            self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        """Close the writer. A failure while closing never masks an exception from the block."""
        try:
            self.close()
        except OSError:
            if exc_type is None:
                raise
