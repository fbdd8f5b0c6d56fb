"""Console writer"""

import sys
from typing import Optional, TextIO

from easy_logger.writers.base_writer import BaseWriter


class ConsoleWriter(BaseWriter):
    """Write logs to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None, close_stream: bool = False):
        """
        Initialize console writer.

        Args:
            stream: Output stream (default: sys.stdout)
            close_stream: Close the stream when this writer is released

        Example:
            # Standard output
            writer = ConsoleWriter()

            # Standard error
            writer = ConsoleWriter(sys.stderr)
        """
        super().__init__()
        self.stream = stream or sys.stdout
        self.close_stream = close_stream

    def _write(self, line: str) -> bool:
        self.stream.write(line + "\n")
        return True

    def _flush(self) -> None:
        self.stream.flush()

    def _release(self) -> None:
        if self.close_stream:
            self.stream.close()

    def __repr__(self) -> str:
        """String representation."""
        return f"ConsoleWriter(stream={getattr(self.stream, 'name', self.stream)!r})"
