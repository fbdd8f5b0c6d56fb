"""
Base writer interface
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from easy_logger.core.logger import Logger


class BaseWriter(ABC):
    """
    Abstract base class for log writers.

    A writer owns one output sink. Lifecycle:
    ``start_log`` once per attaching logger, then any number of ``log``
    and ``flush`` calls, then ``close`` once per attached logger.

    One instance may be shared by several loggers. The sink is opened by
    the first ``start_log`` and released by the ``close`` matching the
    last one, so a logger closing early does not cut off the others. A
    later ``start_log`` opens a released sink again.
    All sink access is serialized with a lock.

    Subclasses implement ``_write`` and optionally ``_open``, ``_flush``
    and ``_release``.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._attachments = 0
        self._closed = False

    @property
    def closed(self) -> bool:
        """Whether the sink has been released."""
        return self._closed

    def start_log(self, logger: "Logger") -> None:
        """
        Attach a logger, preparing the sink on first attachment.

        A writer released by its previous loggers is opened again, so one
        instance can serve loggers that run one after another.

        Args:
            logger: The logger that is writing to this writer

        Raises:
            Exception: Whatever preparing the sink raised, e.g.
                FileExistsError when a file writer's log already exists
        """
        with self._lock:
            if self._attachments == 0:
                self._open(logger)
                self._closed = False
            self._attachments += 1

    def log(self, line: str) -> bool:
        """
        Append a line and a line terminator to the sink.

        Args:
            line: Formatted log line

        Returns:
            Whether the write succeeded. I/O failures and writes after
            close are reported here rather than raised.
        """
        with self._lock:
            if self._closed:
                return False
            try:
                return self._write(line)
            except (OSError, ValueError):
                return False

    def flush(self) -> None:
        """Flush buffered output, if applicable."""
        with self._lock:
            if not self._closed:
                self._flush()

    def close(self) -> None:
        """Detach one logger; release the sink once none remain."""
        with self._lock:
            if self._closed:
                return
            if self._attachments > 1:
                self._attachments -= 1
                return
            self._attachments = 0
            self._closed = True
            self._release()

    def _open(self, logger: "Logger") -> None:
        pass

    @abstractmethod
    def _write(self, line: str) -> bool:
        """Write one line; return False if the sink cannot take it."""
        pass

    def _flush(self) -> None:
        pass

    def _release(self) -> None:
        pass

    def __enter__(self) -> "BaseWriter":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()
