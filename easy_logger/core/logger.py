"""
Main Logger class - fans formatted lines out to writers
"""

from __future__ import annotations

import sys
import weakref
from datetime import datetime
from typing import Callable, List, Optional, Sequence, Tuple

from easy_logger.core.log_entry import LogEntry
from easy_logger.core.log_level import LogLevel
from easy_logger.core.logger_config import LoggerConfig
from easy_logger.core.timestamp import format_delta, format_timestamp
from easy_logger.formatters.line_formatter import LineFormatter
from easy_logger.writers.base_writer import BaseWriter


def _local_now() -> datetime:
    return datetime.now().astimezone()


def find_caller(depth: int) -> Tuple[str, int]:
    """File name and line number ``depth`` frames above this function."""
    try:
        frame = sys._getframe(depth)
    except ValueError:
        return "", 0
    return frame.f_code.co_filename, frame.f_lineno


def _report(action: str, writer: BaseWriter, error: Exception) -> None:
    print(f"Writer error: {action} {writer!r} failed: {error}", file=sys.stderr)


def _release_writers(writers: Sequence[BaseWriter]) -> List[Exception]:
    """Flush then close every writer, attempting all of them."""
    errors = []
    for writer in writers:
        for action in (writer.flush, writer.close):
            try:
                action()
            except Exception as e:
                _report(action.__name__, writer, e)
                errors.append(e)
    return errors


class Logger:
    """
    Logger that formats messages and writes them to every writer.

    Writers are started when the logger is created and flushed and closed
    when it is closed. Closing happens at most once: explicitly through
    ``close()`` or a ``with`` block, or otherwise when the logger is
    garbage collected or the interpreter exits.

    Example:
        with Logger(LoggerConfig(), ConsoleWriter(), FileWriter("logs/")) as logger:
            logger.info("Application started")
    """

    def __init__(
        self,
        config: Optional[LoggerConfig] = None,
        *writers: BaseWriter,
        clock: Optional[Callable[[], datetime]] = None
    ):
        """
        Create a logger and start its writers.

        Args:
            config: Logger configuration (default: LoggerConfig.default())
            *writers: Writers to log to, in fan-out order
            clock: Source of the current time (default: local now)

        Raises:
            Exception: Whatever a writer's ``start_log`` raised, e.g.
                FileExistsError. Writers started before it are closed.
        """
        self._config = config or LoggerConfig.default()
        self._writers: List[BaseWriter] = list(writers)
        self._clock = clock or _local_now
        self._formatter = LineFormatter(self._config)

        started = []
        for writer in self._writers:
            try:
                writer.start_log(self)
            except Exception:
                _release_writers(started)
                raise
            started.append(writer)

        self._finalizer = weakref.finalize(self, _release_writers, self._writers)

    @property
    def config(self) -> LoggerConfig:
        """Configuration shared with writers."""
        return self._config

    @property
    def writers(self) -> Tuple[BaseWriter, ...]:
        """Writers in fan-out order."""
        return tuple(self._writers)

    @property
    def closed(self) -> bool:
        """Whether the writers have been released."""
        return not self._finalizer.alive

    def get_timestamp(self, t: datetime) -> str:
        """Format an absolute time the way this logger's config asks for."""
        return format_timestamp(t, self._config.use_unix_time)

    def get_timestamp_from_start(self, t: datetime) -> str:
        """Format the time elapsed since the config's start time."""
        return format_delta(t, self._config.start_time, self._config.use_unix_time)

    def log(
        self,
        level: LogLevel,
        message: str,
        caller: Optional[str] = None,
        caller_line: Optional[int] = None,
        *,
        stacklevel: int = 1
    ) -> bool:
        """
        Log a message at the given level.

        Args:
            level: Level to tag the message with
            message: Message to log
            caller: File path of the call site (default: detected)
            caller_line: Line number of the call site (default: detected)
            stacklevel: Frames to skip when detecting the call site;
                1 is the direct caller of this method

        Returns:
            Whether the logging succeeded. It fails if *any* writer failed;
            every writer is attempted regardless.
        """
        if self.closed:
            return False

        if self._config.log_caller and (caller is None or caller_line is None):
            found_file, found_line = find_caller(stacklevel + 1)
            caller = found_file if caller is None else caller
            caller_line = found_line if caller_line is None else caller_line

        entry = LogEntry(
            level=level,
            message=message,
            timestamp=self._clock(),
            file_name=caller or "",
            line_number=caller_line or 0,
        )
        line = self._formatter.format(entry)

        successful = True
        for writer in self._writers:
            try:
                successful &= bool(writer.log(line))
            except Exception as e:
                _report("log to", writer, e)
                successful = False
        return successful

    # Shorthand methods

    def trace(self, message: str, caller: Optional[str] = None, caller_line: Optional[int] = None) -> bool:
        """Log trace message."""
        return self.log(LogLevel.TRACE, message, caller, caller_line, stacklevel=2)

    def debug(self, message: str, caller: Optional[str] = None, caller_line: Optional[int] = None) -> bool:
        """Log debug message."""
        return self.log(LogLevel.DEBUG, message, caller, caller_line, stacklevel=2)

    def verbose(self, message: str, caller: Optional[str] = None, caller_line: Optional[int] = None) -> bool:
        """Log verbose message."""
        return self.log(LogLevel.VERBOSE, message, caller, caller_line, stacklevel=2)

    def info(self, message: str, caller: Optional[str] = None, caller_line: Optional[int] = None) -> bool:
        """Log info message."""
        return self.log(LogLevel.INFO, message, caller, caller_line, stacklevel=2)

    def warn(self, message: str, caller: Optional[str] = None, caller_line: Optional[int] = None) -> bool:
        """Log warning message."""
        return self.log(LogLevel.WARN, message, caller, caller_line, stacklevel=2)

    def error(self, message: str, caller: Optional[str] = None, caller_line: Optional[int] = None) -> bool:
        """Log error message."""
        return self.log(LogLevel.ERROR, message, caller, caller_line, stacklevel=2)

    def fatal(self, message: str, caller: Optional[str] = None, caller_line: Optional[int] = None) -> bool:
        """Log fatal message."""
        return self.log(LogLevel.FATAL, message, caller, caller_line, stacklevel=2)

    def flush(self) -> None:
        """Flush all writers; a failing writer does not stop the rest."""
        for writer in self._writers:
            try:
                writer.flush()
            except Exception as e:
                _report("flush", writer, e)

    def close(self) -> List[Exception]:
        """
        Flush and close all writers.

        Every writer gets a flush and close attempt even if earlier ones
        fail. Calling this again does nothing.

        Returns:
            Errors raised by writers while flushing or closing
        """
        return self._finalizer() or []

    def __enter__(self) -> "Logger":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()

    def __repr__(self) -> str:
        """String representation."""
        return f"Logger(writers={self._writers!r}, closed={self.closed})"
