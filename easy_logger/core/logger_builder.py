"""Logger builder pattern"""

from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional, TextIO, Union

from easy_logger.core.logger import Logger
from easy_logger.core.logger_config import LoggerConfig
from easy_logger.writers.base_writer import BaseWriter
from easy_logger.writers.console_writer import ConsoleWriter
from easy_logger.writers.file_writer import FileWriter


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self):
        self._config = LoggerConfig()
        self._clock: Optional[Callable[[], datetime]] = None
        self._writers: List[BaseWriter] = []

    def with_config(self, config: LoggerConfig) -> "LoggerBuilder":
        """Use an existing (possibly shared) config."""
        self._config = config
        return self

    def with_start_time(self, start_time: datetime) -> "LoggerBuilder":
        """Set the start time used for deltas and file names."""
        self._config = self._config.replace(start_time=start_time)
        return self

    def with_unix_time(self, enabled: bool = True) -> "LoggerBuilder":
        """Log Unix epoch milliseconds instead of dates."""
        self._config = self._config.replace(use_unix_time=enabled)
        return self

    def with_delta_time(self, enabled: bool = True) -> "LoggerBuilder":
        """Log time elapsed since start instead of wall-clock time."""
        self._config = self._config.replace(use_delta_time=enabled)
        return self

    def with_caller(self, enabled: bool = True) -> "LoggerBuilder":
        """Include the ``file:line`` of the call site."""
        self._config = self._config.replace(log_caller=enabled)
        return self

    def with_timestamp(self, enabled: bool = True) -> "LoggerBuilder":
        """Include a timestamp section."""
        self._config = self._config.replace(log_timestamp=enabled)
        return self

    def with_level(self, enabled: bool = True) -> "LoggerBuilder":
        """Include the ``[LEVEL]`` section."""
        self._config = self._config.replace(log_level=enabled)
        return self

    def with_clock(self, clock: Callable[[], datetime]) -> "LoggerBuilder":
        """Set the source of the current time."""
        self._clock = clock
        return self

    def with_console(self, stream: Optional[TextIO] = None) -> "LoggerBuilder":
        """Enable console output."""
        self._writers.append(ConsoleWriter(stream))
        return self

    def with_file(self, path: Union[str, Path], id: Optional[str] = None) -> "LoggerBuilder":
        """
        Enable file output.

        Args:
            path: Log file path, or a directory to generate the name in
            id: Id appended to a generated file name

        Returns:
            Self for method chaining

        Example:
            logger = (LoggerBuilder()
                .with_caller()
                .with_file("logs/", id="worker-1")
                .build())
        """
        self._writers.append(FileWriter(path, id))
        return self

    def add_writer(self, writer: BaseWriter) -> "LoggerBuilder":
        """
        Add a custom writer.

        Args:
            writer: Writer instance

        Returns:
            Self for method chaining
        """
        self._writers.append(writer)
        return self

    def build(self) -> Logger:
        """Build and return configured logger."""
        return Logger(self._config, *self._writers, clock=self._clock)
