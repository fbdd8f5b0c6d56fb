"""
File logger factory

Creates many loggers sharing one config (and therefore one start time),
each writing to its own generated file in a common directory.
"""

import os
from pathlib import Path
from typing import Optional, Union

from easy_logger.core.logger import Logger, find_caller
from easy_logger.core.logger_config import LoggerConfig
from easy_logger.writers.base_writer import BaseWriter
from easy_logger.writers.file_writer import FileWriter


class FileLoggerFactory:
    """
    Factory for loggers that each get a FileWriter with their own id.

    Example:
        factory = FileLoggerFactory("logs/", LoggerConfig(), ConsoleWriter())
        network = factory.create("network")   # logs/<start>_network.log
        storage = factory.create("storage")   # logs/<start>_storage.log
    """

    def __init__(
        self,
        log_directory: Union[str, Path],
        config: LoggerConfig,
        *extra_writers: BaseWriter
    ):
        """
        Initialize factory.

        Args:
            log_directory: Directory the log files are created in
            config: Config shared by every created logger
            *extra_writers: Writers added to every created logger after
                its file writer. The same instances are shared.
        """
        self.log_directory = Path(log_directory)
        self.config = config
        self.extra_writers = extra_writers

    def create(self, id: Optional[str] = None) -> Logger:
        """
        Create a logger writing to ``{start}_{id}.log``.

        Args:
            id: Log id, unique within the directory. Defaults to the
                calling file's name without its extension.

        Returns:
            A started logger

        Raises:
            FileExistsError: If a log with this id already exists
        """
        if id is None:
            caller, _ = find_caller(2)
            id = os.path.splitext(os.path.basename(caller))[0]

        return Logger(self.config, FileWriter(self.log_directory, id), *self.extra_writers)

    def clone_with_directory(self, log_directory: Union[str, Path]) -> "FileLoggerFactory":
        """Create a factory with the same config and extra writers in another directory."""
        return FileLoggerFactory(log_directory, self.config, *self.extra_writers)
