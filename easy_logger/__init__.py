"""
easy_logger - A lightweight logging library

Formats log lines from configurable sections (level, timestamp, caller,
message) and writes them to any number of pluggable writers.
"""

__version__ = "1.0.0"

from easy_logger.core.logger import Logger
from easy_logger.core.logger_builder import LoggerBuilder
from easy_logger.core.logger_factory import FileLoggerFactory
from easy_logger.core.log_entry import LogEntry
from easy_logger.core.log_level import LogLevel
from easy_logger.core.logger_config import LoggerConfig
from easy_logger.writers import BaseWriter, ConsoleWriter, FileWriter

from easy_logger import formatters
from easy_logger import writers

__all__ = [
    "Logger",
    "LoggerBuilder",
    "FileLoggerFactory",
    "LogEntry",
    "LogLevel",
    "LoggerConfig",
    "BaseWriter",
    "ConsoleWriter",
    "FileWriter",
    "formatters",
    "writers",
]
