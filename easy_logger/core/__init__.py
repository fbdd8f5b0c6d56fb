"""
Core module for easy_logger

This module contains the fundamental classes:
- Logger: Fans formatted lines out to writers
- LoggerBuilder: Builder pattern for logger construction
- FileLoggerFactory: Many file loggers sharing one config
- LogEntry: Log entry data structure
- LogLevel: Log level enumeration
- LoggerConfig: Configuration
"""

from easy_logger.core.log_level import LogLevel
from easy_logger.core.logger_config import LoggerConfig
from easy_logger.core.log_entry import LogEntry
from easy_logger.core.timestamp import format_delta, format_timestamp, to_unix_millis
from easy_logger.core.naming import derive_file_name
from easy_logger.core.logger import Logger
from easy_logger.core.logger_builder import LoggerBuilder
from easy_logger.core.logger_factory import FileLoggerFactory

__all__ = [
    "Logger",
    "LoggerBuilder",
    "FileLoggerFactory",
    "LogEntry",
    "LogLevel",
    "LoggerConfig",
    "format_delta",
    "format_timestamp",
    "to_unix_millis",
    "derive_file_name",
]
