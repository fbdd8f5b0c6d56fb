"""Writers module - Log output handlers"""

from easy_logger.writers.base_writer import BaseWriter
from easy_logger.writers.console_writer import ConsoleWriter
from easy_logger.writers.file_writer import FileWriter

__all__ = ["BaseWriter", "ConsoleWriter", "FileWriter"]
