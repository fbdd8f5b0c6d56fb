"""
Log formatters module

Turns log entries into the text written by writers.
"""

from easy_logger.formatters.line_formatter import (
    SECTION_SEPARATOR,
    LineFormatter,
    build_line,
)

__all__ = [
    "SECTION_SEPARATOR",
    "LineFormatter",
    "build_line",
]
