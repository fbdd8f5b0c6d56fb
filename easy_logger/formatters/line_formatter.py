"""
Line formatter

Joins the configured sections of a log entry into a single line.
"""

import os
from datetime import datetime
from typing import List

from easy_logger.core.log_entry import LogEntry
from easy_logger.core.log_level import LogLevel
from easy_logger.core.logger_config import LoggerConfig
from easy_logger.core.timestamp import format_delta, format_timestamp

SECTION_SEPARATOR = " | "


class LineFormatter:
    """
    Format log entries as ``" | "`` separated sections.

    Section order is level, timestamp, caller, message. Each of the first
    three is included only when enabled in the config; the message is
    always present.

    Example:
        # "[INFO] | 01-01-1970T00:00:00.000 | app.py:12 | started"
        formatter = LineFormatter(LoggerConfig(log_caller=True))
    """

    def __init__(self, config: LoggerConfig):
        self.config = config

    def sections(self, entry: LogEntry) -> List[str]:
        """Ordered sections for an entry, disabled ones omitted."""
        config = self.config
        parts = []

        if config.log_level:
            parts.append(entry.level.tag)

        if config.log_timestamp:
            if config.use_delta_time:
                parts.append(format_delta(entry.timestamp, config.start_time, config.use_unix_time))
            else:
                parts.append(format_timestamp(entry.timestamp, config.use_unix_time))

        if config.log_caller:
            parts.append(f"{os.path.basename(entry.file_name)}:{entry.line_number}")

        parts.append(entry.message)
        return parts

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry as one line.

        Args:
            entry: Log entry to format

        Returns:
            Formatted line, without a line terminator
        """
        return SECTION_SEPARATOR.join(self.sections(entry))

    def __call__(self, entry: LogEntry) -> str:
        return self.format(entry)

    def __repr__(self) -> str:
        """String representation."""
        return f"LineFormatter(config={self.config!r})"


def build_line(
    config: LoggerConfig,
    level: LogLevel,
    message: str,
    caller_file: str,
    caller_line: int,
    now: datetime
) -> str:
    """Build a log line from loose values instead of a LogEntry."""
    entry = LogEntry(
        level=level,
        message=message,
        timestamp=now,
        file_name=caller_file,
        line_number=caller_line,
    )
    return LineFormatter(config).format(entry)
