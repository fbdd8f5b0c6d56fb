"""
Log entry data structure
"""

from dataclasses import dataclass, field
from datetime import datetime

from easy_logger.core.log_level import LogLevel


@dataclass
class LogEntry:
    """
    Log entry data structure.

    Contains everything a single logging call contributes to a log line.
    """

    level: LogLevel
    message: str
    timestamp: datetime = field(default_factory=lambda: datetime.now().astimezone())
    file_name: str = ""
    line_number: int = 0

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not isinstance(self.message, str):
            self.message = str(self.message)
