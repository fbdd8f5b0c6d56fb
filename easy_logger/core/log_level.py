"""
Log level enumeration
"""

from enum import IntEnum


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Indicates the type or severity of a logged message. Values follow
    declaration order and are used for display only; the logger never
    filters on them.
    """

    TRACE = 0
    DEBUG = 1
    VERBOSE = 2
    INFO = 3
    WARN = 4
    ERROR = 5
    FATAL = 6

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @property
    def tag(self) -> str:
        """Bracketed upper-case name, as written in a log line."""
        return f"[{self.name.upper()}]"

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        level_str = level_str.upper()
        if level_str in cls.__members__:
            return cls[level_str]
        raise ValueError(f"Invalid log level: {level_str}")
