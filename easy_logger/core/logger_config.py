"""
Logger configuration
"""

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime


def _now() -> datetime:
    return datetime.now().astimezone()


@dataclass(frozen=True)
class LoggerConfig:
    """
    Logger configuration.

    Immutable once created, so one instance can be shared by every logger
    built from the same factory. ``start_time`` is fixed at creation and
    drives both delta timestamps and generated log file names.
    """

    # Time settings
    start_time: datetime = field(default_factory=_now)
    use_unix_time: bool = False
    use_delta_time: bool = False

    # Section settings
    log_caller: bool = False
    log_timestamp: bool = True
    log_level: bool = True

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not isinstance(self.start_time, datetime):
            raise TypeError("start_time must be a datetime")

    def replace(self, **changes) -> "LoggerConfig":
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def delta_config(cls) -> "LoggerConfig":
        """Create configuration logging elapsed time and call sites."""
        return cls(use_delta_time=True, log_caller=True)
