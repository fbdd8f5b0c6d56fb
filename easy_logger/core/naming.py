"""Log file naming"""

import os
from datetime import datetime
from typing import Optional

from easy_logger.core.timestamp import format_timestamp

LOG_EXTENSION = ".log"

_FORBIDDEN = {"/", "\0"} | {sep for sep in (os.sep, os.altsep) if sep}


def derive_file_name(
    start_time: datetime,
    use_unix_time: bool,
    id: Optional[str] = None
) -> str:
    """
    Derive a log file name from a start time and optional id.

    The id is used verbatim, Unicode included, so equal inputs always
    produce byte-for-byte equal names.

    Args:
        start_time: Logger start time
        use_unix_time: Whether the timestamp part is Unix milliseconds
        id: Optional suffix identifying the log

    Returns:
        ``"{timestamp}.log"`` or ``"{timestamp}_{id}.log"``

    Raises:
        ValueError: If the name would contain a path separator or NUL
    """
    base = format_timestamp(start_time, use_unix_time)
    name = f"{base}_{id}{LOG_EXTENSION}" if id is not None else f"{base}{LOG_EXTENSION}"

    bad = sorted(ch for ch in _FORBIDDEN if ch in name)
    if bad:
        raise ValueError(f"Invalid log file name {name!r}: contains {bad}")
    return name
