"""
Timestamp formatting

Renders points in time either as ``DD-MM-YYYYTHH:mm:ss.fff`` or as Unix
epoch milliseconds, and elapsed time relative to a start time.

Naive datetimes are interpreted as UTC when an absolute instant is needed
(Unix time, deltas against an aware datetime). Aware datetimes are
converted exactly.
"""

from datetime import datetime, timedelta, timezone

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_MILLISECOND = timedelta(milliseconds=1)
_MICROSECOND = timedelta(microseconds=1)

_MS_PER_SECOND = 1000
_MS_PER_MINUTE = 60 * _MS_PER_SECOND
_MS_PER_HOUR = 60 * _MS_PER_MINUTE


def _as_aware(t: datetime) -> datetime:
    if t.tzinfo is None or t.utcoffset() is None:
        return t.replace(tzinfo=timezone.utc)
    return t


def to_unix_millis(t: datetime) -> int:
    """
    Milliseconds since 1970-01-01T00:00:00Z, rounded down.

    Negative for instants before the epoch.
    """
    return (_as_aware(t) - UNIX_EPOCH) // _MILLISECOND


def delta_millis(t: datetime, start: datetime) -> int:
    """Whole milliseconds from ``start`` to ``t``, truncated toward zero."""
    micros = (_as_aware(t) - _as_aware(start)) // _MICROSECOND
    if micros < 0:
        return -(-micros // 1000)
    return micros // 1000


def format_timestamp(t: datetime, use_unix_time: bool) -> str:
    """
    Format a point in time.

    Args:
        t: Time to format
        use_unix_time: Render Unix epoch milliseconds instead of
            ``DD-MM-YYYYTHH:mm:ss.fff``

    Returns:
        Formatted timestamp

    Example:
        >>> format_timestamp(datetime(1970, 1, 1), False)
        '01-01-1970T00:00:00.000'
        >>> format_timestamp(datetime(1, 1, 1), True)
        '-62135596800000'
    """
    if use_unix_time:
        return str(to_unix_millis(t))

    return (
        f"{t.day:02d}-{t.month:02d}-{t.year:04d}"
        f"T{t.hour:02d}:{t.minute:02d}:{t.second:02d}.{t.microsecond // 1000:03d}"
    )


def format_delta(t: datetime, start: datetime, use_unix_time: bool) -> str:
    """
    Format the time elapsed between ``start`` and ``t``.

    Hours are not wrapped at 24: four days render as ``96:00:00.000``.
    A negative delta (``t`` before ``start``) renders its magnitude with a
    leading ``-``, e.g. ``-00:00:01.500``.

    Args:
        t: Time of the log call
        start: Reference start time
        use_unix_time: Render a signed millisecond count instead of
            ``HH:mm:ss.fff``

    Returns:
        Formatted delta
    """
    total_ms = delta_millis(t, start)
    if use_unix_time:
        return str(total_ms)

    sign = "-" if total_ms < 0 else ""
    hours, rest = divmod(abs(total_ms), _MS_PER_HOUR)
    minutes, rest = divmod(rest, _MS_PER_MINUTE)
    seconds, millis = divmod(rest, _MS_PER_SECOND)
    return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}.{millis:03d}"
