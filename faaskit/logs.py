"""Working out the starting point of a log request."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone


def since_value(
    timestamp: datetime | None,
    duration: timedelta,
    now: datetime | None = None,
) -> datetime | None:
    """Return the time logs should start from.

    An explicit ``timestamp`` wins; otherwise a non-zero ``duration`` is
    counted back from ``now`` (the current UTC time by default). With
    neither, ``None`` is returned.
    """
    if timestamp is not None:
        return timestamp
    if duration:
        if now is None:
            now = datetime.now(timezone.utc)
        return now - duration
    return None