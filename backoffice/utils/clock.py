# File: backoffice/utils/clock.py
"""
Clock used to timestamp health check responses.
"""

from datetime import datetime, timezone


class SystemClock:
    def now(self) -> datetime:
        return datetime.now(timezone.utc)


def isoformat(dt: datetime) -> str:
    # 2026-10-19T08:30:00.123456Z
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return dt.isoformat(timespec="microseconds").replace("+00:00", "Z")
