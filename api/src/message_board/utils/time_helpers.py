from datetime import datetime, timezone


def utc_now_iso(now: datetime = None) -> str:
    """Return an ISO-8601 UTC timestamp with millisecond precision and a 'Z' suffix.

    Fixed width keeps the strings sortable as plain text.
    """
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    now = now.astimezone(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
