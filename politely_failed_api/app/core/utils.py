"""Small helpers shared by the HTTP layer."""

from datetime import datetime, timezone


def utc_timestamp() -> str:
    """Return the current UTC time as ISO‑8601 with milliseconds, e.g. ``2025-01-01T12:00:00.000Z``."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
