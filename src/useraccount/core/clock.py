"""Wall-clock helpers."""

from datetime import UTC, datetime


def now_unix_seconds() -> int:
    """Current UTC time as whole seconds since the Unix epoch."""
    return int(datetime.now(UTC).timestamp())
