import time
from datetime import datetime, timezone


def get_current_ms() -> int:
    """Returns the current time as milliseconds since the Unix epoch.

    This is the unit the exchange expects in the `timestamp` parameter of
    signed requests.
    """
    return time.time_ns() // 1_000_000


def ms_to_datetime(timestamp_ms: int) -> datetime:
    """Converts an exchange timestamp in milliseconds to an aware UTC datetime."""
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc)
