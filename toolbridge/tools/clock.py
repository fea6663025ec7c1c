"""Time-of-day capability."""

from datetime import datetime


def get_time_of_day() -> str:
    """Current local time as an offset-aware ISO-8601 string."""
    return datetime.now().astimezone().isoformat(timespec="seconds")
