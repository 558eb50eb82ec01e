"""
Datetime helpers. All persisted timestamps are timezone-aware UTC.
"""
from datetime import datetime, timezone
from typing import Optional, Union


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Return ``value`` as an aware UTC datetime; naive values are assumed UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def from_unix_seconds(value: Union[int, float]) -> datetime:
    """
    Convert Unix epoch seconds to an aware UTC datetime.

    Raises:
        ValueError: If the value is out of the representable range
    """
    try:
        return datetime.fromtimestamp(value, tz=timezone.utc)
    except (OverflowError, OSError) as exc:
        raise ValueError(f"Timestamp out of range: {value}") from exc
