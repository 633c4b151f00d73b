"""Normalization of instants to timezone-aware UTC datetimes."""

from datetime import date, datetime, time, timezone


def utc_now() -> datetime:
    """Return the current instant in UTC."""
    return datetime.now(timezone.utc)


def normalize_instant(value: datetime | date | str) -> datetime:
    """Normalize a date, datetime, or ISO string to an aware UTC datetime.

    Naive datetimes are taken as UTC; bare dates map to midnight UTC.

    Args:
        value: Instant to normalize.

    Returns:
        datetime: Timezone-aware datetime in UTC.

    Raises:
        ValueError: If a string is not an ISO 8601 date or datetime.
        TypeError: If the value is not a supported type.
    """
    if isinstance(value, str):
        value = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    raise TypeError(f"Unsupported instant type: {type(value).__name__}")


def resolve_as_of(as_of: datetime | date | str | None) -> datetime:
    """Return the normalized reference instant, defaulting to now."""
    if as_of is None:
        return utc_now()
    return normalize_instant(as_of)


__all__ = ["utc_now", "normalize_instant", "resolve_as_of"]
