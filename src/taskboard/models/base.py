"""Timestamp helpers shared by the table models and schemas."""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(UTC)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to timestamps read back without an offset.

    SQLite keeps ``TIMESTAMP WITH TIME ZONE`` values as plain text and
    returns them naive; every stored timestamp is UTC.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
