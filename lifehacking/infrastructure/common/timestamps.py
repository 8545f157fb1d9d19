"""Timestamp helpers shared by the ORM mappers."""

from datetime import UTC, datetime


def as_utc(value: datetime) -> datetime:
    """
    Return ``value`` as an aware UTC datetime.

    SQLite drops tzinfo on round-trip, so naive values read back are taken to be UTC.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def as_utc_or_none(value: datetime | None) -> datetime | None:
    return as_utc(value) if value is not None else None
