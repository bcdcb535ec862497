"""Date parsing and date-floor comparison helpers."""

from __future__ import annotations

from datetime import datetime, timezone

from dateutil import parser as date_parser


def parse_date(value: str) -> datetime:
    """Parse an ISO-like or Jira-style date string.

    Raises ``ValueError`` (or ``OverflowError``) when the string holds no date.
    """

    text = value.strip()
    if not text:
        raise ValueError("empty date")
    return date_parser.parse(text)


def _as_utc_naive(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def is_after(value: datetime, floor: datetime) -> bool:
    """Return True when ``value`` is strictly after ``floor``.

    Naive datetimes are treated as UTC when compared against aware ones.
    """

    if (value.tzinfo is None) == (floor.tzinfo is None):
        return value > floor
    return _as_utc_naive(value) > _as_utc_naive(floor)
