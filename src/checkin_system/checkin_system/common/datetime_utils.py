from __future__ import annotations

from datetime import date, datetime, timezone

from ..core.constants import DATE_FORMAT, TIME_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def now_utc() -> datetime:
    """Current time as an aware UTC datetime.

    Note: Wrapped so tests can patch/mock it easily.
    """
    return datetime.now(timezone.utc)


def as_utc(now: datetime) -> datetime:
    """Aware UTC view of ``now``; naive datetimes are taken as UTC."""
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc)


def calendar_date(now: datetime) -> str:
    """Deduplication partition key for ``now``: its UTC calendar date."""
    return as_utc(now).strftime(DATE_FORMAT)


def local_time_label(now: datetime) -> str:
    """Human-readable server-local wall-clock time of the same instant."""
    return as_utc(now).astimezone().strftime(TIME_FORMAT)
