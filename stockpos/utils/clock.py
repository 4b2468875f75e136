"""Timestamps for entities and calendar-day matching."""

from datetime import date, datetime


def now() -> datetime:
    """Current local time, timezone aware."""
    return datetime.now().astimezone()


def today() -> date:
    """Current local calendar day."""
    return now().date()


def epoch_millis(moment: datetime | None = None) -> int:
    """Milliseconds since the epoch for the given moment (defaults to now)."""
    moment = moment or now()
    return int(moment.timestamp() * 1000)


def local_day(moment: datetime) -> date:
    """Calendar day of a timestamp in local time."""
    if moment.tzinfo is None:
        return moment.date()
    return moment.astimezone().date()
