"""Time sources for calculations that depend on "now"."""

from datetime import date, datetime, time, timedelta, timezone
from typing import Protocol, Union


class Clock(Protocol):
    def now(self) -> datetime:
        ...


class SystemClock:
    """Wall-clock time in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """A clock stopped at one instant, for tests and replays."""

    def __init__(self, instant: datetime):
        self._instant = as_utc(instant)

    def now(self) -> datetime:
        return self._instant

    def advance(self, **delta) -> "FixedClock":
        """Return a new clock moved forward by timedelta keyword arguments."""
        return FixedClock(self._instant + timedelta(**delta))


def as_utc(moment: Union[date, datetime]) -> datetime:
    """
    Normalize a date or datetime to an aware UTC datetime.

    Naive datetimes are taken to be UTC; a plain date means midnight UTC.
    """
    if not isinstance(moment, datetime):
        moment = datetime.combine(moment, time.min)
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


system_clock = SystemClock()
