from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import Optional, Union

from ..core.constants import DATE_KEY_FORMAT

DateLike = Union[date, datetime]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_KEY_FORMAT).date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def today_local() -> date:
    return now_local().date()


def as_local_date(value: DateLike) -> date:
    """Reduce a date/datetime to its local calendar day.

    Aware datetimes are converted to the local timezone first; naive ones are
    taken as local wall-clock time.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    return value


def date_key(value: DateLike) -> str:
    """Canonical override key (YYYY-MM-DD of the local calendar day)."""
    return as_local_date(value).strftime(DATE_KEY_FORMAT)


def days_between(value: DateLike, start: DateLike) -> int:
    """Signed whole calendar days from `start` to `value`."""
    return (as_local_date(value) - as_local_date(start)).days


def is_today(value: DateLike, today: Optional[date] = None) -> bool:
    return as_local_date(value) == (today or today_local())


def month_days(year: int, month: int) -> list[date]:
    count = calendar.monthrange(year, month)[1]
    first = date(year, month, 1)
    return [first + timedelta(days=i) for i in range(count)]


def month_weeks(year: int, month: int, first_weekday: int) -> list[list[date]]:
    """Full weeks (7 dates each) covering the month, padding included."""
    cal = calendar.Calendar(firstweekday=first_weekday)
    return cal.monthdatescalendar(year, month)
