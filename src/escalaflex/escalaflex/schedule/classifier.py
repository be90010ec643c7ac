from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import (
    DateLike,
    as_local_date,
    date_key,
    days_between,
    is_today,
    month_days,
    month_weeks,
    today_local,
)
from ..core.constants import DEFAULT_FIRST_WEEKDAY
from ..core.enums import ShiftType
from ..overrides.model import Overrides
from ..patterns.model import ShiftPattern


@dataclass(frozen=True)
class DayInfo:
    """Classification of one calendar day.

    `type` is None only for grid padding cells that have no backing day.
    """

    date: date
    type: Optional[ShiftType]
    is_overridden: bool = False
    note: str = ""
    is_today: bool = False
    is_current_month: bool = True

    @property
    def is_padding(self) -> bool:
        return self.type is None

    def to_dict(self) -> dict:
        return {
            "date": date_key(self.date),
            "type": self.type.value if self.type else None,
            "isOverridden": self.is_overridden,
            "note": self.note,
            "isToday": self.is_today,
            "isCurrentMonth": self.is_current_month,
        }


def pattern_type(day: DateLike, pattern: ShiftPattern) -> ShiftType:
    """Shift type from the repeating cycle alone, overrides ignored."""
    cycle_length = pattern.work_days + pattern.off_days
    if cycle_length <= 0:
        # Degenerate pattern: every day is off.
        return ShiftType.OFF

    day_diff = days_between(day, pattern.cycle_start)
    day_in_cycle = ((day_diff % cycle_length) + cycle_length) % cycle_length
    return ShiftType.WORK if day_in_cycle < pattern.work_days else ShiftType.OFF


def classify(
    day: DateLike,
    pattern: ShiftPattern,
    overrides: Overrides,
    *,
    today: Optional[date] = None,
) -> DayInfo:
    local_day = as_local_date(day)
    override = overrides.get(date_key(local_day))

    if override is not None:
        return DayInfo(
            date=local_day,
            type=override.type,
            is_overridden=True,
            note=override.note or "",
            is_today=is_today(local_day, today),
        )

    return DayInfo(
        date=local_day,
        type=pattern_type(local_day, pattern),
        is_today=is_today(local_day, today),
    )


def classify_month(
    year: int,
    month: int,
    pattern: ShiftPattern,
    overrides: Overrides,
    *,
    today: Optional[date] = None,
) -> list[DayInfo]:
    today = today or today_local()
    return [classify(d, pattern, overrides, today=today) for d in month_days(year, month)]


def classify_month_grid(
    year: int,
    month: int,
    pattern: ShiftPattern,
    overrides: Overrides,
    *,
    today: Optional[date] = None,
    first_weekday: int = DEFAULT_FIRST_WEEKDAY,
) -> list[list[DayInfo]]:
    """Month laid out in weeks; days of neighbouring months become padding."""
    today = today or today_local()
    weeks: list[list[DayInfo]] = []
    for week in month_weeks(year, month, first_weekday):
        row = []
        for d in week:
            if d.month == month:
                row.append(classify(d, pattern, overrides, today=today))
            else:
                row.append(DayInfo(date=d, type=None, is_current_month=False))
        weeks.append(row)
    return weeks
