from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from ..common.datetime_utils import today_local
from ..common.validators import require_month
from ..core.constants import DEFAULT_FIRST_WEEKDAY
from ..core.enums import ShiftType
from ..overrides.service import OverrideService
from ..patterns.model import ShiftPattern
from ..patterns.service import PatternService
from .classifier import DayInfo, classify_month, classify_month_grid
from .summary import summarize


@dataclass(frozen=True)
class MonthView:
    year: int
    month: int
    pattern: ShiftPattern
    days: list[DayInfo]
    weeks: list[list[DayInfo]]
    summary: dict[ShiftType, int]

    def to_dict(self) -> dict[str, Any]:
        return {
            "year": self.year,
            "month": self.month,
            "pattern": self.pattern.to_dict(),
            "days": [d.to_dict() for d in self.days],
            "weeks": [[d.to_dict() for d in week] for week in self.weeks],
            "summary": {t.value: n for t, n in self.summary.items()},
        }


class CalendarService:
    def __init__(
        self,
        patterns: PatternService,
        overrides: OverrideService,
        *,
        first_weekday: int = DEFAULT_FIRST_WEEKDAY,
    ):
        self._patterns = patterns
        self._overrides = overrides
        self._first_weekday = first_weekday

    def month_view(self, year: Any, month: Any, *, today: Optional[date] = None) -> MonthView:
        y, m = require_month(year, month)
        pattern = self._patterns.require_pattern()
        # One snapshot for the whole month.
        overrides = self._overrides.snapshot()
        today = today or today_local()

        days = classify_month(y, m, pattern, overrides, today=today)
        weeks = classify_month_grid(
            y, m, pattern, overrides, today=today, first_weekday=self._first_weekday
        )
        return MonthView(
            year=y,
            month=m,
            pattern=pattern,
            days=days,
            weeks=weeks,
            summary=summarize(days),
        )
