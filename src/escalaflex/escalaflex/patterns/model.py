from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Any

from ..common.datetime_utils import date_key, parse_iso_date


@dataclass(frozen=True)
class ShiftPattern:
    work_days: int
    off_days: int
    cycle_start: date

    @property
    def cycle_length(self) -> int:
        return self.work_days + self.off_days

    def with_counts(self, *, work_days: int, off_days: int) -> "ShiftPattern":
        """New pattern with other counts; the cycle start is kept."""
        return replace(self, work_days=work_days, off_days=off_days)

    def to_dict(self) -> dict[str, Any]:
        return {
            "work": self.work_days,
            "off": self.off_days,
            "startDate": date_key(self.cycle_start),
        }

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "ShiftPattern":
        return ShiftPattern(
            work_days=int(data["work"]),
            off_days=int(data["off"]),
            cycle_start=parse_iso_date(data["startDate"]),
        )
