from __future__ import annotations

from typing import Iterable

from ..core.enums import ShiftType
from .classifier import DayInfo


def summarize(day_infos: Iterable[DayInfo]) -> dict[ShiftType, int]:
    """Count days per shift type.

    Padding cells are skipped and types that never occur are left out, so
    callers must read a missing type as zero.
    """
    summary: dict[ShiftType, int] = {}
    for day in day_infos:
        if day.type is None:
            continue
        summary[day.type] = summary.get(day.type, 0) + 1
    return summary
