from __future__ import annotations

from typing import Any

from ..common.validators import require_date, require_positive_int
from .model import ShiftPattern


def validate_pattern(*, work: Any, off: Any, cycle_start: Any) -> ShiftPattern:
    """Build a ShiftPattern from raw input, enforcing work >= 1 and off >= 1."""
    return ShiftPattern(
        work_days=require_positive_int(work, "Dias de trabalho"),
        off_days=require_positive_int(off, "Dias de folga"),
        cycle_start=require_date(cycle_start, "Data de início do ciclo"),
    )
