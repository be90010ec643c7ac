from __future__ import annotations

import logging
from typing import Any, Optional

from ..common.validators import require_positive_int
from ..core.exceptions import NotConfiguredError
from ..overrides.repository import OverrideRepository
from .model import ShiftPattern
from .repository import PatternRepository
from .validation import validate_pattern

logger = logging.getLogger(__name__)


class PatternService:
    def __init__(self, patterns: PatternRepository, overrides: OverrideRepository):
        self._patterns = patterns
        self._overrides = overrides

    def get_pattern(self) -> Optional[ShiftPattern]:
        """Stored pattern, or None while the app is not set up yet."""
        return self._patterns.get()

    def require_pattern(self) -> ShiftPattern:
        pattern = self._patterns.get()
        if pattern is None:
            raise NotConfiguredError("Configure sua escala antes de continuar")
        return pattern

    def save_pattern(self, *, work: Any, off: Any, cycle_start: Any) -> ShiftPattern:
        pattern = validate_pattern(work=work, off=off, cycle_start=cycle_start)
        self._patterns.save(pattern)
        logger.info(
            "pattern saved: %s work / %s off from %s",
            pattern.work_days,
            pattern.off_days,
            pattern.cycle_start.isoformat(),
        )
        return pattern

    def apply_suggestion(self, *, work: Any, off: Any) -> ShiftPattern:
        """Accept a suggested work/off split, keeping the current cycle start."""
        current = self.require_pattern()
        pattern = current.with_counts(
            work_days=require_positive_int(work, "Dias de trabalho"),
            off_days=require_positive_int(off, "Dias de folga"),
        )
        self._patterns.save(pattern)
        logger.info("suggested pattern applied: %s/%s", pattern.work_days, pattern.off_days)
        return pattern

    def reset(self) -> None:
        """Whole-app reset: pattern and every override are removed."""
        self._patterns.delete()
        self._overrides.delete()
        logger.info("app data reset")
