from __future__ import annotations

import logging
from typing import Any, Optional

from ..common.datetime_utils import date_key
from ..common.validators import require_date
from ..core.constants import VACATION_NOTE
from ..core.enums import ShiftType
from ..core.exceptions import ValidationError
from ..schedule.range_expander import expand_range
from . import operations
from .model import Override
from .repository import OverrideRepository

logger = logging.getLogger(__name__)


class OverrideService:
    def __init__(self, overrides: OverrideRepository):
        self._overrides = overrides

    def snapshot(self) -> dict[str, Override]:
        """A fully-loaded copy of all overrides; later edits never change it."""
        return self._overrides.load()

    @staticmethod
    def _key(value: Any) -> str:
        return date_key(require_date(value, "Data"))

    @staticmethod
    def _parse_type(value: Any) -> ShiftType:
        if isinstance(value, ShiftType):
            return value
        try:
            return ShiftType(value)
        except ValueError:
            pass
        try:
            return ShiftType[str(value).upper()]
        except KeyError:
            raise ValidationError("Tipo de turno inválido") from None

    def set_override(self, day: Any, *, shift_type: Any, note: Optional[str] = None) -> Override:
        key = self._key(day)
        if note is not None and not isinstance(note, str):
            raise ValidationError("Anotação inválida")
        note = note.strip() if note else None
        override = Override(type=self._parse_type(shift_type), note=note or None)
        self._overrides.save(operations.set_override(self._overrides.load(), key, override))
        logger.info("override set for %s: %s", key, override.type.value)
        return override

    def clear_override(self, day: Any) -> None:
        key = self._key(day)
        current = self._overrides.load()
        if key not in current:
            return
        self._overrides.save(operations.clear_override(current, key))
        logger.info("override cleared for %s", key)

    def add_vacation(self, start: Any, end: Any) -> list[str]:
        """Mark every day of [start, end] as vacation, replacing earlier edits.

        Nothing is written when the range is invalid.
        """
        keys = expand_range(require_date(start, "Data de início"), require_date(end, "Data de término"))
        vacation = Override(type=ShiftType.VACATION, note=VACATION_NOTE)
        overrides = operations.set_many(self._overrides.load(), keys, vacation)
        self._overrides.save(overrides)
        logger.info("vacation saved: %s..%s (%d days)", keys[0], keys[-1], len(keys))
        return keys

    def clear_all(self) -> None:
        self._overrides.delete()
