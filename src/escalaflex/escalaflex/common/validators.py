from __future__ import annotations

from datetime import date
from typing import Any

from ..core.exceptions import ValidationError
from .datetime_utils import as_local_date, parse_iso_date

MIN_GRID_YEAR = 2
MAX_GRID_YEAR = 9998


def require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} inválido")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} inválido") from None
    if number != value and not isinstance(value, str):
        raise ValidationError(f"{field_name} deve ser um número inteiro")
    if number < 1:
        raise ValidationError(f"{field_name} deve ser no mínimo 1")
    return number


def require_date(value: Any, field_name: str) -> date:
    if isinstance(value, date):
        return as_local_date(value)
    if not value or not isinstance(value, str):
        raise ValidationError(f"{field_name} é obrigatória")
    try:
        return parse_iso_date(value.strip())
    except ValueError:
        raise ValidationError(f"{field_name} inválida (use AAAA-MM-DD)") from None


def require_month(year: Any, month: Any) -> tuple[int, int]:
    try:
        y, m = int(year), int(month)
    except (TypeError, ValueError):
        raise ValidationError("Mês inválido") from None
    # Grid padding reaches into the neighbouring months, which must still fit in `date`.
    if not 1 <= m <= 12 or not MIN_GRID_YEAR <= y <= MAX_GRID_YEAR:
        raise ValidationError("Mês inválido")
    return y, m
