from __future__ import annotations

from datetime import timedelta

from ..common.datetime_utils import DateLike, as_local_date, date_key
from ..core.exceptions import ValidationError


def expand_range(start: DateLike, end: DateLike) -> list[str]:
    """Date keys from `start` to `end`, both inclusive, ascending."""
    first = as_local_date(start)
    last = as_local_date(end)
    if last < first:
        raise ValidationError("A data de término não pode ser anterior à data de início.")

    span = (last - first).days
    return [date_key(first + timedelta(days=i)) for i in range(span + 1)]
