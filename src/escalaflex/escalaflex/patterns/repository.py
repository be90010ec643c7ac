from __future__ import annotations

from typing import Optional

from ..core.constants import PATTERN_STORAGE_KEY
from ..core.exceptions import StorageError
from ..storage.repository import KeyValueStore
from .model import ShiftPattern


class PatternRepository:
    """Reads/writes the ShiftPattern under its storage key."""

    def __init__(self, store: KeyValueStore):
        self._store = store

    def get(self) -> Optional[ShiftPattern]:
        raw = self._store.get(PATTERN_STORAGE_KEY)
        if raw is None:
            return None
        try:
            return ShiftPattern.from_dict(raw)
        except (KeyError, TypeError, ValueError) as e:
            raise StorageError("Padrão de escala salvo está corrompido") from e

    def save(self, pattern: ShiftPattern) -> None:
        self._store.set(PATTERN_STORAGE_KEY, pattern.to_dict())

    def delete(self) -> bool:
        return self._store.delete(PATTERN_STORAGE_KEY)
