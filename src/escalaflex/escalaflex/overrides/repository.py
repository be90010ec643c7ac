from __future__ import annotations

from ..common.datetime_utils import parse_iso_date
from ..core.constants import OVERRIDES_STORAGE_KEY
from ..core.exceptions import StorageError
from ..storage.repository import KeyValueStore
from .model import Override, Overrides, overrides_from_dict, overrides_to_dict


class OverrideRepository:
    """Reads/writes the whole override mapping under its storage key."""

    def __init__(self, store: KeyValueStore):
        self._store = store

    def load(self) -> dict[str, Override]:
        raw = self._store.get(OVERRIDES_STORAGE_KEY)
        if raw is None:
            return {}
        try:
            overrides = overrides_from_dict(raw)
            for key in overrides:
                parse_iso_date(key)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise StorageError("Alterações salvas estão corrompidas") from e
        return overrides

    def save(self, overrides: Overrides) -> None:
        self._store.set(OVERRIDES_STORAGE_KEY, overrides_to_dict(overrides))

    def delete(self) -> bool:
        return self._store.delete(OVERRIDES_STORAGE_KEY)
