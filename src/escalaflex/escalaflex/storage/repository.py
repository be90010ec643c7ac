from __future__ import annotations

from typing import Any, Optional, Protocol


class KeyValueStore(Protocol):
    """Local persistent storage for JSON-compatible values."""

    def get(self, key: str) -> Optional[Any]:
        """Return the stored value, or None when the key is absent."""

        raise NotImplementedError

    def set(self, key: str, value: Any) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> bool:
        """Remove a key. Returns True when something was removed."""

        raise NotImplementedError
