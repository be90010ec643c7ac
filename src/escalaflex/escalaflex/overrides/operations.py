"""Override merge rules.

Overrides are independent per date key. Every operation returns a new mapping
and never touches the one passed in, so a snapshot held by a classification
pass stays stable while edits happen.
"""

from __future__ import annotations

from typing import Iterable

from .model import Override, Overrides


def set_override(overrides: Overrides, key: str, override: Override) -> dict[str, Override]:
    updated = dict(overrides)
    updated[key] = override
    return updated


def set_many(overrides: Overrides, keys: Iterable[str], override: Override) -> dict[str, Override]:
    """Write the same override under every key, copying the mapping once."""
    updated = dict(overrides)
    for key in keys:
        updated[key] = override
    return updated


def clear_override(overrides: Overrides, key: str) -> dict[str, Override]:
    updated = dict(overrides)
    updated.pop(key, None)
    return updated
