from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..core.enums import ShiftType

Overrides = Mapping[str, "Override"]


@dataclass(frozen=True)
class Override:
    type: ShiftType
    note: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": self.type.value}
        if self.note is not None:
            data["note"] = self.note
        return data

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "Override":
        return Override(type=ShiftType(data["type"]), note=data.get("note"))


def overrides_to_dict(overrides: Overrides) -> dict[str, dict[str, Any]]:
    return {key: ov.to_dict() for key, ov in overrides.items()}


def overrides_from_dict(data: Mapping[str, Mapping[str, Any]]) -> dict[str, Override]:
    return {str(key): Override.from_dict(value) for key, value in data.items()}
