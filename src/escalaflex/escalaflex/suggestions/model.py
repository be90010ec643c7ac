from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..core.constants import MAX_RESOLUTION_OPTIONS


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SuggestionRequest(_CamelModel):
    """Input for the pattern-adjustment suggestion."""

    original_pattern_description: str = Field(..., description="The original, repeating schedule pattern.")
    edited_schedule_description: str = Field(
        ..., description="The user-edited schedule, showing deviations from the pattern."
    )
    user_preferences: Optional[str] = Field(default=None, description="Any user preferences or constraints.")
    conflict_description: Optional[str] = Field(
        default=None, description="A conflict or specific situation the AI should resolve."
    )


class SuggestedPattern(BaseModel):
    work: int = Field(..., description="Work days in the new pattern.")
    off: int = Field(..., description="Off days in the new pattern.")


class SuggestionResult(_CamelModel):
    """Advisory output; never applied without an explicit user action."""

    suggested_adjustments: str
    optimization_rationale: str
    new_pattern: Optional[SuggestedPattern] = None
    conflict_resolution_options: Optional[list[str]] = Field(
        default=None, max_length=MAX_RESOLUTION_OPTIONS
    )

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
