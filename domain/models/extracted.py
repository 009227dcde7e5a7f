"""
Raw workout tree as produced by the extraction model.

Everything is optional and loosely typed: the extractor is a language model
and its output is only as structured as the prompt made it. These models
accept that output as-is; building a WorkoutPlan applies the defaults.
"""

from typing import List, Optional, Union

from pydantic import Field, field_validator

from domain.models.base import CamelModel


def _as_text(value) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class ExtractedExercise(CamelModel):
    """One exercise row, before its name is matched to the catalog."""

    name: str = ""
    type: Optional[str] = None
    sets: Optional[int] = None
    reps: Optional[Union[str, List[str]]] = None
    weight: Optional[str] = None
    rest_time: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def coerce_name(cls, v):
        return "" if v is None else str(v)

    @field_validator("reps", "weight", "rest_time", mode="before")
    @classmethod
    def coerce_numbers(cls, v):
        """Extractors sometimes emit 10 instead of "10"."""
        if isinstance(v, list):
            return [_as_text(x) for x in v]
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return _as_text(v)
        return v

    @field_validator("sets", mode="before")
    @classmethod
    def lenient_sets(cls, v):
        # "3x10" and similar go to the default rather than failing the tree
        try:
            return int(v) if v is not None else None
        except (TypeError, ValueError):
            return None


class ExtractedDay(CamelModel):
    name: Optional[str] = None
    is_rest_day: Optional[bool] = None
    exercises: List[ExtractedExercise] = Field(default_factory=list)

    @field_validator("exercises", mode="before")
    @classmethod
    def null_exercises(cls, v):
        return [] if v is None else v


class ExtractedWorkout(CamelModel):
    """Top of the extracted tree: a plan name and its days."""

    name: Optional[str] = None
    days: List[ExtractedDay] = Field(default_factory=list)

    @field_validator("days", mode="before")
    @classmethod
    def null_days(cls, v):
        return [] if v is None else v
