"""
Exercise value objects for tracked workout plans.
"""

from typing import List, Literal, Optional, Union

from pydantic import Field

from domain.models.base import CamelModel


class SetRecord(CamelModel):
    """One performed set, as logged by the tracker."""

    set_number: int = Field(..., ge=1)
    reps: int = Field(default=0, ge=0, description="Reps for rep-based exercises")
    duration: Optional[int] = Field(
        default=None, ge=0, description="Seconds for time-based exercises"
    )
    weight: Optional[float] = None
    completed: bool = False


class Exercise(CamelModel):
    """
    An exercise within a workout day.

    `name` holds the canonical catalog name when the name was matched, and
    the name as extracted otherwise.

    `reps` is free text ("8-12", "AMRAP", "60 sec") or one target per set
    (["12", "10", "8"]).

    Examples:
        >>> exercise = Exercise(id="exercise-1-0-0", name="Back Squat", sets=5, reps="5")
        >>> exercise.model_dump(by_alias=True)["completedSets"]
        []
    """

    id: str
    name: str
    sets: int = 3
    type: Literal["reps", "time"] = "reps"
    reps: Union[str, List[str]] = "10"
    weight: Optional[str] = None
    rest_time: Optional[str] = None
    target_notes: str = ""
    notes: str = ""
    completed: bool = False
    completed_sets: List[SetRecord] = Field(default_factory=list)
