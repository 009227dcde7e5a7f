"""
Workout plan aggregate: a named plan organised into days of exercises.
"""

from typing import List, Optional

from pydantic import Field

from domain.models.base import CamelModel
from domain.models.exercise import Exercise, SetRecord


class WorkoutDay(CamelModel):
    """A day/split of a plan ("Day 1: Push", "Monday - Upper"), possibly a rest day."""

    id: str
    name: str
    is_rest_day: bool = False
    exercises: List[Exercise] = Field(default_factory=list)


class CompletedExercise(CamelModel):
    id: str
    name: str
    sets: List[SetRecord] = Field(default_factory=list)
    notes: Optional[str] = None


class WorkoutSession(CamelModel):
    """A logged performance of one WorkoutDay."""

    id: str
    date: str
    day_id: str
    day_name: str
    completed_exercises: List[CompletedExercise] = Field(default_factory=list)
    duration: Optional[int] = Field(default=None, ge=0, description="Seconds")
    notes: Optional[str] = None


class WorkoutPlan(CamelModel):
    """
    Aggregate root for a tracked plan.

    IDs are synthetic (`workout-{ts}`, `day-{ts}-{d}`, `exercise-{ts}-{d}-{e}`)
    and unique within the pass that built the plan, not globally.
    """

    id: str
    name: str = Field(..., min_length=1)
    uploaded_at: str = Field(..., description="ISO-8601 timestamp")
    days: List[WorkoutDay] = Field(default_factory=list)
    sessions: List[WorkoutSession] = Field(default_factory=list)

    @property
    def exercise_names(self) -> List[str]:
        return [ex.name for day in self.days for ex in day.exercises]
