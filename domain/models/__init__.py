"""
Domain models for the exercise normalization service.

Pure pydantic models, independent of the HTTP layer and of any model provider:
- ExtractedWorkout / ExtractedDay / ExtractedExercise: raw extractor output
- WorkoutPlan / WorkoutDay / Exercise: the normalized, trackable plan
- WorkoutSession / CompletedExercise / SetRecord: tracking records

All models read and write camelCase JSON (isRestDay, restTime, completedSets).

Usage:
    >>> from domain.models import ExtractedWorkout

    >>> tree = ExtractedWorkout.model_validate(
    ...     {"name": "PPL", "days": [{"name": "Push", "exercises": [{"name": "bench"}]}]}
    ... )
    >>> tree.days[0].exercises[0].name
    'bench'
"""

from domain.models.base import CamelModel
from domain.models.exercise import Exercise, SetRecord
from domain.models.extracted import ExtractedDay, ExtractedExercise, ExtractedWorkout
from domain.models.workout import (
    CompletedExercise,
    WorkoutDay,
    WorkoutPlan,
    WorkoutSession,
)

__all__ = [
    "CamelModel",
    # Extractor output
    "ExtractedWorkout",
    "ExtractedDay",
    "ExtractedExercise",
    # Normalized plan
    "WorkoutPlan",
    "WorkoutDay",
    "Exercise",
    # Tracking
    "WorkoutSession",
    "CompletedExercise",
    "SetRecord",
]
