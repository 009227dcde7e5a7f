"""
Domain layer for the exercise normalization service.

This package contains pure domain models that are independent of
infrastructure concerns (HTTP, model providers).
"""

from domain.models import (
    Exercise,
    ExtractedWorkout,
    WorkoutDay,
    WorkoutPlan,
)

__all__ = [
    "Exercise",
    "ExtractedWorkout",
    "WorkoutDay",
    "WorkoutPlan",
]
