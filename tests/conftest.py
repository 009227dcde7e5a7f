"""Shared fixtures for the test suite."""

import pytest

from backend.core.catalog import ExerciseCatalog, load_catalog
from domain.models import ExtractedWorkout
from tests.fakes import FakeCatalogMatcher


SMALL_CATALOG = [
    "Barbell Bench Press",
    "Incline Dumbbell Bench Press",
    "Back Squat",
    "Romanian Deadlift",
    "Pull-Up",
    "Lat Pulldown",
    "Skull Crusher",
    "Plank",
    "Farmer's Carry",
    "Clean & Jerk",
]


@pytest.fixture
def catalog() -> ExerciseCatalog:
    """A small, fixed catalog so expectations do not drift with the bundled one."""
    return ExerciseCatalog(SMALL_CATALOG)


@pytest.fixture
def bundled_catalog() -> ExerciseCatalog:
    return load_catalog()


@pytest.fixture
def fake_matcher() -> FakeCatalogMatcher:
    return FakeCatalogMatcher()


@pytest.fixture
def extracted_tree() -> ExtractedWorkout:
    """Extractor output with exact, fuzzy and unknown exercise names."""
    return ExtractedWorkout.model_validate({
        "name": "Push Pull",
        "days": [
            {
                "name": "Day 1: Push",
                "isRestDay": False,
                "exercises": [
                    {"name": "barbell bench press", "sets": 4, "reps": "8-12", "weight": "135 lbs"},
                    {"name": "Skullcrushers", "sets": 3, "reps": ["12", "10", "8"]},
                    {"name": "Plank", "type": "time", "reps": "60 sec"},
                ],
            },
            {"name": "Day 2: Rest", "isRestDay": True, "exercises": []},
            {
                "name": "Day 3: Pull",
                "exercises": [
                    {"name": "Pull Up", "sets": 3, "reps": "AMRAP", "weight": "8 RPE"},
                    {"name": "Zercher Carry Thing", "sets": 3, "reps": "40 m"},
                ],
            },
        ],
    })
