"""
Unit tests for the domain models: camelCase wire format and lenient
acceptance of extractor output.
"""

import pytest
from pydantic import ValidationError

from domain.models import (
    Exercise,
    ExtractedExercise,
    ExtractedWorkout,
    SetRecord,
    WorkoutDay,
    WorkoutPlan,
    WorkoutSession,
)


@pytest.mark.unit
class TestExtractedExercise:

    def test_numbers_become_text(self):
        ex = ExtractedExercise.model_validate({"name": "Squat", "reps": 10, "weight": 135.0, "restTime": 90})
        assert ex.reps == "10"
        assert ex.weight == "135"
        assert ex.rest_time == "90"

    def test_fractional_weight_kept(self):
        ex = ExtractedExercise.model_validate({"name": "Curl", "weight": 27.5})
        assert ex.weight == "27.5"

    def test_rep_list_items_become_text(self):
        ex = ExtractedExercise.model_validate({"name": "Squat", "reps": [12, 10, "8"]})
        assert ex.reps == ["12", "10", "8"]

    def test_unparseable_sets_become_none(self):
        ex = ExtractedExercise.model_validate({"name": "Squat", "sets": "3x10"})
        assert ex.sets is None

    def test_numeric_string_sets(self):
        ex = ExtractedExercise.model_validate({"name": "Squat", "sets": "4"})
        assert ex.sets == 4

    def test_null_name_becomes_empty(self):
        ex = ExtractedExercise.model_validate({"name": None})
        assert ex.name == ""

    def test_unknown_fields_ignored(self):
        ex = ExtractedExercise.model_validate({"name": "Squat", "tempo": "3-1-1"})
        assert not hasattr(ex, "tempo")


@pytest.mark.unit
class TestExtractedWorkout:

    def test_null_collections(self):
        tree = ExtractedWorkout.model_validate({"name": None, "days": [{"name": "Rest", "exercises": None}]})
        assert tree.days[0].exercises == []

    def test_missing_days(self):
        assert ExtractedWorkout.model_validate({}).days == []

    def test_camel_case_input(self):
        tree = ExtractedWorkout.model_validate({"days": [{"name": "Off", "isRestDay": True}]})
        assert tree.days[0].is_rest_day is True

    def test_snake_case_input_also_accepted(self):
        tree = ExtractedWorkout.model_validate({"days": [{"name": "Off", "is_rest_day": True}]})
        assert tree.days[0].is_rest_day is True


@pytest.mark.unit
class TestExercise:

    def test_defaults(self):
        ex = Exercise(id="exercise-1-0-0", name="Back Squat")
        assert ex.sets == 3
        assert ex.type == "reps"
        assert ex.reps == "10"
        assert ex.target_notes == ""
        assert ex.completed is False
        assert ex.completed_sets == []

    def test_invalid_type_rejected(self):
        with pytest.raises(ValidationError):
            Exercise(id="exercise-1-0-0", name="Plank", type="distance")

    def test_dumps_camel_case(self):
        ex = Exercise(id="exercise-1-0-0", name="Back Squat", rest_time="90s", target_notes="RPE 8")
        data = ex.model_dump(by_alias=True)
        assert data["restTime"] == "90s"
        assert data["targetNotes"] == "RPE 8"
        assert "completedSets" in data


@pytest.mark.unit
class TestWorkoutPlan:

    def _plan(self):
        return WorkoutPlan(
            id="workout-1",
            name="PPL",
            uploaded_at="2026-03-01T12:00:00+00:00",
            days=[
                WorkoutDay(id="day-1-0", name="Push", exercises=[
                    Exercise(id="exercise-1-0-0", name="Barbell Bench Press"),
                    Exercise(id="exercise-1-0-1", name="Skull Crusher"),
                ]),
                WorkoutDay(id="day-1-1", name="Rest", is_rest_day=True),
            ],
        )

    def test_exercise_names(self):
        assert self._plan().exercise_names == ["Barbell Bench Press", "Skull Crusher"]

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            WorkoutPlan(id="workout-1", name="", uploaded_at="2026-03-01T12:00:00+00:00")

    def test_dumps_camel_case(self):
        data = self._plan().model_dump(by_alias=True)
        assert data["uploadedAt"] == "2026-03-01T12:00:00+00:00"
        assert data["days"][1]["isRestDay"] is True
        assert data["sessions"] == []

    def test_round_trips_through_json(self):
        plan = self._plan()
        assert WorkoutPlan.model_validate_json(plan.model_dump_json(by_alias=True)) == plan


@pytest.mark.unit
class TestTrackingRecords:

    def test_session_from_camel_case(self):
        session = WorkoutSession.model_validate({
            "id": "session-1",
            "date": "2026-03-02",
            "dayId": "day-1-0",
            "dayName": "Push",
            "completedExercises": [
                {"id": "exercise-1-0-0", "name": "Barbell Bench Press",
                 "sets": [{"setNumber": 1, "reps": 8, "weight": 135, "completed": True}]},
            ],
        })
        assert session.completed_exercises[0].sets[0].weight == 135.0

    def test_set_number_starts_at_one(self):
        with pytest.raises(ValidationError):
            SetRecord(set_number=0)
