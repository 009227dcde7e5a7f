"""
Workouts router.

Turns raw extractor output (days -> exercises with free-form names) into a
normalized, trackable WorkoutPlan.
"""
from typing import Optional

from fastapi import APIRouter, Depends

from api.deps import get_catalog, get_catalog_matcher
from application.ports import CatalogMatcher
from backend.core.canonicalize import normalize_extracted_workout
from backend.core.catalog import ExerciseCatalog
from domain.models import ExtractedWorkout, WorkoutPlan

router = APIRouter(
    prefix="/workouts",
    tags=["Workouts"],
)


@router.post("/normalize", response_model=WorkoutPlan, response_model_by_alias=True)
async def normalize_workout(
    extracted: ExtractedWorkout,
    catalog: ExerciseCatalog = Depends(get_catalog),
    matcher: Optional[CatalogMatcher] = Depends(get_catalog_matcher),
) -> WorkoutPlan:
    """
    Normalize an extracted workout tree.

    Exercise names are matched to the catalog (unmatched names are kept as
    extracted), defaults are filled in, RPE values misplaced in the weight
    field move to target notes, and plan/day/exercise IDs are assigned.
    """
    return await normalize_extracted_workout(extracted, catalog, matcher)
