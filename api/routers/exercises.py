"""
Exercises router for catalog lookup and name matching.

This router provides endpoints for:
- Listing the canonical exercise catalog
- Batch matching of raw exercise names (local fuzzy match, remote fallback)
- Ranked suggestions for a single name
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field

from api.deps import get_catalog, get_catalog_matcher
from application.ports import CatalogMatcher
from backend.core.canonicalize import resolve_exercise_names
from backend.core.catalog import ExerciseCatalog
from backend.core.match import suggest_catalog_matches

router = APIRouter(
    prefix="/exercises",
    tags=["Exercises"],
)


# =============================================================================
# Request/Response Models
# =============================================================================


class MatchNamesRequest(BaseModel):
    """Raw exercise names to resolve against the catalog."""
    names: List[str] = Field(
        default_factory=list,
        description="Exercise names as extracted",
        max_length=200,
    )


class NameMatch(BaseModel):
    input: str
    match: Optional[str] = Field(None, description="Canonical name, or null if unmatched")


class MatchNamesResponse(BaseModel):
    matches: List[NameMatch] = Field(..., description="One entry per distinct input, in input order")


class Suggestion(BaseModel):
    name: str
    confidence: float = Field(..., description="Similarity (0.0 to 1.0)")


class CatalogResponse(BaseModel):
    exercises: List[str]
    count: int


# =============================================================================
# Endpoints
# =============================================================================


@router.get("/catalog", response_model=CatalogResponse)
def list_catalog(catalog: ExerciseCatalog = Depends(get_catalog)) -> CatalogResponse:
    """Return the canonical exercise names in catalog order."""
    return CatalogResponse(exercises=list(catalog.names), count=len(catalog))


@router.post("/match", response_model=MatchNamesResponse)
async def match_exercise_names(
    request: MatchNamesRequest,
    catalog: ExerciseCatalog = Depends(get_catalog),
    matcher: Optional[CatalogMatcher] = Depends(get_catalog_matcher),
) -> MatchNamesResponse:
    """
    Resolve raw names to canonical catalog names.

    Local fuzzy matching runs first; names it cannot place go to the remote
    matcher in one batch. A remote failure never fails the request: those
    names come back with `match: null`.
    """
    distinct = list(dict.fromkeys(n for n in request.names if n))
    if not distinct:
        return MatchNamesResponse(matches=[])

    name_map = await resolve_exercise_names(distinct, catalog, matcher)
    return MatchNamesResponse(
        matches=[NameMatch(input=n, match=name_map.get(n)) for n in distinct]
    )


@router.get("/suggest", response_model=List[Suggestion])
def suggest_exercises(
    name: str = Query(..., description="Exercise name to get suggestions for"),
    limit: int = Query(5, ge=1, le=20, description="Maximum suggestions to return"),
    catalog: ExerciseCatalog = Depends(get_catalog),
) -> List[Suggestion]:
    """
    Ranked catalog suggestions for a name, best first.

    Useful for letting the user pick when automatic matching left a name
    unresolved.
    """
    return [
        Suggestion(name=canonical, confidence=score)
        for canonical, score in suggest_catalog_matches(name, catalog, limit=limit)
    ]
