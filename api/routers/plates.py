"""
Plates router for barbell plate math.

The caller sends its own plate inventory and bar weight with each request;
nothing about a user's plates is stored server-side.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import Field

from api.deps import get_settings
from backend.core.plates import (
    PlateConfiguration,
    PlateSettings,
    calculate_plates_for,
    default_plates,
    format_plate_result,
)
from backend.settings import Settings
from domain.models import CamelModel

router = APIRouter(
    prefix="/plates",
    tags=["Plates"],
)


# =============================================================================
# Request/Response Models
# =============================================================================


class PlateInput(CamelModel):
    weight: float = Field(..., gt=0, description="Plate weight")
    available: int = Field(..., ge=0, description="Plates of this weight available (total)")


class PlateCalculationRequest(CamelModel):
    target_weight: float = Field(..., ge=0, description="Total weight including the bar")
    plates: Optional[List[PlateInput]] = Field(
        None, description="Plate inventory; standard plates (10 each) if omitted"
    )
    barbell_weight: Optional[float] = Field(None, gt=0, description="Bar weight")


class PlateCountOutput(CamelModel):
    weight: float
    count: int


class PlateCalculationResponse(CamelModel):
    plates: List[PlateCountOutput] = Field(..., description="Plates per side")
    total_weight: float
    exact: bool
    barbell_weight: float
    formatted: str


# =============================================================================
# Endpoints
# =============================================================================


@router.post("/calculate", response_model=PlateCalculationResponse, response_model_by_alias=True)
def calculate(
    request: PlateCalculationRequest,
    settings: Settings = Depends(get_settings),
) -> PlateCalculationResponse:
    """
    Break a target weight into plates per side.

    The breakdown is greedy (heaviest first). When the inventory cannot make
    the target exactly, `exact` is false and `totalWeight` is what the
    returned plates actually load.
    """
    if request.plates is None:
        plates = default_plates()
    else:
        plates = [PlateConfiguration(weight=p.weight, available=p.available) for p in request.plates]

    plate_settings = PlateSettings(
        plates=plates,
        barbell_weight=request.barbell_weight or settings.default_barbell_weight,
    )
    result = calculate_plates_for(request.target_weight, plate_settings)

    return PlateCalculationResponse(
        plates=[PlateCountOutput(weight=p.weight, count=p.count) for p in result.plates],
        total_weight=result.total_weight,
        exact=result.exact,
        barbell_weight=result.barbell_weight,
        formatted=format_plate_result(result),
    )
