"""
Barbell plate math.

Converts a target total weight plus the lifter's plate inventory into a
per-side plate breakdown. The decomposition is greedy (heaviest plate first)
and therefore not always optimal: some inventories admit an exact load that
the greedy pass misses. `exact` on the result reports what was achieved.

Plate inventory and bar weight travel together as a PlateSettings value
passed into each call; there is no module-level configuration state.
"""
import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

# Standard barbell weight (lbs)
BARBELL_WEIGHT = 45.0

# Common plate weights (lbs)
STANDARD_PLATES = [45, 35, 25, 10, 5, 2.5]

DEFAULT_PLATE_COUNT = 10


@dataclass(frozen=True)
class PlateConfiguration:
    """One plate size in the inventory: `available` plates of `weight`."""
    weight: float
    available: int


@dataclass(frozen=True)
class PlateCount:
    weight: float
    count: int


@dataclass
class PlateCalculationResult:
    """Plates to load on EACH side, plus the weight actually achieved."""
    plates: List[PlateCount]
    total_weight: float
    exact: bool
    barbell_weight: float


def default_plates() -> List[PlateConfiguration]:
    return [PlateConfiguration(weight=w, available=DEFAULT_PLATE_COUNT) for w in STANDARD_PLATES]


@dataclass(frozen=True)
class PlateSettings:
    """A user's plate inventory and bar weight, replaced wholesale on update."""
    plates: Sequence[PlateConfiguration] = field(default_factory=default_plates)
    barbell_weight: float = BARBELL_WEIGHT


def calculate_plates(
    target_weight: float,
    available_plates: Optional[Sequence[PlateConfiguration]] = None,
    barbell_weight: float = BARBELL_WEIGHT,
) -> PlateCalculationResult:
    """
    Calculate the plates needed on each side of the bar.

    Args:
        target_weight: Total target weight including the bar
        available_plates: Plate inventory (defaults to 10 of each standard plate)
        barbell_weight: Weight of the bar

    Returns:
        PlateCalculationResult with plates per side. Never raises for numeric
        input; a target at or below the bar (or a non-finite one) yields the
        bar alone. Plate entries without a positive, finite weight are ignored.
    """
    if available_plates is None:
        available_plates = default_plates()

    weight_per_side = (target_weight - barbell_weight) / 2

    if not math.isfinite(weight_per_side) or weight_per_side <= 0:
        return PlateCalculationResult(
            plates=[],
            total_weight=barbell_weight,
            exact=target_weight == barbell_weight,
            barbell_weight=barbell_weight,
        )

    sorted_plates = sorted(available_plates, key=lambda p: p.weight, reverse=True)

    remaining = weight_per_side
    used: List[PlateCount] = []

    # Greedy: heaviest plates first
    for plate in sorted_plates:
        if not (plate.weight > 0) or not math.isfinite(plate.weight):
            continue
        if remaining < plate.weight or plate.available <= 0:
            continue

        count = min(math.floor(remaining / plate.weight), plate.available)
        if count > 0:
            remaining -= count * plate.weight
            used.append(PlateCount(weight=plate.weight, count=count))

        if remaining == 0:
            break

    loaded_per_side = sum(p.weight * p.count for p in used)

    return PlateCalculationResult(
        plates=used,
        total_weight=barbell_weight + loaded_per_side * 2,
        exact=remaining == 0,
        barbell_weight=barbell_weight,
    )


def calculate_plates_for(target_weight: float, settings: PlateSettings) -> PlateCalculationResult:
    """calculate_plates() against a user's PlateSettings."""
    return calculate_plates(target_weight, settings.plates, settings.barbell_weight)


def _format_weight(value: float) -> str:
    return f"{value:g}"


def format_plate_result(result: PlateCalculationResult) -> str:
    """Human-readable breakdown, e.g. "2×45 + 1×10 per side"."""
    if not result.plates:
        return f"Bar only ({_format_weight(result.barbell_weight)} lbs)"

    per_side = " + ".join(f"{p.count}×{_format_weight(p.weight)}" for p in result.plates)
    return f"{per_side} per side"
