import re
from typing import Optional, Tuple

_RPE_PATTERN = re.compile(r"(?:^|\s)(\d+(?:\.\d+)?)\s*rpe\b", re.IGNORECASE)
_WEIGHT_UNITS = re.compile(r"\b(lb|lbs|kilogram|kilograms|kg)\b", re.IGNORECASE)

NOTES_SEPARATOR = " • "


def extract_rpe_from_weight(weight: Optional[str]) -> Optional[float]:
    """Parse "8 RPE" / "7.5rpe" style values out of a weight string."""
    if not weight:
        return None
    match = _RPE_PATTERN.search(weight)
    if not match:
        return None
    return float(match.group(1))


def normalize_exercise_fields(
    weight: Optional[str],
    target_notes: Optional[str],
) -> Tuple[Optional[str], Optional[str]]:
    """
    Move an RPE that was extracted into the weight field over to the notes.

    Only applies when the weight carries no units ("8 RPE"); "185 lbs @ 8 RPE"
    is left alone. Returns the (weight, target_notes) pair to store.
    """
    stripped = weight.strip() if weight else ""
    if not stripped:
        return weight, target_notes

    rpe = extract_rpe_from_weight(stripped)
    if rpe is None or _WEIGHT_UNITS.search(stripped):
        return weight, target_notes

    parts = [p for p in ((target_notes or "").strip(), f"RPE {rpe:g}") if p]
    return None, NOTES_SEPARATOR.join(parts) or None
