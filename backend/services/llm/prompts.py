"""
LLM prompt templates for catalog matching.

The catalog and names are embedded as JSON arrays so quoting inside exercise
names ("Farmer's Carry") cannot break the prompt structure.
"""

import json
from typing import Sequence

CATALOG_MATCH_SYSTEM_PROMPT = """You match exercise names from workout plans to a fixed catalog of canonical exercise names.

For every input name, pick the single catalog entry that names the same movement, or null if none does.

Rules:
- Only ever answer with a name copied exactly from the catalog, or null
- Prefer null over a different movement (a "Leg Press" is not a "Back Squat")
- Equipment matters when the catalog distinguishes it (dumbbell vs barbell)
- Abbreviations are common: "DB" = dumbbell, "BB" = barbell, "RDL" = Romanian Deadlift, "OHP" = Overhead Press
- Return one entry per input name, with the input copied exactly as given

Return ONLY a JSON object of the form:
{"matches": [{"input": "<input name>", "match": "<catalog name>" | null}]}
"""

CATALOG_MATCH_USER_PROMPT = """Catalog:
{catalog}

Input names:
{names}
"""


def build_catalog_match_prompt(names: Sequence[str], catalog: Sequence[str]) -> str:
    """Render the user prompt for one batch."""
    return CATALOG_MATCH_USER_PROMPT.format(
        catalog=json.dumps(list(catalog), ensure_ascii=False),
        names=json.dumps(list(names), ensure_ascii=False),
    )
