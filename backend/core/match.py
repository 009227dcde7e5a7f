from typing import List, Optional, Tuple

from rapidfuzz import fuzz, process

from .catalog import ExerciseCatalog
from .normalize import normalize_exercise_name


# Minimum score for a scored (non-exact) catalog match
MATCH_THRESHOLD = 0.6


def token_score(target: str, candidate: str) -> float:
    """Jaccard similarity of the word sets of two normalized names."""
    target_tokens = set(target.split())
    candidate_tokens = set(candidate.split())
    union = target_tokens | candidate_tokens
    if not union:
        return 0.0
    return len(target_tokens & candidate_tokens) / len(union)


def score_candidate(normalized: str, normalized_candidate: str) -> float:
    # containment favours tight matches: "bench press" in "barbell bench press"
    if normalized in normalized_candidate:
        return len(normalized) / len(normalized_candidate)
    return token_score(normalized, normalized_candidate)


def find_catalog_match(name: str, catalog: ExerciseCatalog) -> Optional[str]:
    """
    Resolve a free-form exercise name to a single catalog entry, or None.

    Precedence, first hit wins:
    1. case-insensitive exact name
    2. exact normalized name
    3. best scored candidate (substring ratio or token Jaccard), accepted at
       MATCH_THRESHOLD; catalog order breaks ties
    """
    if not name:
        return None

    exact = catalog.lookup_lower(name.lower().strip())
    if exact:
        return exact

    normalized = normalize_exercise_name(name)
    if not normalized:
        return None

    direct = catalog.lookup_normalized(normalized)
    if direct:
        return direct

    best_name = None
    best_score = 0.0
    for canonical, normalized_candidate in catalog.entries():
        score = score_candidate(normalized, normalized_candidate)
        if score > best_score:
            best_name = canonical
            best_score = score

    if best_name and best_score >= MATCH_THRESHOLD:
        return best_name
    return None


def suggest_catalog_matches(
    name: str,
    catalog: ExerciseCatalog,
    limit: int = 5,
    score_cutoff: float = 0.3,
) -> List[Tuple[str, float]]:
    """
    Ranked (canonical, confidence) alternatives for a name, best first.

    confidence is 0-1. This is a browsing aid and never feeds the name map.
    """
    normalized = normalize_exercise_name(name)
    if not normalized:
        return []

    ranked = process.extract(
        normalized,
        catalog.normalized_names,
        scorer=fuzz.token_set_ratio,
        limit=limit,
        score_cutoff=score_cutoff * 100,
    )
    return [(catalog.names[index], score / 100.0) for _, score, index in ranked]
