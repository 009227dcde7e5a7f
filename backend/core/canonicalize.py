"""
Name resolution pass over an extracted workout tree.

1. Collect every exercise name in the tree (unique set)
2. Resolve what the local fuzzy matcher can
3. Send the rest, once, to the remote catalog matcher
4. Rewrite the tree and stamp synthetic IDs on plan, days and exercises

A remote matcher failure is logged and the pass continues with local results
only; unresolved names keep their extracted spelling.
"""
import logging
import time
from datetime import datetime, timezone
from typing import Dict, Iterable, Optional, Set

from application.ports.catalog_matcher import CatalogMatcher, CatalogMatcherError
from domain.models import Exercise, ExtractedWorkout, WorkoutDay, WorkoutPlan

from .catalog import ExerciseCatalog
from .exercise_fields import normalize_exercise_fields
from .match import find_catalog_match

logger = logging.getLogger(__name__)

DEFAULT_PLAN_NAME = "My Workout Plan"
EXERCISE_TYPES = {"reps", "time"}


def collect_exercise_names(tree: ExtractedWorkout) -> Set[str]:
    names = set()
    for day in tree.days:
        for ex in day.exercises:
            if ex.name:
                names.add(ex.name)
    return names


async def resolve_exercise_names(
    names: Iterable[str],
    catalog: ExerciseCatalog,
    matcher: Optional[CatalogMatcher] = None,
) -> Dict[str, str]:
    """
    Build the raw name -> canonical name map for one resolution pass.

    Names that resolve to nothing are absent from the map. The remote matcher
    is called at most once, and only with names the local matcher missed.
    """
    name_map: Dict[str, str] = {}
    unknown = []
    for name in set(names):
        match = find_catalog_match(name, catalog)
        if match:
            name_map[name] = match
        else:
            unknown.append(name)

    logger.debug(f"Local match resolved {len(name_map)} names, {len(unknown)} unresolved")

    if not unknown:
        return name_map
    if matcher is None:
        logger.info(f"Remote matching disabled, leaving {len(unknown)} names unresolved")
        return name_map

    try:
        result = await matcher.match_batch(unknown, catalog.names)
    except CatalogMatcherError as e:
        logger.warning(f"Remote catalog match failed for {len(unknown)} names: {e}")
        return name_map
    except Exception:
        logger.exception(f"Remote catalog matcher raised unexpectedly for {len(unknown)} names")
        return name_map

    requested = set(unknown)
    for raw, match in result.resolved().items():
        # Name map values must stay inside the catalog
        canonical = catalog.canonical(match) if raw in requested else None
        if canonical:
            name_map[raw] = canonical

    return name_map


def apply_name_map(tree: ExtractedWorkout, name_map: Dict[str, str]) -> ExtractedWorkout:
    """Rewrite exercise names in place; names absent from the map are kept."""
    for day in tree.days:
        for ex in day.exercises:
            ex.name = name_map.get(ex.name, ex.name)
    return tree


def build_workout_plan(
    tree: ExtractedWorkout,
    name_map: Optional[Dict[str, str]] = None,
    now: Optional[datetime] = None,
) -> WorkoutPlan:
    """
    Turn an extracted tree into a WorkoutPlan.

    Names are mapped through `name_map` and IDs derived from a single
    millisecond timestamp plus day/exercise position, so they are unique
    within this call only.
    """
    name_map = name_map or {}
    now = now or datetime.now(timezone.utc)
    timestamp = int(now.timestamp() * 1000)

    days = []
    for day_index, day in enumerate(tree.days):
        exercises = []
        for ex_index, ex in enumerate(day.exercises):
            weight, target_notes = normalize_exercise_fields(ex.weight, ex.notes)
            exercises.append(Exercise(
                id=f"exercise-{timestamp}-{day_index}-{ex_index}",
                name=name_map.get(ex.name, ex.name),
                type=ex.type if ex.type in EXERCISE_TYPES else "reps",
                sets=ex.sets or 3,
                reps=ex.reps or "10",
                weight=weight,
                rest_time=ex.rest_time,
                target_notes=target_notes or "",
            ))
        days.append(WorkoutDay(
            id=f"day-{timestamp}-{day_index}",
            name=day.name or f"Day {day_index + 1}",
            is_rest_day=bool(day.is_rest_day),
            exercises=exercises,
        ))

    return WorkoutPlan(
        id=f"workout-{timestamp}",
        name=tree.name or DEFAULT_PLAN_NAME,
        uploaded_at=now.isoformat(),
        days=days,
    )


async def normalize_extracted_workout(
    tree: ExtractedWorkout,
    catalog: ExerciseCatalog,
    matcher: Optional[CatalogMatcher] = None,
    now: Optional[datetime] = None,
) -> WorkoutPlan:
    """Run a full resolution pass; `tree` is rewritten in place."""
    started = time.perf_counter()
    names = collect_exercise_names(tree)
    name_map = await resolve_exercise_names(names, catalog, matcher)
    apply_name_map(tree, name_map)
    plan = build_workout_plan(tree, now=now)

    logger.info(
        f"Normalized plan '{plan.name}': {len(plan.days)} days, "
        f"{len(name_map)}/{len(names)} names matched in {time.perf_counter() - started:.3f}s"
    )
    return plan
