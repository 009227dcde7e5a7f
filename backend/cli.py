import argparse
import asyncio
import json
import sys

from pydantic import ValidationError

from backend.core.canonicalize import normalize_extracted_workout
from backend.core.catalog import CatalogError, load_catalog
from backend.core.plates import calculate_plates, format_plate_result
from backend.settings import get_settings
from domain.models import ExtractedWorkout


def _build_matcher(settings, local_only):
    if local_only or not settings.remote_matching_enabled:
        return None
    from backend.services.llm import OpenAICatalogMatcher

    return OpenAICatalogMatcher(
        api_key=settings.openai_api_key,
        model=settings.catalog_match_model,
        timeout=settings.catalog_match_timeout,
    )


def normalize_command(args):
    settings = get_settings()
    with open(args.input, 'r') as f:
        tree = ExtractedWorkout.model_validate(json.load(f))

    catalog = load_catalog(settings.exercise_catalog_path)
    matcher = _build_matcher(settings, args.local_only)
    plan = asyncio.run(normalize_extracted_workout(tree, catalog, matcher))

    output = plan.model_dump_json(by_alias=True, indent=2)
    if args.output:
        with open(args.output, 'w') as f:
            f.write(output)
    else:
        print(output)


def plates_command(args):
    bar = args.bar if args.bar is not None else get_settings().default_barbell_weight
    result = calculate_plates(args.weight, barbell_weight=bar)
    suffix = "" if result.exact else f" (closest: {result.total_weight:g})"
    print(f"{format_plate_result(result)}{suffix}")


def main():
    parser = argparse.ArgumentParser(description="Exercise name normalization and plate math")
    subparsers = parser.add_subparsers(dest="command", required=True)

    normalize = subparsers.add_parser("normalize", help="Normalize an extracted workout JSON file")
    normalize.add_argument("input", help="Input JSON file path")
    normalize.add_argument("-o", "--output", help="Output JSON file path (default: stdout)")
    normalize.add_argument("--local-only", action="store_true", help="Skip the remote matcher")
    normalize.set_defaults(func=normalize_command)

    plates = subparsers.add_parser("plates", help="Plates per side for a target weight")
    plates.add_argument("weight", type=float, help="Total target weight including the bar")
    plates.add_argument("--bar", type=float, help="Bar weight (default from settings)")
    plates.set_defaults(func=plates_command)

    args = parser.parse_args()

    try:
        args.func(args)
    except FileNotFoundError as e:
        print(f"Error: File not found: {e.filename}", file=sys.stderr)
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON: {e}", file=sys.stderr)
        sys.exit(1)
    except (ValidationError, CatalogError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
