"""
Offline workout tooling.

    python -m backend.cli stats export.json [--start 2024-01-01 --end 2024-01-31]
    python -m backend.cli validate exercise.json

`stats` reads a JSON list of workout records (as returned by
GET /api/workouts) and prints the statistics summary, computed with the
same aggregator the server uses. `validate` checks one exercise payload.
"""
import argparse
import json
import sys
from datetime import datetime

from domain.converters import db_row_to_workout
from domain.exceptions import ExerciseValidationError
from domain.services import filter_by_date_range, summarize, validate_exercise_payload


def _load_json(path):
    with open(path, "r") as f:
        return json.load(f)


def _parse_date(value):
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid date: {value}")


def run_stats(args) -> int:
    records = _load_json(args.input)
    if not isinstance(records, list):
        print("Error: expected a JSON list of workouts", file=sys.stderr)
        return 1

    workouts = [db_row_to_workout(r) for r in records if isinstance(r, dict)]
    if args.start or args.end:
        if not (args.start and args.end):
            print("Error: --start and --end must be given together", file=sys.stderr)
            return 1
        workouts = filter_by_date_range(workouts, args.start, args.end)

    summary = summarize(workouts)
    print(json.dumps(summary.model_dump(mode="json"), indent=2))
    return 0


def run_validate(args) -> int:
    payload = _load_json(args.input)
    if not isinstance(payload, dict):
        print("Error: expected a JSON object", file=sys.stderr)
        return 1

    try:
        exercise = validate_exercise_payload(payload)
    except ExerciseValidationError as e:
        print(json.dumps(e.to_dict(), indent=2), file=sys.stderr)
        return 2

    print(json.dumps(exercise.to_record(), indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Workout tracker offline tools")
    subparsers = parser.add_subparsers(dest="command", required=True)

    stats = subparsers.add_parser("stats", help="Summarize a JSON export of workouts")
    stats.add_argument("input", help="Input JSON file path")
    stats.add_argument("--start", type=_parse_date, help="Inclusive lower bound (ISO date)")
    stats.add_argument("--end", type=_parse_date, help="Inclusive upper bound (ISO date)")
    stats.set_defaults(func=run_stats)

    validate = subparsers.add_parser("validate", help="Validate one exercise payload")
    validate.add_argument("input", help="Input JSON file path")
    validate.set_defaults(func=run_validate)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        return args.func(args)
    except FileNotFoundError:
        print(f"Error: File not found: {args.input}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
