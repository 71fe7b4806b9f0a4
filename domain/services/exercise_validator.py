"""
Exercise validation and normalization.

This is the only gate new exercise data passes through before it is
stored. It checks, in order:

1. Category - must be cardio or resistance
2. Presence - every required field for the category is present
3. Parsing - numeric fields parse to finite numbers
4. Range - parsed values respect the category bounds

Each stage reports every offending field at once, never just the first.
"""

import logging
import math
from typing import Any, Dict, List, Mapping, Tuple

from domain.exceptions import (
    InvalidCategory,
    InvalidNumericValue,
    MissingFields,
    OutOfRangeValue,
)
from domain.models.exercise import CATEGORY_FIELDS, Exercise, ExerciseCategory

logger = logging.getLogger(__name__)


REQUIRED_FIELDS: Dict[ExerciseCategory, Tuple[str, ...]] = {
    ExerciseCategory.CARDIO: ("name", "duration", "distance"),
    ExerciseCategory.RESISTANCE: ("name", "duration", "weight", "sets", "reps"),
}

INTEGER_FIELDS = frozenset({"duration", "sets", "reps"})

# (field, lower bound, bound is inclusive)
RANGE_RULES: Dict[ExerciseCategory, Tuple[Tuple[str, int, bool], ...]] = {
    ExerciseCategory.CARDIO: (
        ("duration", 0, False),
        ("distance", 0, True),
    ),
    ExerciseCategory.RESISTANCE: (
        ("duration", 0, False),
        ("weight", 0, True),
        ("sets", 0, False),
        ("reps", 0, False),
    ),
}


def parse_category(category: Any) -> ExerciseCategory:
    """
    Resolve a declared category to ExerciseCategory.

    Raises:
        InvalidCategory: If category is not cardio or resistance.
    """
    value = category.strip() if isinstance(category, str) else category
    try:
        return ExerciseCategory(value)
    except ValueError:
        raise InvalidCategory(category) from None


def _coerce_number(value: Any, integer: bool):
    """
    Parse value to int or float.

    Integers are truncated toward zero. Booleans, non-finite values and
    unparsable text raise ValueError.
    """
    if isinstance(value, bool):
        raise ValueError("boolean is not a number")
    if isinstance(value, str):
        number = float(value.strip())
    elif isinstance(value, (int, float)):
        number = value
    else:
        raise ValueError(f"unsupported type {type(value).__name__}")

    if isinstance(number, float) and not math.isfinite(number):
        raise ValueError("number is not finite")
    return int(number) if integer else float(number)


def _find_missing(raw: Mapping[str, Any], category: ExerciseCategory) -> List[str]:
    missing = []
    for field in REQUIRED_FIELDS[category]:
        value = raw.get(field)
        if value is None:
            missing.append(field)
        elif field == "name" and not str(value).strip():
            missing.append(field)
    return missing


def _describe_bound(bound: int, inclusive: bool) -> str:
    return f">= {bound}" if inclusive else f"> {bound}"


def validate_and_normalize(raw: Mapping[str, Any], category: Any) -> Exercise:
    """
    Validate a raw exercise payload and return a normalized Exercise.

    Args:
        raw: Loosely-typed field bag (e.g. a decoded JSON object)
        category: Declared exercise type, "cardio" or "resistance"

    Returns:
        Exercise with only the fields relevant to its category populated,
        name trimmed and numbers coerced.

    Raises:
        InvalidCategory: category is not cardio or resistance
        MissingFields: required fields are absent, or name is blank
        InvalidNumericValue: numeric fields do not parse to finite numbers
        OutOfRangeValue: parsed numbers violate the category bounds
    """
    resolved = parse_category(category)

    missing = _find_missing(raw, resolved)
    if missing:
        raise MissingFields(missing)

    numeric_fields = ("duration",) + CATEGORY_FIELDS[resolved]
    values: Dict[str, Any] = {}
    invalid: Dict[str, Any] = {}
    for field in numeric_fields:
        try:
            values[field] = _coerce_number(raw[field], field in INTEGER_FIELDS)
        except (TypeError, ValueError):
            invalid[field] = raw[field]
    if invalid:
        raise InvalidNumericValue(invalid)

    violations = []
    for field, bound, inclusive in RANGE_RULES[resolved]:
        value = values[field]
        ok = value >= bound if inclusive else value > bound
        if not ok:
            violations.append((field, _describe_bound(bound, inclusive)))
    if violations:
        raise OutOfRangeValue(violations)

    return Exercise(
        category=resolved.value,
        name=str(raw["name"]).strip(),
        **values,
    )


def validate_exercise_payload(raw: Mapping[str, Any]) -> Exercise:
    """
    Validate a payload that declares its own category.

    The category is read from ``type`` (the stored key) or ``category``.

    Raises:
        MissingFields: If neither key is present.
        ExerciseValidationError: Any error from validate_and_normalize.
    """
    category = raw.get("type")
    if category is None:
        category = raw.get("category")
    if category is None:
        raise MissingFields(["type"])
    return validate_and_normalize(raw, category)


def validate_exercises(payloads: List[Mapping[str, Any]]) -> List[Exercise]:
    """
    Validate a list of payloads as one unit.

    Every payload is checked; failures are combined into a single error
    whose messages are prefixed with the exercise position, so nothing is
    written unless all of them are valid.

    Raises:
        ExerciseValidationError: The first failure's type, carrying the
            errors of every invalid payload.
    """
    exercises: List[Exercise] = []
    first_error = None
    errors: List[str] = []
    fields: List[str] = []

    for index, payload in enumerate(payloads):
        try:
            exercises.append(validate_exercise_payload(payload))
        except (InvalidCategory, MissingFields, InvalidNumericValue, OutOfRangeValue) as e:
            first_error = first_error or e
            errors.extend(f"exercises[{index}]: {message}" for message in e.errors)
            fields.extend(f"exercises[{index}].{name}" for name in e.fields)

    if first_error is not None:
        logger.warning(f"Rejected {len(errors)} exercise payload error(s): {errors}")
        first_error.errors = errors
        first_error.fields = fields
        raise first_error
    return exercises
