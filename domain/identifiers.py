"""
Workout identifier rules.

Workout IDs are opaque 24-character hexadecimal tokens. They are checked
before any store query so malformed input never reaches the database.
"""
import re
import secrets
from typing import Any

from domain.exceptions import MalformedIdentifier

WORKOUT_ID_LENGTH = 24
WORKOUT_ID_PATTERN = re.compile(r"[0-9a-fA-F]{24}")


def is_valid_workout_id(value: Any) -> bool:
    """Check whether value has the workout identifier shape."""
    return isinstance(value, str) and WORKOUT_ID_PATTERN.fullmatch(value) is not None


def ensure_workout_id(value: Any) -> str:
    """
    Return value unchanged if it is a well-formed workout ID.

    Raises:
        MalformedIdentifier: If value is not 24 hexadecimal characters.
    """
    if not is_valid_workout_id(value):
        raise MalformedIdentifier(value)
    return value


def new_workout_id() -> str:
    """Generate a fresh random workout ID."""
    return secrets.token_hex(WORKOUT_ID_LENGTH // 2)
