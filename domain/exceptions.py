"""
Domain exceptions for the workout tracker.

These exceptions are used across domain, application and infrastructure
layers. Every error carries a human readable ``message`` plus the list of
individual ``errors`` and offending ``fields`` so callers can correct
their input in one round trip.
"""
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple


class WorkoutTrackerError(Exception):
    """Base exception for workout tracker errors."""

    def __init__(
        self,
        message: str,
        errors: Optional[List[str]] = None,
        fields: Optional[List[str]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.errors = errors or [message]
        self.fields = fields or []

    @property
    def error_code(self) -> str:
        """Stable error name exposed to API clients."""
        return type(self).__name__

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for an HTTP error body."""
        return {
            "error": self.error_code,
            "message": self.message,
            "errors": list(self.errors),
            "fields": list(self.fields),
        }


# =============================================================================
# Exercise validation
# =============================================================================


class ExerciseValidationError(WorkoutTrackerError):
    """Raised when an exercise payload is rejected."""


class InvalidCategory(ExerciseValidationError):
    """Exercise category is not one of cardio/resistance."""

    def __init__(self, category: Any):
        self.category = category
        super().__init__(
            f"Invalid exercise type {category!r}: must be 'cardio' or 'resistance'",
            fields=["type"],
        )


class MissingFields(ExerciseValidationError):
    """One or more required fields are absent or empty."""

    def __init__(self, missing: Sequence[str]):
        missing = list(missing)
        super().__init__(
            f"Missing required fields: {', '.join(missing)}",
            errors=[f"{name} is required" for name in missing],
            fields=missing,
        )


class InvalidNumericValue(ExerciseValidationError):
    """A numeric field could not be parsed to a finite number."""

    def __init__(self, values: Dict[str, Any]):
        self.values = dict(values)
        super().__init__(
            f"Invalid numeric value for: {', '.join(self.values)}",
            errors=[
                f"{name} must be a finite number (got {value!r})"
                for name, value in self.values.items()
            ],
            fields=list(self.values),
        )


class OutOfRangeValue(ExerciseValidationError):
    """A parsed numeric field violates its category bound."""

    def __init__(self, violations: Iterable[Tuple[str, str]]):
        self.violations = list(violations)
        super().__init__(
            "Value out of range: "
            + ", ".join(f"{name} must be {bound}" for name, bound in self.violations),
            errors=[f"{name} must be {bound}" for name, bound in self.violations],
            fields=[name for name, _ in self.violations],
        )


# =============================================================================
# Lookup
# =============================================================================


class WorkoutNotFound(WorkoutTrackerError):
    """Referenced workout does not resolve in the store."""

    def __init__(self, workout_id: str):
        self.workout_id = workout_id
        super().__init__(f"Workout with ID {workout_id} not found", fields=["id"])


class ExerciseNotFound(WorkoutTrackerError):
    """No exercise exists at the requested position of a workout."""

    def __init__(self, workout_id: str, index: int):
        self.workout_id = workout_id
        self.index = index
        super().__init__(
            f"Workout {workout_id} has no exercise at position {index}",
            fields=["index"],
        )


class MalformedIdentifier(WorkoutTrackerError):
    """Identifier does not have the 24-character hexadecimal shape."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f"Malformed workout identifier {value!r}: expected 24 hexadecimal characters",
            fields=["id"],
        )


# =============================================================================
# Storage
# =============================================================================


class StorageError(WorkoutTrackerError):
    """The persistence layer failed to complete an operation.

    Raised by repository implementations on database errors, so that
    infrastructure failures are never mistaken for "not found".
    """
