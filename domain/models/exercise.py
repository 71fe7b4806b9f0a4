"""
Exercise value object for workout exercises.

An exercise is either cardio (time/distance based) or resistance
(weight/sets/reps based). The model itself is deliberately lenient so that
historical records load as they were stored; new data only enters through
``domain.services.exercise_validator``.
"""

from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Number = Union[int, float]


class ExerciseCategory(str, Enum):
    """Kind of exercise."""

    CARDIO = "cardio"
    RESISTANCE = "resistance"


# Fields that belong to each category, besides name/type/duration
CATEGORY_FIELDS = {
    ExerciseCategory.CARDIO: ("distance",),
    ExerciseCategory.RESISTANCE: ("weight", "reps", "sets"),
}


class Exercise(BaseModel):
    """
    Value object representing one logged exercise within a workout.

    The category is serialized under the ``type`` key, which is how
    workout records have always been stored; ``category`` is accepted as
    an input name as well.

    Examples:
        >>> run = Exercise(category="cardio", name="Run", duration=30, distance=5)
        >>> run.is_cardio
        True

        >>> bench = Exercise(
        ...     type="resistance", name="Bench", duration=20, weight=60, reps=8, sets=3
        ... )
        >>> bench.is_resistance
        True
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {"type": "cardio", "name": "Run", "duration": 30, "distance": 5.0},
                {
                    "type": "resistance",
                    "name": "Bench Press",
                    "duration": 20,
                    "weight": 60.0,
                    "reps": 8,
                    "sets": 3,
                },
            ]
        },
    )

    category: str = Field(
        ..., alias="type", description="Exercise type: 'cardio' or 'resistance'"
    )
    name: str = Field(default="", description="Exercise name")
    duration: Optional[Number] = Field(default=None, description="Duration in minutes")

    # Cardio
    distance: Optional[Number] = Field(default=None, description="Distance covered")

    # Resistance
    weight: Optional[Number] = Field(default=None, description="Weight per rep")
    reps: Optional[Number] = Field(default=None, description="Reps per set")
    sets: Optional[Number] = Field(default=None, description="Number of sets")

    @property
    def is_cardio(self) -> bool:
        return self.category == ExerciseCategory.CARDIO.value

    @property
    def is_resistance(self) -> bool:
        return self.category == ExerciseCategory.RESISTANCE.value

    def to_record(self) -> Dict[str, Any]:
        """Serialize to the stored/wire format, omitting unset fields."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def __str__(self) -> str:
        parts = [self.name or "<unnamed>", f"[{self.category}]"]
        if self.duration:
            parts.append(f"{self.duration}min")
        if self.is_cardio and self.distance is not None:
            parts.append(f"{self.distance} dist")
        if self.is_resistance and self.reps:
            parts.append(f"{self.sets or 1}x{self.reps} @ {self.weight or 0}")
        return " ".join(parts)
