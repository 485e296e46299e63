"""
Pydantic models for the generated fitness plan.

Field names match the JSON contract the model is asked to follow, so a
validated plan dumps back to exactly what the upstream returned.
Unknown keys are kept and scalar values keep their upstream types.
"""
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr

MEAL_SLOTS = ("Breakfast", "Lunch", "Snack", "Dinner")

# Counts and quantities arrive as "3", 3 or "450 kcal" depending on the model
Scalar = Union[StrictStr, StrictInt, StrictFloat]


class PlanOrigin(str, Enum):
    """Provenance of a plan."""

    GENERATED = "generated"
    FALLBACK = "fallback"


class PlanPart(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)


class Exercise(PlanPart):
    """Single exercise in a workout day."""

    name: str
    sets: Scalar
    reps: Scalar
    tips: str


class WorkoutDay(PlanPart):
    """One day of the weekly workout plan."""

    day: str
    focus: str
    exercises: list[Exercise]


class MealEntry(PlanPart):
    """Single meal in the daily diet plan."""

    meal: str
    food: str
    calories: Scalar
    protein: Scalar
    carbs: Scalar
    fats: Scalar


class Macros(PlanPart):
    protein: Scalar
    carbs: Scalar
    fats: Scalar


class PlanSummary(PlanPart):
    daily_calories: Scalar
    macros: Macros


class FitnessPlan(PlanPart):
    """Complete 7-day workout and diet plan."""

    workout_plan: list[WorkoutDay]
    diet_plan: list[MealEntry]
    summary: PlanSummary
    origin: PlanOrigin = Field(PlanOrigin.GENERATED, description="generated or fallback")

    @property
    def is_fallback(self) -> bool:
        return self.origin == PlanOrigin.FALLBACK

    def to_response(self) -> dict:
        """Plan as the upstream contract shapes it, without the origin tag."""
        return self.model_dump(mode="json", exclude={"origin"})


class PlanOutcome(BaseModel):
    """
    Result of one pipeline run.

    A generated plan has no reason; a fallback plan always carries the
    reason the generated one could not be used.
    """

    model_config = ConfigDict(frozen=True)

    plan: FitnessPlan
    reason: Optional[str] = None

    @property
    def degraded(self) -> bool:
        return self.plan.is_fallback
