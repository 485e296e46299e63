"""
Pydantic models for the user profile submitted by the form.
Normalizes enum labels and rejects malformed input before any AI call.
"""
import hashlib
import re
from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from fitplan.core.errors import ProfileValidationError


class Choice(str, Enum):
    """Enum whose members also accept the human labels shown in the form."""

    @property
    def label(self) -> str:
        return _LABELS.get(self.value, self.value)

    @classmethod
    def parse(cls, value: Any) -> Any:
        if isinstance(value, cls) or not isinstance(value, str):
            return value
        wanted = _normalize(value)
        for member in cls:
            if wanted in (_normalize(member.value), _normalize(member.label)):
                return member
        # Let pydantic report the enum error
        return value


def _normalize(text: str) -> str:
    return re.sub(r"[\s_\-]", "", text).casefold()


_LABELS = {
    "WeightLoss": "Weight Loss",
    "MuscleGain": "Muscle Gain",
    "NonVegetarian": "Non-Vegetarian",
}


class Gender(Choice):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class Goal(Choice):
    WEIGHT_LOSS = "WeightLoss"
    MUSCLE_GAIN = "MuscleGain"
    ENDURANCE = "Endurance"
    FLEXIBILITY = "Flexibility"


class FitnessLevel(Choice):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class Location(Choice):
    GYM = "Gym"
    HOME = "Home"
    OUTDOOR = "Outdoor"


class DietPreference(Choice):
    NON_VEGETARIAN = "NonVegetarian"
    VEGETARIAN = "Vegetarian"
    VEGAN = "Vegan"
    KETO = "Keto"
    PALEO = "Paleo"
    MEDITERRANEAN = "Mediterranean"


class StressLevel(Choice):
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"


class UserProfile(BaseModel):
    """Profile collected by the multi-step form. Immutable once submitted."""

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "name": "Ana",
                "age": 30,
                "gender": "Female",
                "heightCm": 165,
                "weightKg": 60,
                "goal": "WeightLoss",
                "fitnessLevel": "Beginner",
                "location": "Home",
                "dietPreference": "Vegetarian",
                "sleepHours": 7,
                "waterIntakeL": 2,
                "stressLevel": "Low",
            }
        },
    )

    name: str = Field(..., min_length=1, max_length=100, pattern=r"^[A-Za-z\s]+$")
    age: float = Field(..., gt=0, le=130)
    gender: Gender
    heightCm: float = Field(..., gt=0, description="Height in cm")
    weightKg: float = Field(..., gt=0, description="Weight in kg")
    goal: Goal
    fitnessLevel: FitnessLevel
    location: Location
    dietPreference: DietPreference
    sleepHours: float = Field(..., gt=0, le=24, description="Average sleep per night")
    waterIntakeL: float = Field(..., gt=0, description="Daily water intake in litres")
    stressLevel: StressLevel

    @field_validator(
        "gender", "goal", "fitnessLevel", "location", "dietPreference", "stressLevel",
        mode="before",
    )
    @classmethod
    def _accept_labels(cls, value, info):
        choice = cls.model_fields[info.field_name].annotation
        return choice.parse(value)

    def fingerprint(self) -> str:
        """Stable digest of every field; equal profiles share it."""
        return hashlib.sha256(self.model_dump_json().encode("utf-8")).hexdigest()


def validate_profile(data: UserProfile | Mapping[str, Any]) -> UserProfile:
    """
    Validate raw form data into a UserProfile.

    Raises:
        ProfileValidationError: If any field is missing or malformed
    """
    if isinstance(data, UserProfile):
        return data
    try:
        return UserProfile.model_validate(data)
    except ValidationError as e:
        raise ProfileValidationError(
            e.errors(include_url=False, include_context=False, include_input=False)
        ) from e
