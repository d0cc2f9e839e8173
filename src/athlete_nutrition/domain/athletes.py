"""Athlete profile model used to derive nutrition targets."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class Gender(StrEnum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class TrainingIntensity(StrEnum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    EXTREME = "extreme"


class PrimaryGoal(StrEnum):
    PERFORMANCE = "performance"
    WEIGHT_LOSS = "weight_loss"
    MUSCLE_GAIN = "muscle_gain"
    MAINTENANCE = "maintenance"
    RECOVERY = "recovery"


class TrainingType(StrEnum):
    STRENGTH = "strength"
    ENDURANCE = "endurance"
    POWER = "power"
    MIXED = "mixed"


class AthleteProfile(BaseModel):
    """Physiological and training context for one athlete on one day.

    Missing or mistyped fields raise ``pydantic.ValidationError``. Implausible
    numbers (zero weight, extreme age) are accepted here and clamped by the
    target calculator instead.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    age: int
    gender: Gender
    weight_kg: float
    height_cm: float
    sport: str
    training_intensity: TrainingIntensity
    primary_goal: PrimaryGoal
    is_training_day: bool
    training_frequency: int = Field(default=0, ge=0)
    dietary_restrictions: tuple[str, ...] = ()
    meals_per_day: int = Field(default=3, ge=1)
    body_fat_percentage: float | None = Field(default=None, ge=0.0, le=100.0)
    training_type: TrainingType | None = None
    training_duration_min: int | None = Field(default=None, ge=0)
