"""Nutrient target models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NutrientRange:
    """Acceptable range with an optimal point."""

    min: float
    max: float
    optimal: float

    def contains(self, value: float) -> bool:
        """Return whether the value lies within the range."""
        return self.min <= value <= self.max


@dataclass(frozen=True)
class MinimumTarget:
    """Target with a floor and an optimal point."""

    min: float
    optimal: float


@dataclass(frozen=True)
class MaximumTarget:
    """Target with a ceiling and an optimal point."""

    max: float
    optimal: float


@dataclass(frozen=True)
class NutritionTarget:
    """Daily targets derived from an athlete profile."""

    calories: NutrientRange
    protein: NutrientRange
    carbs: NutrientRange
    fat: NutrientRange
    fiber: MinimumTarget
    sodium: MaximumTarget
    iron: MinimumTarget | None = None
    calcium: MinimumTarget | None = None
    vitamin_d: MinimumTarget | None = None
    vitamin_c: MinimumTarget | None = None
