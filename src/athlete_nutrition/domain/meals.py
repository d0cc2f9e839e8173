"""Domain models for planned meals and their nutrition totals."""

from dataclasses import dataclass
from enum import StrEnum

from athlete_nutrition.domain.foods import FoodItem


class MealType(StrEnum):
    """Meal slot within a day."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"
    PRE_WORKOUT = "pre_workout"
    POST_WORKOUT = "post_workout"


@dataclass(frozen=True)
class MealItem:
    """A planned selection of a food portion."""

    food: FoodItem
    portion_id: str
    quantity: float
    meal_type: MealType
    timing: str | None = None


@dataclass(frozen=True)
class SkippedMealItem:
    """A meal item whose portion id did not match its food."""

    food_id: str
    portion_id: str
    meal_type: MealType


@dataclass(frozen=True)
class PortionNutrition:
    """Macros for a single food selection."""

    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float


@dataclass(frozen=True)
class NutritionSummary:
    """Totals and derived ratios for a list of meal items."""

    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    fiber_g: float
    sodium_mg: float
    protein_percentage: float
    carbs_percentage: float
    fat_percentage: float
    protein_per_kg: float
    iron_mg: float
    calcium_mg: float
    vitamin_d_iu: float
    vitamin_c_mg: float
    skipped_items: tuple[SkippedMealItem, ...] = ()
