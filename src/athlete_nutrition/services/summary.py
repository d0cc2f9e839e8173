"""Nutrition totals for planned meal items."""

import logging
from dataclasses import dataclass, fields

from athlete_nutrition import constants
from athlete_nutrition.domain.athletes import AthleteProfile
from athlete_nutrition.domain.foods import FoodItem, FoodPortion
from athlete_nutrition.domain.meals import (
    MealItem,
    NutritionSummary,
    PortionNutrition,
    SkippedMealItem,
)

_logger = logging.getLogger(__name__)


@dataclass
class _Totals:
    calories: float = 0.0
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fat_g: float = 0.0
    fiber_g: float = 0.0
    sodium_mg: float = 0.0
    iron_mg: float = 0.0
    calcium_mg: float = 0.0
    vitamin_d_iu: float = 0.0
    vitamin_c_mg: float = 0.0

    def add(self, food: FoodItem, factor: float) -> None:
        nutrition = food.nutrition
        for item in fields(self):
            value = getattr(nutrition, item.name) or 0.0
            setattr(self, item.name, getattr(self, item.name) + value * factor)


def summarize(
    meals: list[MealItem],
    profile: AthleteProfile,
    *,
    min_weight_kg: float = 30.0,
    max_weight_kg: float = 300.0,
) -> NutritionSummary:
    """Aggregate nutrition for meal items.

    Items whose portion id does not resolve contribute nothing and are
    reported in ``skipped_items``. ``protein_per_kg`` uses the body weight clamped
    to ``[min_weight_kg, max_weight_kg]``, matching the target calculator.
    """
    totals = _Totals()
    skipped: list[SkippedMealItem] = []
    for meal in meals:
        portion = find_portion(meal.food, meal.portion_id)
        if portion is None:
            skipped.append(
                SkippedMealItem(
                    food_id=meal.food.id,
                    portion_id=meal.portion_id,
                    meal_type=meal.meal_type,
                )
            )
            _logger.debug(
                "Skipping meal item: food=%s portion=%s",
                meal.food.id,
                meal.portion_id,
            )
            continue
        totals.add(meal.food, (portion.grams / 100.0) * meal.quantity)

    weight = min(max(profile.weight_kg, min_weight_kg), max_weight_kg)
    return NutritionSummary(
        calories=round(totals.calories),
        protein_g=round(totals.protein_g, 1),
        carbs_g=round(totals.carbs_g, 1),
        fat_g=round(totals.fat_g, 1),
        fiber_g=round(totals.fiber_g, 1),
        sodium_mg=round(totals.sodium_mg),
        protein_percentage=_calorie_share(
            totals.protein_g * constants.KCAL_PER_G_PROTEIN, totals.calories
        ),
        carbs_percentage=_calorie_share(
            totals.carbs_g * constants.KCAL_PER_G_CARBS, totals.calories
        ),
        fat_percentage=_calorie_share(
            totals.fat_g * constants.KCAL_PER_G_FAT, totals.calories
        ),
        protein_per_kg=round(totals.protein_g / weight, 1),
        iron_mg=round(totals.iron_mg, 1),
        calcium_mg=round(totals.calcium_mg),
        vitamin_d_iu=round(totals.vitamin_d_iu),
        vitamin_c_mg=round(totals.vitamin_c_mg, 1),
        skipped_items=tuple(skipped),
    )


def find_portion(food: FoodItem, portion_id: str) -> FoodPortion | None:
    """Return the food's portion with the given id, if present."""
    for portion in food.portions:
        if portion.id == portion_id:
            return portion
    return None


def default_portion(food: FoodItem) -> FoodPortion:
    """Return the default portion, falling back to the first one."""
    for portion in food.portions:
        if portion.is_default:
            return portion
    return food.portions[0]


def portion_nutrition(
    food: FoodItem, portion: FoodPortion, quantity: float
) -> PortionNutrition:
    """Compute macros for a single food selection."""
    if quantity <= 0:
        return PortionNutrition(0.0, 0.0, 0.0, 0.0)
    factor = (portion.grams / 100.0) * quantity
    nutrition = food.nutrition
    return PortionNutrition(
        calories=round(nutrition.calories * factor),
        protein_g=round(nutrition.protein_g * factor, 1),
        carbs_g=round(nutrition.carbs_g * factor, 1),
        fat_g=round(nutrition.fat_g * factor, 1),
    )


def target_progress(current: float, target: float) -> float:
    """Percent of a target reached, capped at 100."""
    if target <= 0:
        return 0.0
    return min(current / target * 100.0, 100.0)


def _calorie_share(macro_calories: float, total_calories: float) -> float:
    if total_calories <= 0:
        return 0.0
    return round(macro_calories / total_calories * 100.0, 1)
