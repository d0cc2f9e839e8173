"""Nutrition target calculation from an athlete profile."""

import logging
from dataclasses import dataclass

from athlete_nutrition import constants
from athlete_nutrition.domain.athletes import AthleteProfile, Gender, PrimaryGoal
from athlete_nutrition.domain.targets import (
    MaximumTarget,
    MinimumTarget,
    NutrientRange,
    NutritionTarget,
)

_logger = logging.getLogger(__name__)


@dataclass
class TargetCalculator:
    """Derive calorie, macro and micronutrient targets for an athlete."""

    min_weight_kg: float = 30.0
    max_weight_kg: float = 300.0
    min_height_cm: float = 100.0
    max_height_cm: float = 250.0
    min_calories: float = 1200.0

    def calculate(self, profile: AthleteProfile) -> NutritionTarget:
        """Return daily targets for the profile.

        Weight, height and age are clamped to plausible bounds first. Only a
        clamped profile has its optimal calories floored at ``min_calories``;
        valid profiles get the unadjusted formula value.
        """
        weight = self.clamp_weight(profile.weight_kg)
        height = _clamp(profile.height_cm, self.min_height_cm, self.max_height_cm)
        age = _clamp(profile.age, constants.MIN_AGE, constants.MAX_AGE)
        clamped = (weight, height, age) != (
            profile.weight_kg,
            profile.height_cm,
            profile.age,
        )
        if clamped:
            _logger.debug(
                "Clamped profile: weight=%s->%s height=%s->%s age=%s->%s",
                profile.weight_kg,
                weight,
                profile.height_cm,
                height,
                profile.age,
                age,
            )

        bmr = basal_metabolic_rate(weight, height, age, profile.gender)
        training, rest = constants.ACTIVITY_FACTORS[profile.training_intensity]
        activity = training if profile.is_training_day else rest
        calories = bmr * activity * constants.GOAL_FACTORS[profile.primary_goal]
        if clamped:
            calories = max(calories, self.min_calories)

        protein = _protein_per_kg(profile) * weight
        carbs = _carbs_per_kg(profile) * weight
        fat_floor = weight * constants.FAT_MIN_G_PER_KG
        remaining = (
            calories
            - protein * constants.KCAL_PER_G_PROTEIN
            - carbs * constants.KCAL_PER_G_CARBS
        )
        fat = max(remaining / constants.KCAL_PER_G_FAT, fat_floor)

        is_male = profile.gender == Gender.MALE
        sex_index = 0 if is_male else 1
        return NutritionTarget(
            calories=_scaled_range(calories, constants.CALORIE_RANGE),
            protein=_scaled_range(protein, constants.PROTEIN_RANGE),
            carbs=_scaled_range(carbs, constants.CARBS_RANGE),
            fat=NutrientRange(
                min=fat_floor,
                max=fat * constants.FAT_MAX_FACTOR,
                optimal=fat,
            ),
            fiber=MinimumTarget(
                min=constants.FIBER_MIN_G, optimal=constants.FIBER_OPTIMAL_G
            ),
            sodium=MaximumTarget(
                max=constants.SODIUM_MAX_MG, optimal=constants.SODIUM_OPTIMAL_MG
            ),
            iron=MinimumTarget(
                min=constants.IRON_MIN_MG[sex_index],
                optimal=constants.IRON_OPTIMAL_MG[sex_index],
            ),
            calcium=MinimumTarget(
                min=constants.CALCIUM_MIN_MG, optimal=constants.CALCIUM_OPTIMAL_MG
            ),
            vitamin_d=MinimumTarget(
                min=constants.VITAMIN_D_MIN_IU,
                optimal=constants.VITAMIN_D_OPTIMAL_IU,
            ),
            vitamin_c=MinimumTarget(
                min=constants.VITAMIN_C_MIN_MG[sex_index],
                optimal=constants.VITAMIN_C_OPTIMAL_MG,
            ),
        )

    def clamp_weight(self, weight_kg: float) -> float:
        """Clamp a body weight to the configured bounds."""
        return _clamp(weight_kg, self.min_weight_kg, self.max_weight_kg)


def basal_metabolic_rate(
    weight_kg: float, height_cm: float, age: float, gender: Gender
) -> float:
    """Mifflin-St Jeor basal metabolic rate in kcal/day."""
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    return base + 5 if gender == Gender.MALE else base - 161


def _protein_per_kg(profile: AthleteProfile) -> float:
    sport = profile.sport.lower()
    muscle_gain = profile.primary_goal == PrimaryGoal.MUSCLE_GAIN
    if any(keyword in sport for keyword in constants.STRENGTH_SPORT_KEYWORDS):
        if muscle_gain:
            return constants.PROTEIN_G_PER_KG_STRENGTH_GAIN
        return constants.PROTEIN_G_PER_KG_STRENGTH
    if any(keyword in sport for keyword in constants.ENDURANCE_SPORT_KEYWORDS):
        if profile.is_training_day:
            return constants.PROTEIN_G_PER_KG_ENDURANCE_TRAINING
        return constants.PROTEIN_G_PER_KG_ENDURANCE_REST
    if muscle_gain:
        return constants.PROTEIN_G_PER_KG_GENERAL_GAIN
    return constants.PROTEIN_G_PER_KG_GENERAL


def _carbs_per_kg(profile: AthleteProfile) -> float:
    if not profile.is_training_day:
        return constants.CARBS_G_PER_KG_REST
    return constants.CARBS_G_PER_KG_TRAINING[profile.training_intensity]


def _scaled_range(optimal: float, bounds: tuple[float, float]) -> NutrientRange:
    low, high = bounds
    return NutrientRange(min=optimal * low, max=optimal * high, optimal=optimal)


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)
