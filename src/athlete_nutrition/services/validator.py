"""Scoring of planned meals against athlete nutrition targets."""

import logging
from dataclasses import dataclass, field

from athlete_nutrition import constants
from athlete_nutrition.domain.athletes import AthleteProfile
from athlete_nutrition.domain.foods import FoodCategory
from athlete_nutrition.domain.meals import MealItem, MealType, NutritionSummary
from athlete_nutrition.domain.targets import NutrientRange, NutritionTarget
from athlete_nutrition.domain.validation import (
    NutritionRecommendation,
    NutritionWarning,
    Priority,
    RecommendationType,
    Severity,
    ValidationCategories,
    ValidationCategory,
    ValidationLevel,
    ValidationResult,
    WarningType,
)
from athlete_nutrition.services.summary import summarize
from athlete_nutrition.services.targets import TargetCalculator

_logger = logging.getLogger(__name__)

_MACRO_MESSAGES = {
    ValidationLevel.EXCELLENT: "Macro balance is excellent for your sport",
    ValidationLevel.GOOD: "Macro balance is good with minor adjustments needed",
    ValidationLevel.FAIR: "Macro balance needs some improvement",
    ValidationLevel.POOR: "Macro balance needs significant improvement",
    ValidationLevel.CRITICAL: "Macro balance needs significant improvement",
}


@dataclass
class NutritionValidator:
    """Validate a day of meal items and produce feedback."""

    calculator: TargetCalculator = field(default_factory=TargetCalculator)

    def validate(
        self, meals: list[MealItem], profile: AthleteProfile
    ) -> ValidationResult:
        """Score meals against targets for the profile."""
        targets = self.calculator.calculate(profile)
        summary = summarize(
            meals,
            profile,
            min_weight_kg=self.calculator.min_weight_kg,
            max_weight_kg=self.calculator.max_weight_kg,
        )

        categories = ValidationCategories(
            calories=_validate_calories(summary, targets),
            macros=_validate_macros(summary, targets),
            micronutrients=_validate_micronutrients(summary, targets),
            timing=_validate_timing(meals, profile),
            hydration=_validate_hydration(meals),
        )
        weighted = sum(
            getattr(categories, name).score * weight
            for name, weight in constants.CATEGORY_WEIGHTS.items()
        )
        score = round(weighted)
        overall = score_to_level(score)
        _logger.debug(
            "Validated %s meal items: score=%s level=%s",
            len(meals),
            score,
            overall,
        )
        return ValidationResult(
            overall=overall,
            score=score,
            categories=categories,
            recommendations=_recommendations(summary, targets, profile),
            warnings=_warnings(summary, targets),
        )


def score_to_level(score: float) -> ValidationLevel:
    """Map a 0-100 score to a validation level."""
    for threshold, level in constants.LEVEL_THRESHOLDS:
        if score >= threshold:
            return level
    return ValidationLevel.CRITICAL


def score_nutrient(actual: float, target: NutrientRange) -> float:
    """Score an intake against a range, rewarding closeness to optimal."""
    if target.contains(actual):
        distance = abs(actual - target.optimal) / target.optimal
        return max(
            constants.NUTRIENT_SCORE_FLOOR_IN_RANGE,
            100.0 - distance * constants.NUTRIENT_DISTANCE_PENALTY,
        )
    close_low, close_high = constants.NUTRIENT_CLOSE_BAND
    if target.min * close_low <= actual <= target.max * close_high:
        return constants.NUTRIENT_SCORE_CLOSE
    off_low, off_high = constants.NUTRIENT_OFF_BAND
    if target.min * off_low <= actual <= target.max * off_high:
        return constants.NUTRIENT_SCORE_OFF
    return constants.NUTRIENT_SCORE_FAR


def _validate_calories(
    summary: NutritionSummary, targets: NutritionTarget
) -> ValidationCategory:
    calories = targets.calories
    actual = summary.calories
    close_low, close_high = constants.CALORIE_CLOSE_BAND
    off_low, off_high = constants.CALORIE_OFF_BAND
    if calories.contains(actual):
        score = constants.CALORIE_SCORE_IN_RANGE
        message = "Perfect calorie intake for your goals"
    elif calories.min * close_low <= actual <= calories.max * close_high:
        score = constants.CALORIE_SCORE_CLOSE
        message = "Good calorie intake, close to target"
    elif calories.min * off_low <= actual <= calories.max * off_high:
        score = constants.CALORIE_SCORE_OFF
        message = "Calories could be better aligned with goals"
    else:
        score = constants.CALORIE_SCORE_FAR
        message = "Significant calorie mismatch for your goals"
    details = (
        f"Target: {round(calories.optimal)} calories",
        f"Actual: {round(actual)} calories",
        f"Range: {round(calories.min)}-{round(calories.max)} calories",
    )
    return ValidationCategory(
        level=score_to_level(score), score=score, message=message, details=details
    )


def _validate_macros(
    summary: NutritionSummary, targets: NutritionTarget
) -> ValidationCategory:
    scores = (
        score_nutrient(summary.protein_g, targets.protein),
        score_nutrient(summary.carbs_g, targets.carbs),
        score_nutrient(summary.fat_g, targets.fat),
    )
    score = round(sum(scores) / len(scores))
    level = score_to_level(score)
    details = (
        f"Protein: {summary.protein_g}g ({summary.protein_percentage}% calories, "
        f"{summary.protein_per_kg}g/kg)",
        f"Carbs: {summary.carbs_g}g ({summary.carbs_percentage}% calories)",
        f"Fat: {summary.fat_g}g ({summary.fat_percentage}% calories)",
    )
    return ValidationCategory(
        level=level, score=score, message=_MACRO_MESSAGES[level], details=details
    )


def _validate_micronutrients(
    summary: NutritionSummary, targets: NutritionTarget
) -> ValidationCategory:
    scores: list[float] = []
    details: list[str] = []

    fiber = targets.fiber
    scores.append(
        score_nutrient(
            summary.fiber_g,
            NutrientRange(
                min=fiber.min,
                max=fiber.optimal * constants.FIBER_SCORING_MAX_FACTOR,
                optimal=fiber.optimal,
            ),
        )
    )
    details.append(f"Fiber: {summary.fiber_g}g (target: {round(fiber.optimal)}g)")

    sodium = targets.sodium
    if summary.sodium_mg <= sodium.optimal:
        scores.append(constants.SODIUM_SCORE_OPTIMAL)
    elif summary.sodium_mg <= sodium.max:
        scores.append(constants.SODIUM_SCORE_UNDER_MAX)
    else:
        scores.append(constants.SODIUM_SCORE_OVER_MAX)
    details.append(f"Sodium: {round(summary.sodium_mg)}mg (max: {round(sodium.max)}mg)")

    iron = targets.iron
    if summary.iron_mg > 0 and iron is not None:
        scores.append(
            score_nutrient(
                summary.iron_mg,
                NutrientRange(
                    min=iron.min,
                    max=iron.optimal * constants.IRON_SCORING_MAX_FACTOR,
                    optimal=iron.optimal,
                ),
            )
        )
        details.append(f"Iron: {summary.iron_mg}mg (target: {round(iron.optimal)}mg)")

    if scores:
        score = round(sum(scores) / len(scores))
    else:
        score = round(constants.MICRONUTRIENT_DEFAULT_SCORE)
    level = score_to_level(score)
    return ValidationCategory(
        level=level,
        score=score,
        message=f"Micronutrient profile is {level}",
        details=tuple(details),
    )


def _validate_timing(
    meals: list[MealItem], profile: AthleteProfile
) -> ValidationCategory:
    meal_types = {meal.meal_type for meal in meals}
    score = constants.TIMING_BASE_SCORE
    details: list[str] = []
    if profile.is_training_day:
        if MealType.PRE_WORKOUT in meal_types:
            score += constants.TIMING_WORKOUT_BONUS
            details.append("Pre-workout nutrition included")
        else:
            details.append("Consider adding pre-workout nutrition")
        if MealType.POST_WORKOUT in meal_types:
            score += constants.TIMING_WORKOUT_BONUS
            details.append("Post-workout recovery nutrition included")
        else:
            details.append("Post-workout nutrition recommended")
    level = score_to_level(score)
    return ValidationCategory(
        level=level,
        score=score,
        message=f"Meal timing is {level} for your training",
        details=tuple(details),
    )


def _validate_hydration(meals: list[MealItem]) -> ValidationCategory:
    # Placeholder signal: only checks whether any beverage is planned.
    has_beverage = any(meal.food.category == FoodCategory.BEVERAGES for meal in meals)
    if has_beverage:
        score = constants.HYDRATION_SCORE_WITH_BEVERAGE
    else:
        score = constants.HYDRATION_SCORE_WITHOUT_BEVERAGE
    return ValidationCategory(
        level=score_to_level(score),
        score=score,
        message="Remember to monitor hydration throughout the day",
        details=("Track fluid intake separately from food logging",),
    )


def _recommendations(
    summary: NutritionSummary, targets: NutritionTarget, profile: AthleteProfile
) -> tuple[NutritionRecommendation, ...]:
    recommendations: list[NutritionRecommendation] = []
    if summary.protein_g < targets.protein.min:
        missing = round(targets.protein.optimal - summary.protein_g)
        recommendations.append(
            NutritionRecommendation(
                type=RecommendationType.ADD_FOOD,
                priority=Priority.HIGH,
                title="Increase Protein Intake",
                description=f"Add {missing}g more protein",
                reasoning="Adequate protein supports muscle recovery and performance",
                expected_impact="Better recovery and muscle protein synthesis",
                suggested_foods=constants.PROTEIN_SUGGESTED_FOODS,
            )
        )
    if profile.is_training_day and summary.carbs_g < targets.carbs.min:
        recommendations.append(
            NutritionRecommendation(
                type=RecommendationType.ADD_FOOD,
                priority=Priority.HIGH,
                title="Increase Carbohydrate Intake",
                description="Add quality carbs to fuel your training",
                reasoning="Carbohydrates are essential for high-intensity training",
                expected_impact="Improved training performance and energy levels",
                suggested_foods=constants.CARBS_SUGGESTED_FOODS,
                target_meal=MealType.PRE_WORKOUT,
            )
        )
    if summary.fiber_g < targets.fiber.min:
        recommendations.append(
            NutritionRecommendation(
                type=RecommendationType.ADD_FOOD,
                priority=Priority.MEDIUM,
                title="Increase Fiber Intake",
                description="Add more vegetables and whole grains",
                reasoning="Fiber supports digestive health and nutrient absorption",
                expected_impact="Better digestion and sustained energy",
                suggested_foods=constants.FIBER_SUGGESTED_FOODS,
            )
        )
    return tuple(recommendations)


def _warnings(
    summary: NutritionSummary, targets: NutritionTarget
) -> tuple[NutritionWarning, ...]:
    warnings: list[NutritionWarning] = []
    if summary.sodium_mg > targets.sodium.max:
        warnings.append(
            NutritionWarning(
                type=WarningType.EXCESS,
                severity=Severity.WARNING,
                nutrient="sodium",
                message=(
                    f"Sodium intake ({round(summary.sodium_mg)}mg) exceeds "
                    "recommended maximum"
                ),
                recommendation="Reduce processed foods and added salt",
            )
        )
    if summary.calories < targets.calories.min * constants.LOW_CALORIE_WARNING_FACTOR:
        warnings.append(
            NutritionWarning(
                type=WarningType.DEFICIENCY,
                severity=Severity.ERROR,
                nutrient="calories",
                message="Calorie intake is dangerously low for an athlete",
                recommendation=(
                    "Increase overall food intake to support training demands"
                ),
            )
        )
    return tuple(warnings)
