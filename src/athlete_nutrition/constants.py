"""Empirical multipliers and thresholds used by targets and scoring."""

from athlete_nutrition.domain.athletes import PrimaryGoal, TrainingIntensity
from athlete_nutrition.domain.meals import MealType
from athlete_nutrition.domain.validation import ValidationLevel

KCAL_PER_G_PROTEIN = 4.0
KCAL_PER_G_CARBS = 4.0
KCAL_PER_G_FAT = 9.0

# (training day, rest day)
ACTIVITY_FACTORS: dict[TrainingIntensity, tuple[float, float]] = {
    TrainingIntensity.LOW: (1.6, 1.4),
    TrainingIntensity.MODERATE: (1.8, 1.5),
    TrainingIntensity.HIGH: (2.0, 1.6),
    TrainingIntensity.EXTREME: (2.2, 1.8),
}

GOAL_FACTORS: dict[PrimaryGoal, float] = {
    PrimaryGoal.WEIGHT_LOSS: 0.85,
    PrimaryGoal.MUSCLE_GAIN: 1.15,
    PrimaryGoal.PERFORMANCE: 1.0,
    PrimaryGoal.MAINTENANCE: 1.0,
    PrimaryGoal.RECOVERY: 1.05,
}

CALORIE_RANGE = (0.9, 1.1)
PROTEIN_RANGE = (0.8, 1.3)
CARBS_RANGE = (0.7, 1.3)
FAT_MAX_FACTOR = 1.5
FAT_MIN_G_PER_KG = 0.8

STRENGTH_SPORT_KEYWORDS = ("strength", "power")
ENDURANCE_SPORT_KEYWORDS = ("endurance",)
PROTEIN_G_PER_KG_STRENGTH = 2.0
PROTEIN_G_PER_KG_STRENGTH_GAIN = 2.2
PROTEIN_G_PER_KG_ENDURANCE_TRAINING = 1.6
PROTEIN_G_PER_KG_ENDURANCE_REST = 1.4
PROTEIN_G_PER_KG_GENERAL = 1.6
PROTEIN_G_PER_KG_GENERAL_GAIN = 2.0

CARBS_G_PER_KG_REST = 3.0
CARBS_G_PER_KG_TRAINING: dict[TrainingIntensity, float] = {
    TrainingIntensity.LOW: 4.0,
    TrainingIntensity.MODERATE: 5.0,
    TrainingIntensity.HIGH: 6.0,
    TrainingIntensity.EXTREME: 8.0,
}

FIBER_MIN_G = 25.0
FIBER_OPTIMAL_G = 35.0
SODIUM_MAX_MG = 2300.0
SODIUM_OPTIMAL_MG = 1500.0
# (male, female/other)
IRON_MIN_MG = (8.0, 18.0)
IRON_OPTIMAL_MG = (12.0, 25.0)
CALCIUM_MIN_MG = 1000.0
CALCIUM_OPTIMAL_MG = 1200.0
VITAMIN_D_MIN_IU = 600.0
VITAMIN_D_OPTIMAL_IU = 1000.0
VITAMIN_C_MIN_MG = (90.0, 75.0)
VITAMIN_C_OPTIMAL_MG = 200.0

MIN_AGE = 0
MAX_AGE = 100

# Ordered from best to worst; first threshold met wins.
LEVEL_THRESHOLDS: tuple[tuple[float, ValidationLevel], ...] = (
    (90.0, ValidationLevel.EXCELLENT),
    (75.0, ValidationLevel.GOOD),
    (60.0, ValidationLevel.FAIR),
    (40.0, ValidationLevel.POOR),
)

CATEGORY_WEIGHTS: dict[str, float] = {
    "calories": 0.25,
    "macros": 0.35,
    "micronutrients": 0.20,
    "timing": 0.15,
    "hydration": 0.05,
}

CALORIE_SCORE_IN_RANGE = 95
CALORIE_SCORE_CLOSE = 80
CALORIE_SCORE_OFF = 60
CALORIE_SCORE_FAR = 30
CALORIE_CLOSE_BAND = (0.8, 1.2)
CALORIE_OFF_BAND = (0.6, 1.4)

NUTRIENT_SCORE_FLOOR_IN_RANGE = 85.0
NUTRIENT_DISTANCE_PENALTY = 50.0
NUTRIENT_SCORE_CLOSE = 75.0
NUTRIENT_SCORE_OFF = 50.0
NUTRIENT_SCORE_FAR = 25.0
NUTRIENT_CLOSE_BAND = (0.8, 1.2)
NUTRIENT_OFF_BAND = (0.6, 1.5)

FIBER_SCORING_MAX_FACTOR = 1.5
IRON_SCORING_MAX_FACTOR = 2.0
SODIUM_SCORE_OPTIMAL = 100.0
SODIUM_SCORE_UNDER_MAX = 80.0
SODIUM_SCORE_OVER_MAX = 40.0
MICRONUTRIENT_DEFAULT_SCORE = 80.0

TIMING_BASE_SCORE = 70
TIMING_WORKOUT_BONUS = 15

HYDRATION_SCORE_WITH_BEVERAGE = 90
HYDRATION_SCORE_WITHOUT_BEVERAGE = 60

LOW_CALORIE_WARNING_FACTOR = 0.7

PROTEIN_SUGGESTED_FOODS = ("chicken-breast-skinless", "greek-yogurt-plain-nonfat")
CARBS_SUGGESTED_FOODS = ("quinoa-cooked", "banana-medium")
FIBER_SUGGESTED_FOODS = ("broccoli-raw", "brown-rice-cooked")

SEARCH_EXACT_MATCH_SCORE = 10
SEARCH_PARTIAL_MATCH_SCORE = 5
MEAL_SUGGESTION_QUERIES: dict[MealType, str] = {
    MealType.BREAKFAST: "breakfast cereal oats egg yogurt",
    MealType.LUNCH: "sandwich salad soup chicken",
    MealType.DINNER: "chicken fish beef rice pasta",
    MealType.SNACK: "fruit nuts yogurt",
    MealType.PRE_WORKOUT: "",
    MealType.POST_WORKOUT: "",
}

MAX_PORTION_GRAMS = 10000.0
CALORIE_CONSISTENCY_TOLERANCE = 0.15
