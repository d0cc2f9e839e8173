"""Domain models for nutrition validation results."""

from dataclasses import dataclass
from enum import StrEnum

from athlete_nutrition.domain.meals import MealType


class ValidationLevel(StrEnum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"
    CRITICAL = "critical"


class RecommendationType(StrEnum):
    ADD_FOOD = "add_food"
    ADJUST_PORTION = "adjust_portion"
    TIMING = "timing"
    REPLACE_FOOD = "replace_food"
    HYDRATION = "hydration"


class Priority(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class WarningType(StrEnum):
    EXCESS = "excess"
    DEFICIENCY = "deficiency"
    IMBALANCE = "imbalance"
    TIMING = "timing"
    SAFETY = "safety"


class Severity(StrEnum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class ValidationCategory:
    """Score and feedback for one validation category."""

    level: ValidationLevel
    score: int
    message: str
    details: tuple[str, ...] = ()


@dataclass(frozen=True)
class ValidationCategories:
    """The five scored categories."""

    calories: ValidationCategory
    macros: ValidationCategory
    micronutrients: ValidationCategory
    timing: ValidationCategory
    hydration: ValidationCategory


@dataclass(frozen=True)
class NutritionRecommendation:
    """Actionable suggestion for improving a day of meals."""

    type: RecommendationType
    priority: Priority
    title: str
    description: str
    reasoning: str
    expected_impact: str
    suggested_foods: tuple[str, ...] = ()
    target_meal: MealType | None = None
    portion_adjustment: float | None = None


@dataclass(frozen=True)
class NutritionWarning:
    """Safety or balance warning for a nutrient."""

    type: WarningType
    severity: Severity
    nutrient: str
    message: str
    recommendation: str


@dataclass(frozen=True)
class ValidationResult:
    """Overall validation outcome for a list of meal items."""

    overall: ValidationLevel
    score: int
    categories: ValidationCategories
    recommendations: tuple[NutritionRecommendation, ...]
    warnings: tuple[NutritionWarning, ...]
