"""Domain models for the food catalog."""

from dataclasses import dataclass, field
from enum import StrEnum


class FoodCategory(StrEnum):
    """Top-level food category."""

    PROTEINS = "proteins"
    GRAINS = "grains"
    VEGETABLES = "vegetables"
    FRUITS = "fruits"
    DAIRY = "dairy"
    FATS = "fats"
    BEVERAGES = "beverages"
    SNACKS = "snacks"
    CONDIMENTS = "condiments"
    SUPPLEMENTS = "supplements"


class Allergen(StrEnum):
    """Common allergens tracked per food."""

    MILK = "milk"
    EGGS = "eggs"
    FISH = "fish"
    SHELLFISH = "shellfish"
    TREE_NUTS = "tree_nuts"
    PEANUTS = "peanuts"
    WHEAT = "wheat"
    SOY = "soy"
    SESAME = "sesame"


class DietaryTag(StrEnum):
    """Descriptive dietary tags."""

    HIGH_PROTEIN = "high_protein"
    LOW_CARB = "low_carb"
    HIGH_FIBER = "high_fiber"
    LOW_SODIUM = "low_sodium"
    ORGANIC = "organic"
    WHOLE_GRAIN = "whole_grain"
    LEAN = "lean"
    HEART_HEALTHY = "heart_healthy"


@dataclass(frozen=True)
class FoodNutrition:
    """Nutrition values per 100g of a food."""

    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    fiber_g: float | None = None
    sugar_g: float | None = None
    sodium_mg: float | None = None
    calcium_mg: float | None = None
    iron_mg: float | None = None
    vitamin_c_mg: float | None = None
    vitamin_d_iu: float | None = None


@dataclass(frozen=True)
class FoodPortion:
    """Named serving unit of a food, expressed in grams."""

    id: str
    name: str
    grams: float
    is_default: bool = False
    is_metric: bool | None = None
    description: str | None = None


@dataclass(frozen=True)
class DietaryInfo:
    """Dietary flags and allergens for a food."""

    vegetarian: bool
    vegan: bool
    gluten_free: bool
    dairy_free: bool
    nut_free: bool
    allergens: frozenset[Allergen] = field(default_factory=frozenset)
    tags: frozenset[DietaryTag] = field(default_factory=frozenset)


@dataclass(frozen=True)
class FoodItem:
    """A catalog food with per-100g nutrition and portions."""

    id: str
    name: str
    category: FoodCategory
    nutrition: FoodNutrition
    portions: tuple[FoodPortion, ...]
    dietary_info: DietaryInfo
    search_terms: tuple[str, ...] = ()
    brand: str | None = None
    subcategory: str | None = None
    verified: bool = False
    last_updated: str | None = None
