"""Shared test fixtures."""

import pytest

from athlete_nutrition.config import Settings
from athlete_nutrition.containers import AppContainer, build_container
from athlete_nutrition.domain.athletes import AthleteProfile
from athlete_nutrition.domain.foods import (
    Allergen,
    DietaryInfo,
    DietaryTag,
    FoodCategory,
    FoodItem,
    FoodNutrition,
    FoodPortion,
)
from athlete_nutrition.domain.meals import MealItem, MealType
from athlete_nutrition.services.catalog import default_catalog
from athlete_nutrition.services.search import FoodSearchEngine


def make_food(  # noqa: PLR0913
    food_id: str,
    *,
    name: str | None = None,
    category: FoodCategory = FoodCategory.PROTEINS,
    nutrition: FoodNutrition | None = None,
    portions: tuple[FoodPortion, ...] | None = None,
    allergens: frozenset[Allergen] = frozenset(),
    vegetarian: bool = True,
    vegan: bool = True,
    gluten_free: bool = True,
    search_terms: tuple[str, ...] = (),
) -> FoodItem:
    """Build a food item with sensible defaults for tests."""
    return FoodItem(
        id=food_id,
        name=name or food_id,
        category=category,
        nutrition=nutrition or FoodNutrition(calories=0, protein_g=0, carbs_g=0, fat_g=0),
        portions=portions
        or (FoodPortion(id="portion-100g", name="100g", grams=100, is_default=True),),
        dietary_info=DietaryInfo(
            vegetarian=vegetarian,
            vegan=vegan,
            gluten_free=gluten_free,
            dairy_free=Allergen.MILK not in allergens,
            nut_free=not ({Allergen.TREE_NUTS, Allergen.PEANUTS} & allergens),
            allergens=allergens,
        ),
        search_terms=search_terms,
    )


MOCK_CHICKEN = FoodItem(
    id="test-chicken",
    name="Test Chicken Breast",
    category=FoodCategory.PROTEINS,
    nutrition=FoodNutrition(calories=165, protein_g=31.0, carbs_g=0, fat_g=3.6),
    portions=(
        FoodPortion(id="portion-100g", name="100g", grams=100, is_default=True),
        FoodPortion(id="portion-breast", name="1 breast", grams=174),
    ),
    dietary_info=DietaryInfo(
        vegetarian=False,
        vegan=False,
        gluten_free=True,
        dairy_free=True,
        nut_free=True,
        tags=frozenset({DietaryTag.HIGH_PROTEIN, DietaryTag.LEAN}),
    ),
    search_terms=("chicken",),
    verified=True,
    last_updated="2025-01-22",
)

MOCK_RICE = FoodItem(
    id="test-rice",
    name="Test Brown Rice",
    category=FoodCategory.GRAINS,
    nutrition=FoodNutrition(
        calories=112, protein_g=2.6, carbs_g=22.0, fat_g=0.9, fiber_g=1.8
    ),
    portions=(
        FoodPortion(id="portion-100g", name="100g", grams=100, is_default=True),
        FoodPortion(id="portion-cup", name="1 cup", grams=195),
    ),
    dietary_info=DietaryInfo(
        vegetarian=True,
        vegan=True,
        gluten_free=True,
        dairy_free=True,
        nut_free=True,
        tags=frozenset({DietaryTag.WHOLE_GRAIN}),
    ),
    search_terms=("rice",),
    verified=True,
    last_updated="2025-01-22",
)

# Calories match the 4/4/9 factors exactly.
BALANCED_MIX = make_food(
    "balanced-mix",
    nutrition=FoodNutrition(
        calories=4 * 20 + 4 * 30 + 9 * 10,
        protein_g=20,
        carbs_g=30,
        fat_g=10,
        fiber_g=5,
        sodium_mg=100,
        iron_mg=2,
    ),
)

SALTY_BROTH = make_food(
    "salty-broth",
    category=FoodCategory.CONDIMENTS,
    nutrition=FoodNutrition(
        calories=10, protein_g=1, carbs_g=1, fat_g=0.2, sodium_mg=1500
    ),
)

SPORTS_WATER = make_food("sports-water", category=FoodCategory.BEVERAGES)


def with_changes(
    profile: AthleteProfile, changes: dict[str, object]
) -> AthleteProfile:
    """Return a re-validated copy of the profile with fields replaced."""
    return AthleteProfile.model_validate({**profile.model_dump(), **changes})


def lunch(food: FoodItem, portion_id: str, quantity: float = 1) -> MealItem:
    return MealItem(
        food=food, portion_id=portion_id, quantity=quantity, meal_type=MealType.LUNCH
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", log_level="DEBUG")


@pytest.fixture
def strength_profile() -> AthleteProfile:
    return AthleteProfile(
        age=25,
        gender="male",
        weight_kg=80,
        height_cm=180,
        sport="strength training",
        training_intensity="high",
        training_frequency=5,
        primary_goal="muscle_gain",
        is_training_day=True,
        meals_per_day=5,
    )


@pytest.fixture
def mock_meals() -> list[MealItem]:
    return [lunch(MOCK_CHICKEN, "portion-breast"), lunch(MOCK_RICE, "portion-cup")]


@pytest.fixture
def catalog() -> tuple[FoodItem, ...]:
    return default_catalog()


@pytest.fixture
def search_engine(catalog: tuple[FoodItem, ...]) -> FoodSearchEngine:
    return FoodSearchEngine(catalog)


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)
