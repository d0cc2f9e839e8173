"""Tests for the food search engine."""

import pytest
from pydantic import ValidationError

from athlete_nutrition.domain.foods import Allergen, FoodCategory, FoodItem
from athlete_nutrition.domain.meals import MealType
from athlete_nutrition.services.search import (
    DietaryRequirements,
    FoodSearchEngine,
    SearchOptions,
)
from tests.conftest import MOCK_CHICKEN, MOCK_RICE, make_food


def _ids(foods: list[FoodItem]) -> list[str]:
    return [food.id for food in foods]


def test_search_finds_chicken(search_engine: FoodSearchEngine) -> None:
    results = search_engine.search("chicken")

    assert results
    assert results[0].id == "chicken-breast-skinless"


def test_partial_query_matches(search_engine: FoodSearchEngine) -> None:
    results = search_engine.search("chick")

    assert "chicken-breast-skinless" in _ids(results)


def test_search_is_case_and_whitespace_insensitive(
    search_engine: FoodSearchEngine,
) -> None:
    expected = _ids(search_engine.search("chicken breast"))

    assert _ids(search_engine.search("  CHICKEN   Breast ")) == expected


def test_exact_match_outranks_partial() -> None:
    exact = make_food("exact", name="Plain", search_terms=("rice",))
    partial = make_food("partial", name="Ricecakes")
    engine = FoodSearchEngine([partial, exact])

    assert _ids(engine.search("rice")) == ["exact", "partial"]


def test_category_filter(search_engine: FoodSearchEngine) -> None:
    results = search_engine.search(
        "protein", SearchOptions(category=FoodCategory.DAIRY)
    )

    assert results
    assert all(food.category == FoodCategory.DAIRY for food in results)
    assert "greek-yogurt-plain-nonfat" in _ids(results)


def test_dietary_filters(search_engine: FoodSearchEngine) -> None:
    vegan = search_engine.search(
        "protein",
        SearchOptions(dietary_requirements=DietaryRequirements(vegan=True)),
    )
    gluten_free = search_engine.search(
        "grain",
        SearchOptions(dietary_requirements=DietaryRequirements(gluten_free=True)),
    )

    assert vegan
    assert all(food.dietary_info.vegan for food in vegan)
    assert "greek-yogurt-plain-nonfat" not in _ids(vegan)
    assert gluten_free
    assert all(food.dietary_info.gluten_free for food in gluten_free)


def test_excluded_allergens_are_filtered(search_engine: FoodSearchEngine) -> None:
    results = search_engine.search(
        "milk", SearchOptions(exclude_allergens=(Allergen.MILK,))
    )

    assert "milk-whole" not in _ids(results)
    assert all(Allergen.MILK not in food.dietary_info.allergens for food in results)


def test_empty_query_lists_filtered_catalog(search_engine: FoodSearchEngine) -> None:
    results = search_engine.search("", SearchOptions(category=FoodCategory.GRAINS))

    assert results == search_engine.get_foods_by_category(FoodCategory.GRAINS)
    assert len(results) == 4


def test_whitespace_query_filters_by_category_only(
    search_engine: FoodSearchEngine,
) -> None:
    results = search_engine.search(
        "   ",
        SearchOptions(
            category=FoodCategory.PROTEINS,
            dietary_requirements=DietaryRequirements(vegetarian=True),
            exclude_allergens=(Allergen.EGGS,),
        ),
    )

    assert _ids(results) == [
        "chicken-breast-skinless",
        "salmon-atlantic-wild",
        "egg-whole-large",
        "almonds-raw",
    ]


def test_max_results(search_engine: FoodSearchEngine) -> None:
    assert len(search_engine.search("", SearchOptions(max_results=3))) == 3
    assert len(search_engine.search("")) == 20
    assert len(search_engine.foods) == 21


def test_default_max_results_is_configurable(catalog: tuple[FoodItem, ...]) -> None:
    engine = FoodSearchEngine(catalog, default_max_results=5)

    assert len(engine.search("")) == 5


def test_invalid_max_results_rejected() -> None:
    with pytest.raises(ValidationError):
        SearchOptions(max_results=0)


def test_unknown_query_returns_nothing(search_engine: FoodSearchEngine) -> None:
    assert search_engine.search("zzzz") == []


def test_empty_engine() -> None:
    engine = FoodSearchEngine([])

    assert engine.search("chicken") == []
    assert engine.search("") == []
    assert engine.get_food_by_id("chicken") is None


def test_get_food_by_id(search_engine: FoodSearchEngine) -> None:
    food = search_engine.get_food_by_id("banana-medium")

    assert food is not None
    assert food.category == FoodCategory.FRUITS
    assert search_engine.get_food_by_id("dragonfruit") is None


def test_get_foods_by_category() -> None:
    engine = FoodSearchEngine([MOCK_CHICKEN, MOCK_RICE])

    assert engine.get_foods_by_category(FoodCategory.GRAINS) == [MOCK_RICE]
    assert engine.get_foods_by_category(FoodCategory.FRUITS) == []


def test_category_name_is_searchable() -> None:
    engine = FoodSearchEngine([MOCK_CHICKEN, MOCK_RICE])

    assert _ids(engine.search("grains")) == ["test-rice"]


def test_suggest_for_breakfast(search_engine: FoodSearchEngine) -> None:
    results = search_engine.suggest_for_meal(MealType.BREAKFAST)

    assert results
    assert len(results) <= 6
    assert "oats-rolled-dry" in _ids(results)


def test_suggest_for_breakfast_respects_restrictions(
    search_engine: FoodSearchEngine,
) -> None:
    results = search_engine.suggest_for_meal(
        MealType.BREAKFAST,
        dietary_requirements=DietaryRequirements(vegan=True),
        exclude_allergens=(Allergen.MILK,),
    )

    assert all(food.dietary_info.vegan for food in results)
    assert "greek-yogurt-plain-nonfat" not in _ids(results)


@pytest.mark.parametrize("meal_type", [MealType.PRE_WORKOUT, MealType.POST_WORKOUT])
def test_workout_slots_have_no_suggestions(
    search_engine: FoodSearchEngine, meal_type: MealType
) -> None:
    assert search_engine.suggest_for_meal(meal_type) == []
