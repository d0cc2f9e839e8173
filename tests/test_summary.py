"""Tests for meal nutrition aggregation."""

import pytest

from athlete_nutrition.domain.athletes import AthleteProfile
from athlete_nutrition.domain.foods import FoodPortion
from athlete_nutrition.domain.meals import MealItem, MealType
from athlete_nutrition.services.summary import (
    default_portion,
    find_portion,
    portion_nutrition,
    summarize,
    target_progress,
)
from tests.conftest import (
    BALANCED_MIX,
    MOCK_CHICKEN,
    MOCK_RICE,
    SALTY_BROTH,
    SPORTS_WATER,
    lunch,
    make_food,
    with_changes,
)


def test_summarize_chicken_and_rice(
    mock_meals: list[MealItem], strength_profile: AthleteProfile
) -> None:
    summary = summarize(mock_meals, strength_profile)

    assert summary.calories == pytest.approx(165 * 1.74 + 112 * 1.95, abs=1)
    assert summary.protein_g == pytest.approx(59.0)
    assert summary.carbs_g == pytest.approx(42.9)
    assert summary.fat_g == pytest.approx(8.0)
    assert summary.fiber_g == pytest.approx(3.5)
    assert summary.protein_per_kg == pytest.approx(0.7)
    assert summary.skipped_items == ()


def test_percentages_follow_calorie_shares(strength_profile: AthleteProfile) -> None:
    summary = summarize([lunch(BALANCED_MIX, "portion-100g")], strength_profile)

    assert summary.calories == 290
    assert summary.protein_percentage == pytest.approx(27.6)
    assert summary.carbs_percentage == pytest.approx(41.4)
    assert summary.fat_percentage == pytest.approx(31.0)
    total = (
        summary.protein_percentage
        + summary.carbs_percentage
        + summary.fat_percentage
    )
    assert total == pytest.approx(100, abs=0.5)


def test_quantity_scales_totals(strength_profile: AthleteProfile) -> None:
    single = summarize([lunch(BALANCED_MIX, "portion-100g")], strength_profile)
    double = summarize([lunch(BALANCED_MIX, "portion-100g", 2)], strength_profile)

    assert double.calories == 2 * single.calories
    assert double.protein_g == pytest.approx(2 * single.protein_g)
    assert double.iron_mg == pytest.approx(4.0)
    assert double.protein_percentage == single.protein_percentage


def test_empty_meals_give_zero_summary(strength_profile: AthleteProfile) -> None:
    summary = summarize([], strength_profile)

    assert summary.calories == 0
    assert summary.protein_percentage == 0
    assert summary.carbs_percentage == 0
    assert summary.fat_percentage == 0
    assert summary.protein_per_kg == 0


def test_zero_macro_food_has_zero_percentages(
    strength_profile: AthleteProfile,
) -> None:
    summary = summarize([lunch(SPORTS_WATER, "portion-100g", 5)], strength_profile)

    assert summary.calories == 0
    assert summary.protein_percentage == 0
    assert summary.carbs_percentage == 0
    assert summary.fat_percentage == 0


def test_unknown_portion_is_skipped(strength_profile: AthleteProfile) -> None:
    meals = [
        lunch(MOCK_CHICKEN, "portion-missing"),
        lunch(BALANCED_MIX, "portion-100g"),
    ]

    summary = summarize(meals, strength_profile)

    assert summary.calories == 290
    assert len(summary.skipped_items) == 1
    skipped = summary.skipped_items[0]
    assert skipped.food_id == MOCK_CHICKEN.id
    assert skipped.portion_id == "portion-missing"
    assert skipped.meal_type == MealType.LUNCH


def test_sodium_is_accumulated(strength_profile: AthleteProfile) -> None:
    summary = summarize([lunch(SALTY_BROTH, "portion-100g", 2)], strength_profile)

    assert summary.sodium_mg == 3000


def test_protein_per_kg_uses_clamped_weight(strength_profile: AthleteProfile) -> None:
    profile = with_changes(strength_profile, {"weight_kg": 0})

    summary = summarize([lunch(BALANCED_MIX, "portion-100g", 3)], profile)

    assert summary.protein_per_kg == pytest.approx(2.0)


def test_protein_per_kg_caps_heavy_weight(strength_profile: AthleteProfile) -> None:
    profile = with_changes(strength_profile, {"weight_kg": 400})

    summary = summarize([lunch(BALANCED_MIX, "portion-100g", 30)], profile)

    assert summary.protein_per_kg == pytest.approx(2.0)


def test_find_and_default_portion() -> None:
    assert find_portion(MOCK_RICE, "portion-cup") == MOCK_RICE.portions[1]
    assert find_portion(MOCK_RICE, "portion-bowl") is None
    assert default_portion(MOCK_RICE).id == "portion-100g"


def test_default_portion_falls_back_to_first() -> None:
    food = make_food(
        "no-default",
        portions=(
            FoodPortion(id="portion-slice", name="1 slice", grams=30),
            FoodPortion(id="portion-loaf", name="1 loaf", grams=500),
        ),
    )

    assert default_portion(food).id == "portion-slice"


def test_portion_nutrition() -> None:
    breast = MOCK_CHICKEN.portions[1]

    result = portion_nutrition(MOCK_CHICKEN, breast, 2)

    assert result.calories == round(165 * 1.74 * 2)
    assert result.protein_g == pytest.approx(107.9)
    assert result.carbs_g == 0


@pytest.mark.parametrize("quantity", [0, -1])
def test_portion_nutrition_non_positive_quantity(quantity: float) -> None:
    result = portion_nutrition(MOCK_RICE, MOCK_RICE.portions[0], quantity)

    assert (result.calories, result.protein_g, result.carbs_g, result.fat_g) == (
        0,
        0,
        0,
        0,
    )


@pytest.mark.parametrize(
    ("current", "target", "expected"),
    [
        (50, 200, 25.0),
        (300, 200, 100.0),
        (10, 0, 0.0),
        (10, -5, 0.0),
    ],
)
def test_target_progress(current: float, target: float, expected: float) -> None:
    assert target_progress(current, target) == pytest.approx(expected)
