"""Tests for container wiring."""

from athlete_nutrition.config import Settings
from athlete_nutrition.containers import AppContainer, build_container
from tests.conftest import MOCK_CHICKEN, MOCK_RICE


def test_build_container_creates_services(container: AppContainer) -> None:
    assert container.search_engine.search("banana")
    assert container.catalog_report.passed
    assert container.validator.calculator is container.target_calculator
    assert len(container.foods) == container.catalog_report.food_count


def test_build_container_applies_settings() -> None:
    settings = Settings(
        environment="test",
        default_max_results=1,
        min_weight_kg=40,
        min_calories=1500,
    )

    container = build_container(settings, foods=[MOCK_CHICKEN, MOCK_RICE])

    assert container.foods == (MOCK_CHICKEN, MOCK_RICE)
    assert len(container.search_engine.search("")) == 1
    assert container.target_calculator.min_weight_kg == 40
    assert container.target_calculator.min_calories == 1500
