"""Dependency container wiring for the nutrition core."""

from collections.abc import Iterable
from dataclasses import dataclass

from athlete_nutrition.app_logging import configure_logging
from athlete_nutrition.config import Settings, parse_log_level
from athlete_nutrition.domain.foods import FoodItem
from athlete_nutrition.services.catalog import (
    CatalogReport,
    check_catalog,
    default_catalog,
)
from athlete_nutrition.services.search import FoodSearchEngine
from athlete_nutrition.services.targets import TargetCalculator
from athlete_nutrition.services.validator import NutritionValidator


@dataclass
class AppContainer:
    """Holds process-wide instances of the nutrition services."""

    settings: Settings
    foods: tuple[FoodItem, ...]
    catalog_report: CatalogReport
    search_engine: FoodSearchEngine
    target_calculator: TargetCalculator
    validator: NutritionValidator


def build_container(
    settings: Settings | None = None, foods: Iterable[FoodItem] | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    configure_logging(parse_log_level(resolved_settings.log_level))
    catalog = tuple(foods) if foods is not None else default_catalog()
    catalog_report = check_catalog(catalog)
    search_engine = FoodSearchEngine(
        catalog, default_max_results=resolved_settings.default_max_results
    )
    target_calculator = TargetCalculator(
        min_weight_kg=resolved_settings.min_weight_kg,
        max_weight_kg=resolved_settings.max_weight_kg,
        min_height_cm=resolved_settings.min_height_cm,
        max_height_cm=resolved_settings.max_height_cm,
        min_calories=resolved_settings.min_calories,
    )
    validator = NutritionValidator(calculator=target_calculator)

    return AppContainer(
        settings=resolved_settings,
        foods=catalog,
        catalog_report=catalog_report,
        search_engine=search_engine,
        target_calculator=target_calculator,
        validator=validator,
    )
