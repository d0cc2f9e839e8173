"""Food catalog loading and integrity checks."""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from pydantic import ValidationError

from athlete_nutrition import constants
from athlete_nutrition.catalog.records import FoodRecord
from athlete_nutrition.catalog.static_foods import CATALOG_VERSION, FOOD_RECORDS
from athlete_nutrition.domain.foods import Allergen, FoodItem

_logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Raised when a catalog record cannot be loaded."""


@dataclass
class CatalogReport:
    """Outcome of a catalog integrity check."""

    food_count: int = 0
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        """True when the check found no errors."""
        return not self.errors


def load_catalog(records: Iterable[Mapping[str, object]]) -> tuple[FoodItem, ...]:
    """Validate raw records and convert them to domain foods."""
    foods: list[FoodItem] = []
    for index, record in enumerate(records):
        try:
            parsed = FoodRecord.model_validate(record)
        except ValidationError as exc:
            label = record.get("id") if isinstance(record, Mapping) else None
            raise CatalogError(
                f"Invalid food record #{index} ({label or 'no id'}): {exc}"
            ) from exc
        foods.append(parsed.to_domain())
    return tuple(foods)


def default_catalog() -> tuple[FoodItem, ...]:
    """Load the bundled food catalog."""
    _logger.debug("Loading bundled catalog version %s", CATALOG_VERSION)
    return load_catalog(FOOD_RECORDS)


def check_catalog(foods: Iterable[FoodItem]) -> CatalogReport:
    """Check data integrity of a loaded catalog and log the findings."""
    report = CatalogReport()
    seen_ids: set[str] = set()
    for food in foods:
        report.food_count += 1
        _check_identity(food, seen_ids, report)
        _check_portions(food, report)
        _check_dietary_flags(food, report)
        _check_search_terms(food, report)
        _check_calories(food, report)

    for message in report.errors:
        _logger.error("Catalog check: %s", message)
    for message in report.warnings:
        _logger.warning("Catalog check: %s", message)
    _logger.info(
        "Catalog check: foods=%s errors=%s warnings=%s",
        report.food_count,
        len(report.errors),
        len(report.warnings),
    )
    return report


def _check_identity(food: FoodItem, seen_ids: set[str], report: CatalogReport) -> None:
    if not food.id or not food.name:
        report.errors.append(f"Food {food.id!r} is missing an id or name")
    if food.id in seen_ids:
        report.errors.append(f"Duplicate food id {food.id!r}")
    seen_ids.add(food.id)


def _check_portions(food: FoodItem, report: CatalogReport) -> None:
    if not food.portions:
        report.errors.append(f"Food {food.name!r} has no portions")
        return
    defaults = [portion for portion in food.portions if portion.is_default]
    if not defaults:
        report.warnings.append(f"Food {food.name!r} has no default portion")
    elif len(defaults) > 1:
        report.errors.append(f"Food {food.name!r} has more than one default portion")
    portion_ids = [portion.id for portion in food.portions]
    if len(set(portion_ids)) != len(portion_ids):
        report.errors.append(f"Food {food.name!r} has duplicate portion ids")
    for portion in food.portions:
        if not 0 < portion.grams < constants.MAX_PORTION_GRAMS:
            report.errors.append(
                f"Portion {portion.id!r} of {food.name!r} has invalid grams "
                f"{portion.grams}"
            )


def _check_dietary_flags(food: FoodItem, report: CatalogReport) -> None:
    info = food.dietary_info
    if info.vegan and not info.vegetarian:
        report.errors.append(f"Food {food.name!r} is vegan but not vegetarian")
    if (Allergen.MILK in info.allergens) == info.dairy_free:
        report.errors.append(
            f"Food {food.name!r} has inconsistent dairy-free flag and milk allergen"
        )
    if Allergen.WHEAT in info.allergens and info.gluten_free:
        report.errors.append(f"Food {food.name!r} contains wheat but is gluten-free")
    has_nuts = bool({Allergen.TREE_NUTS, Allergen.PEANUTS} & info.allergens)
    if has_nuts and info.nut_free:
        report.errors.append(f"Food {food.name!r} contains nuts but is nut-free")


def _check_search_terms(food: FoodItem, report: CatalogReport) -> None:
    terms = food.search_terms
    if any(term != term.lower() for term in terms):
        report.errors.append(f"Food {food.name!r} has non-lowercase search terms")
    if len(set(terms)) != len(terms):
        report.errors.append(f"Food {food.name!r} has duplicate search terms")


def _check_calories(food: FoodItem, report: CatalogReport) -> None:
    nutrition = food.nutrition
    calculated = (
        nutrition.protein_g * constants.KCAL_PER_G_PROTEIN
        + nutrition.carbs_g * constants.KCAL_PER_G_CARBS
        + nutrition.fat_g * constants.KCAL_PER_G_FAT
    )
    tolerance = nutrition.calories * constants.CALORIE_CONSISTENCY_TOLERANCE
    if abs(nutrition.calories - calculated) > tolerance:
        report.warnings.append(
            f"Food {food.name!r} lists {nutrition.calories} kcal but macros "
            f"give {round(calculated)} kcal"
        )
