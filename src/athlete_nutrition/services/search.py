"""Indexed, filterable food search."""

import logging
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field

from athlete_nutrition import constants
from athlete_nutrition.domain.foods import Allergen, FoodCategory, FoodItem
from athlete_nutrition.domain.meals import MealType

_logger = logging.getLogger(__name__)


class DietaryRequirements(BaseModel):
    """Dietary flags a search result must satisfy when set."""

    model_config = ConfigDict(frozen=True)

    vegetarian: bool = False
    vegan: bool = False
    gluten_free: bool = False


class SearchOptions(BaseModel):
    """Optional filters for a food search."""

    model_config = ConfigDict(frozen=True)

    category: FoodCategory | None = None
    max_results: int | None = Field(default=None, ge=1)
    dietary_requirements: DietaryRequirements | None = None
    exclude_allergens: tuple[Allergen, ...] = ()


class FoodSearchEngine:
    """Inverted index over a food collection.

    The index maps lowercase tokens (name, search terms, category,
    subcategory) to the foods carrying them. It is built once and never
    mutated afterwards.
    """

    def __init__(self, foods: Iterable[FoodItem], default_max_results: int = 20):
        self._foods: tuple[FoodItem, ...] = tuple(foods)
        self._by_id: dict[str, FoodItem] = {}
        self._index: dict[str, list[FoodItem]] = {}
        self.default_max_results = default_max_results
        for food in self._foods:
            self._by_id.setdefault(food.id, food)
            self._add_to_index(food.name, food)
            for term in food.search_terms:
                self._add_to_index(term, food)
            self._add_to_index(food.category.value, food)
            if food.subcategory:
                self._add_to_index(food.subcategory, food)

    @property
    def foods(self) -> tuple[FoodItem, ...]:
        """Indexed foods in catalog order."""
        return self._foods

    def search(
        self, query: str, options: SearchOptions | None = None
    ) -> list[FoodItem]:
        """Return foods ranked by relevance to the query."""
        resolved = options or SearchOptions()
        limit = resolved.max_results or self.default_max_results
        terms = query.lower().split()
        if not terms:
            # Listing mode: only the category narrows an empty query.
            return [
                food
                for food in self._foods
                if resolved.category is None or food.category == resolved.category
            ][:limit]

        scores: dict[str, int] = {}
        candidates: dict[str, FoodItem] = {}
        for term in terms:
            for food in self._index.get(term, ()):
                candidates.setdefault(food.id, food)
                scores[food.id] = (
                    scores.get(food.id, 0) + constants.SEARCH_EXACT_MATCH_SCORE
                )
            for key, foods in self._index.items():
                if term not in key or key == term:
                    continue
                for food in foods:
                    candidates.setdefault(food.id, food)
                    scores[food.id] = (
                        scores.get(food.id, 0) + constants.SEARCH_PARTIAL_MATCH_SCORE
                    )

        ranked = sorted(
            (food for food in candidates.values() if _matches(food, resolved)),
            key=lambda food: scores[food.id],
            reverse=True,
        )
        _logger.debug(
            "Food search: query=%s candidates=%s results=%s",
            query,
            len(candidates),
            min(len(ranked), limit),
        )
        return ranked[:limit]

    def get_food_by_id(self, food_id: str) -> FoodItem | None:
        """Return a food by id, if present."""
        return self._by_id.get(food_id)

    def get_foods_by_category(self, category: FoodCategory) -> list[FoodItem]:
        """Return all foods in a category, in catalog order."""
        return [food for food in self._foods if food.category == category]

    def suggest_for_meal(
        self,
        meal_type: MealType,
        *,
        dietary_requirements: DietaryRequirements | None = None,
        exclude_allergens: tuple[Allergen, ...] = (),
        max_results: int = 6,
    ) -> list[FoodItem]:
        """Suggest foods typical for a meal slot."""
        query = constants.MEAL_SUGGESTION_QUERIES[meal_type]
        if not query:
            return []
        return self.search(
            query,
            SearchOptions(
                max_results=max_results,
                dietary_requirements=dietary_requirements,
                exclude_allergens=exclude_allergens,
            ),
        )

    def _add_to_index(self, key: str, food: FoodItem) -> None:
        self._index.setdefault(key.lower(), []).append(food)


def _matches(food: FoodItem, options: SearchOptions) -> bool:
    if options.category is not None and food.category != options.category:
        return False
    requirements = options.dietary_requirements
    if requirements is not None:
        info = food.dietary_info
        if requirements.vegetarian and not info.vegetarian:
            return False
        if requirements.vegan and not info.vegan:
            return False
        if requirements.gluten_free and not info.gluten_free:
            return False
    return not any(
        allergen in food.dietary_info.allergens
        for allergen in options.exclude_allergens
    )
