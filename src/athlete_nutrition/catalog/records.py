"""Pydantic models for raw food catalog records."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from athlete_nutrition.domain.foods import (
    Allergen,
    DietaryInfo,
    DietaryTag,
    FoodCategory,
    FoodItem,
    FoodNutrition,
    FoodPortion,
)

_RECORD_CONFIG = ConfigDict(
    alias_generator=to_camel, populate_by_name=True, extra="ignore"
)


class NutritionRecord(BaseModel):
    """Per-100g nutrition payload."""

    model_config = _RECORD_CONFIG

    calories: float = Field(ge=0.0)
    protein: float = Field(ge=0.0)
    carbs: float = Field(ge=0.0)
    fat: float = Field(ge=0.0)
    fiber: float | None = Field(default=None, ge=0.0)
    sugar: float | None = Field(default=None, ge=0.0)
    sodium: float | None = Field(default=None, ge=0.0)
    calcium: float | None = Field(default=None, ge=0.0)
    iron: float | None = Field(default=None, ge=0.0)
    vitamin_c: float | None = Field(default=None, ge=0.0)
    vitamin_d: float | None = Field(default=None, ge=0.0)


class PortionRecord(BaseModel):
    """Portion payload."""

    model_config = _RECORD_CONFIG

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    grams: float = Field(gt=0.0)
    is_default: bool = False
    is_metric: bool | None = None
    description: str | None = None


class DietaryInfoRecord(BaseModel):
    """Dietary flags payload."""

    model_config = _RECORD_CONFIG

    vegetarian: bool
    vegan: bool
    gluten_free: bool
    dairy_free: bool
    nut_free: bool
    allergens: list[Allergen] = Field(default_factory=list)
    tags: list[DietaryTag] = Field(default_factory=list)


class FoodRecord(BaseModel):
    """Catalog food payload."""

    model_config = _RECORD_CONFIG

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    brand: str | None = None
    category: FoodCategory
    subcategory: str | None = None
    nutrition: NutritionRecord
    portions: list[PortionRecord] = Field(min_length=1)
    dietary_info: DietaryInfoRecord
    search_terms: list[str] = Field(default_factory=list)
    verified: bool = False
    last_updated: str | None = None

    def to_domain(self) -> FoodItem:
        """Convert the record into an immutable domain food."""
        nutrition = self.nutrition
        info = self.dietary_info
        return FoodItem(
            id=self.id,
            name=self.name,
            brand=self.brand,
            category=self.category,
            subcategory=self.subcategory,
            nutrition=FoodNutrition(
                calories=nutrition.calories,
                protein_g=nutrition.protein,
                carbs_g=nutrition.carbs,
                fat_g=nutrition.fat,
                fiber_g=nutrition.fiber,
                sugar_g=nutrition.sugar,
                sodium_mg=nutrition.sodium,
                calcium_mg=nutrition.calcium,
                iron_mg=nutrition.iron,
                vitamin_c_mg=nutrition.vitamin_c,
                vitamin_d_iu=nutrition.vitamin_d,
            ),
            portions=tuple(
                FoodPortion(
                    id=portion.id,
                    name=portion.name,
                    grams=portion.grams,
                    is_default=portion.is_default,
                    is_metric=portion.is_metric,
                    description=portion.description,
                )
                for portion in self.portions
            ),
            dietary_info=DietaryInfo(
                vegetarian=info.vegetarian,
                vegan=info.vegan,
                gluten_free=info.gluten_free,
                dairy_free=info.dairy_free,
                nut_free=info.nut_free,
                allergens=frozenset(info.allergens),
                tags=frozenset(info.tags),
            ),
            search_terms=tuple(self.search_terms),
            verified=self.verified,
            last_updated=self.last_updated,
        )
