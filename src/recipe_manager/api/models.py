"""Pydantic models for the nutrition HTTP API."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NutritionLookupRequest(ApiModel):
    """Lookup request for one ingredient."""

    query: str = Field(min_length=1, max_length=200)
    weight_grams: float = Field(ge=0.1)


class NutritionLookupResponse(ApiModel):
    """Macros scaled to the requested weight."""

    calories: float
    protein: float
    fat: float
    carbohydrates: float
    weight_grams: float
    source: str | None = None
    reason: str | None = None


class NutritionLookupFailure(ApiModel):
    """Body returned when a lookup produced no data."""

    message: str
    query: str
    weight_grams: float
    hint: str


class NutritionSuggestion(ApiModel):
    """Autocomplete suggestion."""

    variant_name: str
    base_product: str
    display_name: str
    query_alias: str
    calories: float
    protein: float
    fat: float
    carbohydrates: float


class IngredientInput(ApiModel):
    """Ingredient values entered on the recipe form."""

    name: str = ""
    amount: str | float | None = None
    unit: str | None = None
    weight: float | None = None
    calories: float = Field(default=0.0, ge=0)
    protein: float = Field(default=0.0, ge=0)
    fat: float = Field(default=0.0, ge=0)
    carbohydrates: float = Field(default=0.0, ge=0)


class RecipeSummaryRequest(ApiModel):
    """Ingredients and servings of a recipe."""

    ingredients: list[IngredientInput] = Field(default_factory=list)
    servings: int = 1


class NutritionTotalsModel(ApiModel):
    """Macro totals for some weight."""

    calories: float
    protein: float
    fat: float
    carbohydrates: float
    weight: float


class MacroSplitModel(ApiModel):
    """Energy share per macro, in percent."""

    protein_pct: float
    fat_pct: float
    carbs_pct: float


class RecipeSummaryResponse(ApiModel):
    """Recipe nutrition breakdown."""

    servings: int
    total: NutritionTotalsModel
    per_100g: NutritionTotalsModel
    per_serving: NutritionTotalsModel
    split: MacroSplitModel
    recommendations: list[str]
