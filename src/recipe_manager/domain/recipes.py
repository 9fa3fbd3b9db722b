"""Recipe nutrition domain models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class IngredientNutrition:
    """Nutrition-relevant fields of a recipe ingredient."""

    name: str
    amount: str | float | None = None
    unit: str | None = None
    weight: float | None = None
    calories: float = 0.0
    protein: float = 0.0
    fat: float = 0.0
    carbohydrates: float = 0.0


@dataclass(frozen=True)
class NutritionTotals:
    """Macro totals together with the weight they apply to."""

    calories: float
    protein: float
    fat: float
    carbohydrates: float
    weight: float


@dataclass(frozen=True)
class MacroSplit:
    """Share of energy coming from each macronutrient, in percent."""

    protein_pct: float
    fat_pct: float
    carbs_pct: float


@dataclass(frozen=True)
class RecipeNutritionSummary:
    """Recipe totals, per-100 g and per-serving breakdown."""

    servings: int
    total: NutritionTotals
    per_100g: NutritionTotals
    per_serving: NutritionTotals
    split: MacroSplit
    recommendations: list[str] = field(default_factory=list)
