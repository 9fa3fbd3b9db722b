"""Recipe-level nutrition totals built from ingredient values."""

from dataclasses import dataclass

from recipe_manager.domain.recipes import (
    IngredientNutrition,
    MacroSplit,
    NutritionTotals,
    RecipeNutritionSummary,
)
from recipe_manager.services.scaling import (
    CARBS_KCAL_PER_G,
    DEFAULT_BASE_WEIGHT,
    FAT_KCAL_PER_G,
    PROTEIN_KCAL_PER_G,
)

UNIT_TO_GRAMS: dict[str, float] = {
    "g": 1.0,
    "kg": 1000.0,
    "ml": 1.0,
    "l": 1000.0,
    "tsp": 5.0,
    "tbsp": 15.0,
    "cup": 240.0,
}

LOW_PROTEIN_PCT = 15
HIGH_PROTEIN_PCT = 35
LOW_FAT_PCT = 20
HIGH_FAT_PCT = 40
LOW_CARBS_PCT = 30
LOW_CALORIE_SERVING = 200
HIGH_CALORIE_SERVING = 600


def unit_to_grams(amount: str | float | None, unit: str | None) -> float:
    """Convert an amount in a kitchen unit to grams; unknown units count as grams."""
    if amount is None:
        return 0.0
    try:
        value = float(str(amount).strip().replace(",", "."))
    except ValueError:
        return 0.0
    if value != value or value <= 0:  # NaN
        return 0.0
    return value * UNIT_TO_GRAMS.get((unit or "").strip().lower(), 1.0)


def resolve_ingredient_weight(ingredient: IngredientNutrition) -> float:
    """Prefer the explicit weight, otherwise derive it from amount and unit."""
    if ingredient.weight is not None and ingredient.weight > 0:
        return ingredient.weight
    return unit_to_grams(ingredient.amount, ingredient.unit)


@dataclass
class RecipeNutritionService:
    """Computes recipe totals, per-100 g and per-serving values."""

    def summarize(
        self, ingredients: list[IngredientNutrition], servings: int = 1
    ) -> RecipeNutritionSummary:
        """Aggregate ingredient macros into a recipe summary."""
        total = NutritionTotals(
            calories=sum(item.calories for item in ingredients),
            protein=sum(item.protein for item in ingredients),
            fat=sum(item.fat for item in ingredients),
            carbohydrates=sum(item.carbohydrates for item in ingredients),
            weight=sum(resolve_ingredient_weight(item) for item in ingredients),
        )
        servings_count = max(servings, 1)
        per_serving = _per_serving(total, servings_count)
        split = _macro_split(per_serving)
        return RecipeNutritionSummary(
            servings=servings_count,
            total=_round_totals(total, 2),
            per_100g=_per_100g(total),
            per_serving=per_serving,
            split=split,
            recommendations=_recommendations(per_serving, split),
        )


def _round_totals(totals: NutritionTotals, digits: int) -> NutritionTotals:
    return NutritionTotals(
        calories=round(totals.calories, digits),
        protein=round(totals.protein, digits),
        fat=round(totals.fat, digits),
        carbohydrates=round(totals.carbohydrates, digits),
        weight=round(totals.weight, digits),
    )


def _per_100g(total: NutritionTotals) -> NutritionTotals:
    weight = total.weight if total.weight > 0 else DEFAULT_BASE_WEIGHT
    factor = DEFAULT_BASE_WEIGHT / weight
    return NutritionTotals(
        calories=round(total.calories * factor, 2),
        protein=round(total.protein * factor, 2),
        fat=round(total.fat * factor, 2),
        carbohydrates=round(total.carbohydrates * factor, 2),
        weight=DEFAULT_BASE_WEIGHT,
    )


def _per_serving(total: NutritionTotals, servings: int) -> NutritionTotals:
    return NutritionTotals(
        calories=round(total.calories / servings, 1),
        protein=round(total.protein / servings, 1),
        fat=round(total.fat / servings, 1),
        carbohydrates=round(total.carbohydrates / servings, 1),
        weight=round(total.weight / servings, 0),
    )


def _macro_split(per_serving: NutritionTotals) -> MacroSplit:
    """Energy share of each macro relative to the serving's calories."""
    energy = per_serving.calories or 1
    return MacroSplit(
        protein_pct=round(per_serving.protein * PROTEIN_KCAL_PER_G / energy * 100, 1),
        fat_pct=round(per_serving.fat * FAT_KCAL_PER_G / energy * 100, 1),
        carbs_pct=round(
            per_serving.carbohydrates * CARBS_KCAL_PER_G / energy * 100, 1
        ),
    )


def _recommendations(per_serving: NutritionTotals, split: MacroSplit) -> list[str]:
    codes: list[str] = []
    if split.protein_pct < LOW_PROTEIN_PCT:
        codes.append("low-protein")
    elif split.protein_pct > HIGH_PROTEIN_PCT:
        codes.append("high-protein")
    if split.fat_pct < LOW_FAT_PCT:
        codes.append("low-fat")
    elif split.fat_pct > HIGH_FAT_PCT:
        codes.append("high-fat")
    if split.carbs_pct < LOW_CARBS_PCT:
        codes.append("low-carb")
    if per_serving.calories < LOW_CALORIE_SERVING:
        codes.append("low-calorie")
    elif per_serving.calories > HIGH_CALORIE_SERVING:
        codes.append("high-calorie")
    return codes
