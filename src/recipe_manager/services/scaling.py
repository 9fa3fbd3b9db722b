"""Scaling of macro sets between weights."""

from recipe_manager.domain.nutrition import NutritionInfo

DEFAULT_BASE_WEIGHT = 100.0

PROTEIN_KCAL_PER_G = 4
CARBS_KCAL_PER_G = 4
FAT_KCAL_PER_G = 9


def scale_nutrition(  # noqa: PLR0913
    calories: float,
    protein: float,
    fat: float,
    carbohydrates: float,
    requested_weight: float,
    base_weight: float = DEFAULT_BASE_WEIGHT,
) -> NutritionInfo:
    """Scale macros defined over base_weight grams to requested_weight grams."""
    if base_weight <= 0:
        base_weight = DEFAULT_BASE_WEIGHT
    scale = requested_weight / base_weight
    return NutritionInfo(
        calories=round(calories * scale, 2),
        protein=round(protein * scale, 2),
        fat=round(fat * scale, 2),
        carbohydrates=round(carbohydrates * scale, 2),
        weight_grams=round(requested_weight, 2),
    )


def estimate_calories(protein: float, fat: float, carbohydrates: float) -> float:
    """Estimate energy from macros with the Atwater factors."""
    calories = (
        protein * PROTEIN_KCAL_PER_G
        + carbohydrates * CARBS_KCAL_PER_G
        + fat * FAT_KCAL_PER_G
    )
    return round(calories, 2)
