"""Tests for nutrition scaling helpers."""

import math

from recipe_manager.services.scaling import estimate_calories, scale_nutrition


def test_scale_from_100g() -> None:
    info = scale_nutrition(89, 1.1, 0.3, 23, 150)

    assert info.calories == 133.5
    assert info.protein == 1.65
    assert info.fat == 0.45
    assert info.carbohydrates == 34.5
    assert info.weight_grams == 150


def test_scale_with_custom_base() -> None:
    info = scale_nutrition(200, 10, 5, 20, requested_weight=50, base_weight=200)

    assert info.calories == 50
    assert info.protein == 2.5
    assert info.fat == 1.25
    assert info.carbohydrates == 5


def test_scale_non_positive_base_falls_back_to_100() -> None:
    zero = scale_nutrition(100, 10, 10, 10, requested_weight=200, base_weight=0)
    negative = scale_nutrition(100, 10, 10, 10, requested_weight=200, base_weight=-5)

    assert zero.calories == 200
    assert negative == zero


def test_scale_rounds_weight() -> None:
    info = scale_nutrition(100, 0, 0, 0, requested_weight=33.3333)

    assert info.weight_grams == 33.33
    assert info.calories == 33.33


def test_scale_round_trip() -> None:
    for weight in (25, 150, 333, 1000):
        there = scale_nutrition(250, 12.5, 8.25, 31, weight)
        back = scale_nutrition(
            there.calories,
            there.protein,
            there.fat,
            there.carbohydrates,
            requested_weight=100,
            base_weight=weight,
        )
        assert math.isclose(back.calories, 250, abs_tol=0.05)
        assert math.isclose(back.protein, 12.5, abs_tol=0.05)
        assert math.isclose(back.fat, 8.25, abs_tol=0.05)
        assert math.isclose(back.carbohydrates, 31, abs_tol=0.05)


def test_estimate_calories_atwater() -> None:
    assert estimate_calories(protein=26, fat=14, carbohydrates=0) == 230
    assert estimate_calories(protein=1.1, fat=0.3, carbohydrates=23) == 99.1
