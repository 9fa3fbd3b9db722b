"""Nutrition lookup: local dictionary first, then the external API."""

import logging
import math
from dataclasses import dataclass

import httpx

from recipe_manager.adapters.nutrition_api_client import NutritionApiClient
from recipe_manager.domain.nutrition import (
    DictionarySuggestion,
    LookupResult,
    LookupStatus,
    NutritionInfo,
    QueryVariant,
)
from recipe_manager.services.matching import DictionaryMatcher
from recipe_manager.services.query_variants import (
    PRIMARY_REASON,
    build_query_variants,
    format_weight,
)
from recipe_manager.services.scaling import (
    DEFAULT_BASE_WEIGHT,
    estimate_calories,
    scale_nutrition,
)

MIN_SUGGESTIONS = 1
MAX_SUGGESTIONS = 10

_logger = logging.getLogger(__name__)


@dataclass
class _Attempt:
    """Outcome of a single external request."""

    info: NutritionInfo | None = None
    failed: bool = False


@dataclass
class NutritionService:
    """Resolves free-text food queries into macros for a given weight."""

    matcher: DictionaryMatcher
    api_client: NutritionApiClient | None = None

    def suggest(self, query: str | None, limit: int = 5) -> list[DictionarySuggestion]:
        """Return dictionary suggestions for autocomplete."""
        if not query or not query.strip():
            return []
        clamped = min(max(limit, MIN_SUGGESTIONS), MAX_SUGGESTIONS)
        return self.matcher.suggest(query, clamped)

    async def lookup(self, query: str, weight_grams: float) -> NutritionInfo | None:
        """Return macros for the requested weight, or None when nothing matched."""
        result = await self.lookup_detailed(query, weight_grams)
        return result.info

    async def lookup_detailed(  # noqa: PLR0911
        self, query: str, weight_grams: float
    ) -> LookupResult:
        """Resolve a query and report how the answer was obtained."""
        if weight_grams <= 0:
            _logger.warning("Weight is %s g, must be > 0", weight_grams)
            return LookupResult(status=LookupStatus.NOT_FOUND)
        if not query or not query.strip():
            _logger.warning("Nutrition lookup query is empty")
            return LookupResult(status=LookupStatus.NOT_FOUND)

        match = self.matcher.find_best_match(query)
        if match is not None:
            reason = f"dictionary/{match.variant_name}"
            _logger.info(
                "Nutrition dictionary match for %r: %s", query, match.variant_name
            )
            info = scale_nutrition(
                match.calories,
                match.protein,
                match.fat,
                match.carbohydrates,
                weight_grams,
            )
            _log_result(reason, info)
            return LookupResult(
                status=LookupStatus.FOUND,
                info=info,
                source="dictionary",
                reason=reason,
            )

        if self.api_client is None:
            _logger.debug("External nutrition lookup disabled; no API key")
            return LookupResult(status=LookupStatus.UNAVAILABLE)

        variants = build_query_variants(query, weight_grams)
        if not variants:
            _logger.warning("No query variants could be generated for %r", query)
            return LookupResult(status=LookupStatus.NOT_FOUND)

        _logger.info(
            "Nutrition lookup started for %r (%s variants)", query, len(variants)
        )
        failures = 0
        for attempts, variant in enumerate(variants, start=1):
            attempt = await _try_variant(self.api_client, variant, weight_grams)
            if attempt.failed:
                failures += 1
            if attempt.info is not None:
                if not variant.reason.startswith(PRIMARY_REASON):
                    _logger.info(
                        "Nutrition lookup succeeded via fallback %r", variant.reason
                    )
                return LookupResult(
                    status=LookupStatus.FOUND,
                    info=attempt.info,
                    source="external",
                    reason=variant.reason,
                    attempts=attempts,
                )

        _logger.warning(
            "All nutrition lookup attempts failed for %r (%s g, %s errors)",
            query,
            weight_grams,
            failures,
        )
        status = LookupStatus.UNAVAILABLE if failures else LookupStatus.NOT_FOUND
        return LookupResult(status=status, attempts=len(variants))


async def _try_variant(
    client: NutritionApiClient, variant: QueryVariant, requested_weight: float
) -> _Attempt:
    """Run one external request; every expected failure becomes a miss."""
    request_query = (
        f"{format_weight(variant.query_weight)} grams {variant.product_query}"
    ).strip()
    _logger.info("Nutrition API lookup: %s => %s", variant.reason, request_query)

    try:
        items = await client.fetch_nutrition(request_query)
    except httpx.HTTPError as exc:
        _logger.warning(
            "Nutrition API request failed for %s (status=%s): %s",
            variant.reason,
            _status_code_from_exception(exc),
            exc,
        )
        return _Attempt(failed=True)
    except ValueError as exc:
        _logger.warning(
            "Failed to parse nutrition API response for %s: %s",
            variant.reason,
            exc,
        )
        return _Attempt(failed=True)

    if not items:
        _logger.warning("Nutrition API returned no items for %s", variant.reason)
        return _Attempt()

    info = _scale_item(items[0], variant, requested_weight)
    _log_result(variant.reason, info)
    return _Attempt(info=info)


def _scale_item(
    item: dict[str, object], variant: QueryVariant, requested_weight: float
) -> NutritionInfo:
    """Turn the first API item into macros for the originally requested weight."""
    calories = _coerce_number(item.get("calories"))
    protein = _coerce_number(item.get("protein_g"))
    fat = _coerce_number(item.get("fat_total_g"))
    carbohydrates = _coerce_number(item.get("carbohydrates_total_g"))

    if calories <= 0 and (protein > 0 or fat > 0 or carbohydrates > 0):
        calories = estimate_calories(protein, fat, carbohydrates)
        _logger.info(
            "Calories estimated from macros for %s: %s", variant.reason, calories
        )

    serving_weight = _coerce_number(item.get("serving_size_g"))
    if serving_weight <= 0:
        serving_weight = variant.query_weight
    if serving_weight <= 0:
        serving_weight = DEFAULT_BASE_WEIGHT

    return scale_nutrition(
        calories, protein, fat, carbohydrates, requested_weight, serving_weight
    )


def _coerce_number(value: object) -> float:
    """Return finite numbers as floats; sentinel strings, nulls and NaN become 0."""
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, int | float) and math.isfinite(value):
        return float(value)
    return 0.0


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"


def _log_result(context: str, info: NutritionInfo) -> None:
    _logger.info(
        "Nutrition lookup successful (%s): %s kcal, %s g protein for %s g",
        context,
        info.calories,
        info.protein,
        info.weight_grams,
    )
