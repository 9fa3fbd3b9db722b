"""Nutrition API endpoints."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from recipe_manager.api.models import (
    NutritionLookupFailure,
    NutritionLookupRequest,
    NutritionLookupResponse,
    NutritionSuggestion,
    RecipeSummaryRequest,
    RecipeSummaryResponse,
)
from recipe_manager.domain.nutrition import LookupStatus
from recipe_manager.domain.recipes import IngredientNutrition

if TYPE_CHECKING:
    from recipe_manager.containers import AppContainer

router = APIRouter(prefix="/api/nutrition", tags=["nutrition"])

_NOT_FOUND_MESSAGE = "No nutrition data found for this ingredient."
_UNAVAILABLE_MESSAGE = (
    "The nutrition service is temporarily unavailable or not configured."
)
_MANUAL_ENTRY_HINT = "You can enter the values manually."


@router.get("/suggest", response_model=list[NutritionSuggestion])
async def suggest(
    request: Request, query: str | None = None, limit: int = 5
) -> list[NutritionSuggestion]:
    """Return dictionary suggestions for ingredient autocomplete."""
    container: AppContainer = request.app.state.container
    suggestions = container.nutrition_service.suggest(query, limit)
    return [NutritionSuggestion(**asdict(item)) for item in suggestions]


@router.post(
    "/lookup",
    response_model=NutritionLookupResponse,
    responses={
        status.HTTP_404_NOT_FOUND: {"model": NutritionLookupFailure},
        status.HTTP_503_SERVICE_UNAVAILABLE: {"model": NutritionLookupFailure},
    },
)
async def lookup(
    payload: NutritionLookupRequest, request: Request
) -> NutritionLookupResponse | JSONResponse:
    """Estimate macros for an ingredient query and weight."""
    container: AppContainer = request.app.state.container
    result = await container.nutrition_service.lookup_detailed(
        payload.query, payload.weight_grams
    )
    if result.status is LookupStatus.FOUND and result.info is not None:
        return NutritionLookupResponse(
            calories=result.info.calories,
            protein=result.info.protein,
            fat=result.info.fat,
            carbohydrates=result.info.carbohydrates,
            weight_grams=result.info.weight_grams,
            source=result.source,
            reason=result.reason,
        )

    if result.status is LookupStatus.UNAVAILABLE:
        status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        message = _UNAVAILABLE_MESSAGE
    else:
        status_code = status.HTTP_404_NOT_FOUND
        message = _NOT_FOUND_MESSAGE
    failure = NutritionLookupFailure(
        message=message,
        query=payload.query,
        weight_grams=payload.weight_grams,
        hint=_MANUAL_ENTRY_HINT,
    )
    return JSONResponse(
        status_code=status_code, content=failure.model_dump(by_alias=True)
    )


@router.post("/summary", response_model=RecipeSummaryResponse)
async def summary(
    payload: RecipeSummaryRequest, request: Request
) -> RecipeSummaryResponse:
    """Summarize recipe nutrition from its ingredients."""
    container: AppContainer = request.app.state.container
    ingredients = [
        IngredientNutrition(
            name=item.name,
            amount=item.amount,
            unit=item.unit,
            weight=item.weight,
            calories=item.calories,
            protein=item.protein,
            fat=item.fat,
            carbohydrates=item.carbohydrates,
        )
        for item in payload.ingredients
    ]
    result = container.recipe_nutrition_service.summarize(
        ingredients, payload.servings
    )
    return RecipeSummaryResponse.model_validate(asdict(result))
