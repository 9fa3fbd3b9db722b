"""Dependency container wiring for the application."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from recipe_manager.adapters.dictionary_file import load_dictionary
from recipe_manager.adapters.nutrition_api_client import HttpxNutritionApiClient
from recipe_manager.config import (
    Settings,
    normalize_base_url,
    resolve_api_key,
    resolve_dictionary_path,
)
from recipe_manager.services.matching import DictionaryMatcher
from recipe_manager.services.nutrition import NutritionService
from recipe_manager.services.recipe_nutrition import RecipeNutritionService

_logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    matcher: DictionaryMatcher
    nutrition_service: NutritionService
    recipe_nutrition_service: RecipeNutritionService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    matcher = DictionaryMatcher(
        load_dictionary(
            resolve_dictionary_path(resolved_settings.nutrition_dictionary_path)
        )
    )

    api_client: HttpxNutritionApiClient | None = None
    api_key = resolve_api_key(resolved_settings.nutrition_api_key)
    if api_key is None:
        _logger.warning(
            "Nutrition API key is not configured; only dictionary lookups will work"
        )
    else:
        base_url = normalize_base_url(resolved_settings.nutrition_api_base_url)
        api_client = HttpxNutritionApiClient.create(
            api_key=api_key,
            base_url=base_url,
            timeout_seconds=resolved_settings.nutrition_timeout_seconds,
        )
        _logger.info("Nutrition API configured: %s", base_url)

    nutrition_service = NutritionService(matcher=matcher, api_client=api_client)

    async def close_resources() -> None:
        if api_client is not None:
            await api_client.close()

    return AppContainer(
        settings=resolved_settings,
        matcher=matcher,
        nutrition_service=nutrition_service,
        recipe_nutrition_service=RecipeNutritionService(),
        close_resources=close_resources,
    )
