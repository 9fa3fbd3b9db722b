"""Shared test fixtures."""

from dataclasses import dataclass, field

import httpx
import pytest

from recipe_manager.adapters.nutrition_api_client import NutritionApiClient
from recipe_manager.config import Settings
from recipe_manager.containers import AppContainer
from recipe_manager.domain.nutrition import DictionaryEntry, DictionaryVariant
from recipe_manager.services.matching import DictionaryMatcher
from recipe_manager.services.nutrition import NutritionService
from recipe_manager.services.recipe_nutrition import RecipeNutritionService


@dataclass
class FakeNutritionApiClient(NutritionApiClient):
    """Fake API client answering from a query -> payload map.

    A payload that is an exception is raised instead of returned.
    Queries without a mapping return an empty list.
    """

    responses: dict[str, object] = field(default_factory=dict)
    queries: list[str] = field(default_factory=list)

    async def fetch_nutrition(self, query: str) -> list[dict[str, object]]:
        self.queries.append(query)
        payload = self.responses.get(query, [])
        if isinstance(payload, BaseException):
            raise payload
        return payload  # type: ignore[return-value]


def http_status_error(status_code: int) -> httpx.HTTPStatusError:
    """Build the error httpx raises for a non-success response."""
    request = httpx.Request("GET", "https://api.test/v1/nutrition")
    response = httpx.Response(status_code, request=request)
    return httpx.HTTPStatusError(
        f"status {status_code}", request=request, response=response
    )


def make_entry(
    entry_id: str,
    title_ru: str,
    title_en: str,
    aliases: tuple[str, ...],
    variants: tuple[DictionaryVariant, ...],
) -> DictionaryEntry:
    return DictionaryEntry(
        id=entry_id,
        title_ru=title_ru,
        title_en=title_en,
        aliases=aliases,
        variants=variants,
    )


@pytest.fixture
def banana_entry() -> DictionaryEntry:
    return make_entry(
        "banana",
        "банан",
        "banana",
        ("бананы",),
        (DictionaryVariant("raw", 89, 1.1, 0.3, 23),),
    )


@pytest.fixture
def egg_entry() -> DictionaryEntry:
    return make_entry(
        "egg",
        "Яйцо",
        "Egg",
        ("яйцо",),
        (
            DictionaryVariant("boiled", 155, 12.6, 10.6, 1.1),
            DictionaryVariant("fried", 196, 13.6, 15.3, 0.8),
        ),
    )


@pytest.fixture
def chicken_entry() -> DictionaryEntry:
    return make_entry(
        "chicken-breast",
        "Куриная грудка",
        "chicken breast",
        ("курица", "куриное филе"),
        (
            DictionaryVariant("куриная грудка сырая", 120, 22.5, 2.6, 0),
            DictionaryVariant("куриная грудка варёная", 151, 29.8, 3.2, 0),
        ),
    )


@pytest.fixture
def matcher(
    banana_entry: DictionaryEntry,
    egg_entry: DictionaryEntry,
    chicken_entry: DictionaryEntry,
) -> DictionaryMatcher:
    return DictionaryMatcher((banana_entry, egg_entry, chicken_entry))


@pytest.fixture
def api_client() -> FakeNutritionApiClient:
    return FakeNutritionApiClient()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        nutrition_api_key="test-key",
        nutrition_api_base_url="https://api.test/v1",
    )


@pytest.fixture
def container(
    settings: Settings,
    matcher: DictionaryMatcher,
    api_client: FakeNutritionApiClient,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        matcher=matcher,
        nutrition_service=NutritionService(matcher=matcher, api_client=api_client),
        recipe_nutrition_service=RecipeNutritionService(),
        close_resources=close_resources,
    )
