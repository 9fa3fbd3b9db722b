"""Client for the third-party nutrition lookup API."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class NutritionApiError(ValueError):
    """Raised when the API answers with a payload of an unexpected shape."""


class NutritionApiClient(Protocol):
    """Interface for the external nutrition lookup endpoint."""

    async def fetch_nutrition(self, query: str) -> list[dict[str, object]]:
        """Return the raw result items for a "<weight> grams <food>" query."""


@dataclass
class HttpxNutritionApiClient(NutritionApiClient):
    """HTTPX-backed nutrition API client."""

    api_key: str
    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 30.0

    @classmethod
    def create(
        cls, api_key: str, base_url: str, timeout_seconds: float = 30.0
    ) -> "HttpxNutritionApiClient":
        """Create a client with a managed httpx session."""
        return cls(
            api_key=api_key,
            base_url=base_url,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def fetch_nutrition(self, query: str) -> list[dict[str, object]]:
        """Query the nutrition endpoint.

        An empty body is an empty result. Non-2xx statuses raise
        ``httpx.HTTPStatusError``; malformed JSON raises ``ValueError``.
        """
        response = await self.http_client.get(
            f"{self.base_url}nutrition",
            params={"query": query},
            headers={"X-Api-Key": self.api_key},
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        if not response.content.strip():
            return []
        payload = response.json()
        if not isinstance(payload, list):
            msg = f"Expected a JSON list, got {type(payload).__name__}"
            raise NutritionApiError(msg)
        return [item for item in payload if isinstance(item, dict)]

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
