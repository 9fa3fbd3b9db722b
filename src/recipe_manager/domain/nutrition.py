"""Nutrition domain models."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class DictionaryVariant:
    """A named serving form of a dictionary food with macros per 100 g."""

    name: str
    calories: float
    protein: float
    fat: float
    carbohydrates: float


@dataclass(frozen=True)
class DictionaryEntry:
    """A curated food known to the local dictionary."""

    id: str
    title_ru: str
    title_en: str
    aliases: tuple[str, ...]
    variants: tuple[DictionaryVariant, ...]

    def candidate_aliases(self, variant: DictionaryVariant) -> tuple[str, ...]:
        """Return every matchable handle for a variant, in scan order."""
        return (*self.aliases, self.title_ru, self.title_en, variant.name)


@dataclass(frozen=True)
class DictionaryMatch:
    """Best dictionary variant for a query, macros per 100 g."""

    variant_name: str
    calories: float
    protein: float
    fat: float
    carbohydrates: float


@dataclass(frozen=True)
class DictionarySuggestion:
    """Autocomplete suggestion built from a dictionary variant."""

    variant_name: str
    base_product: str
    display_name: str
    query_alias: str
    calories: float
    protein: float
    fat: float
    carbohydrates: float


@dataclass(frozen=True)
class QueryVariant:
    """Candidate text and weight to send to the external lookup."""

    product_query: str
    query_weight: float
    reason: str


@dataclass(frozen=True)
class NutritionInfo:
    """Macros scaled to the requested weight."""

    calories: float
    protein: float
    fat: float
    carbohydrates: float
    weight_grams: float


class LookupStatus(str, Enum):
    """Aggregate outcome of a nutrition lookup."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class LookupResult:
    """Detailed lookup outcome used by the HTTP boundary."""

    status: LookupStatus
    info: NutritionInfo | None = None
    source: str | None = None
    reason: str | None = None
    attempts: int = 0
