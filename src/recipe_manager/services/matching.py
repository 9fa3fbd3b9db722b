"""Fuzzy matching of free-text food queries against the local dictionary."""

import logging
import re
from dataclasses import dataclass

from rapidfuzz.distance import Levenshtein

from recipe_manager.domain.nutrition import (
    DictionaryEntry,
    DictionaryMatch,
    DictionarySuggestion,
    DictionaryVariant,
)

EXACT_SCORE = 1.0
SUBSTRING_SCORE = 0.85
MATCH_THRESHOLD = 0.65
SUGGESTION_THRESHOLD = 0.35

_MULTI_SPACE = re.compile(r"\s+")

_logger = logging.getLogger(__name__)


def normalize_text(value: str) -> str:
    """Trim, lowercase and collapse internal whitespace to single spaces."""
    return _MULTI_SPACE.sub(" ", value.strip().lower())


def levenshtein_distance(a: str, b: str) -> int:
    """Classic edit distance with unit insertion, deletion and substitution."""
    return Levenshtein.distance(a, b)


def similarity(a: str, b: str) -> float:
    """Edit-distance similarity in [0, 1]; 1.0 only for equal strings."""
    if a == b:
        return 1.0
    return Levenshtein.normalized_similarity(a, b)


def _is_substring(query: str, alias: str) -> bool:
    return bool(alias) and (alias in query or query in alias)


def _alias_score(query: str, alias: str) -> float:
    """Tiered score: exact, then substring, then edit-distance similarity."""
    if query == alias:
        return EXACT_SCORE
    if _is_substring(query, alias):
        return SUBSTRING_SCORE
    return similarity(query, alias)


def _to_match(variant: DictionaryVariant) -> DictionaryMatch:
    return DictionaryMatch(
        variant_name=variant.name,
        calories=variant.calories,
        protein=variant.protein,
        fat=variant.fat,
        carbohydrates=variant.carbohydrates,
    )


@dataclass(frozen=True)
class DictionaryMatcher:
    """Read-only matcher over the curated dictionary, shared by all requests."""

    entries: tuple[DictionaryEntry, ...] = ()

    def find_best_match(self, query: str) -> DictionaryMatch | None:
        """Return the best variant for a query, or None below the threshold."""
        if not query or not query.strip() or not self.entries:
            return None

        normalized = normalize_text(query)
        best_match: DictionaryMatch | None = None
        best_score = 0.0

        for entry in self.entries:
            for variant in entry.variants:
                for alias in entry.candidate_aliases(variant):
                    alias_normalized = normalize_text(alias)
                    if normalized == alias_normalized:
                        return _to_match(variant)
                    score = similarity(normalized, alias_normalized)
                    if _is_substring(normalized, alias_normalized):
                        score = max(score, SUBSTRING_SCORE)
                    if score > best_score:
                        best_score = score
                        best_match = _to_match(variant)

        if best_score >= MATCH_THRESHOLD:
            return best_match
        _logger.debug("No dictionary match for %r (best score %.2f)", query, best_score)
        return None

    def suggest(self, query: str, limit: int = 5) -> list[DictionarySuggestion]:
        """Return suggestions ranked by score, then by display name."""
        if not query or not query.strip() or not self.entries or limit <= 0:
            return []

        normalized = normalize_text(query)
        scored: list[tuple[float, DictionarySuggestion]] = []
        for entry in self.entries:
            for variant in entry.variants:
                for alias in entry.candidate_aliases(variant):
                    score = _alias_score(normalized, normalize_text(alias))
                    if score < SUGGESTION_THRESHOLD:
                        continue
                    scored.append((score, _to_suggestion(entry, variant)))

        scored.sort(key=lambda item: (-item[0], item[1].display_name))
        return [suggestion for _, suggestion in scored[:limit]]


def _to_suggestion(
    entry: DictionaryEntry, variant: DictionaryVariant
) -> DictionarySuggestion:
    return DictionarySuggestion(
        variant_name=variant.name,
        base_product=entry.title_ru,
        display_name=f"{entry.title_ru} · {variant.name}",
        query_alias=entry.title_en,
        calories=variant.calories,
        protein=variant.protein,
        fat=variant.fat,
        carbohydrates=variant.carbohydrates,
    )
