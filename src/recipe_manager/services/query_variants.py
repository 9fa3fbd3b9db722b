"""Candidate query generation for the external nutrition lookup."""

import re

from recipe_manager.domain.nutrition import QueryVariant

PRIMARY_REASON = "original/primary"

_MULTI_SPACE = re.compile(r"\s+")
_NON_ASCII_ALNUM = re.compile(r"[^a-z0-9\s]", re.IGNORECASE | re.ASCII)

CYRILLIC_TO_LATIN: dict[str, str] = {
    "а": "a",
    "б": "b",
    "в": "v",
    "г": "g",
    "д": "d",
    "е": "e",
    "ё": "yo",
    "ж": "zh",
    "з": "z",
    "и": "i",
    "й": "y",
    "к": "k",
    "л": "l",
    "м": "m",
    "н": "n",
    "о": "o",
    "п": "p",
    "р": "r",
    "с": "s",
    "т": "t",
    "у": "u",
    "ф": "f",
    "х": "kh",
    "ц": "ts",
    "ч": "ch",
    "ш": "sh",
    "щ": "sch",
    "ъ": "",
    "ы": "y",
    "ь": "",
    "э": "e",
    "ю": "yu",
    "я": "ya",
    "ґ": "g",
    "ї": "yi",
    "і": "i",
}


def normalize_spaces(value: str | None) -> str:
    """Trim and collapse runs of whitespace to a single space."""
    if value is None or not value.strip():
        return ""
    return _MULTI_SPACE.sub(" ", value.strip())


def transliterate(value: str) -> str:
    """Replace Cyrillic letters with Latin ones; other characters pass through."""
    if not value.strip():
        return ""
    converted = "".join(CYRILLIC_TO_LATIN.get(char.lower(), char) for char in value)
    return normalize_spaces(converted)


def strip_non_ascii(value: str) -> str:
    """Keep ASCII letters, digits and whitespace only."""
    if not value.strip():
        return ""
    return normalize_spaces(_NON_ASCII_ALNUM.sub(" ", value))


def weight_candidates(requested_weight: float) -> list[float]:
    """Return the weights to try, in priority order, without duplicates."""
    candidates: list[float] = []
    if requested_weight > 0:
        candidates.append(round(requested_weight, 2))
    if requested_weight != 100:  # noqa: PLR2004
        candidates.append(100.0)
    if requested_weight > 150 and requested_weight != 200:  # noqa: PLR2004
        candidates.append(200.0)
    if requested_weight != 50:  # noqa: PLR2004
        candidates.append(50.0)

    unique: list[float] = []
    for weight in candidates:
        if weight > 0 and weight not in unique:
            unique.append(weight)
    return unique


def _base_texts(normalized: str) -> list[tuple[str, str]]:
    """Return (text, reason) pairs for every textual fallback."""
    texts = [(normalized, PRIMARY_REASON)]
    words = normalized.split(" ")
    fallbacks = (
        (transliterate(normalized), "transliterated"),
        (strip_non_ascii(normalized), "ascii-only"),
        (words[0] if words else "", "first-word"),
    )
    for text, reason in fallbacks:
        if text and text.lower() != normalized.lower():
            texts.append((text, reason))
    return texts


def build_query_variants(query: str, requested_weight: float) -> list[QueryVariant]:
    """Build the ordered, de-duplicated candidates for one lookup."""
    normalized = normalize_spaces(query)
    if not normalized:
        return []

    variants: list[QueryVariant] = []
    seen: set[tuple[str, float]] = set()
    for text, reason in _base_texts(normalized):
        for weight in weight_candidates(requested_weight):
            key = (text.lower(), weight)
            if key in seen:
                continue
            seen.add(key)
            variants.append(
                QueryVariant(
                    product_query=text,
                    query_weight=weight,
                    reason=f"{reason}/{format_weight(weight)}g",
                )
            )
    return variants


def format_weight(weight: float) -> str:
    """Render 100.0 as "100" and 37.5 as "37.5" for reason tags."""
    return f"{weight:.2f}".rstrip("0").rstrip(".")
