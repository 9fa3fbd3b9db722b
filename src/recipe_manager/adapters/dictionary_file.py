"""Loader for the bundled nutrition dictionary file."""

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from recipe_manager.domain.nutrition import DictionaryEntry, DictionaryVariant

_logger = logging.getLogger(__name__)


class VariantRecord(BaseModel):
    """Variant as stored in the dictionary file, macros per 100 g."""

    name: str
    calories: float = Field(default=0.0, ge=0)
    protein: float = Field(default=0.0, ge=0)
    fat: float = Field(default=0.0, ge=0)
    carbohydrates: float = Field(default=0.0, ge=0)


class EntryRecord(BaseModel):
    """Entry as stored in the dictionary file."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title_ru: str = Field(default="", alias="titleRu")
    title_en: str = Field(default="", alias="titleEn")
    aliases: list[str] = Field(default_factory=list)
    variants: list[VariantRecord] = Field(default_factory=list)

    def to_domain(self) -> DictionaryEntry:
        """Convert the record into an immutable domain entry."""
        return DictionaryEntry(
            id=self.id,
            title_ru=self.title_ru,
            title_en=self.title_en,
            aliases=tuple(self.aliases),
            variants=tuple(
                DictionaryVariant(
                    name=variant.name,
                    calories=variant.calories,
                    protein=variant.protein,
                    fat=variant.fat,
                    carbohydrates=variant.carbohydrates,
                )
                for variant in self.variants
            ),
        )


def parse_entries(raw_items: list[object]) -> tuple[DictionaryEntry, ...]:
    """Validate entries one by one, skipping the ones that do not parse."""
    entries: list[DictionaryEntry] = []
    for index, item in enumerate(raw_items):
        try:
            record = EntryRecord.model_validate(item)
        except ValidationError as exc:
            _logger.warning(
                "Skipping invalid nutrition dictionary entry #%s: %s",
                index,
                exc.errors(include_url=False),
            )
            continue
        entries.append(record.to_domain())
    return tuple(entries)


def load_dictionary(path: Path) -> tuple[DictionaryEntry, ...]:
    """Load the dictionary, returning no entries when the file is unusable."""
    if not path.is_file():
        _logger.warning("Nutrition dictionary file not found at %s", path)
        return ()
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        _logger.exception("Failed to load nutrition dictionary from %s", path)
        return ()
    if not isinstance(raw, list):
        _logger.error("Nutrition dictionary at %s is not a list of entries", path)
        return ()
    entries = parse_entries(raw)
    _logger.info("Nutrition dictionary loaded: %s entries", len(entries))
    return entries
