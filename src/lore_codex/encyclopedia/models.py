"""
Data models for the encyclopedia: categories, listing summaries and item details.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class Category(str, Enum):
    """The four fixed content groupings."""

    CHARACTERS = "characters"
    LOCATIONS = "locations"
    DEITIES = "deities"
    SKILLS = "skills"

    def heading(self, language: str = "en") -> str:
        """Plural heading used for a category listing."""
        return _CATEGORY_TITLES[language][self]

    def label(self, language: str = "en") -> str:
        """Singular label used when an item has no name of its own."""
        return _CATEGORY_LABELS[language][self]


_CATEGORY_TITLES: Dict[str, Dict[Category, str]] = {
    "en": {
        Category.CHARACTERS: "Characters",
        Category.LOCATIONS: "Locations",
        Category.DEITIES: "Deities",
        Category.SKILLS: "Skills",
    },
    "fr": {
        Category.CHARACTERS: "Personnages",
        Category.LOCATIONS: "Lieux",
        Category.DEITIES: "Dieux",
        Category.SKILLS: "Compétences",
    },
}

_CATEGORY_LABELS: Dict[str, Dict[Category, str]] = {
    "en": {
        Category.CHARACTERS: "Character",
        Category.LOCATIONS: "Location",
        Category.DEITIES: "Deity",
        Category.SKILLS: "Skill",
    },
    "fr": {
        Category.CHARACTERS: "Personnage",
        Category.LOCATIONS: "Lieu",
        Category.DEITIES: "Divinité",
        Category.SKILLS: "Compétence",
    },
}

_DETAILS_HINT = {
    "en": "Click to see details",
    "fr": "Cliquez pour voir les détails",
}


class ItemSummary(BaseModel):
    """A single entry as shown in a category listing."""

    id: str
    name: str
    description: Optional[str] = None

    def display_description(self, language: str = "en") -> str:
        return self.description or _DETAILS_HINT[language]


class ItemDetail(BaseModel):
    """A resolved item. ``name`` is only known when extraction supplies one."""

    id: str
    name: Optional[str] = None
    content: str = ""

    def display_title(self, category: Category, language: str = "en") -> str:
        """
        Heading for the detail view.

        Falls back to ``"<label> : <id>"`` when the item has no (or an empty) name.
        """
        if self.name:
            return self.name
        return f"{Category(category).label(language)} : {self.id}"


class MetadataBundle(BaseModel):
    """Summaries for every category, fetched in one bulk load."""

    categories: Dict[Category, List[ItemSummary]] = Field(default_factory=dict)

    @classmethod
    def empty(cls) -> "MetadataBundle":
        return cls(categories={category: [] for category in Category})

    @classmethod
    def from_payload(cls, payload: Dict) -> "MetadataBundle":
        """
        Build a bundle from the raw ``metadata`` payload.

        Keys that are not known categories are ignored.

        Raises:
            pydantic.ValidationError: If a record does not have the summary shape.
            TypeError: If the payload is not a mapping.
        """
        if not isinstance(payload, dict):
            raise TypeError(
                f"metadata payload must be a mapping, got {type(payload).__name__}"
            )

        categories: Dict[Category, List[ItemSummary]] = {}
        for category in Category:
            records = payload.get(category.value) or []
            categories[category] = parse_summaries(records)
        return cls(categories=categories)

    def get(self, category: Category) -> List[ItemSummary]:
        return self.categories.get(category, [])


def parse_summaries(records) -> List[ItemSummary]:
    """Validate a list of raw summary records."""
    if not isinstance(records, list):
        raise TypeError(f"expected a list of items, got {type(records).__name__}")
    return [ItemSummary.model_validate(record) for record in records]
