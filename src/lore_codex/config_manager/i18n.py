"""Localized field descriptions for configuration models."""

from __future__ import annotations

from typing import ClassVar, Dict, Optional

from pydantic import BaseModel


class Description(BaseModel):
    """A field description in each supported language."""

    en: str
    fr: Optional[str] = None

    def get_text(self, lang: str = "en") -> str:
        if lang == "fr" and self.fr:
            return self.fr
        return self.en


class I18nMixin:
    """Adds ``get_field_description`` to models that define ``DESCRIPTIONS``."""

    DESCRIPTIONS: ClassVar[Dict[str, Description]] = {}

    @classmethod
    def get_field_description(cls, field_name: str, lang: str = "en") -> Optional[str]:
        description = cls.DESCRIPTIONS.get(field_name)
        if description is None:
            return None
        return description.get_text(lang)
