"""
Configuration models for the encyclopedia content source and query handling.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Dict, ClassVar, List, Literal, Optional
from .i18n import I18nMixin, Description
from ..encyclopedia.query_classifier import LEAD_WORDS


class EncyclopediaConfig(I18nMixin, BaseModel):
    """Configuration for the encyclopedia."""

    backend: Literal["local", "http"] = Field("local", alias="backend")
    data_dir: str = Field("data", alias="data_dir")
    base_url: Optional[str] = Field(None, alias="base_url")
    request_timeout: float = Field(10.0, alias="request_timeout")
    question_languages: List[str] = Field(
        default_factory=lambda: ["en"], alias="question_languages"
    )
    display_language: Literal["en", "fr"] = Field("en", alias="display_language")
    min_query_length: int = Field(2, alias="min_query_length")
    line_break: str = Field("\n", alias="line_break")

    @field_validator("question_languages")
    @classmethod
    def check_question_languages(cls, value: List[str]) -> List[str]:
        if not value:
            raise ValueError("question_languages must name at least one language")
        unknown = [lang for lang in value if lang not in LEAD_WORDS]
        if unknown:
            raise ValueError(
                f"Unsupported question language(s): {', '.join(unknown)}. "
                f"Available: {', '.join(LEAD_WORDS)}"
            )
        return value

    DESCRIPTIONS: ClassVar[Dict[str, Description]] = {
        "backend": Description(
            en="Where content is read from: 'local' (data directory) or 'http' (static host)",
            fr="Source du contenu : 'local' (répertoire de données) ou 'http' (hôte statique)",
        ),
        "data_dir": Description(
            en="Directory holding metadata.json, category listings and item files (default: data)",
            fr="Répertoire contenant metadata.json, les listes et les fichiers (défaut : data)",
        ),
        "base_url": Description(
            en="Base URL of the content host, required when backend is 'http'",
            fr="URL de base de l'hôte de contenu, requise si backend vaut 'http'",
        ),
        "request_timeout": Description(
            en="Timeout in seconds for HTTP content requests (default: 10)",
            fr="Délai maximal en secondes des requêtes HTTP (défaut : 10)",
        ),
        "question_languages": Description(
            en="Languages whose question words mark input as a question (default: ['en'])",
            fr="Langues dont les mots interrogatifs désignent une question (défaut : ['en'])",
        ),
        "display_language": Description(
            en="Language of category titles and fallback labels (default: en)",
            fr="Langue des titres de catégories et des libellés (défaut : en)",
        ),
        "min_query_length": Description(
            en="Minimum number of characters for a query (default: 2)",
            fr="Nombre minimal de caractères d'une requête (défaut : 2)",
        ),
        "line_break": Description(
            en="Soft line break placed between lines of a paragraph (default: newline)",
            fr="Saut de ligne placé entre les lignes d'un paragraphe (défaut : retour à la ligne)",
        ),
    }
