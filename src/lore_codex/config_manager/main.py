# config_manager/main.py
from pydantic import BaseModel, Field, model_validator
from typing import Dict, ClassVar

from .encyclopedia import EncyclopediaConfig
from .i18n import I18nMixin, Description


class Config(I18nMixin, BaseModel):
    """
    Main configuration for the application.
    """

    encyclopedia: EncyclopediaConfig = Field(
        default_factory=EncyclopediaConfig, alias="encyclopedia"
    )

    @model_validator(mode="after")
    def check_http_backend(self) -> "Config":
        if self.encyclopedia.backend == "http" and not self.encyclopedia.base_url:
            raise ValueError("encyclopedia.base_url is required when backend is 'http'")
        return self

    DESCRIPTIONS: ClassVar[Dict[str, Description]] = {
        "encyclopedia": Description(
            en="Encyclopedia content and query settings",
            fr="Paramètres du contenu et des requêtes de l'encyclopédie",
        ),
    }
