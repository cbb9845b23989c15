from .encyclopedia import EncyclopediaConfig
from .i18n import Description, I18nMixin
from .main import Config
from .utils import load_config, read_yaml, validate_config

__all__ = [
    "Config",
    "Description",
    "EncyclopediaConfig",
    "I18nMixin",
    "load_config",
    "read_yaml",
    "validate_config",
]
