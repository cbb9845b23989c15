"""
Encyclopedia core: query routing, category listings and item extraction.

Serves a small static body of lore (characters, locations, deities, skills).
"""

from .cache import CategoryCache
from .content_store import ContentStore, FileContentStore, HttpContentStore
from .errors import EncyclopediaError, RetrievalError
from .formatter import FormattedContent, format_content
from .manager import EncyclopediaManager, ItemView, QueryResult, SearchHit
from .models import Category, ItemDetail, ItemSummary, MetadataBundle
from .query_classifier import QueryClassifier, QueryKind
from .resolver import ItemResolver
from .skill_extractor import extract_skill

__all__ = [
    "Category",
    "CategoryCache",
    "ContentStore",
    "EncyclopediaError",
    "EncyclopediaManager",
    "FileContentStore",
    "FormattedContent",
    "HttpContentStore",
    "ItemDetail",
    "ItemResolver",
    "ItemSummary",
    "ItemView",
    "MetadataBundle",
    "QueryClassifier",
    "QueryKind",
    "QueryResult",
    "RetrievalError",
    "SearchHit",
    "extract_skill",
    "format_content",
]
