"""
Main encyclopedia manager interface.

Coordinates the content store, category cache, item resolver and query
classifier behind plain async request/response methods.
"""

from __future__ import annotations

from typing import List, Optional, Protocol

from loguru import logger
from pydantic import BaseModel

from .cache import CategoryCache
from .content_store import ContentStore
from .formatter import format_content
from .models import Category, ItemDetail, ItemSummary
from .query_classifier import QueryClassifier, QueryKind
from .resolver import ItemResolver


class AnswerProvider(Protocol):
    """Collaborator that answers natural-language questions."""

    async def answer(self, question: str) -> str: ...


class SearchHit(BaseModel):
    category: Category
    item: ItemSummary
    score: float


class QueryResult(BaseModel):
    """Outcome of routing one raw query."""

    query: str
    kind: QueryKind
    hits: List[SearchHit] = []
    answer: Optional[str] = None


class ItemView(BaseModel):
    """An item ready for display, with the listing to go back to."""

    category: Category
    title: str
    item: ItemDetail
    paragraphs: List[str]


class EncyclopediaManager:
    """
    High-level entry point for browsing and querying the encyclopedia.

    Call ``initialize()`` once before serving requests; it performs the single
    bulk load that populates the category cache.
    """

    def __init__(
        self,
        store: ContentStore,
        classifier: Optional[QueryClassifier] = None,
        answer_provider: Optional[AnswerProvider] = None,
        language: str = "en",
    ):
        """
        Initialize the encyclopedia manager.

        Args:
            store: Content store for every retrieval
            classifier: Query classifier (default: English lead words)
            answer_provider: Optional collaborator for the question path
            language: Display language for titles and fallback labels
        """
        self.store = store
        self.cache = CategoryCache(store)
        self.resolver = ItemResolver(store)
        self.classifier = classifier or QueryClassifier()
        self.answer_provider = answer_provider
        self.language = language

        logger.info("🧠 Encyclopedia Manager initialized")

    async def initialize(self) -> None:
        await self.cache.load()

    async def list_category(self, category: Category | str) -> List[ItemSummary]:
        return await self.cache.get_category_items(category)

    async def search(self, term: str) -> List[SearchHit]:
        """
        Keyword search over the listings of every category.

        Exact name matches score 1.0, partial name matches 0.8 and description
        matches 0.5. Hits keep category order among equal scores.

        Args:
            term: Search term (case-insensitive)

        Returns:
            Hits sorted by descending score
        """
        needle = term.strip().lower()
        if not needle:
            return []

        hits: List[SearchHit] = []
        for category in Category:
            for item in await self.cache.get_category_items(category):
                name = item.name.lower()
                if name == needle:
                    score = 1.0
                elif needle in name:
                    score = 0.8
                elif item.description and needle in item.description.lower():
                    score = 0.5
                else:
                    continue
                hits.append(SearchHit(category=category, item=item, score=score))

        hits.sort(key=lambda hit: hit.score, reverse=True)
        logger.info(f"🔍 Search '{term[:100]}' matched {len(hits)} items")
        return hits

    async def route_query(self, query: str) -> QueryResult:
        """
        Route raw input to the question path or the search path.

        Args:
            query: Raw user input

        Returns:
            QueryResult with either search hits or the provider's answer
        """
        kind = self.classifier.classify(query)
        logger.debug(f"Query '{query[:100]}' classified as {kind.value}")

        if kind is QueryKind.SEARCH:
            return QueryResult(query=query, kind=kind, hits=await self.search(query))

        answer = None
        if self.answer_provider is not None:
            answer = await self.answer_provider.answer(query)
        else:
            logger.debug("No answer provider configured, question left unanswered")
        return QueryResult(query=query, kind=kind, answer=answer)

    async def get_item(
        self, item_id: str, category: Category | str, line_break: str = "\n"
    ) -> ItemView:
        """
        Resolve and format one item for display.

        Args:
            item_id: Item identifier
            category: Category of the item
            line_break: Soft line break used inside paragraphs

        Returns:
            ItemView with title and paragraphs

        Raises:
            RetrievalError: If the item's resource cannot be obtained
        """
        category = Category(category)
        detail = await self.resolver.resolve_item(item_id, category)

        return ItemView(
            category=category,
            title=detail.display_title(category, self.language),
            item=detail,
            paragraphs=list(format_content(detail.content, line_break=line_break)),
        )
