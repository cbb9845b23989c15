"""
Resolution of a single item to its detail record.
"""

from __future__ import annotations

from typing import Callable

from loguru import logger

from .content_store import ContentStore
from .models import Category, ItemDetail
from .skill_extractor import extract_skill

SKILLS_ADDRESS = "skills"


class ItemResolver:
    """
    Resolves ``(item_id, category)`` to an ItemDetail.

    Skills live together in one shared text blob and are extracted from it;
    every other category has one text resource per item. Retrieval failures
    are not absorbed here: the caller decides how to present them.
    """

    def __init__(
        self,
        store: ContentStore,
        extractor: Callable[[str, str], ItemDetail] = extract_skill,
    ):
        self.store = store
        self.extractor = extractor

    async def resolve_item(self, item_id: str, category: Category | str) -> ItemDetail:
        """
        Resolve one item.

        Args:
            item_id: Item identifier within its category
            category: Category of the item

        Returns:
            ItemDetail; ``name`` is None for per-item resources

        Raises:
            RetrievalError: If the underlying resource cannot be obtained
            ValueError: If ``category`` is not a known category
        """
        category = Category(category)

        if category is Category.SKILLS:
            raw_text = await self.store.get_text(SKILLS_ADDRESS)
            detail = self.extractor(raw_text, item_id)
            if not detail.content:
                logger.debug(f"Skill '{item_id}' not present in the skills blob")
            return detail

        raw_text = await self.store.get_text(f"{category.value}/{item_id}")
        logger.debug(f"📄 Resolved '{category.value}/{item_id}' ({len(raw_text)} chars)")
        return ItemDetail(id=item_id, content=raw_text)
