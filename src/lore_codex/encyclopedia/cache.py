"""
In-memory cache of category listings.

The metadata bundle is fetched once by ``load()`` and never invalidated: the
dataset is static for the life of the process. ``load()`` is the only method
that writes to the cache; everything else reads.
"""

from __future__ import annotations

from typing import List, Optional

from loguru import logger
from pydantic import ValidationError

from .content_store import ContentStore
from .errors import RetrievalError
from .models import Category, ItemSummary, MetadataBundle, parse_summaries

METADATA_ADDRESS = "metadata"


class CategoryCache:
    """
    Serves category listings, preferring the bulk-loaded metadata bundle.

    Listings fetched standalone (when a loaded bundle has nothing for a
    category) are returned to the caller but not added to the bundle. After a
    failed bulk load the empty bundle is authoritative and nothing else is
    fetched. Callers receive a copy of each cached listing.
    """

    def __init__(self, store: ContentStore):
        """
        Initialize the category cache.

        Args:
            store: Content store used for the bulk load and standalone listings
        """
        self.store = store
        self._bundle: Optional[MetadataBundle] = None
        self._degraded = False

    @property
    def loaded(self) -> bool:
        return self._bundle is not None

    @property
    def bundle(self) -> Optional[MetadataBundle]:
        return self._bundle

    async def load(self) -> MetadataBundle:
        """
        Bulk-load the metadata bundle.

        Never raises: when the bundle cannot be retrieved or parsed, an
        all-empty bundle is stored and every listing stays empty for the
        rest of the session.

        Returns:
            The stored bundle
        """
        if self._bundle is not None:
            logger.debug("Metadata bundle already loaded, skipping")
            return self._bundle

        try:
            payload = await self.store.get_json(METADATA_ADDRESS)
            bundle = self._parse_bundle(payload)
        except RetrievalError as e:
            logger.error(f"❌ Failed to load metadata bundle: {e}")
            bundle = MetadataBundle.empty()
            self._degraded = True
        else:
            counts = ", ".join(
                f"{category.value}={len(bundle.get(category))}" for category in Category
            )
            logger.success(f"✅ Metadata bundle loaded ({counts})")

        self._bundle = bundle
        return bundle

    @staticmethod
    def _parse_bundle(payload) -> MetadataBundle:
        try:
            return MetadataBundle.from_payload(payload)
        except (ValidationError, TypeError) as e:
            raise RetrievalError(METADATA_ADDRESS, f"malformed metadata: {e}") from e

    async def get_category_items(self, category: Category | str) -> List[ItemSummary]:
        """
        Get the listing for a category.

        Args:
            category: Category to list

        Returns:
            Item summaries in listing order; empty if nothing could be retrieved
        """
        category = Category(category)

        if self._bundle is not None:
            cached = self._bundle.get(category)
            if cached or self._degraded:
                logger.debug(f"📦 Cache hit for '{category.value}' ({len(cached)} items)")
                return list(cached)

        try:
            payload = await self.store.get_json(category.value)
            items = parse_summaries(payload)
        except (ValidationError, TypeError) as e:
            logger.warning(f"⚠️ Malformed listing for '{category.value}': {e}")
            return []
        except RetrievalError as e:
            logger.warning(f"⚠️ Could not load listing for '{category.value}': {e}")
            return []

        logger.debug(f"📄 Loaded standalone listing '{category.value}' ({len(items)} items)")
        return items
