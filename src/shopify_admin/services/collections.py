"""Smart collection service."""

from __future__ import annotations

from shopify_admin.schemas.collection import SmartCollection, SmartCollectionListOptions
from shopify_admin.services.base import ResourceService
from shopify_admin.services.metafields import MetafieldService


class SmartCollectionService(ResourceService[SmartCollection, SmartCollectionListOptions]):
    base_path = "smart_collections"
    resource_key = "smart_collection"
    collection_key = "smart_collections"
    model = SmartCollection

    def metafields(self, collection_id: int) -> MetafieldService:
        """Return the metafield service scoped to one collection.

        Collection metafields live under `collections/`, shared by every
        collection kind.
        """
        return MetafieldService(self.client, "collections", collection_id)
