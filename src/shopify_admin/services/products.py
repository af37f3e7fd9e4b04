"""Product and product listing services."""

from __future__ import annotations

from typing import Any

from shopify_admin.schemas.common import CountOptions, ListOptions
from shopify_admin.schemas.product import Product, ProductListOptions
from shopify_admin.schemas.product_listing import ProductListing
from shopify_admin.services.base import ReadOnlyResourceService, ResourceService
from shopify_admin.services.metafields import MetafieldService


class ProductService(ResourceService[Product, ProductListOptions]):
    """Products in the shop catalogue."""

    base_path = "products"
    resource_key = "product"
    collection_key = "products"
    model = Product

    def metafields(self, product_id: int) -> MetafieldService:
        """Return the metafield service scoped to one product."""
        return MetafieldService(self.client, "products", product_id)


class ProductListingService(ReadOnlyResourceService[ProductListing, ListOptions]):
    """Products published to the calling sales channel.

    Listings are not created or edited directly: a product is published with
    `publish` and unpublished with `delete`.
    """

    base_path = "product_listings"
    resource_key = "product_listing"
    collection_key = "product_listings"
    model = ProductListing

    async def count(self, options: CountOptions | None = None) -> int:
        return await self.client.count(self._path("count"), options)

    async def product_ids(self, options: ListOptions | None = None) -> list[int]:
        """Return the ids of every product published to the channel."""

        payload = await self.client.get(self._path("product_ids"), options)
        return [int(product_id) for product_id in payload.get("product_ids") or []]

    async def publish(self, product_id: int) -> ProductListing | None:
        """Publish a product to the channel."""

        body: dict[str, Any] = {self.resource_key: {"product_id": product_id}}
        payload = await self.client.put(self._path(product_id), body)
        return self._decode_one(payload)

    async def delete(self, product_id: int) -> None:
        """Unpublish a product from the channel."""
        await self.client.delete(self._path(product_id))
